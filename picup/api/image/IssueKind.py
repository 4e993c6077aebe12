"""Kinds of problems reported by the rewrite workflow."""

from enum import Enum


class IssueKind(str, Enum):
    NO_ACTIVE_DOCUMENT = "no_active_document"
    LOCAL_FILE_MISSING = "local_file_missing"
    UPLOAD_FAILED = "upload_failed"
    NO_LOCAL_IMAGES_FOUND = "no_local_images_found"
    EDIT_APPLICATION_FAILURE = "edit_application_failure"
    ORIGINAL_NOT_FOUND = "original_not_found"
