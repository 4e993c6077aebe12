"""Output schemas for image commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ImageScanOutput(BaseOutputSchema):
    """Output schema for image scan command.

    Each reference is a dict with keys: raw, fragment, kind, target, path, offset.
    """

    path: str = Field(..., description="Scanned document path")
    references: list[dict[str, Any]] = Field(..., description="Image references in document order")
    local_count: int = Field(..., description="Local references that resolved to an existing file")
    remote_count: int = Field(..., description="References already pointing at a remote URL")
    missing_count: int = Field(..., description="Local references whose file does not exist")


class ImageRewriteOutput(BaseOutputSchema):
    """Output schema for image rewrite command."""

    source_path: str = Field(..., description="Document whose references were scanned")
    target_path: str = Field(..., description="Document that received the edits, empty if none")
    replacements: list[dict[str, str]] = Field(..., description="Applied {original, replacement} pairs")
    uploads: dict[str, str] = Field(..., description="Absolute path -> uploaded URL")
    messages: list[str] = Field(..., description="Informational notifications")


class ImageUploadOutput(BaseOutputSchema):
    """Output schema for image upload command."""

    urls: list[str] = Field(..., description="Uploaded URLs in input order")
    markdown: str = Field(..., description="Markdown image lines for the uploaded files")


register_output_schema("image", "scan", ImageScanOutput)
register_output_schema("image", "rewrite", ImageRewriteOutput)
register_output_schema("image", "upload", ImageUploadOutput)
