"""Copy a document to its uploaded-version sibling."""

import shutil
from pathlib import Path

from ...constants import UPLOAD_VERSION_DIRNAME, UPLOADED_VERSION_SUFFIX


def duplicate_document(source: Path, use_upload_version_folder: bool = False) -> Path:
    """Copy ``source`` to ``<stem>_uploadedVersion<suffix>`` and return the copy.

    The copy lands next to ``source``, or in ``uploadVersion/`` beside it
    (created on demand) when ``use_upload_version_folder`` is set. An
    existing copy is overwritten.
    """
    target_dir = source.parent / UPLOAD_VERSION_DIRNAME if use_upload_version_folder else source.parent
    target_dir.mkdir(exist_ok=True)
    target = target_dir / f"{source.stem}{UPLOADED_VERSION_SUFFIX}{source.suffix}"
    shutil.copyfile(source, target)
    return target
