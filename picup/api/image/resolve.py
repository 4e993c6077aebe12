"""Resolve an image reference to a remote URL or a local file."""

import logging
import os
from pathlib import Path
from urllib.parse import unquote

from ...constants import WIKILINK_ATTACHMENT_DIRS
from .ImageReference import ImageReference
from .is_remote import is_remote
from .ResolvedTarget import ResolvedTarget
from .SyntaxKind import SyntaxKind
from .TargetKind import TargetKind

logger = logging.getLogger(__name__)


def _candidates(fragment: str, kind: SyntaxKind, document_dir: Path) -> list[str]:
    if os.path.isabs(fragment):
        return [fragment]
    if kind == SyntaxKind.WIKILINK:
        return [os.path.join(document_dir, folder, fragment) for folder in WIKILINK_ATTACHMENT_DIRS]
    return [os.path.join(document_dir, fragment)]


def resolve(ref: ImageReference, document_dir: Path | str) -> ResolvedTarget:
    """Classify ``ref`` and find the file it names.

    Remote references return before any filesystem access. Wiki-link embeds
    search ``attachments/``, ``assets/`` and the document directory in that
    order; other relative references resolve against ``document_dir``.
    A percent-encoded path that does not exist as written is retried decoded.
    """
    if is_remote(ref.fragment):
        return ResolvedTarget(reference=ref, kind=TargetKind.REMOTE)

    document_dir = Path(document_dir)
    spellings = [ref.fragment]
    decoded = unquote(ref.fragment)
    if decoded != ref.fragment:
        spellings.append(decoded)

    for spelling in spellings:
        for candidate in _candidates(spelling, ref.kind, document_dir):
            path = Path(os.path.abspath(candidate))
            if path.is_file():
                logger.debug(f"Resolved {ref.fragment!r} to {path}")
                return ResolvedTarget(reference=ref, kind=TargetKind.LOCAL_RESOLVED, path=path)

    # Report the plain document-relative spelling (last candidate for wiki-links)
    attempted = Path(os.path.abspath(_candidates(ref.fragment, ref.kind, document_dir)[-1]))
    logger.debug(f"Local image {ref.fragment!r} not found at {attempted}")
    return ResolvedTarget(reference=ref, kind=TargetKind.LOCAL_MISSING, path=attempted)
