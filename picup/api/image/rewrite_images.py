"""Upload the local images of a document and point its references at them."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..config.MessagesConfig import MessagesConfig
from ..document.Document import Document
from ..notify.Notifier import Notifier
from ..upload.Uploader import Uploader
from .apply_replacements import apply_replacements
from .IssueKind import IssueKind
from .plan_replacements import plan_replacements
from .resolve import resolve
from .RewriteIssue import RewriteIssue
from .RewriteOutcome import RewriteOutcome
from .scan import scan
from .TargetKind import TargetKind
from .UploadCache import UploadCache

logger = logging.getLogger(__name__)


def rewrite_images(
    document: Document | None,
    document_dir: Path | str,
    uploader: Uploader,
    notifier: Notifier,
    messages: MessagesConfig | None = None,
    upload_workers: int = 1,
) -> RewriteOutcome:
    """Rewrite every local image reference in ``document`` to its uploaded URL.

    Scan -> resolve -> upload (deduplicated per absolute path) -> plan ->
    apply. Every failure is turned into a notification and an issue on the
    returned outcome; nothing is raised.

    Args:
        document: Document to edit, None if there is no document to work on
        document_dir: Directory relative references resolve against
        uploader: Upload primitive, called with one path at a time
        notifier: Receives user-facing notifications
        messages: Message template overrides
        upload_workers: Upload distinct images on this many threads before planning
    """
    messages = messages or MessagesConfig()
    outcome = RewriteOutcome()

    if document is None:
        message = "No active document"
        notifier.error(message)
        outcome.issues.append(RewriteIssue(kind=IssueKind.NO_ACTIVE_DOCUMENT, message=message))
        return outcome

    text = document.get_text()
    targets = [resolve(ref, document_dir) for ref in scan(text)]
    logger.debug(f"Found {len(targets)} image reference(s) under {document_dir}")

    if all(target.kind == TargetKind.REMOTE for target in targets):
        message = messages.render("no_local_images")
        notifier.warning(message)
        outcome.issues.append(RewriteIssue(kind=IssueKind.NO_LOCAL_IMAGES_FOUND, message=message))
        return outcome

    cache = UploadCache(uploader)
    prefetched: dict[Path, str | None] = {}
    if upload_workers > 1:
        paths = list(dict.fromkeys(t.path for t in targets if t.kind == TargetKind.LOCAL_RESOLVED))
        with ThreadPoolExecutor(max_workers=upload_workers) as pool:
            prefetched = dict(zip(paths, pool.map(cache.resolve_url, paths)))

    plan = plan_replacements(targets, cache, notifier, messages, outcome.issues, prefetched=prefetched)
    if plan:
        outcome.replacements = apply_replacements(
            document, plan, notifier, messages, outcome.issues, scanned_text=text
        )
        outcome.applied = bool(outcome.replacements)

    outcome.uploads = cache.uploaded
    outcome.upload_count = cache.upload_count
    return outcome
