"""Apply a replacement plan to a document in one transaction."""

import logging
from collections.abc import Sequence

from ..config.MessagesConfig import MessagesConfig
from ..document.Document import Document
from ..document.EditApplicationError import EditApplicationError
from ..document.TextEdit import TextEdit
from ..document.TextRange import TextRange
from ..notify.Notifier import Notifier
from .IssueKind import IssueKind
from .Replacement import Replacement
from .RewriteIssue import RewriteIssue

logger = logging.getLogger(__name__)


def _find_occurrence(text: str, needle: str, occurrence: int) -> int:
    """Offset of the ``occurrence``-th non-overlapping ``needle``, or -1."""
    index = text.find(needle)
    for _ in range(occurrence):
        if index < 0:
            break
        index = text.find(needle, index + len(needle))
    return index


def _locate(text: str, entry: Replacement, anchored: bool) -> int:
    if anchored and entry.start >= 0 and text.startswith(entry.original, entry.start):
        return entry.start
    return _find_occurrence(text, entry.original, entry.occurrence)


def apply_replacements(
    document: Document,
    plan: Sequence[Replacement],
    notifier: Notifier,
    messages: MessagesConfig,
    issues: list[RewriteIssue],
    scanned_text: str | None = None,
) -> list[Replacement]:
    """Locate each planned original in the current text and replace it.

    While the document still holds ``scanned_text``, each original is taken
    at its recorded ``start``. Otherwise originals are found by content and
    occurrence in freshly fetched text. All edits go to the document in a
    single ``apply_edits`` call; on success one info notification is emitted
    per replacement.

    Returns:
        The replacements that were applied (empty if the batch failed).
    """
    text = document.get_text()
    anchored = scanned_text is not None and text == scanned_text
    edits: list[TextEdit] = []
    located: list[Replacement] = []

    for entry in plan:
        start = _locate(text, entry, anchored)
        if start < 0:
            message = f"Image link {entry.original} is no longer in the document"
            notifier.warning(message)
            issues.append(RewriteIssue(kind=IssueKind.ORIGINAL_NOT_FOUND, message=message))
            continue
        end = start + len(entry.original)
        edits.append(TextEdit(TextRange(document.position_at(start), document.position_at(end)), entry.replacement))
        located.append(entry)

    if not edits:
        return []

    reason = "the document rejected the edit"
    try:
        ok = document.apply_edits(edits)
    except EditApplicationError as e:
        ok = False
        reason = str(e)

    if not ok:
        message = messages.render("edit_failed", reason=reason)
        notifier.error(message)
        issues.append(RewriteIssue(kind=IssueKind.EDIT_APPLICATION_FAILURE, message=message))
        return []

    logger.info(f"Replaced {len(located)} image link(s)")
    for entry in located:
        notifier.info(messages.render("replaced_link", original=entry.original, replacement=entry.replacement))
    return located
