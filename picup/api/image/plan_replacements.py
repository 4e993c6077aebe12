"""Plan replacements for uploaded local images."""

from collections.abc import Iterable
from pathlib import Path

from ..config.MessagesConfig import MessagesConfig
from ..notify.Notifier import Notifier
from .IssueKind import IssueKind
from .Replacement import Replacement
from .ResolvedTarget import ResolvedTarget
from .RewriteIssue import RewriteIssue
from .TargetKind import TargetKind
from .UploadCache import UploadCache


def plan_replacements(
    targets: Iterable[ResolvedTarget],
    cache: UploadCache,
    notifier: Notifier,
    messages: MessagesConfig,
    issues: list[RewriteIssue],
    prefetched: dict[Path, str | None] | None = None,
) -> list[Replacement]:
    """Build the replacement plan in scan order.

    Missing files and failed uploads are notified, appended to ``issues``
    and left out of the plan. Each entry records which occurrence of its
    original text it addresses, counting every scanned reference, and
    where it started in the scanned text.

    ``prefetched`` holds upload results obtained before planning; the first
    reference to each of those paths uses that result instead of uploading
    again. Later references to a path whose upload failed retry through
    ``cache``.
    """
    prefetched = dict(prefetched or {})
    plan: list[Replacement] = []
    seen: dict[str, int] = {}

    for target in targets:
        ref = target.reference
        occurrence = seen.get(ref.raw, 0)
        seen[ref.raw] = occurrence + 1

        if target.kind == TargetKind.REMOTE:
            continue

        if target.kind == TargetKind.LOCAL_MISSING:
            message = messages.render("local_image_missing", path=str(target.path))
            notifier.warning(message)
            issues.append(RewriteIssue(kind=IssueKind.LOCAL_FILE_MISSING, message=message, path=str(target.path)))
            continue

        if target.path in prefetched:
            url = prefetched.pop(target.path)
        else:
            url = cache.resolve_url(target.path)
        if url is None:
            message = messages.render("upload_failed", path=str(target.path))
            notifier.error(message)
            issues.append(RewriteIssue(kind=IssueKind.UPLOAD_FAILED, message=message, path=str(target.path)))
            continue

        plan.append(
            Replacement(original=ref.raw, replacement=ref.with_fragment(url), occurrence=occurrence, start=ref.start)
        )

    return plan
