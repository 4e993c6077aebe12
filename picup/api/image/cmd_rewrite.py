"""Image rewrite API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.image import ImageRewriteOutput
from ..config.PicupConfig import PicupConfig
from ..document.FileDocument import FileDocument
from ..document.NoActiveDocumentError import NoActiveDocumentError
from ..notify.RecordingNotifier import RecordingNotifier
from ..StageResult import StageResult
from ..upload.get_uploader import get_uploader
from .duplicate_document import duplicate_document
from .rewrite_images import rewrite_images
from .RewriteOutcome import RewriteOutcome


def cmd_rewrite(path: str, same_file: bool = False) -> StageResult:
    """Upload local images of a document and rewrite their links.

    Args:
        path: Markdown document to process
        same_file: Edit ``path`` in place instead of a ``_uploadedVersion`` copy
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        source = Path(path).expanduser().resolve()

        def fail(message: str, errors: list[str]) -> None:
            result_obj.result = message
            result_obj.output = ImageRewriteOutput(
                errors=errors,
                source_path=str(source),
                target_path="",
                replacements=[],
                uploads={},
                messages=[],
            ).model_dump(mode="python")
            result_obj.success = False

        try:
            config = PicupConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            fail("Failed to load configuration", [str(e)])
            return

        yield (0.3, "Preparing document...")
        target = source
        if not same_file and source.is_file():
            try:
                target = duplicate_document(source, config.rewrite.use_upload_version_folder)
            except OSError as e:
                yield (1.0, "Complete")
                fail(f"Cannot copy document: {path}", [f"Cannot copy {source}: {e}"])
                return

        notifier = RecordingNotifier()
        try:
            document = FileDocument(target)
        except NoActiveDocumentError as e:
            document = None
            notifier.error(f"No active document: {e}")
            outcome = RewriteOutcome()
        else:
            yield (0.5, "Uploading images...")
            outcome = rewrite_images(
                document,
                source.parent,
                get_uploader(config.upload),
                notifier,
                messages=config.rewrite.messages,
                upload_workers=config.rewrite.upload_workers,
            )

        yield (1.0, "Complete")
        result_obj.output = ImageRewriteOutput(
            errors=notifier.errors,
            warnings=notifier.warnings,
            source_path=str(source),
            target_path=str(target) if document is not None else "",
            replacements=[r.to_dict() for r in outcome.replacements],
            uploads=outcome.uploads,
            messages=notifier.messages,
        ).model_dump(mode="python")
        if document is None:
            result_obj.result = f"Cannot read document: {path}"
        else:
            result_obj.result = f"Replaced {len(outcome.replacements)} image link(s) in {target.name}"
        result_obj.success = not notifier.errors

    return StageResult(announce=f"Rewriting image links in {path}...", progress_callback=do_work)
