"""Image scan API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.image import ImageScanOutput
from ..document.FileDocument import FileDocument
from ..document.NoActiveDocumentError import NoActiveDocumentError
from ..StageResult import StageResult
from .resolve import resolve
from .scan import scan
from .TargetKind import TargetKind


def cmd_scan(path: str) -> StageResult:
    """List the image references of a document and where each one points."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Reading document...")
        file_path = Path(path).expanduser().resolve()
        try:
            document = FileDocument(file_path)
        except NoActiveDocumentError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot read document: {path}"
            result_obj.output = ImageScanOutput(
                errors=[str(e)],
                path=str(file_path),
                references=[],
                local_count=0,
                remote_count=0,
                missing_count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Scanning for images...")
        targets = [resolve(ref, file_path.parent) for ref in scan(document.get_text())]

        yield (0.9, "Classifying references...")
        references = [
            {
                "raw": t.reference.raw,
                "fragment": t.reference.fragment,
                "kind": t.reference.kind.value,
                "target": t.kind.value,
                "path": str(t.path) if t.path else "",
                "offset": t.reference.start,
            }
            for t in targets
        ]
        counts = {kind: sum(1 for t in targets if t.kind == kind) for kind in TargetKind}
        warnings = [f"Local image not found: {t.path}" for t in targets if t.kind == TargetKind.LOCAL_MISSING]

        yield (1.0, "Complete")
        result_obj.output = ImageScanOutput(
            warnings=warnings,
            path=str(file_path),
            references=references,
            local_count=counts[TargetKind.LOCAL_RESOLVED],
            remote_count=counts[TargetKind.REMOTE],
            missing_count=counts[TargetKind.LOCAL_MISSING],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(references)} image reference(s) in {file_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Scanning images in {path}...", progress_callback=do_work)
