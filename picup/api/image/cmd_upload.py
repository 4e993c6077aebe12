"""Image upload API command."""

from collections.abc import Iterator
from pathlib import Path

from ...constants import IMAGE_EXTENSIONS
from .._output_schemas.image import ImageUploadOutput
from ..config.PicupConfig import PicupConfig
from ..StageResult import StageResult
from ..upload.get_uploader import get_uploader


def cmd_upload(paths: list[str]) -> StageResult:
    """Upload image files in one batch and return their URLs.

    Relative paths resolve against the working directory. Files that are
    missing or do not have an image extension are reported and nothing is
    uploaded.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Checking files...")
        files = [Path(p).expanduser().resolve() for p in paths]
        errors: list[str] = []
        for file_path in files:
            if file_path.suffix.lower() not in IMAGE_EXTENSIONS:
                errors.append(f"Not an image: {file_path}")
            elif not file_path.is_file():
                errors.append(f"No such image: {file_path}")
        if not files:
            errors.append("No images given")

        if not errors:
            yield (0.3, "Loading configuration...")
            try:
                config = PicupConfig.load()
            except ValueError as e:
                errors.append(str(e))

        if errors:
            yield (1.0, "Complete")
            result_obj.result = "Nothing uploaded"
            result_obj.output = ImageUploadOutput(errors=errors, urls=[], markdown="").model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, f"Uploading {len(files)} image(s)...")
        urls = get_uploader(config.upload).upload(files)

        yield (1.0, "Complete")
        if not urls:
            result_obj.result = "Upload failed"
            result_obj.output = ImageUploadOutput(
                errors=[f"Upload failed for {len(files)} image(s)"], urls=[], markdown=""
            ).model_dump(mode="python")
            result_obj.success = False
            return

        markdown = "\n".join(f"![{f.stem}]({url})" for f, url in zip(files, urls))
        result_obj.result = f"Uploaded {len(urls)} image(s)"
        result_obj.output = ImageUploadOutput(urls=urls, markdown=markdown).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Uploading {len(paths)} image(s)...", progress_callback=do_work)
