"""Report the installed picup version."""

from collections.abc import Iterator

from ...utils.get_package_version import get_package_version
from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult


def cmd_version() -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading package metadata...")
        version = get_package_version()
        yield (1.0, "Complete")
        result_obj.result = f"picup {version}"
        result_obj.output = ConfigVersionOutput(version=version).model_dump(mode="python")
        result_obj.success = version != "unknown"
        if not result_obj.success:
            result_obj.output["errors"] = ["picup is not installed as a package"]

    return StageResult(announce="Checking picup version...", progress_callback=do_work)
