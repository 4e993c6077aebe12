"""Result record returned by every ``cmd_*`` function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Deferred command run.

    The CLI prints ``announce``, then drives ``progress_callback`` with this
    instance; each yielded ``(fraction, message)`` is a progress line. By the
    time the generator is exhausted it has set ``result`` (one-line summary),
    ``output`` (schema-validated dict) and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
