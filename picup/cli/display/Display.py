"""Display interface used by the command runner."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where the four command stages are rendered.

    ``status``/``info``/``success``/``error``/``warning`` carry human-facing
    lines; ``json_output`` carries the machine-readable command output.
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce the command."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Show a progress line."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Show a failure summary; ``details`` adds an indented second line."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write ``data`` as ``format`` ("yaml" or "json")."""
