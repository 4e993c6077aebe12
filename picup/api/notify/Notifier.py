"""Abstract notification sink."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Fire-and-forget sink for info, warning and error messages."""

    @abstractmethod
    def info(self, message: str) -> None:
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass
