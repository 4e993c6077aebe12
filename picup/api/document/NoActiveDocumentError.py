"""No document is available to operate on."""

from .DocumentError import DocumentError


class NoActiveDocumentError(DocumentError):
    """The document could not be opened or read."""
