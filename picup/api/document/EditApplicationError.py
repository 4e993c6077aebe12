"""An edit batch was rejected."""

from .DocumentError import DocumentError


class EditApplicationError(DocumentError):
    """The transactional edit failed; the document is unchanged."""
