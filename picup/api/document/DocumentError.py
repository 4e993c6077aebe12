"""Base error for document collaborators."""


class DocumentError(Exception):
    """Raised by Document implementations."""
