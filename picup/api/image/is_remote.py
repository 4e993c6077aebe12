"""Check whether a reference already points at remote content."""

_REMOTE_PREFIXES = ("http://", "https://", "data:")


def is_remote(fragment: str) -> bool:
    """True for http(s) URLs and data: URIs."""
    return fragment.strip().lower().startswith(_REMOTE_PREFIXES)
