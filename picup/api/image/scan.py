"""Find image references in text."""

import re
from collections.abc import Iterator

from .ImageReference import ImageReference
from .SyntaxKind import SyntaxKind

# Optional markdown title followed by the closing paren
_TITLE = r"""(?:\s+(?:"[^"\n]*"|'[^'\n]*'|[^)\n]*))?\)"""

# One alternative per syntax; at a given position earlier alternatives win
IMAGE_PATTERN = re.compile(
    r"!\[[^\]]*\]\(\s*<(?P<angle>[^<>\n]*)>" + _TITLE
    + r"|!\[[^\]]*\]\(\s*(?P<paren>[^)\s]+)" + _TITLE
    + r"""|<img\b[^>]*?\ssrc\s*=\s*(?:"(?P<src_dq>[^"]*)"|'(?P<src_sq>[^']*)')[^>]*>"""
    + r"|!\[\[(?P<wiki>[^\]|\n]*)(?:\|[^\]\n]*)?\]\]",
    re.IGNORECASE,
)

_GROUP_KINDS: tuple[tuple[str, SyntaxKind], ...] = (
    ("angle", SyntaxKind.MARKDOWN_ANGLE),
    ("paren", SyntaxKind.MARKDOWN_PAREN),
    ("src_dq", SyntaxKind.HTML),
    ("src_sq", SyntaxKind.HTML),
    ("wiki", SyntaxKind.WIKILINK),
)


def scan(text: str) -> Iterator[ImageReference]:
    """Yield image references in ``text`` ordered by offset.

    Matches never overlap. References whose URL or file name is empty are
    skipped.
    """
    for match in IMAGE_PATTERN.finditer(text):
        for group, kind in _GROUP_KINDS:
            value = match.group(group)
            if value is not None:
                break
        fragment = value.strip()
        if not fragment:
            continue
        leading = len(value) - len(value.lstrip())
        yield ImageReference(
            raw=match.group(0),
            fragment=fragment,
            kind=kind,
            start=match.start(),
            fragment_offset=match.start(group) - match.start() + leading,
        )
