"""Syntax variant of an image reference."""

from enum import Enum


class SyntaxKind(str, Enum):
    MARKDOWN_PAREN = "markdown_paren"
    MARKDOWN_ANGLE = "markdown_angle"
    HTML = "html"
    WIKILINK = "wikilink"
