"""Text document abstraction used by the rewrite workflow."""

from .Document import Document
from .DocumentError import DocumentError
from .EditApplicationError import EditApplicationError
from .FileDocument import FileDocument
from .NoActiveDocumentError import NoActiveDocumentError
from .Position import Position
from .TextEdit import TextEdit
from .TextRange import TextRange

__all__ = [
    "Document",
    "DocumentError",
    "EditApplicationError",
    "FileDocument",
    "NoActiveDocumentError",
    "Position",
    "TextEdit",
    "TextRange",
]
