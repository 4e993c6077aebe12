"""Upload backends."""

from .CommandUploader import CommandUploader
from .get_uploader import get_uploader
from .PicgoUploader import PicgoUploader
from .Uploader import Uploader

__all__ = ["CommandUploader", "PicgoUploader", "Uploader", "get_uploader"]
