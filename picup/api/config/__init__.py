"""Config API module."""

from .PicupConfig import PicupConfig

__all__ = ["PicupConfig"]
