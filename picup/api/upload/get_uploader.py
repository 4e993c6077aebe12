"""Build the configured uploader."""

from ..config.UploadConfig import UploadConfig
from .CommandUploader import CommandUploader
from .PicgoUploader import PicgoUploader
from .Uploader import Uploader


def get_uploader(config: UploadConfig) -> Uploader:
    """Get an uploader instance for ``config.type``."""
    if config.type == "picgo":
        return PicgoUploader(url=config.url, timeout_secs=config.timeout_secs)
    if config.type == "command":
        return CommandUploader(command=config.command, timeout_secs=config.timeout_secs)
    raise ValueError(f"Unknown uploader: {config.type}")
