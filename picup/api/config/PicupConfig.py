"""Top-level picup configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .RewriteConfig import RewriteConfig
from .UploadConfig import UploadConfig


class PicupConfig(BaseModel):
    """Top-level configuration for picup."""

    model_config = ConfigDict(extra="forbid")

    upload: UploadConfig = Field(default_factory=UploadConfig)
    rewrite: RewriteConfig = Field(default_factory=RewriteConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on PICUP_HOME or default to ~/.picup."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "PicupConfig":
        """Load and validate config from file.

        A missing config file yields the defaults for every section.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert PicupConfig instance to a dictionary for serialization."""
        return {
            "upload": self.upload.model_dump(),
            "rewrite": self.rewrite.model_dump(),
            "log": self.log.model_dump(),
        }
