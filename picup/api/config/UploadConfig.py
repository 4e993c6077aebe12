"""Upload backend configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...constants import DEFAULT_PICGO_URL


class UploadConfig(BaseModel):
    """Which uploader to use and how to reach it."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["picgo", "command"] = Field("picgo", description="Uploader backend")
    url: str = Field(DEFAULT_PICGO_URL, description="PicGo server upload endpoint")
    command: list[str] = Field(default_factory=list, description="argv prefix for the command uploader")
    timeout_secs: float = Field(30.0, gt=0, description="Timeout for a single upload call")

    @model_validator(mode="after")
    def require_command_argv(self) -> "UploadConfig":
        if self.type == "command" and not self.command:
            raise ValueError("upload.command must be set when upload.type is 'command'")
        return self
