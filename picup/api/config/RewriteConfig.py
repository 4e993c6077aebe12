"""Rewrite workflow configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .MessagesConfig import MessagesConfig


class RewriteConfig(BaseModel):
    """Settings for the image rewrite workflow."""

    model_config = ConfigDict(extra="forbid")

    use_upload_version_folder: bool = Field(
        False, description="Write duplicated documents under an uploadVersion/ sub-directory"
    )
    upload_workers: int = Field(1, ge=1, description="Parallel uploads of distinct images (1 = sequential)")
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
