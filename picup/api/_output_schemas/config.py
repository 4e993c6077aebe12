"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """``picup config`` / ``picup config show SECTION``.

    With no section, ``content`` is ``{"sections": [...]}``; otherwise it is
    the dumped section model.
    """

    section: str = Field(..., description="Requested section, empty when listing")
    content: dict[str, Any] = Field(..., description="Section names or section values")
    config_path: str = Field(..., description="config.json that was read (may not exist)")


class ConfigVersionOutput(BaseOutputSchema):
    version: str = Field(..., description="Installed picup version, 'unknown' when not installed")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
