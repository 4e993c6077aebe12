"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Common part of all command outputs.

    ``errors`` make the command fail; ``warnings`` (a missing image, a
    document without local images) are reported but do not.
    """

    errors: list[str] = Field(default_factory=list, description="Problems that made the command fail")
    warnings: list[str] = Field(default_factory=list, description="Problems reported without failing")
