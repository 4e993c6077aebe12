"""User-facing message templates."""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

_DEFAULT_MESSAGES: dict[str, str] = {
    "local_image_missing": "Local image not found: {path}",
    "no_local_images": "No local images found in current document",
    "replaced_link": "Replaced original image link {original} with uploaded image link {replacement}.",
    "upload_failed": "Failed to upload local image: {path}",
    "edit_failed": "Failed to apply image link replacements: {reason}",
}

_FORMAT_ERRORS = (ValueError, IndexError, KeyError, AttributeError)


class _KeepUnknown(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class MessagesConfig(BaseModel):
    """Optional overrides for notification text.

    Templates use named ``str.format`` placeholders ({path}, {original},
    {replacement}, {reason}); unknown names are left as written. Positional
    fields such as ``{0}`` and unbalanced braces are rejected at load time.
    A ``None`` template falls back to the built-in phrasing.
    """

    model_config = ConfigDict(extra="forbid")

    local_image_missing: str | None = Field(None, description="Shown once per missing local image")
    no_local_images: str | None = Field(None, description="Shown when a document has no local images")
    replaced_link: str | None = Field(None, description="Shown once per applied replacement")
    upload_failed: str | None = Field(None, description="Shown when the uploader returns no URL")
    edit_failed: str | None = Field(None, description="Shown when the edit batch is rejected")

    @field_validator("*")
    @classmethod
    def check_template(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            value.format_map(_KeepUnknown(path="x", original="x", replacement="x", reason="x"))
        except _FORMAT_ERRORS as e:
            raise ValueError(f"invalid message template {value!r}: {e}") from e
        return value

    def render(self, name: str, **fields: str) -> str:
        """Render message ``name`` with the given placeholder values.

        A template that cannot be formatted falls back to the built-in text.
        """
        template = getattr(self, name)
        if template is not None:
            try:
                return template.format_map(_KeepUnknown(fields))
            except _FORMAT_ERRORS as e:
                logger.warning(f"Message template {name!r} failed ({e}); using the default")
        return _DEFAULT_MESSAGES[name].format_map(_KeepUnknown(fields))
