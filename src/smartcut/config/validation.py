"""Pydantic models for validating user-supplied encoding settings.

Encoder names and presets end up as ffmpeg arguments, so they are checked
for shell metacharacters before use.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smartcut.config.models import EncodingConfig

# Shell metacharacters never valid in an encoder or preset token
FORBIDDEN_TOKEN_PATTERNS = (";", "|", "&", "$(", "`", "${", ">", "<", "\n", " ")

MAX_TOKEN_LENGTH = 64


def _validate_token(field_name: str, value: str | None) -> str | None:
    if value is None:
        return None
    if not value:
        raise ValueError(f"{field_name} must not be empty")
    if len(value) > MAX_TOKEN_LENGTH:
        raise ValueError(
            f"{field_name} exceeds maximum length of {MAX_TOKEN_LENGTH} characters"
        )
    for pattern in FORBIDDEN_TOKEN_PATTERNS:
        if pattern in value:
            raise ValueError(
                f"{field_name} contains forbidden character sequence {pattern!r}"
            )
    return value


class EncodingSettingsModel(BaseModel):
    """Pydantic model for the ``[encoding]`` config table and CLI overrides."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoder: str | None = None
    quality: float | None = Field(default=None, ge=0, le=63)
    preset: str | None = None

    @field_validator("encoder")
    @classmethod
    def validate_encoder(cls, v: str | None) -> str | None:
        """Validate encoder name token."""
        return _validate_token("encoder", v)

    @field_validator("preset")
    @classmethod
    def validate_preset(cls, v: str | None) -> str | None:
        """Validate preset token."""
        return _validate_token("preset", v)

    def to_config(self) -> EncodingConfig:
        """Convert to the EncodingConfig dataclass."""
        return EncodingConfig(
            encoder=self.encoder,
            quality=self.quality,
            preset=self.preset,
        )
