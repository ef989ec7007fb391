"""Reply quote settings (fixed values, no env config)."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuoteSettings(BaseModel):
    """Limits and markers for the quoted excerpt of a replied-to message."""

    max_chars: int = Field(100, ge=1)
    max_lines: int = Field(2, ge=1)
    prefix: str = "  > "
    ellipsis: str = "…"

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("prefix", "ellipsis")
    @classmethod
    def validate_single_line(cls, v):
        if "\n" in v:
            raise ValueError("quote markers must not contain newlines")
        return v
