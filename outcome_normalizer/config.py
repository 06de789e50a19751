"""Configuration for the normalizer command line adapter."""

from pydantic import BaseModel, Field


class NormalizerConfig(BaseModel):
    """Configuration passed as JSON on the command line."""

    name_providers: bool = Field(
        default=True, description="Load printable-name providers from entry points"
    )
    indent: int | None = Field(
        default=2, description="Indentation of the JSON output (None for compact)"
    )
