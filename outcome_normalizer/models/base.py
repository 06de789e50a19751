"""Shared pydantic base for identity, event and detail models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model; inputs are caller-owned and never mutated."""

    model_config = ConfigDict(frozen=True)
