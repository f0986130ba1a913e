"""models/base.py — Shared pydantic configuration for wire records."""
from pydantic import BaseModel, ConfigDict, model_validator


class WireModel(BaseModel):
    """Immutable record decoded from a client payload; unknown keys are ignored."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_as_missing(cls, data):
        # Go clients send null for zero values; treat it as an absent key
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
