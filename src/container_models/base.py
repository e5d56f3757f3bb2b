from pydantic import BaseModel, ConfigDict


class ConfigBaseModel(BaseModel):
    """Base class for frozen container models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        regex_engine="rust-regex",
    )
