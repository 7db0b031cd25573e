"""Configuration for Specific Character Set resolution."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class OverflowPolicy(str, Enum):
    """What to do when more than three character sets are declared."""

    TRUNCATE = "truncate"
    ERROR = "error"


class ResolverOptions(BaseModel):
    overflow: OverflowPolicy = OverflowPolicy.TRUNCATE
    strip_padding: bool = True

    model_config = {
        "frozen": True,
    }
