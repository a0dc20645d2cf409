"""Engine configuration using pydantic-settings with an env prefix."""

from __future__ import annotations

import struct
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

POINTER_WIDTHS = (32, 64)


def _native_pointer_width() -> int:
    return 64 if struct.calcsize("P") * 8 >= 64 else 32


class EngineSettings(BaseSettings):
    """Conversion engine settings.

    Settings are resolved once, when the instance is built, so the pointer
    width never changes between calls that share an instance.
    """

    model_config = {"env_prefix": "VALUECAST_", "frozen": True}

    pointer_width: int = Field(default_factory=_native_pointer_width)
    strict_symbol_separators: bool = False  # non-bitmask types reject multi-token input
    log_level: str = "INFO"

    @field_validator("pointer_width")
    @classmethod
    def _check_pointer_width(cls, value: int) -> int:
        if value not in POINTER_WIDTHS:
            raise ValueError(f"pointer_width must be one of {POINTER_WIDTHS}, got {value}")
        return value


@lru_cache()
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()
