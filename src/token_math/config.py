"""Configuration system using pydantic-settings with environment variable loading.

The arithmetic core never reads settings. They only feed presentation
defaults (locale), the APY approximation scales and logging setup.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class FormatSettings(BaseSettings):
    """Display formatting defaults."""

    model_config = SettingsConfigDict(env_prefix="TOKEN_MATH_FORMAT_")

    locale: str = "en_US"  # used by TokenAmount.format when LocaleFormat.locale is None


class ApySettings(BaseSettings):
    """Scales used by the floating APY approximation.

    All fields configurable via TOKEN_MATH_APY_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="TOKEN_MATH_APY_")

    base_decimal_places: int = 6  # exact rendering of 1 + period yield
    precision_decimal_places: int = 10  # result is floored over 10^10


class TokenMathSettings(BaseSettings):
    """Root settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_prefix="TOKEN_MATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    format: FormatSettings = FormatSettings()
    apy: ApySettings = ApySettings()


@lru_cache(maxsize=1)
def get_settings() -> TokenMathSettings:
    """Return the process-wide settings, loaded once from the environment."""
    return TokenMathSettings()
