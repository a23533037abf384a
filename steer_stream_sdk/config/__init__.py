"""Configuration: provider catalog and translation defaults."""

from .constants import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOOL_SERVER_ID,
    DEFAULT_TOOL_SERVER_NAME,
    FALLBACK_PROVIDER_ID,
    KEYLESS_API_KEY,
    TIMEOUT_ENV_VAR,
)
from .providers import PROVIDER_CONFIGS

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_TOOL_SERVER_ID",
    "DEFAULT_TOOL_SERVER_NAME",
    "FALLBACK_PROVIDER_ID",
    "KEYLESS_API_KEY",
    "TIMEOUT_ENV_VAR",
    "PROVIDER_CONFIGS",
]
