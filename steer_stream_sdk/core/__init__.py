"""Core normalization helpers shared by the translator and the providers."""

from .normalization import (
    decode_tool_arguments,
    normalize_usage,
    split_system_message,
    to_message_dicts,
)

__all__ = [
    "normalize_usage",
    "to_message_dicts",
    "split_system_message",
    "decode_tool_arguments",
]
