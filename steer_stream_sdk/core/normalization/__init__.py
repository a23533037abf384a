"""Normalization layer for standardizing provider output.

This layer handles:
- Usage data normalization
- Message formatting for provider requests
- Tool argument decoding
"""

from .messages import split_system_message, to_message_dicts
from .tools import decode_tool_arguments
from .usage import normalize_usage

__all__ = [
    "normalize_usage",
    "to_message_dicts",
    "split_system_message",
    "decode_tool_arguments",
]
