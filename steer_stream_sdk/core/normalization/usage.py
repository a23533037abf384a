"""
Usage normalization module.

This module normalizes token usage reported by upstream records into a
consistent shape. Backends disagree on field names (AI SDK camelCase,
OpenAI prompt/completion, Anthropic input/output), and some omit usage
entirely; every missing count defaults to 0. The total is never derived
from the other two counts; a backend that reports no total gets 0.
"""

from typing import Any, Dict, Mapping, Optional


PROMPT_TOKEN_FIELDS = (
    "prompt_tokens", "promptTokens", "input_tokens", "inputTokens", "prompt_token_count"
)
COMPLETION_TOKEN_FIELDS = (
    "completion_tokens", "completionTokens", "output_tokens", "outputTokens", "generated_tokens"
)
TOTAL_TOKEN_FIELDS = ("total_tokens", "totalTokens")


def _coerce_count(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _first_count(usage_data: Mapping[str, Any], field_names) -> int:
    for name in field_names:
        if usage_data.get(name) is not None:
            return _coerce_count(usage_data[name])
    return 0


def normalize_usage(
    usage_data: Optional[Mapping[str, Any]],
    prompt_tokens: Optional[int] = None,
    completion_tokens: Optional[int] = None,
    total_tokens: Optional[int] = None,
) -> Dict[str, int]:
    """
    Normalize usage data into the standard shape.

    {
        "prompt_tokens": int,
        "completion_tokens": int,
        "total_tokens": int
    }

    Args:
        usage_data: Raw usage mapping from an upstream record (optional)
        prompt_tokens: Override for prompt tokens
        completion_tokens: Override for completion tokens
        total_tokens: Override for total tokens

    Returns:
        Dict with normalized integer counts
    """
    usage_data = usage_data or {}

    normalized = {
        "prompt_tokens": _first_count(usage_data, PROMPT_TOKEN_FIELDS),
        "completion_tokens": _first_count(usage_data, COMPLETION_TOKEN_FIELDS),
        "total_tokens": _first_count(usage_data, TOTAL_TOKEN_FIELDS),
    }

    # Apply overrides if provided
    if prompt_tokens is not None:
        normalized["prompt_tokens"] = _coerce_count(prompt_tokens)
    if completion_tokens is not None:
        normalized["completion_tokens"] = _coerce_count(completion_tokens)
    if total_tokens is not None:
        normalized["total_tokens"] = _coerce_count(total_tokens)

    return normalized
