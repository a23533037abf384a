from typing import Any, Dict

from ...core.normalization.messages import to_message_dicts
from ...models.provider import ProviderOptions


def build_chat_completion_payload(model_id: str, options: ProviderOptions) -> Dict[str, Any]:
    """Build a streaming Chat Completions payload.

    Usage is requested in-stream so the final chunk carries token counts.
    Only options that are set are copied; OpenAI-compatible servers reject
    some parameters they do not know.
    """
    payload: Dict[str, Any] = {
        "model": model_id,
        "messages": to_message_dicts(options.messages),
        "stream": True,
        "stream_options": {"include_usage": True},
    }

    if options.max_tokens is not None:
        payload["max_tokens"] = options.max_tokens
    if options.temperature is not None:
        payload["temperature"] = options.temperature
    if options.tools:
        payload["tools"] = options.tools

    reasoning = options.reasoning or {}
    if reasoning.get("effort"):
        payload["reasoning_effort"] = reasoning["effort"]

    return payload
