from __future__ import annotations

from typing import Any, Dict

from ...config.constants import DEFAULT_MAX_TOKENS
from ...core.normalization.messages import split_system_message
from ...models.provider import ProviderOptions


def build_messages_payload(model_id: str, options: ProviderOptions) -> Dict[str, Any]:
    """Build a streaming Messages API payload.

    The Messages API requires ``max_tokens`` and takes the system prompt as
    a top-level parameter. A ``budget_tokens`` reasoning option enables
    extended thinking.
    """
    system, messages = split_system_message(options.messages)
    params: Dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "max_tokens": options.max_tokens or DEFAULT_MAX_TOKENS,
        "stream": True,
    }

    # system=None fails SDK validation
    if system:
        params["system"] = system
    if options.temperature is not None:
        params["temperature"] = options.temperature
    if options.tools:
        params["tools"] = options.tools

    reasoning = options.reasoning or {}
    if reasoning.get("budget_tokens"):
        params["thinking"] = {"type": "enabled", "budget_tokens": int(reasoning["budget_tokens"])}

    return params
