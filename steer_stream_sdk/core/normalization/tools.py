"""Tool argument normalization."""

import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


def decode_tool_arguments(arguments_text: str) -> Dict[str, Any]:
    """Decode streamed tool-call arguments into a dict.

    Providers stream arguments as JSON text fragments. Empty or undecodable
    text yields an empty dict; a JSON value that is not an object is
    wrapped as ``{"value": ...}``.
    """
    if not arguments_text or not arguments_text.strip():
        return {}
    try:
        decoded = json.loads(arguments_text)
    except json.JSONDecodeError as e:
        logger.warning(f"Discarding undecodable tool arguments: {e}")
        return {}
    if isinstance(decoded, dict):
        return decoded
    return {"value": decoded}
