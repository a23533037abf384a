from __future__ import annotations

from collections.abc import Mapping
from typing import Any, AsyncGenerator, AsyncIterable, Dict, Optional

from ...core.normalization.tools import decode_tool_arguments
from ...models.upstream import (
    ErrorPart,
    FinishPart,
    ReasoningDeltaPart,
    ReasoningSignaturePart,
    RedactedReasoningPart,
    StepFinishPart,
    StreamPart,
    TextDeltaPart,
    ToolCallDeltaPart,
    ToolCallPart,
    ToolCallStartPart,
)


USAGE_FIELDS = ("input_tokens", "output_tokens")


def _as_dict(value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return dict(vars(value))


def _merge_usage(usage: Dict[str, int], data: Any) -> None:
    # message_delta repeats cumulative output_tokens and may omit input_tokens
    values = _as_dict(data)
    for key in USAGE_FIELDS:
        if values.get(key) is not None:
            usage[key] = values[key]


def _error_payload(error: Any) -> Any:
    if error is None or isinstance(error, (str, Mapping)):
        return error
    message = getattr(error, "message", None)
    return {"message": message} if message else str(error)


async def iter_message_parts(stream: AsyncIterable[Any]) -> AsyncGenerator[StreamPart, None]:
    """Map a Messages API event stream to upstream stream parts.

    Content blocks are indexed; a tool_use block's argument JSON arrives as
    input_json_delta fragments and is complete at its content_block_stop.
    message_stop ends the response; a stream error event ends it with an
    error record.
    """
    tool_blocks: Dict[int, Dict[str, str]] = {}
    usage: Dict[str, int] = {}
    finish_reason: Optional[str] = None

    async for event in stream:
        event_type = getattr(event, "type", None)

        if event_type == "message_start":
            _merge_usage(usage, getattr(getattr(event, "message", None), "usage", None))

        elif event_type == "content_block_start":
            block = event.content_block
            block_type = getattr(block, "type", None)
            if block_type == "tool_use":
                state = {"id": block.id, "name": block.name, "arguments": ""}
                tool_blocks[event.index] = state
                yield ToolCallStartPart(tool_call_id=state["id"], tool_name=state["name"])
            elif block_type == "redacted_thinking":
                yield RedactedReasoningPart(data=getattr(block, "data", None) or "")
            elif block_type == "text" and getattr(block, "text", None):
                yield TextDeltaPart(text_delta=block.text)

        elif event_type == "content_block_delta":
            delta = event.delta
            delta_type = getattr(delta, "type", None)
            if delta_type == "text_delta":
                yield TextDeltaPart(text_delta=delta.text)
            elif delta_type == "thinking_delta":
                yield ReasoningDeltaPart(text_delta=delta.thinking)
            elif delta_type == "signature_delta":
                yield ReasoningSignaturePart(signature=delta.signature)
            elif delta_type == "input_json_delta":
                state = tool_blocks.get(event.index)
                if state is not None and delta.partial_json:
                    state["arguments"] += delta.partial_json
                    yield ToolCallDeltaPart(
                        tool_call_id=state["id"],
                        tool_name=state["name"],
                        args_text_delta=delta.partial_json,
                    )

        elif event_type == "content_block_stop":
            state = tool_blocks.pop(event.index, None)
            if state is not None:
                yield ToolCallPart(
                    tool_call_id=state["id"],
                    tool_name=state["name"],
                    args=decode_tool_arguments(state["arguments"]),
                )

        elif event_type == "message_delta":
            _merge_usage(usage, getattr(event, "usage", None))
            stop_reason = getattr(getattr(event, "delta", None), "stop_reason", None)
            if stop_reason:
                finish_reason = stop_reason

        elif event_type == "message_stop":
            final_usage = None
            if usage:
                # The Messages API reports no total
                final_usage = dict(usage)
                final_usage["total_tokens"] = usage.get("input_tokens", 0) + usage.get("output_tokens", 0)
            yield StepFinishPart(usage=final_usage, finish_reason=finish_reason)
            yield FinishPart(usage=final_usage, finish_reason=finish_reason)
            return

        elif event_type == "error":
            yield ErrorPart(error=_error_payload(getattr(event, "error", None)))
            return
