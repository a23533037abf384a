from __future__ import annotations

from typing import Any, AsyncGenerator, AsyncIterable, Dict, Optional

from ...core.normalization.tools import decode_tool_arguments
from ...models.upstream import (
    FinishPart,
    ReasoningDeltaPart,
    StepFinishPart,
    StreamPart,
    TextDeltaPart,
    ToolCallDeltaPart,
    ToolCallPart,
    ToolCallStartPart,
)


async def iter_chat_completion_parts(stream: AsyncIterable[Any]) -> AsyncGenerator[StreamPart, None]:
    """Map a Chat Completions chunk stream to upstream stream parts.

    Tool calls arrive as indexed fragments: the first fragment of a call
    carries its id and name, later ones only argument text. Completed calls
    are emitted once the stream ends, followed by step-finish and finish
    carrying the usage chunk's counts.
    """
    tool_calls: Dict[int, Dict[str, str]] = {}
    usage: Optional[Any] = None
    finish_reason: Optional[str] = None

    async for chunk in stream:
        if getattr(chunk, "usage", None) is not None:
            usage = chunk.usage

        for choice in getattr(chunk, "choices", None) or []:
            if getattr(choice, "finish_reason", None):
                finish_reason = choice.finish_reason

            delta = getattr(choice, "delta", None)
            if delta is None:
                continue

            # DeepSeek and vLLM use reasoning_content, OpenRouter uses reasoning
            reasoning = getattr(delta, "reasoning_content", None) or getattr(delta, "reasoning", None)
            if reasoning:
                yield ReasoningDeltaPart(text_delta=reasoning)

            content = getattr(delta, "content", None)
            if content:
                yield TextDeltaPart(text_delta=content)

            for fragment in getattr(delta, "tool_calls", None) or []:
                index = getattr(fragment, "index", None) or 0
                function = getattr(fragment, "function", None)
                name = getattr(function, "name", None) or ""
                arguments = getattr(function, "arguments", None) or ""

                state = tool_calls.get(index)
                if state is None:
                    state = {
                        "id": getattr(fragment, "id", None) or f"call_{index}",
                        "name": name,
                        "arguments": "",
                    }
                    tool_calls[index] = state
                    yield ToolCallStartPart(tool_call_id=state["id"], tool_name=state["name"])
                elif name and not state["name"]:
                    state["name"] = name

                if arguments:
                    state["arguments"] += arguments
                    yield ToolCallDeltaPart(
                        tool_call_id=state["id"],
                        tool_name=state["name"],
                        args_text_delta=arguments,
                    )

    for index in sorted(tool_calls):
        state = tool_calls[index]
        yield ToolCallPart(
            tool_call_id=state["id"],
            tool_name=state["name"],
            args=decode_tool_arguments(state["arguments"]),
        )

    yield StepFinishPart(usage=usage, finish_reason=finish_reason)
    yield FinishPart(usage=usage, finish_reason=finish_reason)
