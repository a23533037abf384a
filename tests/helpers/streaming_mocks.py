"""Helper functions for creating streaming mocks."""

from types import SimpleNamespace
from typing import Any, AsyncGenerator, Iterable, List, Optional


async def stream_of(records: Iterable[Any]) -> AsyncGenerator[Any, None]:
    """Async generator over upstream records."""
    for record in records:
        yield record


class TrackingStream:
    """Async stream source that counts reads and releases.

    Raises ``error`` instead of returning the record at index ``fail_at``.
    """

    def __init__(self, records: Iterable[Any], fail_at: Optional[int] = None, error: Optional[Exception] = None):
        self.records = list(records)
        self.fail_at = fail_at
        self.error = error or ConnectionError("stream reset")
        self.reads = 0
        self.close_count = 0

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    def __aiter__(self) -> "TrackingStream":
        return self

    async def __anext__(self) -> Any:
        if self.fail_at is not None and self.reads == self.fail_at:
            raise self.error
        if self.reads >= len(self.records):
            raise StopAsyncIteration
        record = self.records[self.reads]
        self.reads += 1
        return record

    async def aclose(self) -> None:
        self.close_count += 1


class MockSDKStream:
    """Provider SDK stream: async iterable with an async ``close()``."""

    def __init__(self, chunks: Iterable[Any], error: Optional[Exception] = None):
        self.chunks = list(chunks)
        self.error = error
        self.closed = False

    async def __aiter__(self):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error

    async def close(self) -> None:
        self.closed = True


# OpenAI Chat Completions chunks

def openai_tool_fragment(
    index: int = 0,
    id: Optional[str] = None,
    name: Optional[str] = None,
    arguments: Optional[str] = None,
) -> SimpleNamespace:
    return SimpleNamespace(
        index=index,
        id=id,
        function=SimpleNamespace(name=name, arguments=arguments),
    )


def openai_chunk(
    content: Optional[str] = None,
    reasoning_content: Optional[str] = None,
    tool_calls: Optional[List[SimpleNamespace]] = None,
    finish_reason: Optional[str] = None,
    usage: Optional[SimpleNamespace] = None,
    with_choice: bool = True,
) -> SimpleNamespace:
    choices = []
    if with_choice:
        delta = SimpleNamespace(content=content, reasoning_content=reasoning_content, tool_calls=tool_calls)
        choices.append(SimpleNamespace(delta=delta, finish_reason=finish_reason))
    return SimpleNamespace(choices=choices, usage=usage)


def openai_usage(prompt_tokens: int = 10, completion_tokens: int = 5) -> SimpleNamespace:
    return SimpleNamespace(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=prompt_tokens + completion_tokens,
    )


def create_openai_chunks(chunks: List[str]) -> List[SimpleNamespace]:
    """Text chunks followed by a finish chunk and a usage-only chunk."""
    result = [openai_chunk(content=chunk) for chunk in chunks]
    result.append(openai_chunk(finish_reason="stop"))
    result.append(openai_chunk(with_choice=False, usage=openai_usage(10, len(chunks) * 2)))
    return result


# Anthropic Messages events

def anthropic_event(event_type: str, **fields: Any) -> SimpleNamespace:
    return SimpleNamespace(type=event_type, **fields)


def create_anthropic_events(chunks: List[str]) -> List[SimpleNamespace]:
    """A single text block streamed as ``chunks``, with usage and stop."""
    events = [
        anthropic_event(
            "message_start",
            message=SimpleNamespace(usage=SimpleNamespace(input_tokens=10, output_tokens=1)),
        ),
        anthropic_event("content_block_start", index=0, content_block=SimpleNamespace(type="text", text="")),
    ]
    for chunk in chunks:
        events.append(anthropic_event(
            "content_block_delta",
            index=0,
            delta=SimpleNamespace(type="text_delta", text=chunk),
        ))
    events.append(anthropic_event("content_block_stop", index=0))
    events.append(anthropic_event(
        "message_delta",
        delta=SimpleNamespace(stop_reason="end_turn"),
        usage=SimpleNamespace(input_tokens=None, output_tokens=len(chunks) * 2),
    ))
    events.append(anthropic_event("message_stop"))
    return events
