from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from ..models.events import (
    BlockCompleteEvent,
    ChunkType,
    ErrorEvent,
    ImageCompleteEvent,
    KnowledgeCompleteEvent,
    NormalizedEvent,
    ResponseCompleteEvent,
    TextCompleteEvent,
    TextDeltaEvent,
    ThinkingCompleteEvent,
    ThinkingDeltaEvent,
    ToolCompleteEvent,
    ToolCreatedEvent,
    ToolInProgressEvent,
)


Callback = Callable[[Any], Union[None, Awaitable[None]]]


class EventManager:
    """Sink that dispatches normalized events to per-kind callbacks.

    Pass an instance as the translator's sink. Callbacks may be plain
    functions or coroutine functions; ``on_event`` receives every event
    after its kind-specific callback.
    """

    def __init__(
        self,
        on_text_delta: Optional[Callable[[TextDeltaEvent], Any]] = None,
        on_thinking_delta: Optional[Callable[[ThinkingDeltaEvent], Any]] = None,
        on_thinking_complete: Optional[Callable[[ThinkingCompleteEvent], Any]] = None,
        on_tool_created: Optional[Callable[[ToolCreatedEvent], Any]] = None,
        on_tool_in_progress: Optional[Callable[[ToolInProgressEvent], Any]] = None,
        on_tool_complete: Optional[Callable[[ToolCompleteEvent], Any]] = None,
        on_block_complete: Optional[Callable[[BlockCompleteEvent], Any]] = None,
        on_text_complete: Optional[Callable[[TextCompleteEvent], Any]] = None,
        on_response_complete: Optional[Callable[[ResponseCompleteEvent], Any]] = None,
        on_knowledge_complete: Optional[Callable[[KnowledgeCompleteEvent], Any]] = None,
        on_image_complete: Optional[Callable[[ImageCompleteEvent], Any]] = None,
        on_error: Optional[Callable[[ErrorEvent], Any]] = None,
        # Catch-all, called for every event
        on_event: Optional[Callable[[NormalizedEvent], Any]] = None,
        record: bool = False,
    ) -> None:
        self.on_event = on_event
        self.record = record
        self.events: List[NormalizedEvent] = []
        self._callbacks: Dict[ChunkType, Optional[Callback]] = {
            ChunkType.TEXT_DELTA: on_text_delta,
            ChunkType.THINKING_DELTA: on_thinking_delta,
            ChunkType.THINKING_COMPLETE: on_thinking_complete,
            ChunkType.TOOL_CREATED: on_tool_created,
            ChunkType.TOOL_IN_PROGRESS: on_tool_in_progress,
            ChunkType.TOOL_COMPLETE: on_tool_complete,
            ChunkType.BLOCK_COMPLETE: on_block_complete,
            ChunkType.TEXT_COMPLETE: on_text_complete,
            ChunkType.RESPONSE_COMPLETE: on_response_complete,
            ChunkType.KNOWLEDGE_COMPLETE: on_knowledge_complete,
            ChunkType.IMAGE_COMPLETE: on_image_complete,
            ChunkType.ERROR: on_error,
        }

    async def __call__(self, event: NormalizedEvent) -> None:
        await self.emit_event(event)

    async def emit_event(self, event: NormalizedEvent) -> None:
        """Emit a normalized event to the matching handler."""
        if self.record:
            self.events.append(event)
        await _invoke(self._callbacks.get(event.type), event)
        await _invoke(self.on_event, event)

    def events_of(self, chunk_type: ChunkType) -> List[NormalizedEvent]:
        """Recorded events of one kind, in emission order."""
        return [event for event in self.events if event.type == chunk_type]

    def clear(self) -> None:
        self.events.clear()


async def _invoke(callback: Optional[Callback], event: NormalizedEvent) -> None:
    if callback is None:
        return
    result = callback(event)
    if inspect.isawaitable(result):
        await result
