"""
Stream translation.

StreamTranslator consumes the upstream stream parts of one model response
and emits normalized events: answer and reasoning deltas, tool-call
lifecycle events, step and response boundaries, sources, files and errors.

Reasoning and answer text arrive as separate record kinds with no explicit
boundary between them. The translator reconstructs that boundary from the
sequence itself: the first text delta after a reasoning run closes the run
with a single ThinkingComplete event.
"""

from __future__ import annotations

import inspect
import math
from typing import Any, AsyncIterator, Callable, Dict, List, Optional, Type

from ..core.normalization.usage import normalize_usage
from ..models.events import (
    BlockCompleteEvent,
    CompletionMetrics,
    ErrorEvent,
    ErrorPayload,
    ImageCompleteEvent,
    ImagePayload,
    KnowledgeCompleteEvent,
    KnowledgeReference,
    NormalizedEvent,
    ResponseCompleteEvent,
    ResponseSnapshot,
    TextCompleteEvent,
    TextDeltaEvent,
    ThinkingCompleteEvent,
    ThinkingDeltaEvent,
    ToolCall,
    ToolCompleteEvent,
    ToolCreatedEvent,
    ToolDescriptor,
    ToolInProgressEvent,
    ToolResponse,
    ToolStatus,
    UsageSnapshot,
)
from ..models.options import TranslatorOptions
from ..models.upstream import (
    ErrorPart,
    FilePart,
    FinishPart,
    ReasoningDeltaPart,
    ReasoningSignaturePart,
    RedactedReasoningPart,
    SourcePart,
    StepFinishPart,
    StreamPart,
    TextDeltaPart,
    ToolCallDeltaPart,
    ToolCallPart,
    ToolCallStartPart,
    ToolResultPart,
    UpstreamEventError,
    coerce_upstream_event,
)
from ..observability.logging import StreamLogger
from .accumulator import Accumulator
from .source import SourceLike, open_cursor
from .types import Sink


logger = StreamLogger("translator")

# Terminal records are never dropped; an invalid one ends the stream with defaults
TERMINAL_DEFAULTS: Dict[str, Type[StreamPart]] = {
    "finish": FinishPart,
    "error": ErrorPart,
}


class StreamTranslator:
    """Translate one upstream stream into normalized events.

    A translator may be reused for several streams, one after another or
    concurrently: every ``process_stream``/``iter_events`` call owns a
    fresh Accumulator.
    """

    def __init__(self, sink: Optional[Sink] = None, options: Optional[TranslatorOptions] = None):
        """Initialize the translator.

        Args:
            sink: Callable receiving each normalized event; coroutine
                functions are awaited before the next record is read
            options: Translation options
        """
        self.sink = sink
        self.options = options or TranslatorOptions()
        self._handlers: Dict[Type[StreamPart], Callable[[Any, Accumulator], List[NormalizedEvent]]] = {
            TextDeltaPart: self._on_text_delta,
            ReasoningDeltaPart: self._on_reasoning_delta,
            ReasoningSignaturePart: self._on_reasoning_signature,
            RedactedReasoningPart: self._on_redacted_reasoning,
            ToolCallStartPart: self._on_tool_call_start,
            ToolCallDeltaPart: self._on_tool_call_delta,
            ToolCallPart: self._on_tool_call,
            ToolResultPart: self._on_tool_result,
            StepFinishPart: self._on_step_finish,
            FinishPart: self._on_finish,
            SourcePart: self._on_source,
            FilePart: self._on_file,
            ErrorPart: self._on_error,
        }

    async def process_stream(self, source: SourceLike) -> str:
        """Pump ``source`` to completion, delivering events to the sink.

        Args:
            source: Async (or sync) iterable of upstream records

        Returns:
            The cumulative answer text

        Raises:
            Any exception raised by the source or the sink, after the
            source cursor has been released
        """
        accumulator = Accumulator()
        with logger.track_stream(self.options.stream_id) as stream_info:
            async with open_cursor(source) as cursor:
                async for raw in cursor:
                    stream_info['records'] += 1
                    if accumulator.done:
                        stream_info['ignored'] += 1
                        logger.log_unhandled(
                            _record_type(raw), stream_info['stream_id'], reason="after_terminal"
                        )
                        continue
                    for event in self._consume(raw, accumulator, stream_info['stream_id']):
                        await self._deliver(event)
        return accumulator.text

    async def iter_events(self, source: SourceLike) -> AsyncIterator[NormalizedEvent]:
        """Yield normalized events for ``source`` as they are produced.

        Pull-based alternative to ``process_stream``. Closing the iterator
        early releases the source cursor.
        """
        accumulator = Accumulator()
        stream_id = self.options.stream_id
        async with open_cursor(source) as cursor:
            async for raw in cursor:
                if accumulator.done:
                    logger.log_unhandled(_record_type(raw), stream_id, reason="after_terminal")
                    continue
                for event in self._consume(raw, accumulator, stream_id):
                    yield event

    def translate(self, part: StreamPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        """Apply one stream part to ``accumulator`` and return the events it produces."""
        if accumulator.done:
            return []
        handler = self._handlers.get(type(part))
        if handler is None:
            logger.log_unhandled(part.type, self.options.stream_id)
            return []
        return handler(part, accumulator)

    def _consume(self, raw: Any, accumulator: Accumulator, stream_id: Optional[str]) -> List[NormalizedEvent]:
        try:
            part = coerce_upstream_event(raw)
        except UpstreamEventError as e:
            default_type = TERMINAL_DEFAULTS.get(e.event_type)
            if default_type is None:
                logger.warning("Dropping malformed upstream record", stream_id=stream_id, error_msg=str(e))
                return []
            logger.warning("Malformed terminal record, using defaults", stream_id=stream_id, error_msg=str(e))
            part = default_type()
        return self.translate(part, accumulator)

    async def _deliver(self, event: NormalizedEvent) -> None:
        if self.sink is None:
            return
        result = self.sink(event)
        if inspect.isawaitable(result):
            await result

    # Text and reasoning

    def _on_text_delta(self, part: TextDeltaPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        fragment = part.text_delta or ""
        accumulator.append_text(fragment)
        events: List[NormalizedEvent] = [TextDeltaEvent(text=fragment)]
        if accumulator.reasoning:
            events.append(ThinkingCompleteEvent(text=accumulator.flush_reasoning()))
        return events

    def _on_reasoning_delta(self, part: ReasoningDeltaPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        fragment = part.text_delta or ""
        accumulator.append_reasoning(fragment)
        return [ThinkingDeltaEvent(text=fragment)]

    def _on_reasoning_signature(
        self, part: ReasoningSignaturePart, accumulator: Accumulator
    ) -> List[NormalizedEvent]:
        accumulator.enter_reasoning()
        return [ThinkingCompleteEvent(text=part.signature or "")]

    def _on_redacted_reasoning(
        self, part: RedactedReasoningPart, accumulator: Accumulator
    ) -> List[NormalizedEvent]:
        accumulator.enter_reasoning()
        return [ThinkingDeltaEvent(text=part.data or "")]

    # Tool-call lifecycle

    def _tool_response(
        self, tool_call_id: str, tool_name: str, arguments: Dict[str, Any], status: ToolStatus, response: Any
    ) -> ToolResponse:
        return ToolResponse(
            id=tool_call_id,
            tool=ToolDescriptor.stub(
                tool_name,
                server_id=self.options.tool_server_id,
                server_name=self.options.tool_server_name,
            ),
            arguments=arguments,
            status=status,
            response=response,
            tool_call_id=tool_call_id,
        )

    def _on_tool_call_start(self, part: ToolCallStartPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        return [ToolCreatedEvent(tool_calls=[ToolCall(id=part.tool_call_id, name=part.tool_name, args={})])]

    def _on_tool_call_delta(self, part: ToolCallDeltaPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        response = self._tool_response(
            part.tool_call_id, part.tool_name, {}, ToolStatus.INVOKING, part.args_text_delta
        )
        return [ToolInProgressEvent(responses=[response])]

    def _on_tool_call(self, part: ToolCallPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        return [ToolCreatedEvent(tool_calls=[ToolCall(id=part.tool_call_id, name=part.tool_name, args=dict(part.args))])]

    def _on_tool_result(self, part: ToolResultPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        response = self._tool_response(
            part.tool_call_id, part.tool_name, dict(part.args or {}), ToolStatus.DONE, part.result
        )
        return [ToolCompleteEvent(responses=[response])]

    # Step and response boundaries

    def _snapshot(
        self, accumulator: Accumulator, usage: Optional[Dict[str, Any]], reasoning: Optional[str] = None
    ) -> ResponseSnapshot:
        normalized = UsageSnapshot(**normalize_usage(usage))
        metrics = None
        if usage is not None:
            metrics = CompletionMetrics(completion_tokens=normalized.completion_tokens)
        return ResponseSnapshot(
            text=accumulator.text,
            reasoning_content=accumulator.reasoning if reasoning is None else reasoning,
            usage=normalized,
            metrics=metrics,
        )

    def _on_step_finish(self, part: StepFinishPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        return [BlockCompleteEvent(response=self._snapshot(accumulator, part.usage))]

    def _on_finish(self, part: FinishPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        events: List[NormalizedEvent] = []
        reasoning = accumulator.reasoning
        if reasoning and self.options.flush_reasoning_on_finish:
            events.append(ThinkingCompleteEvent(text=accumulator.flush_reasoning()))

        snapshot = self._snapshot(accumulator, part.usage, reasoning=reasoning)
        events.append(TextCompleteEvent(text=accumulator.text))
        events.append(ResponseCompleteEvent(response=snapshot))

        accumulator.finish()
        logger.log_usage(vars(snapshot.usage), self.options.stream_id)
        return events

    # Sources, files and errors

    def _on_source(self, part: SourcePart, accumulator: Accumulator) -> List[NormalizedEvent]:
        ordinal = accumulator.next_source_ordinal()
        source = part.source
        reference = KnowledgeReference(
            id=_knowledge_id(source.id, ordinal),
            content=source.title or "",
            source_url=source.url or "",
        )
        return [KnowledgeCompleteEvent(knowledge=[reference])]

    def _on_file(self, part: FilePart, accumulator: Accumulator) -> List[NormalizedEvent]:
        return [ImageCompleteEvent(image=ImagePayload(images=[part.base64 or ""]))]

    def _on_error(self, part: ErrorPart, accumulator: Accumulator) -> List[NormalizedEvent]:
        # Pending reasoning of an interrupted run is discarded
        accumulator.finish()
        error = part.error if part.error is not None else part.message
        message = _error_message(error, self.options.default_error_message)
        logger.warning("Upstream error record", stream_id=self.options.stream_id, error_msg=message)
        return [ErrorEvent(error=ErrorPayload(message=message))]


def _record_type(raw: Any) -> str:
    if isinstance(raw, StreamPart):
        return raw.type
    if isinstance(raw, dict):
        return str(raw.get("type") or "")
    return str(getattr(raw, "type", "") or "")


def _knowledge_id(value: Any, ordinal: int) -> int:
    """Numeric source id, or the source's ordinal when the id is not a non-zero number."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ordinal
    if not math.isfinite(number) or number == 0:
        return ordinal
    return int(number)


def _error_message(error: Any, default: str) -> str:
    if isinstance(error, str):
        return error or default
    if isinstance(error, dict):
        return str(error.get("message") or default)
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    if error:
        return str(error)
    return default


async def process_stream(
    source: SourceLike,
    sink: Optional[Sink] = None,
    options: Optional[TranslatorOptions] = None,
) -> str:
    """Translate ``source`` into ``sink`` and return the final answer text."""
    return await StreamTranslator(sink, options).process_stream(source)
