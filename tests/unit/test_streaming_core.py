"""Tests for the accumulator, stream cursors and the event manager."""

import pytest

from steer_stream_sdk.models.events import (
    ChunkType,
    ErrorEvent,
    ErrorPayload,
    TextDeltaEvent,
    ThinkingDeltaEvent,
)
from steer_stream_sdk.streaming.accumulator import Accumulator
from steer_stream_sdk.streaming.manager import EventManager
from steer_stream_sdk.streaming.source import StreamCursor, StreamSource, open_cursor, release_iterator
from steer_stream_sdk.streaming.types import StreamPhase
from tests.helpers.streaming_mocks import MockSDKStream, TrackingStream, stream_of


class TestAccumulator:

    def test_phases(self):
        accumulator = Accumulator()
        assert accumulator.phase is StreamPhase.IDLE

        accumulator.append_reasoning("r")
        assert accumulator.phase is StreamPhase.REASONING

        accumulator.append_text("a")
        assert accumulator.phase is StreamPhase.ANSWERING

        accumulator.enter_reasoning()
        assert accumulator.phase is StreamPhase.REASONING

        accumulator.finish()
        assert accumulator.done

    def test_flush_reasoning(self):
        accumulator = Accumulator()
        accumulator.append_reasoning("a")
        accumulator.append_reasoning("b")

        assert accumulator.flush_reasoning() == "ab"
        assert accumulator.reasoning == ""
        assert accumulator.flush_reasoning() == ""

    def test_source_ordinals(self):
        accumulator = Accumulator()

        assert [accumulator.next_source_ordinal() for _ in range(3)] == [1, 2, 3]


class TestStreamCursor:

    @pytest.mark.asyncio
    async def test_sync_iterable(self):
        async with open_cursor([1, 2]) as cursor:
            items = [item async for item in cursor]

        assert items == [1, 2]
        assert cursor.released

    @pytest.mark.asyncio
    async def test_release_is_idempotent(self):
        stream = TrackingStream([1])
        cursor = StreamCursor(stream)

        await cursor.release()
        await cursor.release()

        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_reads_stop_after_release(self):
        cursor = StreamCursor(TrackingStream([1, 2]))
        await cursor.release()

        with pytest.raises(StopAsyncIteration):
            await cursor.__anext__()

    @pytest.mark.asyncio
    async def test_released_on_exception(self):
        stream = TrackingStream([1])

        with pytest.raises(KeyError):
            async with open_cursor(stream):
                raise KeyError("x")

        assert stream.close_count == 1

    def test_rejects_non_iterable(self):
        with pytest.raises(TypeError):
            StreamCursor(42)

    @pytest.mark.asyncio
    async def test_release_iterator_uses_close(self):
        stream = MockSDKStream([])

        await release_iterator(stream)

        assert stream.closed

    @pytest.mark.asyncio
    async def test_release_iterator_closes_sync_generator(self):
        def numbers():
            yield 1
            yield 2

        generator = numbers()
        next(generator)
        await release_iterator(generator)

        with pytest.raises(StopIteration):
            next(generator)

    @pytest.mark.asyncio
    async def test_release_iterator_without_close(self):
        await release_iterator(iter([1]))

    def test_async_generator_is_stream_source(self):
        assert isinstance(stream_of([]), StreamSource)
        assert not isinstance([1], StreamSource)


class TestEventManager:

    @pytest.mark.asyncio
    async def test_dispatch_by_kind(self):
        deltas = []
        everything = []

        async def on_event(event):
            everything.append(event)

        manager = EventManager(on_text_delta=deltas.append, on_event=on_event)

        await manager(TextDeltaEvent(text="a"))
        await manager(ThinkingDeltaEvent(text="r"))

        assert [e.text for e in deltas] == ["a"]
        assert [e.type for e in everything] == [ChunkType.TEXT_DELTA, ChunkType.THINKING_DELTA]

    @pytest.mark.asyncio
    async def test_records_when_enabled(self):
        manager = EventManager(record=True)

        await manager.emit_event(TextDeltaEvent(text="a"))
        await manager.emit_event(ErrorEvent(error=ErrorPayload(message="x")))

        assert len(manager.events) == 2
        assert manager.events_of(ChunkType.ERROR)[0].error.message == "x"

        manager.clear()
        assert manager.events == []

    @pytest.mark.asyncio
    async def test_does_not_record_by_default(self):
        manager = EventManager()

        await manager(TextDeltaEvent(text="a"))

        assert manager.events == []

    @pytest.mark.asyncio
    async def test_callback_errors_propagate(self):
        def on_error(event):
            raise RuntimeError("handler failed")

        manager = EventManager(on_error=on_error)

        with pytest.raises(RuntimeError):
            await manager(ErrorEvent())
