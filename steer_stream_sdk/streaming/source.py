"""
Stream source cursors.

A stream source is any async iterable of upstream records; sync iterables
are accepted for replay and tests. ``open_cursor`` acquires a single-use
cursor over a source and guarantees it is released exactly once, whatever
way the consumer exits.
"""

from __future__ import annotations

import inspect
from contextlib import asynccontextmanager
from typing import Any, AsyncIterable, AsyncIterator, Iterable, Protocol, Union, runtime_checkable


@runtime_checkable
class StreamSource(Protocol):
    """Forward-only, single-consumer sequence of upstream records."""

    def __aiter__(self) -> AsyncIterator[Any]:
        ...


SourceLike = Union[AsyncIterable[Any], Iterable[Any]]


async def release_iterator(iterator: Any) -> None:
    """Close an iterator through ``aclose()`` or ``close()`` when it has one."""
    for name in ("aclose", "close"):
        method = getattr(iterator, name, None)
        if method is None:
            continue
        result = method()
        if inspect.isawaitable(result):
            await result
        return


class StreamCursor:
    """Single-use cursor over a stream source.

    Reads are issued one at a time; ``release()`` closes the underlying
    iterator and is idempotent.
    """

    def __init__(self, source: SourceLike):
        if hasattr(source, "__aiter__"):
            self._iterator = source.__aiter__()
            self._is_async = True
        elif hasattr(source, "__iter__"):
            self._iterator = iter(source)
            self._is_async = False
        else:
            raise TypeError(f"Stream source must be iterable, got {type(source).__name__}")
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def __aiter__(self) -> "StreamCursor":
        return self

    async def __anext__(self) -> Any:
        if self._released:
            raise StopAsyncIteration
        if self._is_async:
            return await self._iterator.__anext__()
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration

    async def release(self) -> None:
        if self._released:
            return
        self._released = True
        await release_iterator(self._iterator)


@asynccontextmanager
async def open_cursor(source: SourceLike) -> AsyncIterator[StreamCursor]:
    """Acquire a cursor over ``source``, releasing it on every exit path."""
    cursor = StreamCursor(source)
    try:
        yield cursor
    finally:
        await cursor.release()
