"""Streaming translation: upstream stream parts to normalized events."""

from .accumulator import Accumulator
from .manager import EventManager
from .source import StreamCursor, StreamSource, open_cursor, release_iterator
from .translator import StreamTranslator, process_stream
from .types import Sink, StreamPhase

__all__ = [
    "StreamTranslator",
    "process_stream",
    "Accumulator",
    "StreamPhase",
    "EventManager",
    "Sink",
    "StreamSource",
    "StreamCursor",
    "open_cursor",
    "release_iterator",
]
