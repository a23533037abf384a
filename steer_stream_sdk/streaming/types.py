from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Union

from ..models.events import NormalizedEvent


class StreamPhase(str, Enum):
    """Lifecycle phase of one translated stream."""
    IDLE = "idle"
    REASONING = "reasoning"
    ANSWERING = "answering"
    DONE = "done"


# Receives normalized events in emission order; may be a coroutine function.
Sink = Callable[[NormalizedEvent], Union[None, Awaitable[Any]]]
