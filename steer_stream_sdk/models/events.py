"""Normalized event models.

This module defines the events the translator emits to its sink. Each
event carries a ``type`` discriminant and exactly the fields a renderer
needs; ``to_dict()`` gives the wire shape.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config.constants import DEFAULT_TOOL_SERVER_ID, DEFAULT_TOOL_SERVER_NAME


class ChunkType(str, Enum):
    """Normalized event kinds."""
    TEXT_DELTA = "text_delta"
    THINKING_DELTA = "thinking_delta"
    THINKING_COMPLETE = "thinking_complete"
    TOOL_CREATED = "tool_created"
    TOOL_IN_PROGRESS = "tool_in_progress"
    TOOL_COMPLETE = "tool_complete"
    BLOCK_COMPLETE = "block_complete"
    TEXT_COMPLETE = "text_complete"
    RESPONSE_COMPLETE = "response_complete"
    KNOWLEDGE_COMPLETE = "knowledge_complete"
    IMAGE_COMPLETE = "image_complete"
    ERROR = "error"


class ToolStatus(str, Enum):
    INVOKING = "invoking"
    DONE = "done"


def _to_wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_wire(v) for v in value]
    return value


@dataclass
class ToolCall:
    """A tool invocation requested by the model."""
    id: str = ""
    name: str = ""
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolDescriptor:
    """Description of the tool behind a tool response."""
    id: str = ""
    name: str = ""
    server_id: str = DEFAULT_TOOL_SERVER_ID
    server_name: str = DEFAULT_TOOL_SERVER_NAME
    description: str = ""
    input_schema: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def stub(
        cls,
        name: str,
        server_id: str = DEFAULT_TOOL_SERVER_ID,
        server_name: str = DEFAULT_TOOL_SERVER_NAME,
    ) -> "ToolDescriptor":
        """Build a descriptor for a tool known only by name."""
        return cls(
            id=name,
            name=name,
            server_id=server_id,
            server_name=server_name,
            input_schema={"type": "object", "title": name, "properties": {}},
        )


@dataclass
class ToolResponse:
    """State of one tool call as seen by the renderer."""
    id: str = ""
    tool: ToolDescriptor = field(default_factory=ToolDescriptor)
    arguments: Dict[str, Any] = field(default_factory=dict)
    status: ToolStatus = ToolStatus.INVOKING
    response: Any = None
    tool_call_id: str = ""


@dataclass
class UsageSnapshot:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class CompletionMetrics:
    completion_tokens: int = 0
    time_completion_millsec: int = 0


@dataclass
class ResponseSnapshot:
    """Accumulated response state at a step or response boundary."""
    text: str = ""
    reasoning_content: str = ""
    usage: UsageSnapshot = field(default_factory=UsageSnapshot)
    metrics: Optional[CompletionMetrics] = None


@dataclass
class KnowledgeReference:
    id: int = 0
    content: str = ""
    source_url: str = ""
    type: str = "url"


@dataclass
class ImagePayload:
    type: str = "base64"
    images: List[str] = field(default_factory=list)


@dataclass
class ErrorPayload:
    message: str = ""


@dataclass
class NormalizedEvent:
    """Base class for all normalized events."""
    type: ChunkType = field(init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation of this event."""
        return _to_wire(asdict(self))


@dataclass
class TextDeltaEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.TEXT_DELTA, init=False)
    text: str = ""


@dataclass
class ThinkingDeltaEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.THINKING_DELTA, init=False)
    text: str = ""


@dataclass
class ThinkingCompleteEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.THINKING_COMPLETE, init=False)
    text: str = ""


@dataclass
class ToolCreatedEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.TOOL_CREATED, init=False)
    tool_calls: List[ToolCall] = field(default_factory=list)


@dataclass
class ToolInProgressEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.TOOL_IN_PROGRESS, init=False)
    responses: List[ToolResponse] = field(default_factory=list)


@dataclass
class ToolCompleteEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.TOOL_COMPLETE, init=False)
    responses: List[ToolResponse] = field(default_factory=list)


@dataclass
class BlockCompleteEvent(NormalizedEvent):
    """Emitted at the end of each generation step."""
    type: ChunkType = field(default=ChunkType.BLOCK_COMPLETE, init=False)
    response: ResponseSnapshot = field(default_factory=ResponseSnapshot)


@dataclass
class TextCompleteEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.TEXT_COMPLETE, init=False)
    text: str = ""


@dataclass
class ResponseCompleteEvent(NormalizedEvent):
    """Emitted once, when the response finishes."""
    type: ChunkType = field(default=ChunkType.RESPONSE_COMPLETE, init=False)
    response: ResponseSnapshot = field(default_factory=ResponseSnapshot)


@dataclass
class KnowledgeCompleteEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.KNOWLEDGE_COMPLETE, init=False)
    knowledge: List[KnowledgeReference] = field(default_factory=list)


@dataclass
class ImageCompleteEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.IMAGE_COMPLETE, init=False)
    image: ImagePayload = field(default_factory=ImagePayload)


@dataclass
class ErrorEvent(NormalizedEvent):
    type: ChunkType = field(default=ChunkType.ERROR, init=False)
    error: ErrorPayload = field(default_factory=ErrorPayload)
