"""Data models: upstream stream parts, normalized events and options."""

from .conversation_types import ConversationMessage, TurnRole
from .events import (
    BlockCompleteEvent,
    ChunkType,
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
from .options import TranslatorOptions
from .provider import ProviderKind, ProviderOptions, ProviderSpec
from .upstream import (
    ErrorPart,
    FilePart,
    FinishPart,
    ReasoningDeltaPart,
    ReasoningSignaturePart,
    RedactedReasoningPart,
    SourceInfo,
    SourcePart,
    StepFinishPart,
    StreamPart,
    TextDeltaPart,
    ToolCallDeltaPart,
    ToolCallPart,
    ToolCallStartPart,
    ToolResultPart,
    UnrecognizedPart,
    UpstreamEvent,
    UpstreamEventError,
    coerce_upstream_event,
)

__all__ = [
    # Upstream
    "StreamPart",
    "UpstreamEvent",
    "UpstreamEventError",
    "coerce_upstream_event",
    "TextDeltaPart",
    "ReasoningDeltaPart",
    "ReasoningSignaturePart",
    "RedactedReasoningPart",
    "ToolCallStartPart",
    "ToolCallDeltaPart",
    "ToolCallPart",
    "ToolResultPart",
    "StepFinishPart",
    "FinishPart",
    "SourceInfo",
    "SourcePart",
    "FilePart",
    "ErrorPart",
    "UnrecognizedPart",

    # Normalized
    "ChunkType",
    "NormalizedEvent",
    "TextDeltaEvent",
    "ThinkingDeltaEvent",
    "ThinkingCompleteEvent",
    "ToolCreatedEvent",
    "ToolInProgressEvent",
    "ToolCompleteEvent",
    "BlockCompleteEvent",
    "TextCompleteEvent",
    "ResponseCompleteEvent",
    "KnowledgeCompleteEvent",
    "ImageCompleteEvent",
    "ErrorEvent",
    "ToolCall",
    "ToolDescriptor",
    "ToolResponse",
    "ToolStatus",
    "UsageSnapshot",
    "CompletionMetrics",
    "ResponseSnapshot",
    "KnowledgeReference",
    "ImagePayload",
    "ErrorPayload",

    # Options
    "TranslatorOptions",
    "ProviderKind",
    "ProviderSpec",
    "ProviderOptions",
    "ConversationMessage",
    "TurnRole",
]
