"""Upstream stream parts.

This module defines the records a model-inference backend streams to the
translator, one record per signal. Field names are snake_case; the camelCase
names of the AI SDK wire format (``textDelta``, ``toolCallId``, ...) are
accepted as aliases so raw JSON records validate without remapping.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Dict, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class UpstreamEventError(ValueError):
    """Raised when a record of a known type carries an invalid payload."""

    def __init__(self, event_type: str, message: str):
        super().__init__(f"Invalid '{event_type}' record: {message}")
        self.event_type = event_type


class StreamPart(BaseModel):
    """Base class for all upstream stream parts."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    type: str = ""


def _coerce_fragment(value: Any) -> Any:
    # Scalars are kept as text; structured payloads count as missing
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


class TextDeltaPart(StreamPart):
    """Fragment of answer text."""
    type: Literal["text-delta"] = "text-delta"
    text_delta: Optional[str] = Field(None, alias="textDelta")

    @field_validator("text_delta", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return _coerce_fragment(v)


class ReasoningDeltaPart(StreamPart):
    """Fragment of chain-of-thought reasoning."""
    type: Literal["reasoning-delta"] = "reasoning-delta"
    text_delta: Optional[str] = Field(None, alias="textDelta")

    @field_validator("text_delta", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return _coerce_fragment(v)


class ReasoningSignaturePart(StreamPart):
    """Signature closing a reasoning block."""
    type: Literal["reasoning-signature"] = "reasoning-signature"
    signature: Optional[str] = None


class RedactedReasoningPart(StreamPart):
    """Reasoning content withheld by the provider."""
    type: Literal["redacted-reasoning"] = "redacted-reasoning"
    data: Optional[str] = None


class ToolCallStartPart(StreamPart):
    type: Literal["tool-call-start"] = "tool-call-start"
    tool_call_id: str = Field("", alias="toolCallId")
    tool_name: str = Field("", alias="toolName")


class ToolCallDeltaPart(StreamPart):
    type: Literal["tool-call-delta"] = "tool-call-delta"
    tool_call_id: str = Field("", alias="toolCallId")
    tool_name: str = Field("", alias="toolName")
    args_text_delta: Optional[str] = Field(None, alias="argsTextDelta")


def _decode_args(value: Any) -> Any:
    # Some backends send the arguments as a JSON string
    if isinstance(value, str):
        if not value.strip():
            return {}
        return json.loads(value)
    return value


class ToolCallPart(StreamPart):
    """A tool call whose arguments are complete."""
    type: Literal["tool-call-complete"] = "tool-call-complete"
    tool_call_id: str = Field("", alias="toolCallId")
    tool_name: str = Field("", alias="toolName")
    args: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("args", mode="before")
    @classmethod
    def decode_args(cls, v):
        if v is None:
            return {}
        return _decode_args(v)


class ToolResultPart(StreamPart):
    """Result of an executed tool call."""
    type: Literal["tool-result"] = "tool-result"
    tool_call_id: str = Field("", alias="toolCallId")
    tool_name: str = Field("", alias="toolName")
    args: Optional[Dict[str, Any]] = None
    result: Any = None

    @field_validator("args", mode="before")
    @classmethod
    def decode_args(cls, v):
        return _decode_args(v)


def _usage_to_dict(value: Any) -> Any:
    """Usage as a plain dict; anything that is not a mapping counts as missing."""
    if isinstance(value, Mapping):
        return dict(value)
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    elif hasattr(value, "__dict__") and not isinstance(value, type):
        value = dict(vars(value))
    return dict(value) if isinstance(value, Mapping) else None


def _finish_reason(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    return str(value)


class StepFinishPart(StreamPart):
    """End of one generation step."""
    type: Literal["step-finish"] = "step-finish"
    usage: Optional[Dict[str, Any]] = None
    finish_reason: Optional[str] = Field(None, alias="finishReason")

    @field_validator("usage", mode="before")
    @classmethod
    def dump_usage(cls, v):
        return _usage_to_dict(v)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def coerce_finish_reason(cls, v):
        return _finish_reason(v)


class FinishPart(StreamPart):
    """End of the whole response."""
    type: Literal["finish"] = "finish"
    usage: Optional[Dict[str, Any]] = None
    finish_reason: Optional[str] = Field(None, alias="finishReason")

    @field_validator("usage", mode="before")
    @classmethod
    def dump_usage(cls, v):
        return _usage_to_dict(v)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def coerce_finish_reason(cls, v):
        return _finish_reason(v)


class SourceInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    url: Optional[str] = None
    source_type: Optional[str] = Field(None, alias="sourceType")


class SourcePart(StreamPart):
    """Reference to a document the model consulted."""
    type: Literal["source"] = "source"
    source: SourceInfo = Field(default_factory=SourceInfo)

    @field_validator("source", mode="before")
    @classmethod
    def default_source(cls, v):
        return {} if v is None else v


class FilePart(StreamPart):
    """Generated file, base64 encoded."""
    type: Literal["file"] = "file"
    base64: Optional[str] = None
    mime_type: Optional[str] = Field(None, alias="mimeType")


class ErrorPart(StreamPart):
    """Error signalled in-band by the backend."""
    type: Literal["error"] = "error"
    error: Any = None
    # Some backends put the message on the record itself
    message: Any = None


class UnrecognizedPart(StreamPart):
    """Any record whose type the translator does not know."""
    payload: Dict[str, Any] = Field(default_factory=dict)


UpstreamEvent = Union[
    TextDeltaPart,
    ReasoningDeltaPart,
    ReasoningSignaturePart,
    RedactedReasoningPart,
    ToolCallStartPart,
    ToolCallDeltaPart,
    ToolCallPart,
    ToolResultPart,
    StepFinishPart,
    FinishPart,
    SourcePart,
    FilePart,
    ErrorPart,
    UnrecognizedPart,
]


# Record type -> part model. Legacy AI SDK tags map onto the current parts.
UPSTREAM_EVENT_TYPES: Dict[str, Type[StreamPart]] = {
    "text-delta": TextDeltaPart,
    "reasoning-delta": ReasoningDeltaPart,
    "reasoning": ReasoningDeltaPart,
    "reasoning-signature": ReasoningSignaturePart,
    "redacted-reasoning": RedactedReasoningPart,
    "tool-call-start": ToolCallStartPart,
    "tool-call-streaming-start": ToolCallStartPart,
    "tool-call-delta": ToolCallDeltaPart,
    "tool-call-complete": ToolCallPart,
    "tool-call": ToolCallPart,
    "tool-result": ToolResultPart,
    "step-finish": StepFinishPart,
    "finish": FinishPart,
    "source": SourcePart,
    "file": FilePart,
    "error": ErrorPart,
}


def _record_to_mapping(raw: Any) -> Optional[Dict[str, Any]]:
    if isinstance(raw, Mapping):
        return dict(raw)
    if hasattr(raw, "model_dump"):
        return raw.model_dump()
    if hasattr(raw, "type") and hasattr(raw, "__dict__"):
        return dict(vars(raw))
    return None


def coerce_upstream_event(raw: Any) -> StreamPart:
    """Convert a raw upstream record into a typed stream part.

    Args:
        raw: A StreamPart, a mapping with a ``type`` key, or an object
            exposing ``type`` as an attribute

    Returns:
        The matching StreamPart; UnrecognizedPart for unknown or missing types

    Raises:
        UpstreamEventError: If the record type is known but its payload is invalid
    """
    if isinstance(raw, StreamPart):
        return raw

    data = _record_to_mapping(raw)
    if data is None:
        return UnrecognizedPart(payload={"value": raw})

    event_type = data.get("type")
    part_type = UPSTREAM_EVENT_TYPES.get(event_type) if isinstance(event_type, str) else None
    if part_type is None:
        return UnrecognizedPart(
            type=event_type if isinstance(event_type, str) else "",
            payload=data,
        )

    fields = {k: v for k, v in data.items() if k != "type"}
    try:
        return part_type.model_validate(fields)
    except (ValidationError, ValueError) as e:
        raise UpstreamEventError(event_type, str(e)) from e
