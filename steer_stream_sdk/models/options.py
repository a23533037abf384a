from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..config.constants import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_TOOL_SERVER_ID,
    DEFAULT_TOOL_SERVER_NAME,
)


class TranslatorOptions(BaseModel):
    """Behaviour switches for StreamTranslator."""

    flush_reasoning_on_finish: bool = Field(
        default=True,
        description="Emit pending reasoning as ThinkingComplete when the stream finishes mid-reasoning",
    )
    tool_server_id: str = DEFAULT_TOOL_SERVER_ID
    tool_server_name: str = DEFAULT_TOOL_SERVER_NAME
    default_error_message: str = DEFAULT_ERROR_MESSAGE
    stream_id: Optional[str] = Field(None, description="Identifier used in log lines")
