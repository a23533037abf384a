from pydantic import BaseModel
from enum import Enum


class TurnRole(str, Enum):
    """Conversation turn roles."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ConversationMessage(BaseModel):
    """Message format for provider requests."""

    role: TurnRole
    content: str
