from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, List, Union
from enum import Enum

from .conversation_types import ConversationMessage


class ProviderKind(str, Enum):
    """Provider families. Each family maps to at most one adapter class."""
    OPENAI = "openai"
    OPENAI_COMPATIBLE = "openai-compatible"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    BEDROCK = "bedrock"


class ProviderSpec(BaseModel):
    """Catalog entry for one provider id."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    kind: ProviderKind
    base_url: Optional[str] = None
    api_key_env: Optional[str] = None
    requires_api_key: bool = True


class ProviderOptions(BaseModel):
    """
    Request options handed to the model access layer.

    Credentials fall back to the environment variable named in the
    provider's catalog entry when ``api_key`` is not set.
    """
    api_key: Optional[str] = Field(None, description="API key; overrides the environment")
    base_url: Optional[str] = Field(None, description="Endpoint override")
    messages: Union[str, List[ConversationMessage]] = Field(default="", description="Prompt or conversation")
    max_tokens: Optional[int] = Field(None, ge=1, description="Maximum tokens to generate")
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Sampling temperature")
    tools: Optional[List[Dict[str, Any]]] = Field(None, description="Tool definitions in the provider's format")
    reasoning: Optional[Dict[str, Any]] = Field(
        None,
        description="Reasoning configuration (e.g. {'effort': 'low'} or {'budget_tokens': 2048})"
    )
    timeout: Optional[float] = Field(None, gt=0, description="Client timeout in seconds")
