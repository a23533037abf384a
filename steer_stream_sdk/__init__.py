"""
Steer Stream SDK - Streaming event translation for model-inference backends.

This package turns the single-pass, heterogeneous stream a model backend
emits (answer text, reasoning, tool-call stages, usage, sources, errors)
into normalized events with explicit completion boundaries.

Features:
- Push (sink) and pull (async iterator) translation
- Reasoning/answer boundary reconstruction
- Tool-call lifecycle events
- Provider adapters for OpenAI, OpenAI-compatible endpoints and Anthropic
- JSON Lines replay CLI
"""

__version__ = "0.1.0"

from .models.events import ChunkType, NormalizedEvent
from .models.options import TranslatorOptions
from .models.provider import ProviderKind, ProviderOptions, ProviderSpec
from .models.upstream import StreamPart, UpstreamEventError, coerce_upstream_event
from .providers.base import ProviderError
from .providers.registry import (
    PROVIDER_CATALOG,
    ProviderConstructionError,
    ProviderFactory,
    get_client_info,
    get_supported_providers,
    resolve,
)
from .streaming.manager import EventManager
from .streaming.translator import StreamTranslator, process_stream

__all__ = [
    # Translation
    "StreamTranslator",
    "process_stream",
    "EventManager",
    "TranslatorOptions",

    # Events
    "ChunkType",
    "NormalizedEvent",
    "StreamPart",
    "UpstreamEventError",
    "coerce_upstream_event",

    # Providers
    "ProviderFactory",
    "ProviderKind",
    "ProviderSpec",
    "ProviderOptions",
    "ProviderError",
    "ProviderConstructionError",
    "PROVIDER_CATALOG",
    "resolve",
    "get_supported_providers",
    "get_client_info",
]
