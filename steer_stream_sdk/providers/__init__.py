"""
Provider Adapters Layer

This layer contains the provider-specific streaming implementations and
the registry that resolves a provider id into a stream source. Each
adapter turns its provider's raw stream into upstream stream parts.
"""

from .anthropic.adapter import AnthropicProvider
from .base import ProviderAdapter, ProviderError
from .errors import ErrorMapper
from .openai.adapter import OpenAIProvider
from .registry import (
    ADAPTER_TYPES,
    PROVIDER_CATALOG,
    ProviderConstructionError,
    ProviderFactory,
    ProviderStreamSource,
    build_provider_catalog,
    get_client_info,
    get_supported_providers,
    resolve,
)

__all__ = [
    "ProviderAdapter",
    "ProviderError",
    "ErrorMapper",
    "OpenAIProvider",
    "AnthropicProvider",
    "ProviderConstructionError",
    "ProviderFactory",
    "ProviderStreamSource",
    "PROVIDER_CATALOG",
    "ADAPTER_TYPES",
    "build_provider_catalog",
    "resolve",
    "get_supported_providers",
    "get_client_info",
]
