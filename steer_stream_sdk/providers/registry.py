"""
Provider registry.

Resolves a provider id, model id and options into a stream source of
upstream stream parts. The catalog is an immutable mapping built once from
the raw provider configs; adapter classes are found through a static
table keyed by ProviderKind.
"""

import logging
import os
from types import MappingProxyType
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Type

from dotenv import load_dotenv

from ..config.constants import FALLBACK_PROVIDER_ID
from ..config.providers import PROVIDER_CONFIGS
from ..models.provider import ProviderKind, ProviderOptions, ProviderSpec
from ..models.upstream import StreamPart
from .anthropic.adapter import AnthropicProvider
from .base import ProviderAdapter, get_default_timeout
from .openai.adapter import OpenAIProvider

logger = logging.getLogger(__name__)

load_dotenv()


class ProviderConstructionError(Exception):
    """Raised when no working adapter can be built for a provider id."""

    def __init__(self, message: str, provider_id: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.provider_id = provider_id
        self.cause = cause


def build_provider_catalog(configs: Mapping[str, Dict[str, Any]]) -> Mapping[str, ProviderSpec]:
    """Convert raw provider configs into an immutable id -> ProviderSpec mapping."""
    return MappingProxyType({
        provider_id: ProviderSpec(id=provider_id, **config)
        for provider_id, config in configs.items()
    })


PROVIDER_CATALOG: Mapping[str, ProviderSpec] = build_provider_catalog(PROVIDER_CONFIGS)

# Google and Bedrock are catalogued without an adapter
ADAPTER_TYPES: Mapping[ProviderKind, Type[ProviderAdapter]] = MappingProxyType({
    ProviderKind.OPENAI: OpenAIProvider,
    ProviderKind.OPENAI_COMPATIBLE: OpenAIProvider,
    ProviderKind.ANTHROPIC: AnthropicProvider,
})


class ProviderStreamSource:
    """Single-use stream source over one provider request.

    Iterating opens the provider stream; ``aclose()`` closes it.
    """

    def __init__(self, adapter: ProviderAdapter, model_id: str, options: ProviderOptions):
        self.adapter = adapter
        self.model_id = model_id
        self.options = options
        self._parts = None

    def __aiter__(self) -> AsyncIterator[StreamPart]:
        if self._parts is None:
            self._parts = self.adapter.stream_parts(self.model_id, self.options)
        return self._parts

    async def aclose(self) -> None:
        if self._parts is not None:
            await self._parts.aclose()


class ProviderFactory:
    """Builds provider adapters from a provider catalog."""

    def __init__(self, catalog: Optional[Mapping[str, ProviderSpec]] = None):
        self.catalog = catalog if catalog is not None else PROVIDER_CATALOG

    def get_spec(self, provider_id: str) -> ProviderSpec:
        """
        Look up a provider spec.

        Unknown ids resolve to a copy of the OpenAI-compatible catalog entry under
        the requested id.

        Raises:
            ProviderConstructionError: If the id is unknown and the catalog
                has no OpenAI-compatible entry
        """
        spec = self.catalog.get(provider_id)
        if spec is not None:
            return spec

        fallback = self.catalog.get(FALLBACK_PROVIDER_ID)
        if fallback is None:
            raise ProviderConstructionError(f"Unknown provider '{provider_id}'", provider_id)

        logger.debug(f"Provider '{provider_id}' not in catalog; using {FALLBACK_PROVIDER_ID}")
        return fallback.model_copy(update={"id": provider_id, "name": provider_id})

    def is_fallback(self, provider_id: str) -> bool:
        return provider_id not in self.catalog

    def create_adapter(self, provider_id: str, options: Optional[ProviderOptions] = None) -> ProviderAdapter:
        """
        Build the adapter for a provider.

        Args:
            provider_id: Catalog id (unknown ids use the OpenAI-compatible fallback)
            options: Request options; api_key, base_url and timeout are used here

        Returns:
            A ProviderAdapter with its client constructed

        Raises:
            ProviderConstructionError: If the kind has no adapter, the endpoint
                or API key is missing, or client construction fails
        """
        options = options or ProviderOptions()
        spec = self.get_spec(provider_id)

        adapter_type = ADAPTER_TYPES.get(spec.kind)
        if adapter_type is None:
            raise ProviderConstructionError(
                f"No streaming adapter for provider '{provider_id}' (kind {spec.kind.value})",
                provider_id,
            )

        base_url = options.base_url or spec.base_url
        if spec.kind is ProviderKind.OPENAI_COMPATIBLE and not base_url:
            raise ProviderConstructionError(
                f"Provider '{provider_id}' requires a base_url",
                provider_id,
            )

        api_key = options.api_key or (os.getenv(spec.api_key_env) if spec.api_key_env else None)
        if spec.requires_api_key and not api_key:
            raise ProviderConstructionError(
                f"API key for provider '{provider_id}' not found; set {spec.api_key_env} or pass api_key",
                provider_id,
            )

        try:
            adapter = adapter_type(
                api_key=api_key,
                base_url=base_url,
                timeout=options.timeout or get_default_timeout(),
                provider_name=provider_id,
                requires_api_key=spec.requires_api_key,
            )
            # Build the SDK client now so misconfiguration surfaces here
            adapter.client
        except Exception as e:
            raise ProviderConstructionError(
                f"Failed to construct client for provider '{provider_id}': {e}",
                provider_id,
                e,
            ) from e

        logger.debug(f"Created {adapter_type.__name__} for provider '{provider_id}'")
        return adapter

    def resolve(
        self,
        provider_id: str,
        model_id: str,
        options: Optional[ProviderOptions] = None
    ) -> ProviderStreamSource:
        """Resolve a provider and model into a stream source."""
        options = options or ProviderOptions()
        adapter = self.create_adapter(provider_id, options)
        return ProviderStreamSource(adapter, model_id, options)

    def get_client_info(self, provider_id: str) -> Dict[str, Any]:
        """Describe how a provider id resolves, without building a client."""
        spec = self.get_spec(provider_id)
        implemented = spec.kind in ADAPTER_TYPES
        has_key = bool(spec.api_key_env and os.getenv(spec.api_key_env))
        return {
            "id": spec.id,
            "name": spec.name,
            "kind": spec.kind.value,
            "base_url": spec.base_url,
            "api_key_env": spec.api_key_env,
            "implemented": implemented,
            "available": implemented and (has_key or not spec.requires_api_key),
            "fallback": self.is_fallback(provider_id),
        }

    def get_supported_providers(self) -> List[Dict[str, Any]]:
        """Describe every catalogued provider, in catalog order."""
        return [self.get_client_info(provider_id) for provider_id in self.catalog]


default_factory = ProviderFactory()


def resolve(
    provider_id: str,
    model_id: str,
    options: Optional[ProviderOptions] = None
) -> ProviderStreamSource:
    """Resolve a provider and model into a stream source using the default catalog."""
    return default_factory.resolve(provider_id, model_id, options)


def get_supported_providers() -> List[Dict[str, Any]]:
    return default_factory.get_supported_providers()


def get_client_info(provider_id: str) -> Dict[str, Any]:
    return default_factory.get_client_info(provider_id)
