"""Tests for the provider catalog and factory."""

from types import MappingProxyType
from unittest.mock import patch

import pytest

from steer_stream_sdk.config.constants import KEYLESS_API_KEY
from steer_stream_sdk.models.provider import ProviderKind, ProviderOptions, ProviderSpec
from steer_stream_sdk.providers.anthropic.adapter import AnthropicProvider
from steer_stream_sdk.providers.openai.adapter import OpenAIProvider
from steer_stream_sdk.providers.registry import (
    ADAPTER_TYPES,
    PROVIDER_CATALOG,
    ProviderConstructionError,
    ProviderFactory,
    ProviderStreamSource,
    build_provider_catalog,
    get_client_info,
    get_supported_providers,
)


class TestCatalog:

    def test_catalog_is_immutable(self):
        assert isinstance(PROVIDER_CATALOG, MappingProxyType)
        with pytest.raises(TypeError):
            PROVIDER_CATALOG["new"] = PROVIDER_CATALOG["openai"]

    def test_catalog_entries(self):
        assert PROVIDER_CATALOG["anthropic"].kind is ProviderKind.ANTHROPIC
        assert PROVIDER_CATALOG["deepseek"].kind is ProviderKind.OPENAI_COMPATIBLE
        assert PROVIDER_CATALOG["deepseek"].base_url == "https://api.deepseek.com/v1"
        assert PROVIDER_CATALOG["ollama"].requires_api_key is False

    def test_build_from_raw_configs(self):
        catalog = build_provider_catalog({"local": {"name": "Local", "kind": "openai-compatible"}})

        assert catalog["local"] == ProviderSpec(id="local", name="Local", kind=ProviderKind.OPENAI_COMPATIBLE)

    def test_dispatch_table(self):
        assert ADAPTER_TYPES[ProviderKind.OPENAI] is OpenAIProvider
        assert ADAPTER_TYPES[ProviderKind.OPENAI_COMPATIBLE] is OpenAIProvider
        assert ADAPTER_TYPES[ProviderKind.ANTHROPIC] is AnthropicProvider
        assert ProviderKind.GOOGLE not in ADAPTER_TYPES


class TestProviderFactory:

    @pytest.fixture
    def factory(self):
        return ProviderFactory()

    def test_create_openai_adapter(self, factory, mock_env_vars):
        adapter = factory.create_adapter("openai")

        assert isinstance(adapter, OpenAIProvider)
        assert adapter.get_provider_name() == "openai"
        assert adapter.is_available()
        assert str(adapter.client.base_url).startswith("https://api.openai.com")

    def test_create_anthropic_adapter(self, factory, mock_env_vars):
        adapter = factory.create_adapter("anthropic")

        assert isinstance(adapter, AnthropicProvider)
        assert adapter.client.api_key == "test-anthropic-key"

    def test_compatible_provider_uses_catalog_base_url(self, factory, mock_env_vars):
        adapter = factory.create_adapter("deepseek")

        assert isinstance(adapter, OpenAIProvider)
        assert adapter.get_provider_name() == "deepseek"
        assert str(adapter.client.base_url).startswith("https://api.deepseek.com/v1")

    def test_options_override_environment(self, factory, mock_env_vars):
        adapter = factory.create_adapter("openai", ProviderOptions(api_key="sk-explicit", timeout=5))

        assert adapter.client.api_key == "sk-explicit"
        assert adapter.client.timeout == 5

    def test_missing_api_key(self, factory, clear_env_vars):
        with pytest.raises(ProviderConstructionError) as exc_info:
            factory.create_adapter("openai")

        assert exc_info.value.provider_id == "openai"
        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_keyless_provider(self, factory, clear_env_vars):
        adapter = factory.create_adapter("ollama")

        assert adapter.is_available()
        assert adapter.client.api_key == KEYLESS_API_KEY
        assert str(adapter.client.base_url).startswith("http://localhost:11434/v1")

    def test_kind_without_adapter(self, factory, mock_env_vars):
        with pytest.raises(ProviderConstructionError, match="No streaming adapter"):
            factory.create_adapter("google")

    def test_unknown_provider_falls_back(self, factory, clear_env_vars):
        adapter = factory.create_adapter("my-gateway", ProviderOptions(base_url="http://gateway.local/v1"))

        assert isinstance(adapter, OpenAIProvider)
        assert adapter.get_provider_name() == "my-gateway"
        assert factory.is_fallback("my-gateway")
        assert adapter.client.api_key == KEYLESS_API_KEY
        assert str(adapter.client.base_url).startswith("http://gateway.local/v1")

    def test_fallback_requires_base_url(self, factory, clear_env_vars):
        with pytest.raises(ProviderConstructionError, match="requires a base_url"):
            factory.create_adapter("my-gateway")

    def test_unknown_provider_without_fallback_entry(self, mock_env_vars):
        factory = ProviderFactory(build_provider_catalog({"openai": {"name": "OpenAI", "kind": "openai"}}))

        with pytest.raises(ProviderConstructionError, match="Unknown provider"):
            factory.create_adapter("other")

    def test_client_construction_failure(self, factory, mock_env_vars):
        with patch(
            "steer_stream_sdk.providers.openai.adapter.AsyncOpenAI",
            side_effect=RuntimeError("bad config"),
        ):
            with pytest.raises(ProviderConstructionError) as exc_info:
                factory.create_adapter("openai")

        assert isinstance(exc_info.value.cause, RuntimeError)
        assert "bad config" in str(exc_info.value)

    def test_resolve_returns_stream_source(self, factory, mock_env_vars):
        options = ProviderOptions(messages="hi")
        source = factory.resolve("openai", "gpt-4o-mini", options)

        assert isinstance(source, ProviderStreamSource)
        assert source.model_id == "gpt-4o-mini"
        assert source.options is options

    def test_custom_catalog(self, clear_env_vars):
        catalog = build_provider_catalog({
            "openai-compatible": {"name": "Compat", "kind": "openai-compatible", "requires_api_key": False},
            "lab": {"name": "Lab", "kind": "openai-compatible", "base_url": "http://lab:8000/v1", "requires_api_key": False},
        })
        factory = ProviderFactory(catalog)

        assert factory.create_adapter("lab").get_provider_name() == "lab"
        assert [info["id"] for info in factory.get_supported_providers()] == ["openai-compatible", "lab"]


class TestProviderInfo:

    def test_supported_providers(self, mock_env_vars):
        providers = {info["id"]: info for info in get_supported_providers()}

        assert set(providers) == set(PROVIDER_CATALOG)
        assert providers["openai"]["available"] is True
        assert providers["google"]["implemented"] is False
        assert providers["google"]["available"] is False

    def test_client_info_without_key(self, clear_env_vars):
        info = get_client_info("openai")

        assert info["implemented"] is True
        assert info["available"] is False
        assert info["api_key_env"] == "OPENAI_API_KEY"
        assert info["fallback"] is False

    def test_client_info_for_unknown_provider(self):
        info = get_client_info("someone-else")

        assert info["kind"] == "openai-compatible"
        assert info["fallback"] is True
