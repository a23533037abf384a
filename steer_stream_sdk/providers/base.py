"""
Base Provider Adapter Interface

This module defines the abstract base class for provider adapters. An
adapter opens a streaming request against one model-inference API and
turns that API's raw stream into upstream stream parts for the translator.
"""

import os
from abc import ABC, abstractmethod
from typing import Any, AsyncGenerator, Optional

from ..config.constants import DEFAULT_TIMEOUT_SECONDS, TIMEOUT_ENV_VAR
from ..models.provider import ProviderOptions
from ..models.upstream import StreamPart


def get_default_timeout() -> float:
    """Client timeout in seconds, overridable via the environment."""
    try:
        return float(os.getenv(TIMEOUT_ENV_VAR, str(DEFAULT_TIMEOUT_SECONDS)))
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS


class ProviderAdapter(ABC):
    """
    Abstract base class for provider adapters.

    The adapter is responsible for:
    - Building the provider-specific streaming request
    - Opening the stream through the provider SDK
    - Mapping each raw stream chunk to upstream stream parts
    - Mapping SDK errors to ProviderError

    Adapters should NOT contain translation logic; turning stream parts
    into normalized events is the translator's job.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        provider_name: Optional[str] = None,
        requires_api_key: bool = True,
    ):
        self._client: Any = None
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout if timeout is not None else get_default_timeout()
        self._provider_name = provider_name
        self._requires_api_key = requires_api_key

    @property
    @abstractmethod
    def client(self) -> Any:
        """The provider SDK client, created on first use."""
        pass

    @abstractmethod
    def stream_parts(
        self,
        model_id: str,
        options: ProviderOptions
    ) -> AsyncGenerator[StreamPart, None]:
        """
        Stream one model response as upstream stream parts.

        Implementations are async generators. Closing the generator closes
        the underlying provider stream.

        Args:
            model_id: Provider model identifier
            options: Prompt and generation options

        Yields:
            StreamPart records in arrival order, ending with step-finish and
            finish (or a single error record)

        Raises:
            ProviderError: For transport failures
        """
        pass

    def is_available(self) -> bool:
        """
        Check if the provider is configured.

        Returns:
            bool: True if an API key is present or none is required
        """
        return bool(self._api_key) or not self._requires_api_key

    def get_provider_name(self) -> str:
        """
        Get the name of this provider.

        Returns the catalog id the adapter was built for, or the class
        name without the 'Provider' suffix.
        """
        if self._provider_name:
            return self._provider_name
        class_name = self.__class__.__name__
        if class_name.endswith("Provider"):
            return class_name[:-8].lower()
        return class_name.lower()


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    This should be raised for:
    - API transport errors
    - Authentication failures
    - Rate limiting

    Attributes:
        message: Error message
        provider: Provider name
        status_code: HTTP status code if applicable
        retry_after: Seconds to wait before retry if applicable
        is_retryable: Whether this error should be retried
        original_error: The original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
        retry_after: Optional[float] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.retry_after = retry_after
        self.is_retryable = False  # Set by ErrorMapper
        self.original_error = original_error
