"""
Error mapping utilities for provider adapters.

This module converts SDK and transport exceptions from any provider into
standardized ProviderError instances.
"""

from typing import Any, Dict, Optional

import httpx

from .base import ProviderError


RATE_LIMIT_PHRASES = ('rate limit', 'too many requests', 'quota exceeded', 'too_many_requests')

PROVIDER_DISPLAY_NAMES = {
    'openai': 'OpenAI',
    'anthropic': 'Anthropic',
}


class ErrorMapper:
    """Maps provider-specific errors to standardized ProviderError."""

    # Common HTTP status codes that indicate retryable errors
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Determine if an error is retryable.

        Args:
            error: The exception to check

        Returns:
            bool: True for 429/5xx responses, timeouts, connection failures
            and rate-limit messages
        """
        status_code = getattr(error, 'status_code', None)
        if status_code is not None and status_code in ErrorMapper.RETRYABLE_STATUS_CODES:
            return True

        if isinstance(error, (httpx.TimeoutException, httpx.ConnectError)):
            return True

        messages = [str(error)]
        if getattr(error, 'message', None):
            messages.append(str(error.message))
        return any(
            phrase in message.lower()
            for message in messages
            for phrase in RATE_LIMIT_PHRASES
        )

    @staticmethod
    def get_retry_after(error: Exception) -> Optional[float]:
        """
        Extract retry-after value from error if available.

        Args:
            error: The exception to check

        Returns:
            Optional[float]: Seconds to wait before retry, or None
        """
        response = getattr(error, 'response', None)
        headers = getattr(response, 'headers', None)
        if headers is not None:
            retry_after = headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass

        return getattr(error, 'retry_after', None)

    @staticmethod
    def map_error(error: Exception, provider: str) -> ProviderError:
        """
        Map an SDK or transport exception to ProviderError.

        Args:
            error: The exception raised by the provider SDK
            provider: Provider name used in the message and metadata

        Returns:
            ProviderError with appropriate metadata
        """
        if isinstance(error, ProviderError):
            return error

        display_name = PROVIDER_DISPLAY_NAMES.get(provider, provider)
        status_code = getattr(error, 'status_code', None)
        detail = getattr(error, 'message', None) or str(error) or type(error).__name__

        if isinstance(error, httpx.TimeoutException):
            message = f"{display_name} request timed out: {detail}"
        elif status_code == 429:
            message = f"{display_name} rate limit exceeded: {detail}"
        elif status_code == 401:
            message = f"{display_name} authentication failed: {detail}"
        else:
            message = f"{display_name} API error: {detail}"

        provider_error = ProviderError(
            message=message,
            provider=provider,
            status_code=status_code,
            retry_after=ErrorMapper.get_retry_after(error),
            original_error=error,
        )
        provider_error.is_retryable = ErrorMapper.is_retryable(error)
        return provider_error

    @staticmethod
    def get_error_classification(error: ProviderError) -> Dict[str, Any]:
        """
        Get error details for logging.

        Args:
            error: The ProviderError to classify

        Returns:
            Dict with error classification details
        """
        return {
            'provider': error.provider,
            'status_code': error.status_code,
            'is_retryable': error.is_retryable,
            'retry_after': error.retry_after,
            'error_type': type(error.original_error).__name__ if error.original_error else None,
            'category': ErrorMapper._categorize_error(error),
        }

    @staticmethod
    def _categorize_error(error: ProviderError) -> str:
        if error.status_code:
            if error.status_code == 401:
                return 'authentication'
            elif error.status_code == 429:
                return 'rate_limit'
            elif error.status_code >= 500:
                return 'server_error'
            elif error.status_code >= 400:
                return 'client_error'

        if isinstance(error.original_error, httpx.TimeoutException):
            return 'timeout'
        if isinstance(error.original_error, httpx.ConnectError):
            return 'network'

        error_msg = error.message.lower()
        if 'timeout' in error_msg or 'timed out' in error_msg:
            return 'timeout'
        elif 'connection' in error_msg or 'network' in error_msg:
            return 'network'

        return 'unknown'
