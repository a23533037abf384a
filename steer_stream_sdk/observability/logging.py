"""
Structured logging utilities.

This module provides consistent logging for provider adapters and the
stream translator, with standard ``key=value`` fields such as provider,
model, stream_id and request_id.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Optional


class StructuredLogger:
    """Logger that prefixes every message with structured fields."""

    def __init__(self, name: str, **base_fields: Any):
        self.logger = logging.getLogger(name)
        self.base_fields = base_fields

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"{key}={value}" for key, value in self.base_fields.items() if value is not None]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        if not fields:
            return message
        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, **kwargs):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, **kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(self._format_message(message, **kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """Log error message, adding the exception type and text when given."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        self.logger.error(self._format_message(message, **kwargs))


class ProviderLogger(StructuredLogger):
    """Structured logger for provider adapters."""

    def __init__(self, provider_name: str):
        """
        Initialize logger for a specific provider.

        Args:
            provider_name: Name of the provider (e.g., "openai", "anthropic")
        """
        super().__init__(f"steer_stream_sdk.providers.{provider_name}", provider=provider_name)
        self.provider = provider_name

    def log_provider_error(self, message: str, classification: Dict[str, Any], model: Optional[str] = None):
        """
        Log a classified provider error.

        Args:
            message: Log message
            classification: Output of ErrorMapper.get_error_classification
            model: The model being used
        """
        self.warning(
            message,
            model=model,
            category=classification.get('category'),
            status_code=classification.get('status_code'),
            retryable=classification.get('is_retryable'),
            retry_after=classification.get('retry_after'),
            error_type=classification.get('error_type'),
        )

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None):
        """
        Context manager to track request timing and log key events.

        Args:
            method: The method being called (e.g., "stream")
            model: The model being used
            request_id: Optional request ID (generated if not provided)

        Yields:
            Dict with request metadata including request_id
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()

        self.debug(f"Starting {method} request", model=model, request_id=request_id, method=method)

        metadata = {
            'request_id': request_id,
            'model': model,
            'method': method,
            'start_time': start_time
        }

        try:
            yield metadata

            duration = time.time() - start_time
            self.info(
                f"Completed {method} request",
                model=model,
                request_id=request_id,
                method=method,
                duration_ms=int(duration * 1000)
            )

        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {method} request",
                model=model,
                request_id=request_id,
                method=method,
                duration_ms=int(duration * 1000),
                error=e
            )
            raise


class StreamLogger(StructuredLogger):
    """Structured logger for stream translation."""

    def __init__(self, component: str = "translator"):
        super().__init__(f"steer_stream_sdk.streaming.{component}")

    @contextmanager
    def track_stream(self, stream_id: Optional[str] = None):
        """
        Context manager to track one translated stream.

        Logs start, completion with record counts, and failures. Failures
        are re-raised unchanged.

        Args:
            stream_id: Optional stream ID (generated if not provided)

        Yields:
            Dict with stream metadata; callers fill in ``records`` and ``ignored``
        """
        if stream_id is None:
            stream_id = str(uuid.uuid4())[:8]

        start_time = time.time()
        self.debug("Starting stream", stream_id=stream_id)

        metadata: Dict[str, Any] = {
            'stream_id': stream_id,
            'start_time': start_time,
            'records': 0,
            'ignored': 0,
        }

        try:
            yield metadata

            duration = time.time() - start_time
            self.info(
                "Completed stream",
                stream_id=stream_id,
                records=metadata['records'],
                ignored=metadata['ignored'] or None,
                duration_ms=int(duration * 1000)
            )

        except Exception as e:
            duration = time.time() - start_time
            self.error(
                "Failed stream",
                stream_id=stream_id,
                records=metadata['records'],
                duration_ms=int(duration * 1000),
                error=e
            )
            raise

    def log_usage(self, usage: Dict[str, Any], stream_id: Optional[str] = None):
        """Log final token usage."""
        self.info(
            "Token usage",
            stream_id=stream_id,
            prompt_tokens=usage.get('prompt_tokens', 0),
            completion_tokens=usage.get('completion_tokens', 0),
            total_tokens=usage.get('total_tokens', 0)
        )

    def log_unhandled(self, record_type: str, stream_id: Optional[str] = None, reason: str = "unrecognized"):
        """Log a record that produced no events."""
        self.debug(
            "Dropping upstream record",
            stream_id=stream_id,
            record_type=record_type or "<none>",
            reason=reason
        )
