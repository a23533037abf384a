"""Observability: structured logging for providers and stream translation."""

from .logging import ProviderLogger, StreamLogger, StructuredLogger

__all__ = ["ProviderLogger", "StreamLogger", "StructuredLogger"]
