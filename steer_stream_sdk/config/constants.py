"""
Stream translation defaults.

Central location for the constants shared by the translator, the provider
adapters and the CLI.
"""

# Tool descriptors attached to tool events
DEFAULT_TOOL_SERVER_ID = "ai-sdk"
DEFAULT_TOOL_SERVER_NAME = "AI SDK"

# Message used when an upstream error record carries no payload
DEFAULT_ERROR_MESSAGE = "Unknown error"

# Provider that serves every provider id missing from the catalog
FALLBACK_PROVIDER_ID = "openai-compatible"

# Anthropic requires max_tokens on every request
DEFAULT_MAX_TOKENS = 1024

# Environment variable for provider client timeouts (seconds)
TIMEOUT_ENV_VAR = "STEER_STREAM_TIMEOUT"
DEFAULT_TIMEOUT_SECONDS = 60.0

# Placeholder key for endpoints that need none; the OpenAI SDK rejects empty keys
KEYLESS_API_KEY = "not-needed"
