"""
Provider catalog.

Raw provider configurations. The registry converts these into immutable
ProviderSpec models once, at import time.

Every OpenAI-compatible endpoint is served by the OpenAI adapter pointed at
its own base URL. Google and Bedrock are catalogued so lookups resolve, but
no streaming adapter exists for them yet.
"""

PROVIDER_CONFIGS = {
    "openai": {
        "name": "OpenAI",
        "kind": "openai",
        "api_key_env": "OPENAI_API_KEY",
    },
    "openai-compatible": {
        "name": "OpenAI Compatible",
        "kind": "openai-compatible",
        "api_key_env": "OPENAI_COMPATIBLE_API_KEY",
        "requires_api_key": False,
    },
    "anthropic": {
        "name": "Anthropic",
        "kind": "anthropic",
        "api_key_env": "ANTHROPIC_API_KEY",
    },
    "deepseek": {
        "name": "DeepSeek",
        "kind": "openai-compatible",
        "base_url": "https://api.deepseek.com/v1",
        "api_key_env": "DEEPSEEK_API_KEY",
    },
    "groq": {
        "name": "Groq",
        "kind": "openai-compatible",
        "base_url": "https://api.groq.com/openai/v1",
        "api_key_env": "GROQ_API_KEY",
    },
    "together": {
        "name": "Together.ai",
        "kind": "openai-compatible",
        "base_url": "https://api.together.xyz/v1",
        "api_key_env": "TOGETHER_API_KEY",
    },
    "fireworks": {
        "name": "Fireworks",
        "kind": "openai-compatible",
        "base_url": "https://api.fireworks.ai/inference/v1",
        "api_key_env": "FIREWORKS_API_KEY",
    },
    "mistral": {
        "name": "Mistral AI",
        "kind": "openai-compatible",
        "base_url": "https://api.mistral.ai/v1",
        "api_key_env": "MISTRAL_API_KEY",
    },
    "xai": {
        "name": "xAI (Grok)",
        "kind": "openai-compatible",
        "base_url": "https://api.x.ai/v1",
        "api_key_env": "XAI_API_KEY",
    },
    "openrouter": {
        "name": "OpenRouter",
        "kind": "openai-compatible",
        "base_url": "https://openrouter.ai/api/v1",
        "api_key_env": "OPENROUTER_API_KEY",
    },
    "perplexity": {
        "name": "Perplexity",
        "kind": "openai-compatible",
        "base_url": "https://api.perplexity.ai",
        "api_key_env": "PERPLEXITY_API_KEY",
    },
    "ollama": {
        "name": "Ollama",
        "kind": "openai-compatible",
        "base_url": "http://localhost:11434/v1",
        "requires_api_key": False,
    },
    "google": {
        "name": "Google Generative AI",
        "kind": "google",
        "api_key_env": "GOOGLE_GENERATIVE_AI_API_KEY",
    },
    "bedrock": {
        "name": "Amazon Bedrock",
        "kind": "bedrock",
        "api_key_env": "AWS_ACCESS_KEY_ID",
    },
}
