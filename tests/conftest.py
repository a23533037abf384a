"""Shared pytest fixtures for Steer Stream SDK tests."""

import pytest
from typing import Any, Dict, List

from steer_stream_sdk.models.conversation_types import ConversationMessage, TurnRole
from steer_stream_sdk.streaming.manager import EventManager


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that run several layers together")


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key",
        "ANTHROPIC_API_KEY": "test-anthropic-key",
        "DEEPSEEK_API_KEY": "test-deepseek-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def clear_env_vars(monkeypatch):
    """Remove provider keys so tests do not depend on the developer's environment."""
    for key in (
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "DEEPSEEK_API_KEY",
        "OPENAI_COMPATIBLE_API_KEY",
        "GROQ_API_KEY",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def recorder():
    """Event manager that records every event it receives."""
    return EventManager(record=True)


@pytest.fixture
def sample_conversation_messages():
    """Sample conversation messages."""
    return [
        ConversationMessage(role=TurnRole.SYSTEM, content="You are a helpful assistant."),
        ConversationMessage(role=TurnRole.USER, content="What is the weather like?"),
        ConversationMessage(role=TurnRole.ASSISTANT, content="I don't have access to real-time weather data."),
    ]


@pytest.fixture
def tool_call_records() -> List[Dict[str, Any]]:
    """Full tool-call lifecycle as AI SDK wire records."""
    return [
        {"type": "tool-call-start", "toolCallId": "call_1", "toolName": "search"},
        {"type": "tool-call-delta", "toolCallId": "call_1", "toolName": "search", "argsTextDelta": '{"q":'},
        {"type": "tool-call-delta", "toolCallId": "call_1", "toolName": "search", "argsTextDelta": '"rust"}'},
        {"type": "tool-call-complete", "toolCallId": "call_1", "toolName": "search", "args": {"q": "rust"}},
        {
            "type": "tool-result",
            "toolCallId": "call_1",
            "toolName": "search",
            "args": {"q": "rust"},
            "result": {"hits": 3},
        },
    ]
