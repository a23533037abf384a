"""Tests for usage, message and tool-argument normalization."""

import pytest

from steer_stream_sdk.core.normalization import (
    decode_tool_arguments,
    normalize_usage,
    split_system_message,
    to_message_dicts,
)
from steer_stream_sdk.models.conversation_types import ConversationMessage, TurnRole


class TestNormalizeUsage:

    def test_missing_usage(self):
        assert normalize_usage(None) == {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}

    def test_camel_case_fields(self):
        usage = normalize_usage({"promptTokens": 4, "completionTokens": 6, "totalTokens": 11})

        assert usage == {"prompt_tokens": 4, "completion_tokens": 6, "total_tokens": 11}

    def test_anthropic_fields(self):
        usage = normalize_usage({"input_tokens": 10, "output_tokens": 5})

        assert usage == {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 0}

    def test_total_is_not_derived(self):
        usage = normalize_usage({"completionTokens": 3})

        assert usage == {"prompt_tokens": 0, "completion_tokens": 3, "total_tokens": 0}

    def test_invalid_values_default_to_zero(self):
        usage = normalize_usage({"prompt_tokens": "many", "completion_tokens": True})

        assert usage == {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}

    def test_numeric_strings(self):
        assert normalize_usage({"prompt_tokens": "3"})["prompt_tokens"] == 3

    def test_overrides(self):
        usage = normalize_usage({"prompt_tokens": 1}, completion_tokens=2, total_tokens=9)

        assert usage == {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 9}


class TestMessages:

    def test_prompt_string(self):
        assert to_message_dicts("hi") == [{"role": "user", "content": "hi"}]

    def test_conversation(self, sample_conversation_messages):
        messages = to_message_dicts(sample_conversation_messages)

        assert [m["role"] for m in messages] == ["system", "user", "assistant"]

    def test_split_system_message(self, sample_conversation_messages):
        system, messages = split_system_message(sample_conversation_messages)

        assert system == "You are a helpful assistant."
        assert [m["role"] for m in messages] == ["user", "assistant"]

    def test_split_joins_system_turns(self):
        system, messages = split_system_message([
            ConversationMessage(role=TurnRole.SYSTEM, content="a"),
            ConversationMessage(role=TurnRole.SYSTEM, content="b"),
            ConversationMessage(role=TurnRole.USER, content="q"),
        ])

        assert system == "a\n\nb"
        assert messages == [{"role": "user", "content": "q"}]

    def test_split_without_system(self):
        assert split_system_message("hi") == (None, [{"role": "user", "content": "hi"}])


class TestToolArguments:

    @pytest.mark.parametrize("text,expected", [
        ('{"a": 1}', {"a": 1}),
        ("", {}),
        ("  ", {}),
        ("{broken", {}),
        ("[1, 2]", {"value": [1, 2]}),
    ])
    def test_decode(self, text, expected):
        assert decode_tool_arguments(text) == expected
