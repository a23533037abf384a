"""Message normalization for provider requests."""

from typing import Any, Dict, List, Optional, Tuple, Union

from ...models.conversation_types import ConversationMessage, TurnRole


def to_message_dicts(messages: Union[str, List[ConversationMessage]]) -> List[Dict[str, Any]]:
    """Convert a prompt or conversation into role/content dicts."""
    if isinstance(messages, str):
        return [{"role": TurnRole.USER.value, "content": messages}]
    return [{"role": m.role.value, "content": m.content} for m in messages]


def split_system_message(
    messages: Union[str, List[ConversationMessage]]
) -> Tuple[Optional[str], List[Dict[str, Any]]]:
    """Separate system turns from the conversation.

    Anthropic takes the system prompt as a top-level parameter; multiple
    system turns are joined with blank lines.
    """
    system_parts = []
    formatted = []
    for message in to_message_dicts(messages):
        if message["role"] == TurnRole.SYSTEM.value:
            system_parts.append(message["content"])
        else:
            formatted.append(message)
    system = "\n\n".join(system_parts) if system_parts else None
    return system, formatted
