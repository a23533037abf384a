"""
Example: Translating a recorded stream

This example replays a JSON Lines recording through the translator and
renders the normalized events the way a chat UI would: reasoning in a
collapsible block, tool calls as status lines, the answer as it arrives.
"""

import asyncio
import json
from pathlib import Path

from steer_stream_sdk import ChunkType, EventManager, StreamTranslator


RECORDING = Path(__file__).parent / "recordings" / "reasoning_and_tools.jsonl"


def load_records(path):
    with open(path, "r", encoding="utf-8") as fh:
        return [json.loads(line) for line in fh if line.strip()]


async def example_render_events():
    """Render events with per-kind callbacks."""
    print("=== Rendering a recorded stream ===\n")

    manager = EventManager(
        on_thinking_delta=lambda e: print(f"  [thinking] {e.text}"),
        on_thinking_complete=lambda e: print("  [thinking done]"),
        on_tool_created=lambda e: print(f"  [tool] {e.tool_calls[0].name} {e.tool_calls[0].args}"),
        on_tool_complete=lambda e: print(f"  [tool result] {e.responses[0].response}"),
        on_knowledge_complete=lambda e: print(f"  [source {e.knowledge[0].id}] {e.knowledge[0].content}"),
        on_text_delta=lambda e: print(f"  [answer] {e.text}"),
        record=True,
    )

    text = await StreamTranslator(manager).process_stream(load_records(RECORDING))

    response = manager.events_of(ChunkType.RESPONSE_COMPLETE)[0].response
    print(f"\nFinal answer: {text}")
    print(f"Usage: {response.usage.prompt_tokens} prompt, {response.usage.completion_tokens} completion")


async def example_pull_events():
    """Consume events with the pull API."""
    print("\n=== Pulling events ===\n")

    async for event in StreamTranslator().iter_events(load_records(RECORDING)):
        print(json.dumps(event.to_dict()))


async def main():
    """Run all examples."""
    await example_render_events()
    await example_pull_events()


if __name__ == "__main__":
    asyncio.run(main())
