"""CLI entry point for Steer Stream SDK."""

import argparse
import asyncio
import json
import sys
from typing import Any, Iterable, Iterator, List, Optional

from .models.events import ChunkType, NormalizedEvent
from .models.options import TranslatorOptions
from .models.provider import ProviderOptions
from .providers.base import ProviderError
from .providers.registry import ProviderConstructionError, get_supported_providers, resolve
from .streaming.manager import EventManager
from .streaming.translator import StreamTranslator


def read_records(lines: Iterable[str]) -> Iterator[Any]:
    """Parse JSON Lines upstream records, skipping blank lines."""
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"line {line_number}: invalid JSON ({e.msg})") from e


def _print_event(event: NormalizedEvent) -> None:
    print(json.dumps(event.to_dict()), flush=True)


def _print_text(event: NormalizedEvent) -> None:
    print(event.text, end='', flush=True)


def _print_error(event: NormalizedEvent) -> None:
    print(f"\nError: {event.error.message}", file=sys.stderr)


async def replay(path: str) -> int:
    """Translate a recorded stream and print its normalized events."""
    translator = StreamTranslator(_print_event, TranslatorOptions(stream_id="replay"))
    try:
        if path == "-":
            text = await translator.process_stream(read_records(sys.stdin))
        else:
            with open(path, "r", encoding="utf-8") as fh:
                text = await translator.process_stream(read_records(fh))
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Final text ({len(text)} chars): {text}", file=sys.stderr)
    return 0


async def chat(
    provider: str,
    model: str,
    prompt: str,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
    base_url: Optional[str] = None,
    events: bool = False,
) -> int:
    """Stream a single prompt through a provider."""
    try:
        options = ProviderOptions(
            messages=prompt,
            max_tokens=max_tokens,
            temperature=temperature,
            base_url=base_url,
        )
        source = resolve(provider, model, options)
    except (ValueError, ProviderConstructionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if events:
        manager = EventManager(on_event=_print_event, record=True)
    else:
        manager = EventManager(on_text_delta=_print_text, on_error=_print_error, record=True)

    try:
        await StreamTranslator(manager).process_stream(source)
    except ProviderError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    if not events:
        print()
    return 1 if manager.events_of(ChunkType.ERROR) else 0


def list_providers() -> int:
    """List catalogued providers."""
    print("Providers:")
    print("-" * 50)
    for info in get_supported_providers():
        status = "✓" if info["available"] else "✗"
        suffix = "" if info["implemented"] else " [no adapter]"
        print(f"{status} {info['id']} - {info['name']} ({info['kind']}){suffix}")
        if info["api_key_env"]:
            print(f"   key: {info['api_key_env']}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="Steer Stream SDK CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Replay command
    replay_parser = subparsers.add_parser('replay', help='Translate a JSON Lines stream recording')
    replay_parser.add_argument('file', help='Recording path, or - for stdin')

    # Chat command
    chat_parser = subparsers.add_parser('chat', help='Stream a prompt through a provider')
    chat_parser.add_argument('provider', help='Provider id (e.g., "openai", "anthropic")')
    chat_parser.add_argument('model', help='Provider model id')
    chat_parser.add_argument('prompt', help='Text prompt')
    chat_parser.add_argument('--max-tokens', type=int, help='Maximum tokens to generate')
    chat_parser.add_argument('--temperature', type=float, help='Temperature (0.0-2.0)')
    chat_parser.add_argument('--base-url', help='Endpoint override for OpenAI-compatible providers')
    chat_parser.add_argument('--events', action='store_true', help='Print normalized events as JSON lines')

    # Providers command
    subparsers.add_parser('providers', help='List catalogued providers')

    args = parser.parse_args(argv)

    if args.command == 'replay':
        return asyncio.run(replay(args.file))
    elif args.command == 'chat':
        return asyncio.run(chat(
            args.provider,
            args.model,
            args.prompt,
            args.max_tokens,
            args.temperature,
            args.base_url,
            args.events,
        ))
    elif args.command == 'providers':
        return list_providers()

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
