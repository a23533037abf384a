"""
Per-stream accumulator state.

The accumulator holds the answer text, the pending reasoning run and the
lifecycle phase of a single stream. It is owned by one translation call
and never shared.
"""

from dataclasses import dataclass

from .types import StreamPhase


@dataclass
class Accumulator:
    """Mutable state of one translated stream.

    Attributes:
        text: Answer text received so far; only ever appended to
        reasoning: Reasoning of the current run, cleared when flushed
        phase: Current lifecycle phase
        source_count: Number of source records seen, used for fallback ids
    """
    text: str = ""
    reasoning: str = ""
    phase: StreamPhase = StreamPhase.IDLE
    source_count: int = 0

    @property
    def done(self) -> bool:
        return self.phase is StreamPhase.DONE

    def append_text(self, fragment: str) -> None:
        self.text += fragment
        self.phase = StreamPhase.ANSWERING

    def append_reasoning(self, fragment: str) -> None:
        self.reasoning += fragment
        self.phase = StreamPhase.REASONING

    def enter_reasoning(self) -> None:
        """Move to REASONING without buffering content."""
        self.phase = StreamPhase.REASONING

    def flush_reasoning(self) -> str:
        """Return the pending reasoning run and clear it."""
        pending = self.reasoning
        self.reasoning = ""
        return pending

    def next_source_ordinal(self) -> int:
        self.source_count += 1
        return self.source_count

    def finish(self) -> None:
        self.phase = StreamPhase.DONE
