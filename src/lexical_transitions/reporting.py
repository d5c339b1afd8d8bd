from __future__ import annotations

from typing import List, Protocol, Sequence

import typer

from .errors import InvalidAnalysisArgument
from .models import TransitionAnalysis, TransitionInterval, TransitionRecord

HEADER = "--- Transition Analyzer Activated ---"
NO_TRANSITIONS_MESSAGE = (
    "No significant semantic transitions were found in this text configuration."
)


class Styler(Protocol):
    """Decorates report fragments by role (heading, highlight, success, error...)."""

    def style(self, text: str, role: str) -> str: ...


class PlainStyler:
    """Returns text untouched."""

    def style(self, text: str, role: str) -> str:
        return text


class TyperStyler:
    """Colors report fragments with ANSI codes through typer.style."""

    COLORS = {
        "heading": typer.colors.BRIGHT_WHITE,
        "prompt": typer.colors.BRIGHT_CYAN,
        "highlight": typer.colors.BRIGHT_YELLOW,
        "success": typer.colors.BRIGHT_GREEN,
        "error": typer.colors.BRIGHT_RED,
        "body": typer.colors.BRIGHT_WHITE,
    }

    def style(self, text: str, role: str) -> str:
        color = self.COLORS.get(role)
        if color is None:
            return text
        return typer.style(text, fg=color, bold=True)


def format_joined_sequence(
    words: Sequence[str], start_word_idx: int, end_word_idx: int
) -> str:
    """Join words[start..end] inclusive with a trailing space, clamping the end."""
    if not words:
        raise InvalidAnalysisArgument("Cannot format a span of an empty word sequence.")
    if start_word_idx < 0 or start_word_idx >= len(words):
        raise InvalidAnalysisArgument(
            f"start_word_idx {start_word_idx} outside [0, {len(words) - 1}]."
        )
    if end_word_idx < start_word_idx:
        raise InvalidAnalysisArgument(
            f"end_word_idx {end_word_idx} precedes start_word_idx {start_word_idx}."
        )
    end = min(end_word_idx, len(words) - 1)
    return "".join(f"{word} " for word in words[start_word_idx : end + 1])


def build_transition_records(
    transitions: Sequence[TransitionInterval], words: Sequence[str]
) -> List[TransitionRecord]:
    """Attach the joined word span to every transition interval."""
    return [
        TransitionRecord(
            transition_id=interval.transition_id,
            start_word_idx=interval.start_word_idx,
            end_word_idx=interval.end_word_idx,
            text=format_joined_sequence(
                words, interval.start_word_idx, interval.end_word_idx
            ),
        )
        for interval in transitions
    ]


def render_report(analysis: TransitionAnalysis, styler: Styler | None = None) -> str:
    """Render the human-readable transition report for one analysis run."""
    styler = styler or PlainStyler()
    lines = ["", styler.style(HEADER, "heading")]
    records = build_transition_records(analysis.transitions, analysis.tokens)
    if not records:
        lines.append(styler.style(NO_TRANSITIONS_MESSAGE, "success"))
        return "\n".join(lines)

    for record in records:
        lines.append(
            styler.style(
                f"Transition #{record.transition_id} Detected "
                f"(from word {record.start_word_idx + 1} to {record.end_word_idx + 1}):",
                "highlight",
            )
        )
        lines.append(
            styler.style("  - Joined Sequence: \"", "highlight")
            + styler.style(record.text, "body")
            + "\""
        )
        lines.append("")
    return "\n".join(lines)
