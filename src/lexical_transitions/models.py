from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AnalysisOutcome(str, Enum):
    """Terminal outcome of a transition analysis run."""

    NO_TRANSITIONS = "no_transitions"
    TRANSITIONS_FOUND = "transitions_found"


@dataclass(frozen=True, slots=True)
class WindowSet:
    """Unique tokens covered by one fixed-width window."""

    window_id: int
    start_token_idx: int
    end_token_idx: int
    tokens: frozenset[str]


@dataclass(frozen=True, slots=True)
class TransitionInterval:
    """A word span where a similarity disruption later restabilizes."""

    transition_id: int
    start_word_idx: int
    end_word_idx: int


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """A transition interval paired with the words it covers."""

    transition_id: int
    start_word_idx: int
    end_word_idx: int
    text: str


@dataclass(frozen=True, slots=True)
class TransitionAnalysis:
    """Every derived artifact of one analysis run."""

    tokens: tuple[str, ...]
    windows: list[WindowSet] = field(default_factory=list)
    similarities: list[float] = field(default_factory=list)
    rates_of_change: list[float] = field(default_factory=list)
    transitions: list[TransitionInterval] = field(default_factory=list)

    @property
    def outcome(self) -> AnalysisOutcome:
        if self.transitions:
            return AnalysisOutcome.TRANSITIONS_FOUND
        return AnalysisOutcome.NO_TRANSITIONS


@dataclass(frozen=True, slots=True)
class PerturbationResult:
    """Text with one marker-delimited span moved to a new word position."""

    original_text: str
    mobile_sequence: str
    perturbed_text: str
    insertion_word_idx: int
    candidate_count: int
