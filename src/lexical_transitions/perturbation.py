from __future__ import annotations

import logging
import random
from typing import List

from .errors import InvalidAnalysisArgument, MarkerNotFoundError
from .models import PerturbationResult

logger = logging.getLogger(__name__)


def find_marker_spans(text: str, start_marker: str, end_marker: str) -> List[str]:
    """
    Return every substring that begins at a start marker and ends with an end marker.

    Each start-marker occurrence is paired with every end-marker occurrence found at
    or after it, so nested and overlapping spans are all candidates. Markers are
    included in the returned substrings.
    """
    if not start_marker or not end_marker:
        raise InvalidAnalysisArgument("Start and end markers must be non-empty.")

    spans: List[str] = []
    start_pos = text.find(start_marker)
    while start_pos != -1:
        end_pos = text.find(end_marker, start_pos)
        while end_pos != -1:
            spans.append(text[start_pos : end_pos + len(end_marker)])
            end_pos = text.find(end_marker, end_pos + 1)
        start_pos = text.find(start_marker, start_pos + 1)
    return spans


def remove_first_occurrence(text: str, fragment: str) -> str:
    """Cut the first occurrence of fragment out of text (no-op when absent)."""
    position = text.find(fragment)
    if not fragment or position == -1:
        return text
    return text[:position] + text[position + len(fragment) :]


def insert_at_word(text: str, fragment: str, word_idx: int) -> str:
    """Re-join the whitespace-split words of text with fragment placed before word_idx."""
    words = text.split()
    if word_idx < 0 or word_idx > len(words):
        raise InvalidAnalysisArgument(
            f"Insertion index {word_idx} outside [0, {len(words)}]."
        )
    return " ".join([*words[:word_idx], fragment, *words[word_idx:]])


def perturb_text(
    text: str,
    start_marker: str,
    end_marker: str,
    rng: random.Random | None = None,
) -> PerturbationResult:
    """Move one randomly chosen marker-delimited span to a random word boundary."""
    rng = rng or random.Random()
    candidates = find_marker_spans(text, start_marker, end_marker)
    if not candidates:
        raise MarkerNotFoundError(
            f"No substring found between markers {start_marker!r} and {end_marker!r}."
        )

    mobile_sequence = candidates[rng.randrange(len(candidates))]
    base_text = remove_first_occurrence(text, mobile_sequence)
    insertion_word_idx = rng.randint(0, len(base_text.split()))
    perturbed_text = insert_at_word(base_text, mobile_sequence, insertion_word_idx)
    logger.info(
        "Moved a %d-character sequence (1 of %d candidates) to word %d",
        len(mobile_sequence),
        len(candidates),
        insertion_word_idx,
    )
    return PerturbationResult(
        original_text=text,
        mobile_sequence=mobile_sequence,
        perturbed_text=perturbed_text,
        insertion_word_idx=insertion_word_idx,
        candidate_count=len(candidates),
    )
