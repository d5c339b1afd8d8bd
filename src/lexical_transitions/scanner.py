from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import InvalidAnalysisArgument
from .models import TransitionInterval

logger = logging.getLogger(__name__)


def scan_transitions(
    rates: Sequence[float],
    window_size: int,
    token_count: int,
    valley_threshold: float = 0.1,
    stability_threshold: float = 0.1,
) -> List[TransitionInterval]:
    """
    Walk the rate-of-change signal looking for disruption -> restabilization spans.

    A disruption is flagged at position ``i`` when ``|rates[i - 1]|`` exceeds
    ``valley_threshold``. From there the scan moves forward to the first ``j >= i``
    with ``|rates[j]| < stability_threshold`` and reports the words ``i`` through
    ``j + window_size`` (clamped to the last token). Scanning then resumes after
    ``j`` so a single disruption is never reported twice. A disruption that never
    settles before the signal ends is dropped.
    """
    if window_size < 1:
        raise InvalidAnalysisArgument(
            f"window_size must be at least 1, got {window_size}."
        )
    # "not >=" also rejects NaN.
    if not (valley_threshold >= 0 and stability_threshold >= 0):
        raise InvalidAnalysisArgument("Thresholds must be non-negative numbers.")
    if token_count <= 0:
        raise InvalidAnalysisArgument(
            f"token_count must be positive, got {token_count}."
        )
    count = len(rates)
    max_rates = max(token_count - window_size - 1, 0)
    if count > max_rates:
        raise InvalidAnalysisArgument(
            f"{count} rates of change cannot come from {token_count} tokens "
            f"with window_size {window_size} (at most {max_rates})."
        )

    transitions: List[TransitionInterval] = []
    last_word_idx = token_count - 1
    i = 1
    while i < count:
        if abs(rates[i - 1]) > valley_threshold:
            j = _find_stable_point(rates, i, stability_threshold)
            if j is not None:
                start_idx = i
                end_idx = min(j + window_size, last_word_idx)
                transitions.append(
                    TransitionInterval(
                        transition_id=len(transitions) + 1,
                        start_word_idx=start_idx,
                        end_word_idx=end_idx,
                    )
                )
                logger.debug(
                    "Transition #%d: disruption at %d settled at %d (words %d-%d)",
                    len(transitions),
                    i,
                    j,
                    start_idx,
                    end_idx,
                )
                i = j
            else:
                logger.debug("Disruption at %d never restabilized", i)
        i += 1
    return transitions


def _find_stable_point(
    rates: Sequence[float], start: int, stability_threshold: float
) -> int | None:
    for j in range(start, len(rates)):
        if abs(rates[j]) < stability_threshold:
            return j
    return None
