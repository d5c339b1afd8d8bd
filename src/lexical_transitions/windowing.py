from __future__ import annotations

from typing import List, Sequence

from .errors import InvalidAnalysisArgument
from .models import WindowSet


def create_window_sets(
    tokens: Sequence[str],
    window_size: int,
    min_window_multiple: int = 3,
) -> List[WindowSet]:
    """Slide a fixed-width window one token at a time and collect each token set.

    Sequences shorter than ``min_window_multiple * window_size`` tokens produce
    no windows at all.
    """
    if window_size < 1:
        raise InvalidAnalysisArgument(
            f"window_size must be at least 1, got {window_size}."
        )
    if min_window_multiple < 1:
        raise InvalidAnalysisArgument(
            f"min_window_multiple must be at least 1, got {min_window_multiple}."
        )
    if len(tokens) < window_size * min_window_multiple:
        return []

    windows: List[WindowSet] = []
    for start_idx in range(len(tokens) - window_size + 1):
        end_idx = start_idx + window_size
        windows.append(
            WindowSet(
                window_id=start_idx,
                start_token_idx=start_idx,
                end_token_idx=end_idx,
                tokens=frozenset(tokens[start_idx:end_idx]),
            )
        )
    return windows
