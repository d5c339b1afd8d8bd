from __future__ import annotations

import logging
from typing import Sequence

from .config import AnalyzerConfig
from .models import TransitionAnalysis
from .scanner import scan_transitions
from .similarity import rate_of_change, similarity_series
from .tokenization import tokenize_words
from .windowing import create_window_sets

logger = logging.getLogger(__name__)


def analyze_tokens(
    tokens: Sequence[str], config: AnalyzerConfig | None = None
) -> TransitionAnalysis:
    """Run windowing, similarity and scanning over an already tokenized text."""
    cfg = (config or AnalyzerConfig()).validate()
    frozen_tokens = tuple(tokens)

    windows = create_window_sets(
        frozen_tokens, cfg.window_size, cfg.min_window_multiple
    )
    if not windows:
        logger.debug(
            "Only %d tokens (< %d); skipping transition scan",
            len(frozen_tokens),
            cfg.min_tokens,
        )
        return TransitionAnalysis(tokens=frozen_tokens)

    similarities = similarity_series(windows)
    rates = rate_of_change(similarities)
    logger.debug(
        "Built %d windows, %d similarities, %d rates of change",
        len(windows),
        len(similarities),
        len(rates),
    )
    transitions = scan_transitions(
        rates,
        window_size=cfg.window_size,
        token_count=len(frozen_tokens),
        valley_threshold=cfg.valley_threshold,
        stability_threshold=cfg.stability_threshold,
    )
    logger.info(
        "Found %d transition(s) across %d tokens", len(transitions), len(frozen_tokens)
    )
    return TransitionAnalysis(
        tokens=frozen_tokens,
        windows=windows,
        similarities=similarities,
        rates_of_change=rates,
        transitions=transitions,
    )


def analyze_text(text: str, config: AnalyzerConfig | None = None) -> TransitionAnalysis:
    """Tokenize raw text and analyze it for transitions."""
    return analyze_tokens(tokenize_words(text), config)
