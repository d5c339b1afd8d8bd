"""
lexical_transitions package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analyzer import analyze_text, analyze_tokens
from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .errors import InvalidAnalysisArgument, MarkerNotFoundError
from .models import AnalysisOutcome, TransitionAnalysis, TransitionInterval
from .perturbation import perturb_text
from .reporting import build_transition_records, render_report

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze_text",
    "analyze_tokens",
    "perturb_text",
    "build_transition_records",
    "render_report",
    "AnalysisOutcome",
    "TransitionAnalysis",
    "TransitionInterval",
    "InvalidAnalysisArgument",
    "MarkerNotFoundError",
]

__version__ = "0.1.0"
