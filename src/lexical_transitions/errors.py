from __future__ import annotations


class InvalidAnalysisArgument(ValueError):
    """Raised when the analyzer is handed a malformed width, threshold or span."""


class MarkerNotFoundError(RuntimeError):
    """Raised when no substring exists between the requested markers."""
