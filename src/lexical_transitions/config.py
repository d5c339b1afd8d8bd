from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .errors import InvalidAnalysisArgument


@dataclass(slots=True)
class PerturbationSettings:
    """Markers and random seed used when relocating a span before analysis."""

    start_marker: str | None = None
    end_marker: str | None = None
    seed: int | None = None


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for the transition analyzer."""

    window_size: int = 5
    valley_threshold: float = 0.1
    stability_threshold: float = 0.1
    min_window_multiple: int = 3
    perturbation: PerturbationSettings = field(default_factory=PerturbationSettings)

    @property
    def min_tokens(self) -> int:
        return self.window_size * self.min_window_multiple

    def validate(self) -> "AnalyzerConfig":
        """Raise InvalidAnalysisArgument when any setting is out of range."""
        if self.window_size < 1:
            raise InvalidAnalysisArgument(
                f"window_size must be at least 1, got {self.window_size}."
            )
        if self.min_window_multiple < 1:
            raise InvalidAnalysisArgument(
                f"min_window_multiple must be at least 1, got {self.min_window_multiple}."
            )
        for name in ("valley_threshold", "stability_threshold"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0:
                raise InvalidAnalysisArgument(
                    f"{name} must be a non-negative number, got {value}."
                )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


# Scalar settings and the type YAML/CLI values are coerced into.
_NUMERIC_FIELDS: dict[str, type] = {
    "window_size": int,
    "min_window_multiple": int,
    "valley_threshold": float,
    "stability_threshold": float,
}


def _coerce(name: str, value: Any, kind: type) -> Any:
    # bool is an int subclass; "window_size: yes" is a typo, not a width.
    if isinstance(value, bool) or value is None:
        raise InvalidAnalysisArgument(f"{name} must be a number, got {value!r}.")
    try:
        coerced = kind(value)
    except (TypeError, ValueError) as exc:
        raise InvalidAnalysisArgument(
            f"{name} must be a number, got {value!r}."
        ) from exc
    if kind is int and coerced != value and not isinstance(value, str):
        raise InvalidAnalysisArgument(f"{name} must be a whole number, got {value!r}.")
    return coerced


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the known settings out of data, converting each to its declared type."""
    kwargs: dict[str, Any] = {
        name: _coerce(name, data[name], kind)
        for name, kind in _NUMERIC_FIELDS.items()
        if name in data
    }
    value = data.get("perturbation")
    if isinstance(value, PerturbationSettings):
        kwargs["perturbation"] = value
    elif isinstance(value, Mapping):
        kwargs["perturbation"] = _build_perturbation_settings(value)
    elif value is not None:
        raise InvalidAnalysisArgument("perturbation must be a mapping of settings.")
    return kwargs


def _build_perturbation_settings(data: Mapping[str, Any]) -> PerturbationSettings:
    settings = PerturbationSettings()
    for name in ("start_marker", "end_marker"):
        marker = data.get(name)
        if marker is not None:
            # YAML turns markers such as 1999 or yes into non-strings.
            setattr(settings, name, str(marker))
    if data.get("seed") is not None:
        settings.seed = _coerce("seed", data["seed"], int)
    return settings


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build a validated AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data)).validate()


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    return config_from_yaml(path) if path is not None else AnalyzerConfig()
