from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .analyzer import analyze_text
from .config import AnalyzerConfig, load_config
from .errors import InvalidAnalysisArgument, MarkerNotFoundError
from .models import TransitionAnalysis
from .perturbation import perturb_text
from .reporting import (
    PlainStyler,
    Styler,
    TyperStyler,
    build_transition_records,
    render_report,
)

app = typer.Typer(help="Lexical transition analyzer CLI.", no_args_is_help=True)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class TransitionPayload(TypedDict):
    id: int
    start_word_idx: int
    end_word_idx: int
    text: str


class AnalysisPayload(TypedDict):
    file: str
    outcome: str
    token_count: int
    transitions: List[TransitionPayload]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    window_size: int | None = typer.Option(
        None, "--window-size", help="Number of words per sliding window."
    ),
    valley_threshold: float | None = typer.Option(
        None, "--valley-threshold", help="Rate of change that flags a disruption."
    ),
    stability_threshold: float | None = typer.Option(
        None, "--stability-threshold", help="Rate of change that counts as settled."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit a JSON payload instead of the text report."
    ),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """Analyze an already perturbed text file for lexical transitions."""
    _configure_logging(verbose)
    styler = _styler(color)
    cfg = _load_analyzer_config(
        config, window_size, valley_threshold, stability_threshold
    )
    text = _read_text(input_path, styler)
    analysis = analyze_text(text, cfg)
    if json_output:
        typer.echo(json.dumps(_analysis_payload(input_path, analysis), indent=2))
        return
    typer.echo(render_report(analysis, styler))


@app.command()
def perturb(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    start_marker: str | None = typer.Option(
        None, "--start-marker", help="Marker that opens the movable span."
    ),
    end_marker: str | None = typer.Option(
        None, "--end-marker", help="Marker that closes the movable span."
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducible perturbations."
    ),
    output_path: Path | None = typer.Option(
        None, "--output-path", dir_okay=False, help="Write the perturbed text here."
    ),
    run_analysis: bool = typer.Option(
        True, "--analyze/--no-analyze", help="Analyze the perturbed text afterwards."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    window_size: int | None = typer.Option(None, "--window-size"),
    valley_threshold: float | None = typer.Option(None, "--valley-threshold"),
    stability_threshold: float | None = typer.Option(None, "--stability-threshold"),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """Relocate a random marker-delimited span, then analyze the result."""
    _configure_logging(verbose)
    styler = _styler(color)
    cfg = _load_analyzer_config(
        config, window_size, valley_threshold, stability_threshold
    )
    settings = cfg.perturbation
    # CLI flags win over config; anything still missing is asked for interactively.
    start_marker = start_marker or settings.start_marker
    end_marker = end_marker or settings.end_marker
    if not start_marker:
        start_marker = typer.prompt(styler.style("Enter the START marker", "prompt"))
    if not end_marker:
        end_marker = typer.prompt(styler.style("Enter the END marker", "prompt"))
    if seed is None:
        seed = settings.seed

    text = _read_text(input_path, styler)
    try:
        result = perturb_text(text, start_marker, end_marker, random.Random(seed))
    except (MarkerNotFoundError, InvalidAnalysisArgument) as exc:
        typer.echo(styler.style(f"Error: {exc}", "error"), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        styler.style(
            f"\nRandomly selected sequence to move: \"{result.mobile_sequence}\"",
            "highlight",
        )
    )
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.perturbed_text, encoding="utf-8")
        typer.echo(f"Wrote perturbed text to {output_path}")
    if not run_analysis:
        return

    typer.echo(
        styler.style("\n--- Analyzing perturbed text with moved sequence ---", "prompt")
    )
    typer.echo(render_report(analyze_text(result.perturbed_text, cfg), styler))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _styler(color: bool) -> Styler:
    return TyperStyler() if color else PlainStyler()


def _load_analyzer_config(
    config: Path | None,
    window_size: int | None,
    valley_threshold: float | None,
    stability_threshold: float | None,
) -> AnalyzerConfig:
    """Load the YAML config (or defaults) and apply CLI overrides."""
    try:
        cfg = load_config(config)
        if window_size is not None:
            cfg.window_size = window_size
        if valley_threshold is not None:
            cfg.valley_threshold = valley_threshold
        if stability_threshold is not None:
            cfg.stability_threshold = stability_threshold
        return cfg.validate()
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _read_text(path: Path, styler: Styler) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(styler.style(f"Error: could not read {path}: {exc}", "error"), err=True)
        raise typer.Exit(code=1) from exc


def _analysis_payload(path: Path, analysis: TransitionAnalysis) -> AnalysisPayload:
    """Serialize an analysis run so it can be emitted as JSON."""
    return {
        "file": str(path),
        "outcome": analysis.outcome.value,
        "token_count": len(analysis.tokens),
        "transitions": [
            {
                "id": record.transition_id,
                "start_word_idx": record.start_word_idx,
                "end_word_idx": record.end_word_idx,
                "text": record.text,
            }
            for record in build_transition_records(
                analysis.transitions, analysis.tokens
            )
        ],
    }


if __name__ == "__main__":
    main()
