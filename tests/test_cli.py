import json
from pathlib import Path

from typer.testing import CliRunner

from lexical_transitions.cli import app
from lexical_transitions.reporting import HEADER, NO_TRANSITIONS_MESSAGE
from tests.utils import disrupted_text, repeated_pattern

runner = CliRunner()


def test_cli_analyze_prints_report(tmp_path: Path):
    """analyze prints every detected transition."""
    path = tmp_path / "moved.txt"
    path.write_text(disrupted_text(), encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(path), "--no-color"])

    assert result.exit_code == 0
    assert HEADER in result.stdout
    assert "Transition #1 Detected (from word 11 to 16):" in result.stdout
    assert "Transition #2" in result.stdout


def test_cli_analyze_json_distinguishes_outcomes(tmp_path: Path):
    """JSON output carries an explicit outcome alongside the records."""
    moved = tmp_path / "moved.txt"
    moved.write_text(disrupted_text(), encoding="utf-8")
    flat = tmp_path / "flat.txt"
    flat.write_text(repeated_pattern(20), encoding="utf-8")

    found = json.loads(
        runner.invoke(app, ["analyze", "--input-path", str(moved), "--json"]).stdout
    )
    none = json.loads(
        runner.invoke(app, ["analyze", "--input-path", str(flat), "--json"]).stdout
    )

    assert found["outcome"] == "transitions_found"
    assert found["token_count"] == 45
    assert [t["id"] for t in found["transitions"]] == [1, 2]
    assert found["transitions"][0]["start_word_idx"] == 10
    assert none["outcome"] == "no_transitions"
    assert none["transitions"] == []


def test_cli_analyze_rejects_bad_window(tmp_path: Path):
    path = tmp_path / "moved.txt"
    path.write_text(disrupted_text(), encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(path), "--window-size", "0"]
    )

    assert result.exit_code != 0


def test_cli_analyze_reports_malformed_yaml_config(tmp_path: Path):
    path = tmp_path / "moved.txt"
    path.write_text(disrupted_text(), encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("window_size: [5\nvalley_threshold: 0.1\n", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(path), "--config", str(config_path)]
    )

    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_cli_analyze_rejects_nan_threshold(tmp_path: Path):
    path = tmp_path / "moved.txt"
    path.write_text(disrupted_text(), encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(path), "--valley-threshold", "nan"]
    )

    assert result.exit_code == 2
    assert "valley_threshold" in result.output


def test_cli_perturb_with_seed(tmp_path: Path):
    """perturb relocates the marked span, saves it, then analyzes the result."""
    source = tmp_path / "source.txt"
    source.write_text(
        repeated_pattern(6) + " START alpha beta gamma delta END " + repeated_pattern(6),
        encoding="utf-8",
    )
    output = tmp_path / "out" / "perturbed.txt"
    result = runner.invoke(
        app,
        [
            "perturb",
            "--input-path",
            str(source),
            "--start-marker",
            "START",
            "--end-marker",
            "END",
            "--seed",
            "11",
            "--output-path",
            str(output),
            "--no-color",
        ],
    )

    assert result.exit_code == 0
    assert (
        'Randomly selected sequence to move: "START alpha beta gamma delta END"'
        in result.stdout
    )
    assert output.exists()
    assert "START alpha beta gamma delta END" in output.read_text(encoding="utf-8")
    assert HEADER in result.stdout


def test_cli_perturb_prompts_for_missing_markers(tmp_path: Path):
    source = tmp_path / "source.txt"
    source.write_text("one [two three] four five", encoding="utf-8")
    result = runner.invoke(
        app,
        ["perturb", "--input-path", str(source), "--seed", "1", "--no-color"],
        input="[\n]\n",
    )

    assert result.exit_code == 0
    assert "Enter the START marker" in result.stdout
    assert "Enter the END marker" in result.stdout
    assert NO_TRANSITIONS_MESSAGE in result.stdout


def test_cli_perturb_reads_markers_from_config(tmp_path: Path):
    source = tmp_path / "source.txt"
    source.write_text("one <<two three>> four five", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "perturbation:\n  start_marker: '<<'\n  end_marker: '>>'\n  seed: 4\n",
        encoding="utf-8",
    )
    result = runner.invoke(
        app,
        [
            "perturb",
            "--input-path",
            str(source),
            "--config",
            str(config_path),
            "--no-analyze",
            "--no-color",
        ],
    )

    assert result.exit_code == 0
    assert 'sequence to move: "<<two three>>"' in result.stdout
    assert HEADER not in result.stdout


def test_cli_perturb_missing_markers_exits_with_error(tmp_path: Path):
    source = tmp_path / "source.txt"
    source.write_text("nothing to move here", encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "perturb",
            "--input-path",
            str(source),
            "--start-marker",
            "<",
            "--end-marker",
            ">",
            "--no-color",
        ],
    )

    assert result.exit_code == 1
    assert "No substring found between markers" in result.output


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])

    assert result.exit_code == 0
    assert "window_size: 5" in result.stdout
    assert "valley_threshold: 0.1" in result.stdout
