"""Tests for the Typer CLI entrypoint."""

from __future__ import annotations

from pathlib import Path
import shutil

import pytest
from typer.testing import CliRunner

from ndjson_html_formatter.cli import TYPER_APP
from ndjson_html_formatter.paths import TEMP_DIR_ENV_VAR

DATA_DIR = Path(__file__).resolve().parent / "data"


def test_converts_one_file(tmp_path: Path) -> None:
    """A single good file converts beside its source with exit code 0."""
    source = _copy_sample("good/minimal.ndjson", tmp_path)

    result = CliRunner().invoke(TYPER_APP, [str(source)])

    assert result.exit_code == 0
    assert f"Conversion of {source} completed successfully." in result.stdout
    assert (tmp_path / "minimal.html").is_file()


def test_reports_error_when_file_not_found(tmp_path: Path) -> None:
    """A missing file should be reported and fail the run."""
    missing = tmp_path / "notafile.ndjson"

    result = CliRunner().invoke(TYPER_APP, [str(missing)])

    assert result.exit_code == -1
    assert f"An error occurred while processing {missing}." in result.stdout


def test_reports_error_when_directory_has_no_ndjson_files(tmp_path: Path) -> None:
    """An empty directory is a failed specification, not an empty success."""
    result = CliRunner().invoke(TYPER_APP, [str(tmp_path)])

    assert result.exit_code == -1
    assert f"An error occurred while processing {tmp_path}." in result.stdout
    assert "No ndjson files found in directory" in result.stdout


def test_bad_file_fails_run_but_other_files_convert(tmp_path: Path) -> None:
    """One malformed file flips the exit code while the rest still convert."""
    bad = _copy_sample("bad/empty_envelope.ndjson", tmp_path)
    good = _copy_sample("good/minimal.ndjson", tmp_path)

    result = CliRunner().invoke(TYPER_APP, [str(bad), str(good)])

    assert result.exit_code == -1
    assert f"An error occurred while processing {bad}." in result.stdout
    assert f"Conversion of {good} completed successfully." in result.stdout
    assert (tmp_path / "minimal.html").is_file()


def test_converts_every_file_in_a_directory(tmp_path: Path) -> None:
    """Directory inputs convert each nested `.ndjson` file beside its source."""
    _ = _copy_sample("good/minimal.ndjson", tmp_path)
    _ = _copy_sample("good/SubDirectory/hooks.ndjson", tmp_path / "SubDirectory")

    result = CliRunner().invoke(TYPER_APP, [str(tmp_path)])

    assert result.exit_code == 0
    assert result.stdout.count("completed successfully.") == 2
    assert (tmp_path / "minimal.html").is_file()
    assert (tmp_path / "SubDirectory" / "hooks.html").is_file()


def test_converts_glob_relative_to_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Glob patterns are matched from the current directory and honour the output directory."""
    monkeypatch.chdir(DATA_DIR)
    output_directory = tmp_path / "reports"

    result = CliRunner().invoke(TYPER_APP, ["good/**/*.ndjson", "--outputDirectory", str(output_directory)])

    assert result.exit_code == 0
    assert result.stdout.count("completed successfully.") == 2
    assert sorted(path.name for path in output_directory.glob("*.html")) == ["hooks.html", "minimal.html"]


def test_merges_files_into_one_report(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """`--mergedFile` renders a single report and removes the intermediate NDJSON file."""
    temp_dir = tmp_path / "tmp"
    monkeypatch.setenv(TEMP_DIR_ENV_VAR, str(temp_dir))
    minimal = _copy_sample("good/minimal.ndjson", tmp_path / "inputs")
    hooks = _copy_sample("good/SubDirectory/hooks.ndjson", tmp_path / "inputs")
    output_directory = tmp_path / "out"

    result = CliRunner().invoke(
        TYPER_APP,
        [
            str(minimal),
            str(hooks),
            "--mergedFile",
            "merged.html",
            "--outputDirectory",
            str(output_directory),
        ],
    )

    assert result.exit_code == 0
    assert "Conversion of" in result.stdout
    html_files = list(output_directory.glob("*.html"))
    assert [path.name for path in html_files] == ["merged.html"]
    document = html_files[0].read_text(encoding="utf-8")
    assert "Feature: minimal" in document
    assert "Hook" in document
    assert not (temp_dir / "merged.ndjson").exists()


def test_summary_flag_prints_table(tmp_path: Path) -> None:
    """`--summary` should render the per-item outcome table."""
    source = _copy_sample("good/minimal.ndjson", tmp_path)

    result = CliRunner().invoke(TYPER_APP, [str(source), "--summary"])

    assert result.exit_code == 0
    assert "Conversion Summary" in result.stdout


def test_requires_at_least_one_input() -> None:
    """Running without inputs is a usage error."""
    result = CliRunner().invoke(TYPER_APP, [])

    assert result.exit_code == 2


def _copy_sample(relative_path: str, destination_dir: Path) -> Path:
    sample = DATA_DIR / relative_path
    destination_dir.mkdir(parents=True, exist_ok=True)
    destination = destination_dir / sample.name
    _ = shutil.copy(sample, destination)
    return destination
