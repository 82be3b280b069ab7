"""Integration tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from linebreak import __version__
from linebreak.cli import app

runner = CliRunner()


@pytest.fixture
def sample_text(tmp_path: Path) -> Path:
    """Write a two-paragraph text file."""
    path = tmp_path / "sample.txt"
    path.write_text("aaaaa bbb cccc dd eeeeee\n\nshort\n", encoding="utf-8")
    return path


class TestBreaking:
    """Tests for breaking text from the command line."""

    def test_greedy(self, sample_text: Path):
        """Greedy output stretches closed lines up to the glue limit."""
        result = runner.invoke(
            app, [str(sample_text), "--width", "12", "--algorithm", "greedy", "--quiet"]
        )

        assert result.exit_code == 0, result.output
        assert "aaaaa  bbb\ncccc  dd\neeeeee\n" in result.output
        assert "short" in result.output

    def test_knuth_plass(self, sample_text: Path):
        """Knuth-Plass output justifies every line but the last."""
        result = runner.invoke(app, [str(sample_text), "-w", "12", "-q"])

        assert result.exit_code == 0, result.output
        assert "aaaaa    bbb\ncccc      dd\neeeeee\n" in result.output

    def test_header_and_stats(self, sample_text: Path):
        """Non-quiet runs show a header and optional statistics."""
        result = runner.invoke(app, [str(sample_text), "--width", "12", "--stats"])

        assert result.exit_code == 0, result.output
        assert "Linebreak" in result.output
        assert "Complete" in result.output
        assert "3 paragraphs" in result.output
        assert "4 lines" in result.output

    def test_log_file(self, sample_text: Path, tmp_path: Path):
        """Logs are written to the requested file."""
        log_file = tmp_path / "linebreak.log"
        result = runner.invoke(
            app, [str(sample_text), "-q", "--log-file", str(log_file), "--log-level", "DEBUG"]
        )

        assert result.exit_code == 0, result.output
        assert log_file.exists()
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")


class TestErrors:
    """Tests for error reporting."""

    def test_missing_file(self, tmp_path: Path):
        """Missing input files are reported."""
        result = runner.invoke(app, [str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Could not load text" in result.output

    def test_unknown_algorithm(self, sample_text: Path):
        """Unknown algorithms are reported."""
        result = runner.invoke(app, [str(sample_text), "--algorithm", "bogus"])

        assert result.exit_code == 1
        assert "Unknown line-breaking algorithm" in result.output

    def test_invalid_direction(self, sample_text: Path):
        """Invalid directions are reported."""
        result = runner.invoke(app, [str(sample_text), "--direction", "up"])

        assert result.exit_code == 1
        assert "Invalid text direction" in result.output

    def test_invalid_width(self, sample_text: Path):
        """Non-positive widths are reported."""
        result = runner.invoke(app, [str(sample_text), "--width", "0"])

        assert result.exit_code == 1
        assert "Invalid option" in result.output
        assert "text_width" in result.output

    def test_verbose_and_quiet(self, sample_text: Path):
        """Verbose and quiet cannot be combined."""
        result = runner.invoke(app, [str(sample_text), "-v", "-q"])

        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
