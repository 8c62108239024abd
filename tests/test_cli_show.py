"""Tests for the reclog show CLI command."""

from pathlib import Path

from typer.testing import CliRunner

from reclog.cli.main import app

runner = CliRunner()


class TestShowCommand:
    """Tests for reclog show."""

    def test_lists_operations(self, tmp_path: Path):
        """Each operation's command and form is rendered."""
        path = tmp_path / "ops.rec"
        path.write_text("ls\n----\na\n\ncat\n----\n----\nx\n\ny\n----\n----\n")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 0
        assert "ls" in result.output
        assert "cat" in result.output
        assert "plain" in result.output
        assert "escaped" in result.output
        assert "2 operation(s)" in result.output

    def test_empty_recording(self, tmp_path: Path):
        """An empty recording says so."""
        path = tmp_path / "empty.rec"
        path.write_text("# nothing yet\n")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 0
        assert "No operations recorded" in result.output

    def test_malformed_recording(self, tmp_path: Path):
        """A malformed recording exits nonzero with a diagnostic."""
        path = tmp_path / "bad.rec"
        path.write_text("ls\noops\n")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1
        assert "expected to find separator" in result.output

    def test_missing_recording(self):
        """A missing file is reported."""
        result = runner.invoke(app, ["show", "/nonexistent/file.rec"])
        assert result.exit_code == 1
        assert "not found" in result.output.lower()
