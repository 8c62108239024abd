"""Tests for the reclog check CLI command."""

from pathlib import Path

from typer.testing import CliRunner

from reclog.cli.main import app

runner = CliRunner()

VALID = "# listing\nls\n----\na\nb\n\ncat a\n----\n----\nline\n\nline\n----\n----\n"
MALFORMED = "ls\noops\n"


def _write(tmp_path: Path, name: str, content: str) -> str:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


class TestCheckCommand:
    """Tests for reclog check."""

    def test_valid_recording_exits_zero(self, tmp_path: Path):
        """A well-formed recording passes and reports its operation count."""
        result = runner.invoke(app, ["check", _write(tmp_path, "ok.rec", VALID)])
        assert result.exit_code == 0
        assert "ok (2 operations)" in result.output
        assert "1/1 recordings valid" in result.output

    def test_malformed_recording_exits_nonzero(self, tmp_path: Path):
        """A malformed recording fails with a rich diagnostic."""
        result = runner.invoke(app, ["check", _write(tmp_path, "bad.rec", MALFORMED)])
        assert result.exit_code == 1
        assert "error[R001]" in result.output
        assert "oops" in result.output

    def test_ci_mode_concise_format(self, tmp_path: Path):
        """--ci prints file:line -- message."""
        path = _write(tmp_path, "bad.rec", MALFORMED)
        result = runner.invoke(app, ["check", "--ci", path])
        assert result.exit_code == 1
        assert f"{path}:2 -- expected to find separator" in result.output

    def test_reports_every_file(self, tmp_path: Path):
        """All files are checked even after a failure."""
        bad = _write(tmp_path, "bad.rec", MALFORMED)
        good = _write(tmp_path, "ok.rec", VALID)
        result = runner.invoke(app, ["check", bad, good])
        assert result.exit_code == 1
        assert "1/2 recordings valid" in result.output

    def test_unclosed_escape_block(self, tmp_path: Path):
        """A missing closing pair is reported with its own code."""
        path = _write(tmp_path, "bad.rec", "0\n----\n----\n1\n\n\n1\n")
        result = runner.invoke(app, ["check", path])
        assert result.exit_code == 1
        assert "error[R002]" in result.output

    def test_nonexistent_file_prints_error(self):
        """A missing file is reported clearly."""
        result = runner.invoke(app, ["check", "/nonexistent/file.rec"])
        assert result.exit_code != 0
        assert "not found" in result.output.lower()
