"""Tests for reclog.models.config - ProjectConfig, find_project_root, load_project_config."""

from pathlib import Path

import pytest
from pydantic import ValidationError


class TestProjectConfig:
    """Test ProjectConfig model."""

    def test_defaults(self):
        """ProjectConfig has sensible defaults."""
        from reclog.models import ProjectConfig

        config = ProjectConfig()
        assert config.recordings_dir == "testdata/recordings"
        assert config.suffix == ".rec"
        assert config.record is False
        assert config.log_level == "WARNING"

    def test_rejects_unknown_keys(self):
        """ProjectConfig rejects unknown keys."""
        from reclog.models import ProjectConfig

        with pytest.raises(ValidationError, match="extra_forbidden"):
            ProjectConfig.model_validate({"unknown_field": True})

    def test_rejects_unknown_log_level(self):
        """log_level is limited to the known level names."""
        from reclog.models import ProjectConfig

        with pytest.raises(ValidationError):
            ProjectConfig(log_level="CHATTY")


class TestFindProjectRoot:
    """Test find_project_root function."""

    def test_finds_config_in_parent(self, tmp_path: Path):
        """Walks up to the directory holding reclog.yaml."""
        from reclog.models.config import find_project_root

        (tmp_path / "reclog.yaml").write_text("record: false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()

    def test_returns_cwd_when_nothing_found(self, tmp_path: Path, monkeypatch):
        """Falls back to cwd when no reclog.yaml exists above start."""
        from reclog.models.config import find_project_root

        monkeypatch.chdir(tmp_path)
        assert find_project_root(tmp_path) == Path.cwd()


class TestLoadProjectConfig:
    """Test load_project_config function."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        """No reclog.yaml means default configuration."""
        from reclog.models.config import ProjectConfig, load_project_config

        assert load_project_config(tmp_path) == ProjectConfig()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        """An empty reclog.yaml means default configuration."""
        from reclog.models.config import ProjectConfig, load_project_config

        (tmp_path / "reclog.yaml").write_text("")
        assert load_project_config(tmp_path) == ProjectConfig()

    def test_loads_values(self, tmp_path: Path):
        """Values from reclog.yaml override the defaults."""
        from reclog.models.config import load_project_config

        (tmp_path / "reclog.yaml").write_text(
            "recordings_dir: fixtures\nsuffix: .txt\nrecord: true\nlog_level: DEBUG\n"
        )
        config = load_project_config(tmp_path)
        assert config.recordings_dir == "fixtures"
        assert config.suffix == ".txt"
        assert config.record is True
        assert config.log_level == "DEBUG"


class TestRecordRequested:
    """Test record_requested function."""

    def test_false_by_default(self, monkeypatch):
        """Nothing set means replay."""
        from reclog.models.config import ProjectConfig, record_requested

        monkeypatch.delenv("RECLOG_RECORD", raising=False)
        assert record_requested(ProjectConfig()) is False

    def test_config_flag(self, monkeypatch):
        """record: true in the config selects recording."""
        from reclog.models.config import ProjectConfig, record_requested

        monkeypatch.delenv("RECLOG_RECORD", raising=False)
        assert record_requested(ProjectConfig(record=True)) is True

    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_env_var(self, monkeypatch, value):
        """RECLOG_RECORD set to a truthy value selects recording."""
        from reclog.models.config import record_requested

        monkeypatch.setenv("RECLOG_RECORD", value)
        assert record_requested() is True
