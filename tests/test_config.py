"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from scrolltoc.config import AppConfig, load_config


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Scroll TOC"

    def test_default_heading_config(self) -> None:
        config = AppConfig()
        assert config.headings.target is None
        assert config.headings.levels == [1, 2, 3, 4, 5, 6]

    def test_default_offset_config(self) -> None:
        assert AppConfig().offsets.deduction == 0.0

    def test_default_parser_config(self) -> None:
        assert AppConfig().parser.features == "lxml"


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "headings": {"target": "#article", "levels": [2, 3]},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.headings.target == "#article"
        assert config.headings.levels == [2, 3]
        # Other fields keep defaults
        assert config.offsets.deduction == 0.0

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Scroll TOC"

    def test_env_var_sets_deduction(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("offsets:\n  deduction: 10\n")

        monkeypatch.setenv("TOC_OFFSET_DEDUCTION", "64")

        config = load_config(config_file)
        assert config.offsets.deduction == 64.0

    def test_yaml_deduction_without_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("offsets:\n  deduction: 10\n")
        monkeypatch.delenv("TOC_OFFSET_DEDUCTION", raising=False)

        assert load_config(config_file).offsets.deduction == 10.0

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.app.name == "Scroll TOC"
        assert config.parser.features == "lxml"
