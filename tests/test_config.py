"""Tests for pockettrack.config."""

import stat
from pathlib import Path

from pockettrack.config import (
    DEFAULT_SETTINGS,
    create_default_config,
    get_config_path,
    get_setting,
    load_config,
    save_config,
    set_setting,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, app_dirs: Path) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        assert get_config_path() == app_dirs / "config" / "pockettrack" / "config.toml"


class TestLoadConfig:
    """Tests for load_config and friends."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults without a config file."""
        assert load_config(tmp_path / "missing.toml") == DEFAULT_SETTINGS

    def test_default_config_permissions(self, tmp_path: Path) -> None:
        """Should create the config readable by the owner only."""
        path = tmp_path / "pockettrack" / "config.toml"

        create_default_config(path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert load_config(path) == DEFAULT_SETTINGS

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Should prefer values from the file."""
        path = tmp_path / "config.toml"
        save_config({"currency_symbol": "$"}, path)

        config = load_config(path)

        assert config["currency_symbol"] == "$"
        assert config["export_filename"] == DEFAULT_SETTINGS["export_filename"]

    def test_set_and_get_setting(self, tmp_path: Path) -> None:
        """Should persist a single setting."""
        path = tmp_path / "config.toml"

        set_setting("db_path", "~/money.db", path)

        assert get_setting("db_path", path) == "~/money.db"
        assert get_setting("unknown", path) is None
