"""Tests for cashdesk.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from cashdesk.config import (
    DEFAULT_ACCOUNT,
    ConfigError,
    create_default_config,
    get_config_path,
    load_config,
    parse_config,
)
from cashdesk.domain.models import Account


class TestParseConfig:
    """Tests for parse_config."""

    def test_reads_all_keys(self, tmp_path: Path) -> None:
        """Should use the values given in the file."""
        config = parse_config(
            {"db_path": "/data/ledger.db", "name": "Kiosk", "account": "user:till", "currency": "EUR"},
            base_dir=tmp_path,
        )
        assert config.db_path == Path("/data/ledger.db")
        assert config.name == "Kiosk"
        assert config.account == Account.user("till")
        assert config.currency == "EUR"

    def test_defaults(self) -> None:
        """Should fill in missing keys."""
        config = parse_config({})
        assert config.account == Account.parse(DEFAULT_ACCOUNT)
        assert config.currency == "CHF"

    def test_relative_db_path_resolved_against_config_dir(self, tmp_path: Path) -> None:
        """Should resolve relative database paths next to the config file."""
        config = parse_config({"db_path": "ledger.db"}, base_dir=tmp_path)
        assert config.db_path == tmp_path / "ledger.db"

    def test_invalid_account(self) -> None:
        """Should reject an account that does not parse."""
        with pytest.raises(ConfigError, match="account"):
            parse_config({"account": "kiosk"})

    def test_wrong_type(self) -> None:
        """Should reject non-string values."""
        with pytest.raises(ConfigError, match="currency"):
            parse_config({"currency": 5})


class TestConfigFile:
    """Tests for creating and loading the config file."""

    def test_default_path_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "cashdesk" / "config.toml"

    def test_create_and_load(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should write a loadable default config with private permissions."""
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
        path = tmp_path / "cfg" / "config.toml"

        create_default_config(path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        config = load_config(path)
        assert config.db_path == tmp_path / "data" / "cashdesk" / "ledger.db"
        assert config.account == Account.point_of_sale("kiosk")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing config."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should raise TOMLDecodeError for malformed files."""
        path = tmp_path / "config.toml"
        path.write_text("name = ")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)
