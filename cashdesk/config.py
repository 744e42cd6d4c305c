"""Configuration file management for cashdesk."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from cashdesk.domain.models import Account, InvalidAccountError
from cashdesk.store.schema import get_db_path

DEFAULT_ACCOUNT = "point_of_sale:kiosk"
DEFAULT_CURRENCY = "CHF"


class ConfigError(Exception):
    """Raised when the configuration file holds invalid values."""


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    db_path: Path
    name: str
    account: Account
    currency: str = DEFAULT_CURRENCY


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "cashdesk" / "config.toml"


def default_config_values() -> dict[str, Any]:
    """Values written to a freshly created config file."""
    return {
        "db_path": str(get_db_path()),
        "name": os.environ.get("USER", "cashdesk"),
        "account": DEFAULT_ACCOUNT,
        "currency": DEFAULT_CURRENCY,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config_values(), f)

    os.chmod(config_path, 0o600)


def parse_config(raw: dict[str, Any], base_dir: Path | None = None) -> Config:
    """Build a Config from raw TOML values, filling in defaults.

    Args:
        raw: Parsed TOML document.
        base_dir: Directory relative db_path values are resolved against.

    Returns:
        Configuration.

    Raises:
        ConfigError: If a value has the wrong type or the account is invalid.
    """
    defaults = default_config_values()
    values = {**defaults, **raw}

    for key in ("db_path", "name", "account", "currency"):
        if not isinstance(values[key], str):
            raise ConfigError(f"'{key}' must be a string")

    db_path = Path(values["db_path"]).expanduser()
    if not db_path.is_absolute() and base_dir is not None:
        db_path = base_dir / db_path

    try:
        account = Account.parse(values["account"])
    except InvalidAccountError as e:
        raise ConfigError(f"Invalid 'account': {e}") from e

    return Config(db_path=db_path, name=values["name"], account=account, currency=values["currency"])


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ConfigError: If the file holds invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        raw = tomllib.load(f)

    return parse_config(raw, base_dir=config_path.parent)
