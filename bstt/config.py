"""
Configuration file handling.

The only secret the tool needs is the campusM session cookie, stored in:

    /etc/bstt/config.toml

    [api]
    cookie = "..."

On first run a template is written and the user is asked to fill it in.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from bstt.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path("/etc/bstt")
CONFIG_FILE = "config.toml"
CONFIG_ENV = "BSTT_CONFIG"

PLACEHOLDER_COOKIE = "YourCookieHere"
TEMPLATE = f'[api]\ncookie = "{PLACEHOLDER_COOKIE}"\n'


@dataclass(frozen=True)
class ApiConfig:
    cookie: str


@dataclass(frozen=True)
class Config:
    api: ApiConfig


def default_config_path() -> Path:
    """
    Return the config path: $BSTT_CONFIG if set, else /etc/bstt/config.toml.

    A function (not a constant) so tests can point it elsewhere via the env.
    """
    override = os.environ.get(CONFIG_ENV, "").strip()
    if override:
        return Path(override)
    return CONFIG_DIR / CONFIG_FILE


def _write_template(config_path: Path) -> None:
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(
            f"Failed to create config directory at '{config_path.parent}': {e}. "
            f"Try `sudo mkdir -p {config_path.parent}`."
        ) from e
    try:
        config_path.write_text(TEMPLATE, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to create config file at '{config_path}': {e}.") from e
    logger.warning("Config file not found; wrote template to %s", config_path)


def load_or_create_config(path: str | Path | None = None) -> Config:
    """
    Load the config, writing a template first if the file does not exist.

    Raises ConfigError when the file is missing (after writing the template),
    unreadable, malformed, or still contains the placeholder cookie.
    """
    config_path = Path(path) if path is not None else default_config_path()

    if not config_path.exists():
        _write_template(config_path)
        raise ConfigError(
            f"Config file not found at '{config_path}'. A template config has been created. "
            f"Edit it with your cookie: `sudo nano {config_path}`"
        )

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config at '{config_path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in '{config_path}': {e}") from e

    api = data.get("api")
    if not isinstance(api, dict):
        raise ConfigError(f"Config at '{config_path}' has no [api] table.")

    cookie = api.get("cookie")
    if not isinstance(cookie, str) or not cookie.strip():
        raise ConfigError(f"Config at '{config_path}' has no api.cookie value.")

    if cookie == PLACEHOLDER_COOKIE:
        raise ConfigError(
            f"Your config at '{config_path}' still contains the default value. "
            f"Please replace '{PLACEHOLDER_COOKIE}' with your actual cookie."
        )

    return Config(api=ApiConfig(cookie=cookie))
