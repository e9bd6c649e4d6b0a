from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .transport import DEFAULT_API_URL

# Environment variable names
ENV_BOT_TOKEN = "BOTWIRE_BOT_TOKEN"
ENV_API_URL = "BOTWIRE_API_URL"

LOCAL_CONFIG_NAME = Path(".botwire") / "botwire.toml"
HOME_CONFIG_PATH = Path.home() / ".botwire" / "botwire.toml"

DEFAULT_TIMEOUT_S = 120.0


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class BotSettings:
    bot_token: str
    api_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    config_path: Path | None = None


def _config_candidates() -> list[Path]:
    candidates = [Path.cwd() / LOCAL_CONFIG_NAME, HOME_CONFIG_PATH]
    if candidates[0] == candidates[1]:
        return [candidates[0]]
    return candidates


def _read_config(cfg_path: Path) -> dict:
    try:
        raw = cfg_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Missing config file {cfg_path}.") from None
    except OSError as e:
        raise ConfigError(f"Failed to read config file {cfg_path}: {e}") from e
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed TOML in {cfg_path}: {e}") from None


def load_config(path: str | Path | None = None) -> tuple[dict, Path | None]:
    """Read the config file, or return an empty config when none exists.

    An explicit ``path`` must exist. Without one, ``./.botwire/botwire.toml``
    wins over ``~/.botwire/botwire.toml``.
    """
    if path:
        cfg_path = Path(path).expanduser()
        return _read_config(cfg_path), cfg_path

    for candidate in _config_candidates():
        if candidate.is_file():
            return _read_config(candidate), candidate
    return {}, None


def _where(config_path: Path | None) -> str:
    return str(config_path) if config_path is not None else "the config file"


def get_bot_token(config: dict, config_path: Path | None) -> str:
    """Get bot token from environment variable or config file.

    Environment variable BOTWIRE_BOT_TOKEN takes precedence over config file.
    """
    env_token = os.environ.get(ENV_BOT_TOKEN)
    if env_token and env_token.strip():
        return env_token.strip()

    try:
        token = config["bot_token"]
    except KeyError:
        raise ConfigError(
            f"Missing bot token. Set {ENV_BOT_TOKEN} environment variable "
            f"or add `bot_token` to {_where(config_path)}."
        ) from None

    if not isinstance(token, str) or not token.strip():
        raise ConfigError(
            f"Invalid `bot_token` in {_where(config_path)}; expected a non-empty string."
        )
    return token.strip()


def get_api_url(config: dict, config_path: Path | None) -> str:
    env_url = os.environ.get(ENV_API_URL)
    if env_url and env_url.strip():
        return env_url.strip().rstrip("/")

    url = config.get("api_url", DEFAULT_API_URL)
    if not isinstance(url, str) or not url.startswith(("http://", "https://")):
        raise ConfigError(
            f"Invalid `api_url` in {_where(config_path)}; expected an http(s) URL."
        )
    return url.rstrip("/")


def get_timeout(config: dict, config_path: Path | None) -> float:
    value = config.get("timeout_s", DEFAULT_TIMEOUT_S)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(
            f"Invalid `timeout_s` in {_where(config_path)}; expected a positive number."
        )
    return float(value)


def load_settings(path: str | Path | None = None) -> BotSettings:
    config, config_path = load_config(path)
    return BotSettings(
        bot_token=get_bot_token(config, config_path),
        api_url=get_api_url(config, config_path),
        timeout_s=get_timeout(config, config_path),
        config_path=config_path,
    )


__all__ = [
    "ENV_API_URL",
    "ENV_BOT_TOKEN",
    "BotSettings",
    "ConfigError",
    "get_api_url",
    "get_bot_token",
    "get_timeout",
    "load_config",
    "load_settings",
]
