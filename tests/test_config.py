from pathlib import Path

import pytest

from botwire import config
from botwire.config import (
    ENV_API_URL,
    ENV_BOT_TOKEN,
    BotSettings,
    ConfigError,
    get_bot_token,
    load_config,
    load_settings,
)


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(ENV_BOT_TOKEN, raising=False)
    monkeypatch.delenv(ENV_API_URL, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        config, "HOME_CONFIG_PATH", tmp_path / "home" / ".botwire" / "botwire.toml"
    )


class TestLoadConfig:
    def test_load_from_explicit_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.toml"
        config_file.write_text('bot_token = "test123"')

        loaded, path = load_config(config_file)

        assert loaded["bot_token"] == "test123"
        assert path == config_file

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Missing config file"):
            load_config(tmp_path / "nonexistent.toml")

    def test_malformed_toml_raises(self, tmp_path: Path) -> None:
        bad_file = tmp_path / "bad.toml"
        bad_file.write_text("invalid = [unclosed")

        with pytest.raises(ConfigError, match="Malformed TOML"):
            load_config(bad_file)

    def test_path_exists_but_is_directory(self, tmp_path: Path) -> None:
        dir_path = tmp_path / "config_dir"
        dir_path.mkdir()

        with pytest.raises(ConfigError, match="Failed to read config file"):
            load_config(dir_path)

    def test_local_config_wins_over_home(self, tmp_path: Path) -> None:
        home = config.HOME_CONFIG_PATH
        home.parent.mkdir(parents=True)
        home.write_text('bot_token = "home"')
        local = tmp_path / ".botwire" / "botwire.toml"
        local.parent.mkdir()
        local.write_text('bot_token = "local"')

        loaded, path = load_config()

        assert loaded["bot_token"] == "local"
        assert path == local

    def test_home_config(self) -> None:
        home = config.HOME_CONFIG_PATH
        home.parent.mkdir(parents=True)
        home.write_text('bot_token = "home"')

        loaded, path = load_config()

        assert loaded["bot_token"] == "home"
        assert path == home

    def test_no_config_is_empty(self) -> None:
        assert load_config() == ({}, None)


class TestBotToken:
    def test_env_takes_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_BOT_TOKEN, "  env-token  ")
        assert get_bot_token({"bot_token": "file"}, Path("x.toml")) == "env-token"

    def test_missing_token(self) -> None:
        with pytest.raises(ConfigError, match=ENV_BOT_TOKEN):
            get_bot_token({}, Path("x.toml"))

    @pytest.mark.parametrize("value", ["", "   ", 123])
    def test_invalid_token(self, value: object) -> None:
        with pytest.raises(ConfigError, match="Invalid `bot_token`"):
            get_bot_token({"bot_token": value}, Path("x.toml"))


class TestLoadSettings:
    def test_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "botwire.toml"
        config_file.write_text('bot_token = "123:abc"')

        settings = load_settings(config_file)

        assert settings == BotSettings(
            bot_token="123:abc",
            api_url="https://api.telegram.org",
            timeout_s=120.0,
            config_path=config_file,
        )

    def test_all_keys(self, tmp_path: Path) -> None:
        config_file = tmp_path / "botwire.toml"
        config_file.write_text(
            'bot_token = "123:abc"\napi_url = "http://localhost:8081/"\ntimeout_s = 30\n'
        )

        settings = load_settings(config_file)

        assert settings.api_url == "http://localhost:8081"
        assert settings.timeout_s == 30.0

    def test_env_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_BOT_TOKEN, "123:env")
        monkeypatch.setenv(ENV_API_URL, "http://bot-api:8081")

        settings = load_settings()

        assert settings.bot_token == "123:env"
        assert settings.api_url == "http://bot-api:8081"
        assert settings.config_path is None

    @pytest.mark.parametrize(
        ("line", "message"),
        [
            ('api_url = "ftp://x"', "api_url"),
            ("api_url = 5", "api_url"),
            ("timeout_s = 0", "timeout_s"),
            ("timeout_s = true", "timeout_s"),
            ('timeout_s = "10"', "timeout_s"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, line: str, message: str) -> None:
        config_file = tmp_path / "botwire.toml"
        config_file.write_text(f'bot_token = "123:abc"\n{line}\n')

        with pytest.raises(ConfigError, match=message):
            load_settings(config_file)
