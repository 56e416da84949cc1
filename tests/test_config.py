"""
Unit tests for AppConfig
"""

import os
from pathlib import Path

import pytest

from tunegrab.core.config import AppConfig, AuthMode, load_environment
from tunegrab.core.errors import ConfigError


FULL_ENV = {
    "SPOTIFY_CLIENT_ID": "id",
    "SPOTIFY_CLIENT_SECRET": "secret",
    "YOUTUBE_API_KEY": "key",
}


class TestAppConfig:

    def test_auto_prefers_client_credentials(self):
        config = AppConfig.from_env({**FULL_ENV, "SPOTIFY_API_TOKEN": "tok"})
        assert config.auth_mode is AuthMode.CREDENTIALS

    def test_auto_falls_back_to_token(self):
        config = AppConfig.from_env({"SPOTIFY_API_TOKEN": "tok", "YOUTUBE_API_KEY": "key"})
        assert config.auth_mode is AuthMode.TOKEN
        assert config.spotify_api_token == "tok"
        config.validate()

    def test_explicit_mode_is_kept(self):
        config = AppConfig.from_env(FULL_ENV, auth_mode=AuthMode.TOKEN)
        assert config.auth_mode is AuthMode.TOKEN
        with pytest.raises(ConfigError, match="SPOTIFY_API_TOKEN"):
            config.validate()

    def test_validate_lists_every_missing_variable(self):
        config = AppConfig.from_env({})
        with pytest.raises(ConfigError) as exc:
            config.validate()
        message = str(exc.value)
        for name in ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET", "YOUTUBE_API_KEY"):
            assert name in message

    def test_defaults(self):
        config = AppConfig.from_env(FULL_ENV)
        assert config.output_dir == Path(".")
        assert config.overwrite is False
        assert config.http_timeout is None

    def test_output_dir_argument_beats_environment(self):
        env = {**FULL_ENV, "TUNEGRAB_OUTPUT_DIR": "/music"}
        assert AppConfig.from_env(env).output_dir == Path("/music")
        assert AppConfig.from_env(env, output_dir="/elsewhere").output_dir == Path("/elsewhere")

    def test_http_timeout(self):
        assert AppConfig.from_env({**FULL_ENV, "TUNEGRAB_HTTP_TIMEOUT": "2.5"}).http_timeout == 2.5
        with pytest.raises(ConfigError):
            AppConfig.from_env({**FULL_ENV, "TUNEGRAB_HTTP_TIMEOUT": "soon"})


class TestLoadEnvironment:

    def test_dotenv_does_not_override(self, tmp_path, monkeypatch):
        dotenv = tmp_path / ".env"
        dotenv.write_text("YOUTUBE_API_KEY=from-file\nSPOTIFY_API_TOKEN=file-token\n")
        monkeypatch.setenv("YOUTUBE_API_KEY", "from-shell")
        # registered first so teardown removes what load_dotenv sets
        monkeypatch.setenv("SPOTIFY_API_TOKEN", "placeholder")
        monkeypatch.delenv("SPOTIFY_API_TOKEN")

        assert load_environment(dotenv) is True

        assert os.environ["YOUTUBE_API_KEY"] == "from-shell"
        assert os.environ["SPOTIFY_API_TOKEN"] == "file-token"

    def test_missing_file(self, tmp_path):
        assert load_environment(tmp_path / ".env") is False
