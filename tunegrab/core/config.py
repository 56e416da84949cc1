import os
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from tunegrab.core.errors import ConfigError

logger = logging.getLogger(__name__)


class AuthMode(Enum):
    AUTO = "auto"
    CREDENTIALS = "credentials"
    TOKEN = "token"


@dataclass(frozen=True)
class AppConfig:
    """
    Run configuration, built once at startup and handed to every stage.

    Nothing downstream reads the environment directly.
    """
    auth_mode: AuthMode
    youtube_api_key: str
    spotify_client_id: str = ""
    spotify_client_secret: str = ""
    spotify_api_token: str = ""
    output_dir: Path = Path(".")
    overwrite: bool = False
    http_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None, auth_mode: AuthMode = AuthMode.AUTO,
                 output_dir: Optional[str] = None, overwrite: bool = False) -> "AppConfig":
        env = os.environ if environ is None else environ

        client_id = env.get("SPOTIFY_CLIENT_ID", "")
        client_secret = env.get("SPOTIFY_CLIENT_SECRET", "")
        token = env.get("SPOTIFY_API_TOKEN", "")

        if auth_mode is AuthMode.AUTO:
            if token and not (client_id and client_secret):
                auth_mode = AuthMode.TOKEN
            else:
                auth_mode = AuthMode.CREDENTIALS
            logger.debug("Auth mode resolved to %s", auth_mode.value)

        raw_timeout = env.get("TUNEGRAB_HTTP_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError:
            raise ConfigError(f"TUNEGRAB_HTTP_TIMEOUT must be a number, got {raw_timeout!r}")

        out = output_dir or env.get("TUNEGRAB_OUTPUT_DIR") or "."

        return cls(
            auth_mode=auth_mode,
            youtube_api_key=env.get("YOUTUBE_API_KEY", ""),
            spotify_client_id=client_id,
            spotify_client_secret=client_secret,
            spotify_api_token=token,
            output_dir=Path(out),
            overwrite=overwrite,
            http_timeout=timeout,
        )

    def missing_for_lookup(self) -> list:
        """Names of the variables a track lookup needs but does not have."""
        missing = []
        if self.auth_mode is AuthMode.TOKEN:
            if not self.spotify_api_token:
                missing.append("SPOTIFY_API_TOKEN")
        else:
            if not self.spotify_client_id:
                missing.append("SPOTIFY_CLIENT_ID")
            if not self.spotify_client_secret:
                missing.append("SPOTIFY_CLIENT_SECRET")
        if not self.youtube_api_key:
            missing.append("YOUTUBE_API_KEY")
        return missing

    def validate(self):
        missing = self.missing_for_lookup()
        if missing:
            raise ConfigError(
                f"Missing environment variable(s) for {self.auth_mode.value} mode: {', '.join(missing)}"
            )


def load_environment(dotenv_path: Optional[Path] = None) -> bool:
    """Load a .env file without overriding variables already set."""
    path = dotenv_path or Path.cwd() / ".env"
    loaded = load_dotenv(path, override=False)
    if loaded:
        logger.debug("Loaded environment from %s", path)
    return loaded
