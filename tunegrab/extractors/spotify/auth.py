import logging

from requests.auth import HTTPBasicAuth

from tunegrab.core.config import AppConfig, AuthMode
from tunegrab.core.entities import Credential
from tunegrab.core.errors import AuthenticationError, UpstreamError
from tunegrab.core.interfaces import CredentialResolver
from tunegrab.infra.network.http import HttpClient

logger = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"


class ClientCredentialsResolver(CredentialResolver):
    """Exchanges a client id/secret pair for an app token (client_credentials grant)."""

    def __init__(self, client_id: str, client_secret: str, http: HttpClient):
        self.client_id = client_id
        self.client_secret = client_secret
        self.http = http

    def resolve(self) -> Credential:
        logger.debug("Requesting Spotify access token")
        try:
            data = self.http.post_form(
                TOKEN_URL,
                data={"grant_type": "client_credentials"},
                auth=HTTPBasicAuth(self.client_id, self.client_secret),
            )
        except UpstreamError as e:
            raise AuthenticationError(f"Failed to authenticate with Spotify: {e}") from e

        if not isinstance(data, dict) or not data.get("access_token"):
            raise AuthenticationError("Failed to authenticate with Spotify: no access_token in response")

        return Credential(
            access_token=data["access_token"],
            token_type=data.get("token_type", "Bearer"),
            expires_in=int(data.get("expires_in") or 0),
        )


class StaticTokenResolver(CredentialResolver):
    """Uses a pre-issued token as-is."""

    def __init__(self, token: str):
        self.token = token

    def resolve(self) -> Credential:
        return Credential(access_token=self.token)


def build_resolver(config: AppConfig, http: HttpClient) -> CredentialResolver:
    if config.auth_mode is AuthMode.TOKEN:
        return StaticTokenResolver(config.spotify_api_token)
    return ClientCredentialsResolver(config.spotify_client_id, config.spotify_client_secret, http)
