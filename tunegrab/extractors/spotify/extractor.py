import re
import logging
from urllib.parse import urlparse

from tunegrab.extractors.base import BaseExtractor, ExtractResult
from tunegrab.extractors.spotify.models import track_from_payload
from tunegrab.core.entities import Credential, Track
from tunegrab.core.errors import InvalidTrackUrlError, UpstreamError
from tunegrab.core.interfaces import CredentialResolver
from tunegrab.infra.network.http import HttpClient

logger = logging.getLogger(__name__)

TRACK_PREFIX = "/track/"
_URI_RE = re.compile(r"^spotify:track:([A-Za-z0-9]+)$")
# Localised share links: /intl-de/track/{id}, /intl-pt-BR/track/{id}
_LOCALE_RE = re.compile(r"^/intl-[A-Za-z]{2}(?:[-_][A-Za-z]{2,4})?(?=/track/)")


def parse_track_id(url: str) -> str:
    """
    Return the track id from an open.spotify.com track URL.

    The id is the URL path with the fixed "/track/" prefix stripped, so
    "/track/{id}" always yields {id}. Query and fragment are ignored.
    A leading "/intl-xx" locale segment is dropped first.
    spotify:track:{id} URIs are accepted too.
    """
    match = _URI_RE.match(url.strip())
    if match:
        return match.group(1)

    path = _LOCALE_RE.sub("", urlparse(url.strip()).path, count=1)
    if not path.startswith(TRACK_PREFIX):
        raise InvalidTrackUrlError(f"Not a Spotify track URL: {url}")
    track_id = path[len(TRACK_PREFIX):]
    if not track_id or "/" in track_id:
        raise InvalidTrackUrlError(f"Not a Spotify track URL: {url}")
    return track_id


class SpotifyExtractor(BaseExtractor):
    API_BASE = "https://api.spotify.com/v1"

    def __init__(self, resolver: CredentialResolver, http: HttpClient):
        self.resolver = resolver
        self.http = http

    def supports(self, url: str) -> bool:
        return "open.spotify.com" in url or url.startswith("spotify:track:")

    def fetch_track(self, track_id: str, credential: Credential) -> Track:
        try:
            data = self.http.get_json(
                f"{self.API_BASE}/tracks/{track_id}",
                headers={"Authorization": credential.authorization},
            )
        except UpstreamError as e:
            raise UpstreamError(f"Error fetching Spotify track: failed to get track info: {e}") from e

        track = track_from_payload(track_id, data)
        logger.info("Found track: %s - %s", track.title, ", ".join(track.artists))
        return track

    def extract(self, url: str) -> ExtractResult:
        track_id = parse_track_id(url)
        credential = self.resolver.resolve()
        track = self.fetch_track(track_id, credential)
        return ExtractResult(platform="spotify", source_url=url, metadata=track)
