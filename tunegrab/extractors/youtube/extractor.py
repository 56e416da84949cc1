import re
import logging
from typing import Optional
from urllib.parse import urlparse, parse_qs

from ..base import BaseExtractor
from ..result import ExtractResult
from .models import first_match
from tunegrab.core.entities import Track, VideoMatch
from tunegrab.core.errors import UpstreamError
from tunegrab.infra.network.http import HttpClient

logger = logging.getLogger(__name__)

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
_SHORT_HOSTS = ("youtu.be",)
_ID_PATH_RE = re.compile(r"^/(?:shorts|embed|live)/([^/?#]+)")


def parse_video_id(url: str) -> Optional[str]:
    """Video id from a watch, youtu.be, shorts or embed URL."""
    parsed = urlparse(url.strip())
    host = (parsed.hostname or "").lower()
    if host in _SHORT_HOSTS:
        return parsed.path.lstrip("/").split("/")[0] or None
    if parsed.path == "/watch":
        ids = parse_qs(parsed.query).get("v")
        return ids[0] if ids else None
    match = _ID_PATH_RE.match(parsed.path)
    return match.group(1) if match else None


class YouTubeSearch:
    """Finds the best (first-ranked) video for a track via the Data API search endpoint."""

    def __init__(self, api_key: str, http: HttpClient):
        self.api_key = api_key
        self.http = http

    def search_params(self, query: str) -> dict:
        return {
            "part": "snippet",
            "q": query,
            "maxResults": "1",
            "type": "video",
            "key": self.api_key,
        }

    def find_match(self, track: Track) -> Optional[VideoMatch]:
        query = track.search_query
        logger.debug("Searching YouTube for %r", query)
        try:
            data = self.http.get_json(SEARCH_URL, params=self.search_params(query))
            match = first_match(data)
        except UpstreamError as e:
            raise UpstreamError(f"Error searching YouTube: YouTube search failed: {e}") from e

        if match is not None:
            logger.info("Matched video %s", match.watch_url)
        return match


class YouTubeExtractor(BaseExtractor):
    """Recognises video URLs passed straight to the downloader."""

    def supports(self, url: str) -> bool:
        host = (urlparse(url.strip()).hostname or "").lower()
        return host == "youtu.be" or host == "youtube.com" or host.endswith(".youtube.com")

    def extract(self, url: str) -> ExtractResult:
        video_id = parse_video_id(url)
        metadata = VideoMatch(video_id=video_id) if video_id else None
        return ExtractResult(platform="youtube", source_url=url, metadata=metadata)
