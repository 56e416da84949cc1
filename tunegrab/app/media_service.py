import logging
from typing import Optional

from tunegrab.core.entities import Track, VideoMatch
from tunegrab.extractors.spotify.extractor import SpotifyExtractor
from tunegrab.extractors.youtube.extractor import YouTubeSearch

logger = logging.getLogger(__name__)


class MediaService:
    """
    Coordinates the lookup half of the pipeline.

    RESPONSIBILITIES:
    - Credential -> track metadata -> video match, in that order.
    - It does NOT run external tools.
    - It does NOT touch the file system.
    """

    def __init__(self, spotify: SpotifyExtractor, search: YouTubeSearch):
        self.spotify = spotify
        self.search = search

    def resolve_track(self, url: str) -> Track:
        return self.spotify.extract(url).metadata

    def find_match(self, track: Track) -> Optional[VideoMatch]:
        return self.search.find_match(track)
