from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="


@dataclass(frozen=True)
class Credential:
    """Bearer token for the metadata service. Lives for one run only."""
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 0

    @property
    def authorization(self) -> str:
        return f"Bearer {self.access_token}"


@dataclass(frozen=True)
class Track:
    track_id: str
    title: str = ""
    artists: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def search_query(self) -> str:
        # No quoting or escaping, the search API takes natural language
        return " ".join([self.title, *self.artists])

    @property
    def artist_tag(self) -> str:
        return "; ".join(self.artists)

    @property
    def filename(self) -> str:
        return f"{self.track_id}.mp3"


@dataclass(frozen=True)
class VideoMatch:
    video_id: str

    @property
    def watch_url(self) -> str:
        return YOUTUBE_WATCH_URL + self.video_id


class Outcome(Enum):
    DOWNLOADED = "DOWNLOADED"
    NO_MATCH = "NO_MATCH"


@dataclass
class PipelineResult:
    outcome: Outcome
    track: Track
    match: Optional[VideoMatch] = None
    output_path: Optional[Path] = None
