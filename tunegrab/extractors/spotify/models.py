from typing import Any

from tunegrab.core.entities import Track


def track_from_payload(track_id: str, data: Any) -> Track:
    """Build a Track from a /tracks response; absent fields become empty values."""
    if not isinstance(data, dict):
        data = {}
    artists = []
    for artist in data.get("artists") or []:
        name = artist.get("name") if isinstance(artist, dict) else None
        artists.append(name or "")
    return Track(track_id=track_id, title=data.get("name") or "", artists=tuple(artists))
