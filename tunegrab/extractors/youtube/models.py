from typing import Any, Optional

from tunegrab.core.entities import VideoMatch
from tunegrab.core.errors import UpstreamError


def first_match(data: Any) -> Optional[VideoMatch]:
    """First search item as a VideoMatch, or None when the search came back empty."""
    if not isinstance(data, dict):
        raise UpstreamError("malformed search response: expected an object")
    items = data.get("items") or []
    if not isinstance(items, list):
        raise UpstreamError("malformed search response: 'items' is not a list")
    if not items:
        return None

    first = items[0]
    ident = first.get("id") if isinstance(first, dict) else None
    video_id = ident.get("videoId") if isinstance(ident, dict) else None
    if not video_id or not isinstance(video_id, str):
        raise UpstreamError("malformed search response: first item has no videoId")
    return VideoMatch(video_id=video_id)
