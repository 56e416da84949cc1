from dataclasses import dataclass
from typing import Any

@dataclass
class ExtractResult:
    """
    Unified result contract for all extractors.

    Holds what was identified about a URL, never downloaded data.
    """
    platform: str
    source_url: str
    metadata: Any  # Track for spotify, VideoMatch (or None) for youtube
