from typing import List, Optional

from .base import BaseExtractor


class ExtractorRegistry:
    """
    Ordered registry of extractor instances.
    """

    def __init__(self):
        self._extractors: List[BaseExtractor] = []

    def register(self, extractor: BaseExtractor):
        """Register an extractor; earlier registrations win on overlap."""
        self._extractors.append(extractor)

    def get_extractor(self, url: str) -> Optional[BaseExtractor]:
        for extractor in self._extractors:
            if extractor.supports(url):
                return extractor
        return None
