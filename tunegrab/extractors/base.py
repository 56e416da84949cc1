from abc import ABC, abstractmethod
from .result import ExtractResult

class BaseExtractor(ABC):
    """
    Abstract base class for platform extractors.

    CRITICAL BOUNDARIES:
    - Extractors ONLY identify media and fetch metadata.
    - Extractors do NOT download file content.
    - Extractors do NOT save files to disk.
    """

    @abstractmethod
    def supports(self, url: str) -> bool:
        """
        Check if this extractor supports the given URL.

        Args:
            url: The URL to check.

        Returns:
            True if supported, False otherwise.
        """
        pass

    @abstractmethod
    def extract(self, url: str) -> ExtractResult:
        """
        Extract media information from the given URL.

        Args:
            url: The URL to extract from.

        Returns:
            ExtractResult: Unified extraction result.

        Raises:
            TuneGrabError: On any lookup failure.
        """
        pass
