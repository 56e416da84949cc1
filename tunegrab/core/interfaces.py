from abc import ABC, abstractmethod
from typing import Sequence

from tunegrab.core.entities import Credential


class CredentialResolver(ABC):
    @abstractmethod
    def resolve(self) -> Credential:
        """Returns a bearer credential for the metadata service."""
        pass


class ProcessRunner(ABC):
    @abstractmethod
    def run(self, argv: Sequence[str]) -> int:
        """Runs argv to completion with inherited stdio and returns its exit code."""
        pass

    @abstractmethod
    def which(self, name: str):
        """Returns the executable path for name, or None if it is not installed."""
        pass
