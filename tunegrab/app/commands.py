from dataclasses import dataclass
from typing import Protocol, Type, Dict, Any, TypeVar

# --- Commands ---
@dataclass
class Command:
    pass

@dataclass
class FetchTrack(Command):
    """Full pipeline: track URL -> tagged {track_id}.mp3."""
    url: str

@dataclass
class DownloadVideo(Command):
    """Direct mode: hand a video URL to the downloader as-is."""
    url: str


# --- Bus ---
C = TypeVar("C", bound=Command)

class CommandHandler(Protocol[C]):
    def __call__(self, command: C) -> Any:
        ...

class CommandBus:
    def __init__(self):
        self._handlers: Dict[Type[Command], CommandHandler] = {}

    def register(self, command_type: Type[C], handler: CommandHandler[C]):
        self._handlers[command_type] = handler

    def handle(self, command: Command) -> Any:
        handler = self._handlers.get(type(command))
        if not handler:
            raise ValueError(f"No handler registered for {type(command)}")
        return handler(command)
