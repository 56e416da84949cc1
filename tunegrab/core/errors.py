class TuneGrabError(Exception):
    """Base class for every fatal pipeline error."""


class ConfigError(TuneGrabError):
    pass


class InvalidTrackUrlError(ConfigError):
    pass


class InvalidVideoUrlError(ConfigError):
    pass


class UpstreamError(TuneGrabError):
    """An HTTP API returned a bad status, failed in transport, or sent malformed JSON."""


class AuthenticationError(UpstreamError):
    pass


class ProcessError(TuneGrabError):
    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode


class ToolNotFoundError(ProcessError):
    pass


class CleanupError(TuneGrabError):
    pass
