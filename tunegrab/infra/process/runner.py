import shutil
import logging
import subprocess
from typing import Sequence

from tunegrab.core.interfaces import ProcessRunner
from tunegrab.core.errors import ProcessError

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunner):
    """Runs external tools in the foreground; their stdout/stderr go straight to ours."""

    def run(self, argv: Sequence[str]) -> int:
        logger.debug("Running: %s", " ".join(argv))
        try:
            completed = subprocess.run(list(argv))
        except OSError as e:
            raise ProcessError(f"Failed to start {argv[0]}: {e}") from e
        return completed.returncode

    def which(self, name: str):
        return shutil.which(name)
