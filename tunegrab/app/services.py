import sys
import shutil
import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from tunegrab.core.config import AppConfig
from tunegrab.core.entities import Track, VideoMatch
from tunegrab.core.errors import CleanupError, ProcessError, ToolNotFoundError
from tunegrab.core.interfaces import ProcessRunner

logger = logging.getLogger(__name__)

AUDIO_FORMAT = "mp3"
TEMP_PREFIX = "tunegrab-"


@contextmanager
def scoped_temp_dir(parent: Path) -> Iterator[Path]:
    """
    Private per-run directory under parent, removed with its contents on every exit path.

    yt-dlp may leave intermediates (webm, .part) behind when it fails mid-way;
    they live in here and go with it. A directory that cannot be removed is fatal.
    """
    work_dir = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX, dir=str(parent)))
    try:
        yield work_dir
    finally:
        try:
            shutil.rmtree(work_dir)
            logger.debug("Removed temporary directory %s", work_dir)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise CleanupError(f"Failed to delete temporary directory {work_dir}: {e}") from e


class AcquireService:
    """Downloads audio for a matched video and writes the tagged output file."""

    def __init__(self, config: AppConfig, runner: ProcessRunner, temp_dir: Optional[Path] = None):
        self.config = config
        self.runner = runner
        self.temp_dir = Path(temp_dir or tempfile.gettempdir())

    # --- tool resolution ---

    def downloader_argv(self) -> List[str]:
        path = self.runner.which("yt-dlp")
        if path:
            return [path]
        # pip's yt-dlp also installs the module, even where the script dir is not on PATH
        try:
            import yt_dlp  # noqa: F401
        except ImportError:
            raise ToolNotFoundError("yt-dlp not found. Install it with: pip install yt-dlp")
        return [sys.executable, "-m", "yt_dlp"]

    def ffmpeg_path(self) -> str:
        path = self.runner.which("ffmpeg")
        if not path:
            raise ToolNotFoundError("ffmpeg not found. Please install ffmpeg and make sure it is on PATH.")
        return path

    # --- argv builders ---

    def download_args(self, output_template: str, url: str) -> List[str]:
        return self.downloader_argv() + [
            "-f", "bestaudio",
            "-x",
            "--audio-format", AUDIO_FORMAT,
            "--no-playlist",
            "-o", output_template,
            url,
        ]

    def tag_args(self, source: Path, track: Track, destination: Path) -> List[str]:
        return [
            self.ffmpeg_path(),
            "-i", str(source),
            "-metadata", f"title={track.title}",
            "-metadata", f"artist={track.artist_tag}",
            "-codec", "copy",
            "-y" if self.config.overwrite else "-n",
            str(destination),
        ]

    # --- operations ---

    def output_path(self, track: Track) -> Path:
        return self.config.output_dir / track.filename

    def acquire(self, match: VideoMatch, track: Track) -> Path:
        """Download, tag into {output_dir}/{track_id}.mp3, drop the temp file."""
        destination = self.output_path(track)
        with scoped_temp_dir(self.temp_dir) as work_dir:
            # Let yt-dlp pick the extension; the audio extractor renames to .mp3
            template = str(work_dir / f"{track.track_id}.%(ext)s")
            temp_file = work_dir / f"{track.track_id}.{AUDIO_FORMAT}"
            logger.info("Downloading audio from %s", match.watch_url)
            code = self.runner.run(self.download_args(template, match.watch_url))
            if code != 0:
                raise ProcessError(f"yt-dlp exited with status {code}", returncode=code)
            if not temp_file.exists():
                raise ProcessError(f"yt-dlp did not produce {temp_file}")

            destination.parent.mkdir(parents=True, exist_ok=True)
            logger.info("Tagging %s", destination)
            code = self.runner.run(self.tag_args(temp_file, track, destination))
            if code != 0:
                raise ProcessError(f"ffmpeg exited with status {code}", returncode=code)

        return destination

    def download_direct(self, url: str) -> int:
        """Run the downloader on a video URL and hand back its exit code untouched."""
        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        template = str(self.config.output_dir / "%(title)s.%(ext)s")
        logger.info("Downloading audio from %s", url)
        return self.runner.run(self.download_args(template, url))
