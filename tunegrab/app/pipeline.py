import logging

from tunegrab.app.media_service import MediaService
from tunegrab.app.services import AcquireService
from tunegrab.core.entities import Outcome, PipelineResult

logger = logging.getLogger(__name__)


class Pipeline:
    """
    Track URL in, tagged MP3 out.

    Stages run strictly in order and any TuneGrabError aborts the run where it
    is raised; the caller owns reporting. An empty search is the only early
    exit that is not an error.
    """

    def __init__(self, media: MediaService, acquire: AcquireService):
        self.media = media
        self.acquire = acquire

    def run(self, url: str) -> PipelineResult:
        track = self.media.resolve_track(url)

        match = self.media.find_match(track)
        if match is None:
            logger.info("No results found.")
            return PipelineResult(outcome=Outcome.NO_MATCH, track=track)

        output_path = self.acquire.acquire(match, track)
        logger.info("Saved %s", output_path)
        return PipelineResult(
            outcome=Outcome.DOWNLOADED,
            track=track,
            match=match,
            output_path=output_path,
        )
