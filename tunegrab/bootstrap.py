from typing import Optional

from tunegrab.app.commands import CommandBus, FetchTrack, DownloadVideo
from tunegrab.app.media_service import MediaService
from tunegrab.app.pipeline import Pipeline
from tunegrab.app.services import AcquireService
from tunegrab.core.config import AppConfig
from tunegrab.core.errors import InvalidVideoUrlError
from tunegrab.core.interfaces import ProcessRunner
from tunegrab.extractors.registry import ExtractorRegistry
from tunegrab.extractors.spotify.auth import build_resolver
from tunegrab.extractors.spotify.extractor import SpotifyExtractor
from tunegrab.extractors.youtube.extractor import YouTubeExtractor, YouTubeSearch
from tunegrab.infra.network.http import HttpClient
from tunegrab.infra.process.runner import SubprocessRunner


def create_container(config: AppConfig, http: Optional[HttpClient] = None,
                     runner: Optional[ProcessRunner] = None) -> dict:
    # 1. Infra
    http = http or HttpClient(timeout=config.http_timeout)
    runner = runner or SubprocessRunner()

    # 2. Extractors
    resolver = build_resolver(config, http)
    spotify = SpotifyExtractor(resolver, http)
    youtube = YouTubeExtractor()
    search = YouTubeSearch(config.youtube_api_key, http)

    registry = ExtractorRegistry()
    registry.register(youtube)
    registry.register(spotify)

    # 3. Services
    media_service = MediaService(spotify, search)
    acquire_service = AcquireService(config, runner)
    pipeline = Pipeline(media_service, acquire_service)

    # 4. Handlers
    def handle_fetch_track(cmd: FetchTrack):
        config.validate()
        return pipeline.run(cmd.url)

    def handle_download_video(cmd: DownloadVideo):
        # Only a single video goes to the downloader, never a playlist or channel
        result = youtube.extract(cmd.url)
        if result.metadata is None:
            raise InvalidVideoUrlError(f"Not a YouTube video URL: {cmd.url}")
        return acquire_service.download_direct(result.metadata.watch_url)

    bus = CommandBus()
    bus.register(FetchTrack, handle_fetch_track)
    bus.register(DownloadVideo, handle_download_video)

    return {
        "bus": bus,
        "http": http,
        "registry": registry,
        "media_service": media_service,
        "acquire_service": acquire_service,
        "pipeline": pipeline,
    }
