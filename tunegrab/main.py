import sys
import logging
import argparse

import colorama
from colorama import Fore, Style

from tunegrab.bootstrap import create_container
from tunegrab.app.commands import FetchTrack, DownloadVideo
from tunegrab.core.config import AppConfig, AuthMode, load_environment
from tunegrab.core.entities import Outcome
from tunegrab.core.errors import TuneGrabError
from tunegrab.extractors.youtube.extractor import YouTubeExtractor

logger = logging.getLogger("tunegrab")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tunegrab",
        description="Download a Spotify track's audio from YouTube as a tagged MP3",
    )
    parser.add_argument("url", help="Spotify track URL (or a YouTube URL to download directly)")
    parser.add_argument(
        "--auth",
        choices=[m.value for m in AuthMode],
        default=AuthMode.AUTO.value,
        help="Spotify auth: exchange client credentials, or use SPOTIFY_API_TOKEN as-is",
    )
    parser.add_argument("-o", "--output-dir", help="Directory for the output file (default: .)")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing output file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    # urllib3 is chatty at DEBUG and would print request URLs with the API key
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def report_error(message: str):
    logger.error("%s%s%s", Fore.RED, message, Style.RESET_ALL)


def run(args: argparse.Namespace) -> int:
    config = AppConfig.from_env(
        auth_mode=AuthMode(args.auth),
        output_dir=args.output_dir,
        overwrite=args.force,
    )
    container = create_container(config)
    bus = container["bus"]

    try:
        extractor = container["registry"].get_extractor(args.url)
        if isinstance(extractor, YouTubeExtractor):
            return bus.handle(DownloadVideo(url=args.url))

        result = bus.handle(FetchTrack(url=args.url))
        if result.outcome is Outcome.NO_MATCH:
            return EXIT_OK
        print(result.output_path)
        return EXIT_OK
    finally:
        container["http"].close()


def main(argv=None) -> int:
    colorama.just_fix_windows_console()
    parser = build_parser()
    # Missing url: argparse prints usage to stderr and exits 2
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    load_environment()

    try:
        return run(args)
    except KeyboardInterrupt:
        report_error("Interrupted.")
        return EXIT_INTERRUPTED
    except TuneGrabError as e:
        report_error(str(e))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
