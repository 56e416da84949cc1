"""
Shared pytest fixtures for tunegrab tests.

HTTP is faked at the requests.Session level and external tools through a
recording ProcessRunner, so no test touches the network or spawns processes.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tunegrab.core.config import AppConfig, AuthMode
from tunegrab.core.interfaces import ProcessRunner
from tunegrab.infra.network.http import HttpClient


def make_response(status_code=200, payload=None, reason="OK", invalid_json=False):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if invalid_json:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = payload if payload is not None else {}
    return resp


SPOTIFY_TRACK = {"name": "Song", "artists": [{"name": "A"}, {"name": "B"}]}
SEARCH_HIT = {"items": [{"id": {"kind": "youtube#video", "videoId": "XYZ"}}]}
SEARCH_EMPTY = {"items": []}
TOKEN = {"access_token": "tok-123", "token_type": "Bearer", "expires_in": 3600}


class FakeSession:
    """requests.Session stand-in that answers by URL prefix and records calls."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def _answer(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        for prefix, resp in self.routes.items():
            if url.startswith(prefix):
                if isinstance(resp, Exception):
                    raise resp
                return resp
        raise AssertionError(f"Unexpected {method} {url}")

    def get(self, url, **kwargs):
        return self._answer("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._answer("POST", url, **kwargs)

    def close(self):
        pass

    def urls(self, method=None):
        return [url for m, url, _ in self.calls if method is None or m == method]


class RecordingRunner(ProcessRunner):
    """
    Pretends to be yt-dlp and ffmpeg.

    yt-dlp writes the mp3 its -o template points at; ffmpeg writes its last
    argument. Exit codes are configurable per tool.
    """

    def __init__(self, ytdlp_code=0, ffmpeg_code=0, installed=("yt-dlp", "ffmpeg")):
        self.ytdlp_code = ytdlp_code
        self.ffmpeg_code = ffmpeg_code
        self.installed = set(installed)
        self.calls = []
        self.leftovers = []

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.installed else None

    def run(self, argv):
        argv = list(argv)
        self.calls.append(argv)
        if argv[0].endswith("yt-dlp"):
            template = argv[argv.index("-o") + 1]
            if self.ytdlp_code == 0:
                Path(template.replace("%(ext)s", "mp3")).write_bytes(b"ID3audio")
            else:
                partial = Path(template.replace("%(ext)s", "webm.part"))
                partial.write_bytes(b"partial")
                self.leftovers.append(partial)
            return self.ytdlp_code
        if argv[0].endswith("ffmpeg"):
            if self.ffmpeg_code == 0:
                Path(argv[-1]).write_bytes(Path(argv[argv.index("-i") + 1]).read_bytes())
            return self.ffmpeg_code
        raise AssertionError(f"Unexpected command {argv}")

    def tool_calls(self, name):
        return [c for c in self.calls if c[0].endswith(name)]


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def temp_dir(tmp_path):
    tmp = tmp_path / "tmp"
    tmp.mkdir()
    return tmp


@pytest.fixture
def config(output_dir):
    return AppConfig(
        auth_mode=AuthMode.CREDENTIALS,
        youtube_api_key="yt-key",
        spotify_client_id="client-id",
        spotify_client_secret="client-secret",
        output_dir=output_dir,
    )


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def happy_session():
    return FakeSession({
        "https://accounts.spotify.com/api/token": make_response(payload=TOKEN),
        "https://api.spotify.com/v1/tracks/": make_response(payload=SPOTIFY_TRACK),
        "https://www.googleapis.com/youtube/v3/search": make_response(payload=SEARCH_HIT),
    })


@pytest.fixture
def http_for():
    def _make(session):
        return HttpClient(session=session)
    return _make
