"""Shared fixtures: a fake Canvia API and response helpers."""

import json
import sys
import threading
from pathlib import Path

import pytest
import requests

# Add parent dir to path so artwork_uploader is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

from artwork_uploader.config import DEFAULT_API_URL

ENV_VARS = (
    "USERNAME",
    "PASSWORD",
    "PLAYLIST",
    "API_URL",
    "UPLOAD_WORKERS",
    "REQUEST_TIMEOUT",
    "UPLOAD_TIMEOUT",
)


def make_response(status_code: int = 200, payload: dict | None = None) -> requests.Response:
    """Build a real requests.Response with a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode() if payload is not None else b""
    response.url = DEFAULT_API_URL
    return response


class FakeCanviaApi:
    """In-memory stand-in for the four Canvia endpoints.

    Install with patch("requests.post", side_effect=api.post).
    """

    def __init__(self, existing_titles: tuple[str, ...] = ()) -> None:
        self.titles = set(existing_titles)
        self.calls: list[str] = []
        self.failures: dict[str, int] = {}
        self.uploads: list[bytes] = []
        self.playlists: dict[str, list] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def post(self, url, json=None, data=None, headers=None, timeout=None):
        path = url[len(DEFAULT_API_URL):]
        with self._lock:
            self.calls.append(path)
            if path in self.failures:
                return make_response(self.failures[path], {"message": "server error"})
            return getattr(self, "_" + path.strip("/").replace("/", "_"))(
                json, data, headers or {}
            )

    def _authenticate(self, body, data, headers):
        if body["email"] != "artist@example.com" or body["password"] != "secret":
            return make_response(401, {"message": "invalid credentials"})
        return make_response(200, {"token": "tok-123"})

    def _artworks(self, body, data, headers):
        if headers.get("x-access-token") != "tok-123":
            return make_response(403)
        if body["title"] in self.titles:
            return make_response(409, {"message": "title already exists"})
        self.titles.add(body["title"])
        artwork_id = f"art-{self._next_id}"
        self._next_id += 1
        return make_response(201, {"id": artwork_id, "title": body["title"]})

    def _uploads_upload_artwork_image(self, body, data, headers):
        # Drain the multipart encoder the way the transport would
        chunks = []
        while True:
            chunk = data.read(8192)
            if not chunk:
                break
            chunks.append(chunk)
        self.uploads.append(b"".join(chunks))
        return make_response(200, {"artwork": "uploaded"})

    def _playlists_add_artwork(self, body, data, headers):
        self.playlists.setdefault(body["playlist"], []).extend(body["artworks"])
        return make_response(200)


@pytest.fixture
def fake_api():
    return FakeCanviaApi()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove uploader settings from the environment and skip .env loading."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("artwork_uploader.config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def account_env(clean_env):
    clean_env.setenv("USERNAME", "artist@example.com")
    clean_env.setenv("PASSWORD", "secret")
    clean_env.setenv("PLAYLIST", "playlist-42")
    return clean_env


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "Sunset Over Lake.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0" + b"jpeg-bytes" * 100)
    return path
