"""Shared test helpers: an in-memory HTTP session and jar builders."""

import sys
import zipfile
from pathlib import Path

import pytest
import requests

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content.encode("utf-8") if isinstance(content, str) else content
        self.closed = False

    @property
    def text(self):
        return self.content.decode("utf-8")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeSession:
    """Serves canned responses by URL and records every request."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None, stream=False):
        self.calls.append({"url": url, "params": params, "headers": headers})
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(404)
        if isinstance(route, Exception):
            raise route
        return route

    @property
    def urls(self):
        return [c["url"] for c in self.calls]


def build_jar(path: Path, entries) -> Path:
    """Write a jar containing the given entry names."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as jar:
        jar.writestr("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n")
        for entry in entries:
            jar.writestr(entry, b"\xca\xfe\xba\xbe")
    return path


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def local_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "m2" / "repository"
    repo.mkdir(parents=True)
    return repo


@pytest.fixture
def make_response():
    """Factory for FakeResponse objects."""
    return FakeResponse


@pytest.fixture
def jar_builder():
    return build_jar


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
