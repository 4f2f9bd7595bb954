import pytest

from f4mkit import parse_manifest

MANIFEST_URL = "http://example.com/vod/movie.f4m?token=abc"


class FakeDownloader:
    """In-memory download function: url -> (body, status)."""

    def __init__(self):
        self.documents = {}
        self.calls = []

    def add(self, url, content, status=200):
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.documents[url] = (content, status)

    def __call__(self, user_context, url):
        self.calls.append((user_context, url))
        return self.documents.get(url, (b"", 404))


@pytest.fixture
def downloader():
    return FakeDownloader()


@pytest.fixture
def parse(downloader):
    """Register a manifest document and parse it."""
    def _parse(xml, url=MANIFEST_URL):
        downloader.add(url, xml)
        return parse_manifest(url, download=downloader)
    return _parse
