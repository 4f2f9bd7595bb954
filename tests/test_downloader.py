import pytest
import requests

from f4mkit import HttpDownloader, ManifestDownloadError, ParserConfig, parse_from_config
from f4mkit.downloader import NO_RESPONSE_STATUS, fetch


class FakeResponse:
    def __init__(self, content, status_code=200):
        self.content = content
        self.status_code = status_code


@pytest.fixture
def requests_get(monkeypatch):
    calls = []
    responses = {}

    def _get(url, **kwargs):
        calls.append((url, kwargs))
        return responses.get(url, FakeResponse(b"", 404))

    monkeypatch.setattr(requests, "get", _get)
    _get.calls = calls
    _get.responses = responses
    return _get


def test_http_downloader_returns_body_and_status(requests_get):
    requests_get.responses["http://example.com/a.f4m"] = FakeResponse(b"<manifest/>", 200)
    downloader = HttpDownloader(timeout=5, verify_ssl=False, headers={"X-Token": "t"}, user_agent="f4mkit-test")

    assert downloader(None, "http://example.com/a.f4m") == (b"<manifest/>", 200)

    url, kwargs = requests_get.calls[0]
    assert url == "http://example.com/a.f4m"
    assert kwargs["timeout"] == 5
    assert kwargs["verify"] is False
    assert kwargs["headers"]["X-Token"] == "t"
    assert kwargs["headers"]["User-Agent"] == "f4mkit-test"
    assert "Accept" in kwargs["headers"]


def test_http_downloader_passes_error_status(requests_get):
    assert HttpDownloader()(None, "http://example.com/missing.f4m") == (b"", 404)


def test_http_downloader_transport_error(monkeypatch):
    def _get(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", _get)
    assert HttpDownloader()(None, "http://example.com/a.f4m") == (b"", NO_RESPONSE_STATUS)


def test_fetch_requires_200_and_body():
    assert fetch(lambda context, url: (b"data", 200), None, "http://example.com") == b"data"

    with pytest.raises(ManifestDownloadError) as excinfo:
        fetch(lambda context, url: (b"data", 206), None, "http://example.com")
    assert excinfo.value.status == 206

    with pytest.raises(ManifestDownloadError):
        fetch(lambda context, url: (b"", 200), None, "http://example.com")


def test_parse_from_config(requests_get):
    requests_get.responses["https://example.com/vod/movie.f4m"] = FakeResponse(
        b'<manifest xmlns="http://ns.adobe.com/f4m/1.0"><media url="low" bitrate="400"/></manifest>'
    )
    config = ParserConfig(url="https://example.com/vod/movie.f4m", timeout=10, user_agent="player/1.0")

    manifest = parse_from_config(config)

    assert [media.url for media in manifest.medias] == ["https://example.com/vod/low"]
    _, kwargs = requests_get.calls[0]
    assert kwargs["timeout"] == 10
    assert kwargs["verify"] is True
    assert kwargs["headers"]["User-Agent"] == "player/1.0"
