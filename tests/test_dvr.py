import pytest

from f4mkit import (
    DvrInfo,
    DvrInfoError,
    InvalidURLError,
    ManifestDownloadError,
    ManifestParser,
    ManifestXMLError,
    update_dvr_info,
)

DVR_URL = "http://example.com/live/dvr.xml"


def test_update_dvr_info(downloader):
    downloader.add(DVR_URL, '<dvrInfo id="dvr" beginOffset="5" endOffset="50" windowDuration="3600"/>')
    dvr_info = update_dvr_info(DVR_URL, download=downloader)
    assert dvr_info == DvrInfo(id="dvr", begin_offset=5, end_offset=50, window_duration=3600)
    assert dvr_info.offline is False


def test_update_existing_dvr_info(downloader):
    downloader.add(DVR_URL, '<dvrInfo windowDuration="1200" offline="true"/>')
    current = DvrInfo(url=DVR_URL, window_duration=600)

    updated = update_dvr_info(DVR_URL, download=downloader, dvr_info=current)

    assert updated == DvrInfo(url=DVR_URL, window_duration=1200, offline=True)
    assert current.window_duration == 600


def test_update_dvr_info_through_parser(downloader):
    downloader.add(DVR_URL, '<dvrInfo windowDuration="90"/>')
    context = {"session": 1}
    parser = ManifestParser(download=downloader, user_context=context)
    assert parser.update_dvr_info(DVR_URL).window_duration == 90
    assert downloader.calls == [(context, DVR_URL)]


def test_namespaced_dvr_info_document(downloader):
    downloader.add(DVR_URL, '<dvrInfo xmlns="http://ns.adobe.com/f4m/2.0" windowDuration="30"/>')
    assert update_dvr_info(DVR_URL, download=downloader).window_duration == 30


def test_wrong_root_element(downloader):
    downloader.add(DVR_URL, '<manifest xmlns="http://ns.adobe.com/f4m/2.0"/>')
    with pytest.raises(DvrInfoError):
        update_dvr_info(DVR_URL, download=downloader)


@pytest.mark.parametrize("url", ["", "rtmp://example.com/live/dvr.xml"])
def test_invalid_url(downloader, url):
    with pytest.raises(InvalidURLError):
        update_dvr_info(url, download=downloader)
    assert downloader.calls == []


def test_download_failure(downloader):
    downloader.add(DVR_URL, b"oops", status=500)
    with pytest.raises(ManifestDownloadError):
        update_dvr_info(DVR_URL, download=downloader)


def test_malformed_document(downloader):
    downloader.add(DVR_URL, "<dvrInfo")
    with pytest.raises(ManifestXMLError):
        update_dvr_info(DVR_URL, download=downloader)
