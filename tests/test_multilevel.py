from f4mkit import BestEffortFetchInfo, BootstrapInfo, DvrInfo, Media, splice_media

SET_URL = "http://example.com/live/set.f4m"
LOW_URL = "http://example.com/live/low.f4m"
HIGH_URL = "http://other.example.com/hd/high.f4m"

SET_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns="http://ns.adobe.com/f4m/2.0" profile="set">
  <dvrInfo windowDuration="300"/>
  <bootstrapInfo profile="named">c2V0</bootstrapInfo>
  <media href="low.f4m" bitrate="400" width="640" height="360" streamId="set-low"/>
  <media href="http://other.example.com/hd/high.f4m" bitrate="1500" width="1280" height="720"
         alternate="" label="HD" lang="en" type="video"/>
</manifest>
"""

LOW_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns="http://ns.adobe.com/f4m/2.0" profile="stream-low">
  <dvrInfo windowDuration="999"/>
  <bootstrapInfo profile="named">Ym9vdHN0cmFw</bootstrapInfo>
  <media url="low" bitrate="9999" width="1" height="1" type="audio" label="x" streamId="sub"
         href="deeper.f4m"/>
  <media url="second"/>
</manifest>
"""

HIGH_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns="http://ns.adobe.com/f4m/2.0">
  <bootstrapInfo profile="named" url="high.bootstrap"/>
  <media url="high"/>
</manifest>
"""


def test_set_level_medias_are_spliced(downloader, parse):
    downloader.add(LOW_URL, LOW_MANIFEST)
    downloader.add(HIGH_URL, HIGH_MANIFEST)
    manifest = parse(SET_MANIFEST, url=SET_URL)

    assert len(manifest.medias) == 2
    low, high = manifest.medias
    dvr_info = DvrInfo(window_duration=300)

    assert low.url == "http://example.com/live/low"
    assert low.href == LOW_URL
    assert low.bitrate == "400"
    assert (low.width, low.height) == (640, 360)
    assert (low.type, low.label, low.alternate) == ("", "", False)
    assert low.stream_id == "set-low"
    assert low.bootstrap_info == BootstrapInfo(profile="named", data=b"bootstrap")
    assert low.dvr_info == dvr_info

    assert high.url == "http://other.example.com/hd/high"
    assert high.href == HIGH_URL
    assert high.bitrate == "1500"
    assert (high.width, high.height) == (1280, 720)
    assert (high.type, high.label, high.lang, high.alternate) == ("video", "HD", "en", True)
    assert high.bootstrap_info == BootstrapInfo(profile="named", url="http://other.example.com/hd/high.bootstrap")
    assert high.dvr_info == dvr_info


def test_sub_manifest_profiles_are_collected(downloader, parse):
    downloader.add(LOW_URL, LOW_MANIFEST)
    downloader.add(HIGH_URL, HIGH_MANIFEST)
    manifest = parse(SET_MANIFEST, url=SET_URL)
    assert manifest.profiles == ["set", "stream-low"]


def test_stream_level_manifests_are_not_resolved_further(downloader, parse):
    downloader.add(LOW_URL, LOW_MANIFEST)
    downloader.add(HIGH_URL, HIGH_MANIFEST)
    parse(SET_MANIFEST, url=SET_URL)
    assert [url for _, url in downloader.calls] == [SET_URL, LOW_URL, HIGH_URL]


def test_failed_sub_manifest_keeps_set_level_media(downloader, parse):
    downloader.add(LOW_URL, LOW_MANIFEST)
    manifest = parse(SET_MANIFEST, url=SET_URL)

    low, high = manifest.medias
    assert low.url == "http://example.com/live/low"
    assert high.href == HIGH_URL
    assert high.url == ""
    assert high.bootstrap_info is None
    assert high.dvr_info == DvrInfo(window_duration=300)
    assert manifest.profiles == ["set", "stream-low"]


def test_sub_manifest_without_media_keeps_set_level_media(downloader, parse):
    downloader.add(LOW_URL, '<manifest xmlns="http://ns.adobe.com/f4m/2.0"/>')
    downloader.add(HIGH_URL, "<manifest")
    manifest = parse(SET_MANIFEST, url=SET_URL)
    assert [media.href for media in manifest.medias] == [LOW_URL, HIGH_URL]
    assert [media.url for media in manifest.medias] == ["", ""]


def test_v3_adaptive_set_and_best_effort_fetch_info(downloader, parse):
    downloader.add("http://example.com/v3/video.f4m", """
        <manifest xmlns="http://ns.adobe.com/f4m/2.0" version="3.0">
          <bootstrapInfo profile="named" fragmentDuration="2" segmentDuration="8">Ym9vdHN0cmFw</bootstrapInfo>
          <media url="video"/>
        </manifest>""")
    downloader.add("http://example.com/v3/audio.f4m", """
        <manifest xmlns="http://ns.adobe.com/f4m/2.0" version="3.0">
          <bootstrapInfo profile="named">Ym9vdHN0cmFw</bootstrapInfo>
          <media url="audio"/>
        </manifest>""")

    manifest = parse("""
        <manifest xmlns="http://ns.adobe.com/f4m/2.0" version="3.0">
          <bestEffortFetchInfo id="bef" fragmentDuration="4" segmentDuration="16"/>
          <media href="video.f4m" bitrate="800" width="854" height="480" videoCodec="avc1"/>
          <adaptiveSet label="English" lang="en" type="audio" alternate="true" audioCodec="mp4a.40.2">
            <media href="audio.f4m" bitrate="128" bestEffortFetchInfoId="bef"/>
          </adaptiveSet>
        </manifest>""", url="http://example.com/v3/set.f4m")

    video = manifest.medias[0]
    assert video.url == "http://example.com/v3/video"
    assert video.video_codec == "avc1"
    assert (video.width, video.height, video.bitrate) == (854, 480, "800")
    assert video.bootstrap_info.fragment_duration == 2.0
    assert video.best_effort_fetch_info is None

    assert len(manifest.adaptive_sets) == 1
    (audio,) = manifest.adaptive_sets[0].medias
    assert audio.url == "http://example.com/v3/audio"
    assert audio.bitrate == "128"
    assert (audio.label, audio.lang, audio.type, audio.alternate) == ("English", "en", "audio", True)
    assert audio.audio_codec == "mp4a.40.2"
    assert audio.best_effort_fetch_info == BestEffortFetchInfo(id="bef", fragment_duration=4.0, segment_duration=16.0)


def test_splice_media_set_level_values_win():
    dvr_info = DvrInfo(window_duration=60)
    set_media = Media(href="http://example.com/a.f4m", bitrate="400", width=640, height=360,
                      stream_id="set", audio_codec="mp4a", dvr_info=dvr_info)
    stream_media = Media(url="http://example.com/a", bitrate="9", width=1, height=1, type="video",
                         label="x", audio_codec="", video_codec="avc1")

    spliced = splice_media(set_media, stream_media)

    assert spliced.url == "http://example.com/a"
    assert spliced.href == "http://example.com/a.f4m"
    assert (spliced.bitrate, spliced.width, spliced.height) == ("400", 640, 360)
    assert (spliced.type, spliced.label) == ("", "")
    assert spliced.stream_id == "set"
    assert (spliced.audio_codec, spliced.video_codec) == ("mp4a", "avc1")
    assert spliced.dvr_info is dvr_info
    assert stream_media.width == 1
