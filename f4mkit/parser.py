"""
F4M manifest parser.

Orchestrates the complete resolution pipeline for a Flash Media Manifest:
download, version and level detection, extraction of manifest-scope values
and element collections, cross-reference binding onto medias and, for
multi-level set-level manifests, parsing and splicing of every stream-level
sub-manifest.
"""

import dataclasses
import logging
from typing import Any, Dict, Iterator, List, Optional

from lxml import etree

from . import document as gates
from .binding import (
    MediaBinder,
    all_medias,
    bind_best_effort_fetch_info,
    bind_bootstrap_info,
    bind_cue_info,
    bind_drm_additional_header,
    bind_drm_additional_header_set,
    bind_dvr_info,
    bind_smpte_timecode,
    durations_unset,
    map_medias,
)
from .document import ManifestDocument, attributes, local_name, node_base64, node_text
from .downloader import DownloadFunction, HttpDownloader, fetch
from .dvr import update_dvr_info
from .exceptions import F4MError, InvalidURLError
from .models import (
    AdaptiveSet,
    BestEffortFetchInfo,
    BootstrapInfo,
    Cue,
    DrmAdditionalHeader,
    DvrInfo,
    Manifest,
    Media,
    ParserConfig,
    SmpteTimecode,
)
from .utils import has_http_scheme, has_rtmfp_scheme, resolve_url, sanitize_base_url, to_float, to_int

logger = logging.getLogger(__name__)

VALID_DELIVERY_TYPES = ("streaming", "progressive")
VALID_STREAM_TYPES = ("live", "recorded", "liveOrRecorded")
VALID_MEDIA_TYPES = ("audio", "audio+video", "data", "text", "video")
VALID_MEDIA_TYPES_V3 = VALID_MEDIA_TYPES + ("video-keyframe-only",)
VIDEO_MEDIA_TYPES = ("video", "audio+video", "video-keyframe-only")
CUE_TYPE_SPLICE_OUT = "spliceOut"

# Manifest-scope elements holding a single text value
_MANIFEST_TEXT_ELEMENTS = {
    "id": "id",
    "startTime": "start_time",
    "mimeType": "mime_type",
    "streamType": "stream_type",
    "deliveryType": "delivery_type",
    "label": "label",
    "lang": "lang",
    "baseURL": "base_url",
}

# Manifest-scope elements parsed by their own pass
_MANIFEST_COLLECTION_ELEMENTS = frozenset({
    "media",
    "adaptiveSet",
    "bootstrapInfo",
    "dvrInfo",
    "drmAdditionalHeader",
    "drmAdditionalHeaderSet",
    "smpteTimecodes",
    "cueInfo",
    "bestEffortFetchInfo",
})

_MEDIA_V3_ATTRIBUTES = {
    "audioCodec": "audio_codec",
    "videoCodec": "video_codec",
    "cueInfoId": "cue_info_id",
    "bestEffortFetchInfoId": "best_effort_fetch_info_id",
    "drmAdditionalHeaderSetId": "drm_additional_header_set_id",
}

# Only legal in single-level and set-level manifests
_MEDIA_SET_LEVEL_ATTRIBUTES = {
    "bitrate": "bitrate",
    "streamId": "stream_id",
    "type": "type",
    "label": "label",
    "lang": "lang",
}
_MEDIA_SET_LEVEL_NAMES = frozenset(_MEDIA_SET_LEVEL_ATTRIBUTES) | {"width", "height", "alternate"}

_MEDIA_COMMON_ATTRIBUTES = {
    "bootstrapInfoId": "bootstrap_info_id",
    "drmAdditionalHeaderId": "drm_additional_header_id",
    "groupspec": "groupspec",
    "multicastStreamName": "multicast_stream_name",
}


def check_manifest_url(url: str) -> None:
    """
    Validate a manifest URL before downloading it.

    Raises:
        InvalidURLError: If the URL is empty or not http(s)
    """
    if not url:
        logger.error("Manifest URL is empty")
        raise InvalidURLError("Manifest URL is empty")
    if not has_http_scheme(url):
        logger.error(f"Manifest URL scheme is not http: {url[:100]}")
        raise InvalidURLError(f"Manifest URL must use an http(s) scheme: {url}")


def splice_media(set_media: Media, stream_media: Media) -> Media:
    """
    Merge a set-level media with the single media of its stream-level manifest.

    Width, height, alternate, type, label, lang and bitrate are set-level
    facts: the set-level values replace the stream-level ones, blank values
    included. DVR info also lives at set level. Stream id and codecs fall
    back to the set-level values when the stream-level media has none, and
    the set-level best-effort fetch info is kept unless the stream-level
    bootstrap info carries its own durations.

    Args:
        set_media: Media from the set-level manifest (with href)
        stream_media: Media parsed from the stream-level manifest

    Returns:
        Resolved Media
    """
    best_effort_fetch_info = stream_media.best_effort_fetch_info
    if best_effort_fetch_info is None and durations_unset(stream_media.bootstrap_info):
        best_effort_fetch_info = set_media.best_effort_fetch_info

    return dataclasses.replace(
        stream_media,
        width=set_media.width,
        height=set_media.height,
        alternate=set_media.alternate,
        type=set_media.type,
        label=set_media.label,
        lang=set_media.lang,
        bitrate=set_media.bitrate,
        dvr_info=set_media.dvr_info,
        href=set_media.href,
        stream_id=stream_media.stream_id or set_media.stream_id,
        audio_codec=stream_media.audio_codec or set_media.audio_codec,
        video_codec=stream_media.video_codec or set_media.video_codec,
        best_effort_fetch_info=best_effort_fetch_info,
    )


class ManifestParser:
    """
    Parser for F4M manifests.

    Handles the complete resolution pipeline including:
    - Version (1.0, 2.0, 3.0) and level (single, set, stream) detection
    - Element extraction with version/level gating
    - Binding of bootstrap info, DRM headers, DVR info, cues and timecodes onto medias
    - Fetching and splicing of multi-level stream-level manifests

    The parser holds no per-document state, so one instance can serve any
    number of parse calls.
    """

    def __init__(self, download: Optional[DownloadFunction] = None, user_context: Any = None):
        """
        Initialize manifest parser.

        Args:
            download: Download function ``(user_context, url) -> (body, status)``
                (default: HttpDownloader with default settings)
            user_context: Opaque value handed to every download call
        """
        self.download = download if download is not None else HttpDownloader()
        self.user_context = user_context

    def parse(self, url: str) -> Manifest:
        """
        Download and parse a manifest, resolving multi-level manifests.

        Args:
            url: http(s) URL of the manifest

        Returns:
            Fully resolved Manifest

        Raises:
            InvalidURLError: If the URL is empty or not http(s)
            ManifestDownloadError: If the manifest cannot be downloaded
            ManifestXMLError: If the manifest is not well-formed XML
            ManifestNamespaceError: If the root is not an F4M manifest

        Example:
            >>> parser = ManifestParser()
            >>> manifest = parser.parse("http://example.com/vod/movie.f4m")
            >>> [media.bitrate for media in manifest.medias]
            ['800', '1500']
        """
        logger.info(f"Parsing manifest: {url[:100] if url else 'N/A'}")

        doc = self._load_document(url)
        manifest = self._parse_document(doc)

        if gates.is_set_level(doc.level):
            manifest = self._resolve_set_level(manifest)

        logger.info(
            f"Manifest parsed: {len(manifest.medias)} medias, "
            f"{len(manifest.adaptive_sets)} adaptive sets"
        )
        return manifest

    def update_dvr_info(self, url: str, dvr_info: Optional[DvrInfo] = None) -> DvrInfo:
        """Refresh DVR info from a standalone dvrInfo document, see ``f4mkit.dvr.update_dvr_info``."""
        return update_dvr_info(url, download=self.download, user_context=self.user_context, dvr_info=dvr_info)

    def _load_document(self, url: str, is_sub_manifest: bool = False) -> ManifestDocument:
        check_manifest_url(url)
        content = fetch(self.download, self.user_context, url)
        return ManifestDocument(url, content, is_sub_manifest=is_sub_manifest)

    def _parse_document(self, doc: ManifestDocument) -> Manifest:
        """
        Extract a Manifest from one document, without multi-level resolution.
        """
        manifest = Manifest()
        level, major = doc.level, doc.major

        if gates.reads_profiles(level, major):
            manifest.profiles = (doc.root.get("profile") or "").split()

        self._parse_manifest_values(doc, manifest)

        manifest.medias = self._parse_medias(doc, manifest.base_url)
        if gates.reads_adaptive_sets(level, major):
            manifest.adaptive_sets = self._parse_adaptive_sets(doc, manifest.base_url)

        passes = (
            (gates.reads_dvr_infos, self._parse_dvr_infos),
            (gates.reads_drm_additional_headers, self._parse_drm_additional_headers),
            (gates.reads_bootstrap_infos, self._parse_bootstrap_infos),
            (gates.reads_smpte_timecodes, self._parse_smpte_timecodes),
            (gates.reads_cue_infos, self._parse_cue_infos),
            (gates.reads_drm_additional_header_sets, self._parse_drm_additional_header_sets),
            (gates.reads_best_effort_fetch_infos, self._parse_best_effort_fetch_infos),
        )
        for gate, parse_pass in passes:
            if not gate(level, major):
                continue
            for binder in parse_pass(doc, manifest.base_url):
                manifest = map_medias(manifest, binder)

        return manifest

    def _parse_manifest_values(self, doc: ManifestDocument, manifest: Manifest) -> None:
        """Read the manifest-scope scalar elements and validate them."""
        for node in doc.children():
            name = local_name(node)
            if name in _MANIFEST_TEXT_ELEMENTS:
                setattr(manifest, _MANIFEST_TEXT_ELEMENTS[name], node_text(node))
            elif name == "duration":
                manifest.duration = to_float(node.text)
            elif name not in _MANIFEST_COLLECTION_ELEMENTS:
                logger.debug(f"Ignoring manifest element {name}")

        if manifest.delivery_type and manifest.delivery_type not in VALID_DELIVERY_TYPES:
            logger.warning(f"Invalid deliveryType {manifest.delivery_type!r}, ignoring it")
            manifest.delivery_type = ""

        if manifest.stream_type and manifest.stream_type not in VALID_STREAM_TYPES:
            logger.warning(f"Invalid streamType {manifest.stream_type!r}, ignoring it")
            manifest.stream_type = ""

        if not manifest.base_url:
            manifest.base_url = sanitize_base_url(doc.url)
            logger.debug(f"No baseURL element, using {manifest.base_url}")

    def _parse_medias(self, doc: ManifestDocument, base_url: str) -> List[Media]:
        medias = []
        for node in doc.query("media"):
            media = self._parse_media(doc, node, base_url)
            if media is None:
                continue
            medias.append(media)

            # A stream-level manifest describes exactly one media
            if gates.is_multi_level_stream_level(doc.level):
                break
        return medias

    def _parse_adaptive_sets(self, doc: ManifestDocument, base_url: str) -> List[AdaptiveSet]:
        adaptive_sets = []
        for node in doc.query("adaptiveSet"):
            adaptive_set = AdaptiveSet()
            for name, value in attributes(node):
                if name == "alternate":
                    adaptive_set.alternate = True
                elif name == "label":
                    adaptive_set.label = value
                elif name == "lang":
                    adaptive_set.lang = value
                elif name == "audioCodec":
                    adaptive_set.audio_codec = value
                elif name == "type":
                    adaptive_set.type = value
                else:
                    logger.debug(f"Ignoring adaptiveSet attribute {name}")

            for child in doc.children(node):
                if local_name(child) != "media":
                    logger.debug(f"Ignoring adaptiveSet child element {local_name(child)}")
                    continue
                media = self._parse_media(doc, child, base_url, defaults=adaptive_set)
                if media is not None:
                    adaptive_set.medias.append(media)

            adaptive_sets.append(adaptive_set)
        return adaptive_sets

    def _parse_media(
        self,
        doc: ManifestDocument,
        node: etree._Element,
        base_url: str,
        defaults: Optional[AdaptiveSet] = None,
    ) -> Optional[Media]:
        """
        Build a Media from a media element.

        Args:
            doc: Document the element belongs to
            node: media element
            base_url: Base URL for relative url/href attributes
            defaults: Enclosing adaptive set, whose attributes are applied
                before the media's own attributes

        Returns:
            Media, or None if the element describes an invalid multicast media
        """
        level, major = doc.level, doc.major
        media = Media()
        if defaults is not None:
            media.alternate = defaults.alternate
            media.label = defaults.label
            media.lang = defaults.lang
            media.audio_codec = defaults.audio_codec
            media.type = defaults.type

        for name, value in attributes(node):
            if name == "dvrInfoId" and gates.reads_media_dvr_info_id(level, major):
                media.dvr_info_id = value
            elif name == "href" and gates.reads_media_href(level, major):
                if value:
                    media.href = resolve_url(value, base_url)
            elif name in _MEDIA_V3_ATTRIBUTES and gates.reads_media_v3_attributes(level, major):
                setattr(media, _MEDIA_V3_ATTRIBUTES[name], value)
            elif name in _MEDIA_SET_LEVEL_NAMES and gates.reads_media_set_level_attributes(level, major):
                if name == "width":
                    media.width = to_int(value)
                elif name == "height":
                    media.height = to_int(value)
                elif name == "alternate":
                    media.alternate = True
                else:
                    setattr(media, _MEDIA_SET_LEVEL_ATTRIBUTES[name], value)
            elif name == "url":
                media.url = resolve_url(value, base_url)
            elif name in _MEDIA_COMMON_ATTRIBUTES:
                setattr(media, _MEDIA_COMMON_ATTRIBUTES[name], value)
            else:
                logger.debug(f"Ignoring media attribute {name}")

        for child in doc.children(node):
            name = local_name(child)
            if name == "metadata":
                media.metadata = node_base64(child)
            elif name in ("moov", "xmpMetadata") and gates.reads_media_v1_children(level, major):
                if name == "moov":
                    media.moov = node_base64(child)
                else:
                    media.xmp_metadata = node_base64(child)
            else:
                logger.debug(f"Ignoring media child element {name}")

        if media.groupspec or media.multicast_stream_name:
            if not (media.groupspec and media.multicast_stream_name) or not has_rtmfp_scheme(media.url):
                logger.warning(f"Dropping media {media.url or media.href!r}: invalid multicast (rtmfp) settings")
                return None

        valid_types = VALID_MEDIA_TYPES_V3 if major >= 3 else VALID_MEDIA_TYPES
        if media.type and media.type not in valid_types:
            logger.warning(f"Invalid media type {media.type!r}, defaulting to audio+video")
            media.type = ""

        if major >= 3:
            if media.video_codec and media.type and media.type not in VIDEO_MEDIA_TYPES:
                logger.warning(f"Ignoring videoCodec {media.video_codec!r} on media of type {media.type!r}")
                media.video_codec = ""
            if media.drm_additional_header_id and media.drm_additional_header_set_id:
                logger.debug("Media has both drmAdditionalHeaderId and drmAdditionalHeaderSetId")

        self._check_media_level(doc, media)
        return media

    def _check_media_level(self, doc: ManifestDocument, media: Media) -> None:
        """Report values found at a level where the format does not expect them."""
        if gates.is_set_level(doc.level):
            unexpected = {
                "bootstrapInfoId": media.bootstrap_info_id,
                "drmAdditionalHeaderId": media.drm_additional_header_id,
                "url": media.url,
                "cueInfoId": media.cue_info_id,
                "drmAdditionalHeaderSetId": media.drm_additional_header_set_id,
            }
        elif gates.is_multi_level_stream_level(doc.level):
            unexpected = {
                "href": media.href,
                "audioCodec": media.audio_codec,
                "videoCodec": media.video_codec,
                "bestEffortFetchInfoId": media.best_effort_fetch_info_id,
            }
        else:
            return

        for name, value in unexpected.items():
            if value:
                logger.debug(f"{name} present in a {doc.level.value} manifest")

    def _parse_dvr_infos(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        for node in doc.query("dvrInfo"):
            values: Dict[str, Any] = {}
            for name, value in attributes(node):
                if doc.major == 1 and name == "id":
                    values["id"] = value
                elif doc.major == 1 and name == "beginOffset":
                    values["begin_offset"] = to_int(value)
                elif doc.major == 1 and name == "endOffset":
                    values["end_offset"] = to_int(value)
                elif doc.major >= 2 and name == "windowDuration":
                    values["window_duration"] = to_int(value)
                elif name == "url":
                    values["url"] = resolve_url(value, base_url)
                elif name == "offline":
                    values["offline"] = True
                else:
                    logger.debug(f"Ignoring dvrInfo attribute {name}")

            yield bind_dvr_info(DvrInfo(**values), doc.major)

    def _parse_drm_additional_header(self, node: etree._Element, base_url: str,
                                     in_set: bool = False) -> Optional[DrmAdditionalHeader]:
        values: Dict[str, Any] = {}
        for name, value in attributes(node):
            if name == "id":
                values["id"] = value
            elif name == "url":
                values["url"] = resolve_url(value, base_url)
            elif name == "drmContentId":
                values["drm_content_id"] = value
            elif in_set and name == "prefetchDeadline":
                values["prefetch_deadline"] = to_float(value)
            elif in_set and name == "startTimestamp":
                values["start_timestamp"] = to_float(value)
            else:
                logger.debug(f"Ignoring drmAdditionalHeader attribute {name}")

        if not values.get("url"):
            values["data"] = node_base64(node)
            if not values["data"]:
                logger.warning("Ignoring malformed drmAdditionalHeader: no url and no data")
                return None

        return DrmAdditionalHeader(**values)

    def _parse_drm_additional_headers(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        for node in doc.query("drmAdditionalHeader"):
            header = self._parse_drm_additional_header(node, base_url)
            if header is not None:
                yield bind_drm_additional_header(header)

    def _parse_drm_additional_header_sets(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        for node in doc.query("drmAdditionalHeaderSet"):
            set_id = ""
            for name, value in attributes(node):
                if name == "id":
                    set_id = value
                else:
                    logger.debug(f"Ignoring drmAdditionalHeaderSet attribute {name}")

            headers = []
            for child in doc.children(node):
                if local_name(child) != "drmAdditionalHeader":
                    continue
                header = self._parse_drm_additional_header(child, base_url, in_set=True)
                if header is not None:
                    headers.append(header)

            yield bind_drm_additional_header_set(set_id, headers)

    def _parse_bootstrap_infos(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        for node in doc.query("bootstrapInfo"):
            values: Dict[str, Any] = {}
            for name, value in attributes(node):
                if name == "profile":
                    values["profile"] = value
                elif name == "id":
                    values["id"] = value
                elif name == "url":
                    values["url"] = resolve_url(value, base_url)
                elif doc.major >= 3 and name == "fragmentDuration":
                    values["fragment_duration"] = to_float(value)
                elif doc.major >= 3 and name == "segmentDuration":
                    values["segment_duration"] = to_float(value)
                else:
                    logger.debug(f"Ignoring bootstrapInfo attribute {name}")

            if not values.get("profile"):
                logger.warning("Ignoring malformed bootstrapInfo: no profile attribute")
                continue

            if not values.get("url"):
                values["data"] = node_base64(node)
                if not values["data"]:
                    logger.warning("Ignoring malformed bootstrapInfo: no url and no data")
                    continue

            yield bind_bootstrap_info(BootstrapInfo(**values))

    def _parse_smpte_timecodes(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        for node in doc.query("smpteTimecodes", "smpteTimecode"):
            smpte = ""
            timestamp: Optional[float] = None
            values: Dict[str, Any] = {}
            for name, value in attributes(node):
                if name == "timestamp":
                    timestamp = to_float(value)
                elif name == "smpte":
                    smpte = value
                elif name == "date":
                    values["date"] = value
                elif name == "timezone":
                    values["timezone"] = value
                else:
                    logger.debug(f"Ignoring smpteTimecode attribute {name}")

            if timestamp is None or timestamp < 0 or not smpte:
                logger.warning("Ignoring malformed smpteTimecode")
                continue

            yield bind_smpte_timecode(SmpteTimecode(smpte=smpte, timestamp=timestamp, **values))

    def _parse_cue(self, node: etree._Element) -> Optional[Cue]:
        values: Dict[str, Any] = {}
        for name, value in attributes(node):
            if name == "availNum":
                values["avail_num"] = to_int(value)
            elif name == "availsExpected":
                values["avails_expected"] = to_int(value)
            elif name == "duration":
                values["duration"] = to_float(value)
            elif name == "id":
                values["id"] = value
            elif name == "time":
                values["time"] = to_float(value)
            elif name == "type":
                values["type"] = value
            elif name == "programId":
                values["program_id"] = value
            else:
                logger.debug(f"Ignoring cue attribute {name}")

        duration = values.get("duration")
        time = values.get("time")
        if (duration is None or duration < 0 or time is None or time < 0
                or not values.get("id") or values.get("type") != CUE_TYPE_SPLICE_OUT):
            logger.warning(f"Ignoring malformed cue {values.get('id', '')!r}")
            return None

        return Cue(**values)

    def _parse_cue_infos(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        for node in doc.query("cueInfo"):
            cue_info_id = ""
            for name, value in attributes(node):
                if name == "id":
                    cue_info_id = value
                else:
                    logger.debug(f"Ignoring cueInfo attribute {name}")

            if not cue_info_id:
                logger.warning("Ignoring cueInfo without id")
                continue

            cues = []
            for child in doc.children(node):
                if local_name(child) != "cue":
                    continue
                cue = self._parse_cue(child)
                if cue is not None:
                    cues.append(cue)

            if not cues:
                logger.warning(f"Ignoring cueInfo {cue_info_id!r}: no valid cue")
                continue

            yield bind_cue_info(cue_info_id, cues)

    def _parse_best_effort_fetch_infos(self, doc: ManifestDocument, base_url: str) -> Iterator[MediaBinder]:
        nodes = doc.query("bestEffortFetchInfo")
        for node in nodes:
            values: Dict[str, Any] = {}
            for name, value in attributes(node):
                if name == "id":
                    values["id"] = value
                elif name == "fragmentDuration":
                    values["fragment_duration"] = to_float(value)
                elif name == "segmentDuration":
                    values["segment_duration"] = to_float(value)
                else:
                    logger.debug(f"Ignoring bestEffortFetchInfo attribute {name}")

            if len(nodes) > 1 and not values.get("id"):
                logger.debug("Several bestEffortFetchInfo elements but this one has no id")

            yield bind_best_effort_fetch_info(BestEffortFetchInfo(**values))

    def _resolve_set_level(self, manifest: Manifest) -> Manifest:
        """
        Replace every set-level media carrying an href by its stream-level media.

        Stream-level manifests are parsed with their level forced, so they are
        never resolved any further.
        """
        hrefs = [media.href for media in all_medias(manifest) if media.href]
        logger.info(f"Resolving {len(hrefs)} stream-level manifests")

        profiles = list(manifest.profiles)

        def _resolve(media: Media) -> Media:
            if not media.href:
                return media
            sub_manifest = self._parse_stream_level(media.href)
            if sub_manifest is None:
                return media
            profiles.extend(sub_manifest.profiles)
            return splice_media(media, sub_manifest.medias[0])

        manifest = map_medias(manifest, _resolve)
        manifest.profiles = profiles
        return manifest

    def _parse_stream_level(self, href: str) -> Optional[Manifest]:
        """
        Parse one stream-level manifest.

        Returns:
            Manifest holding exactly one media, or None if the manifest
            cannot be fetched or parsed or holds no valid media
        """
        try:
            doc = self._load_document(href, is_sub_manifest=True)
            sub_manifest = self._parse_document(doc)
        except F4MError as e:
            logger.warning(f"Failed to parse stream-level manifest {href[:100]}: {str(e)}")
            return None

        if not sub_manifest.medias:
            logger.warning(f"Stream-level manifest {href[:100]} has no valid media")
            return None
        return sub_manifest


def parse_manifest(
    url: str,
    download: Optional[DownloadFunction] = None,
    user_context: Any = None,
) -> Manifest:
    """
    Download and parse an F4M manifest.

    Args:
        url: http(s) URL of the manifest
        download: Download function (default: HttpDownloader)
        user_context: Opaque value handed to the download function

    Returns:
        Fully resolved Manifest

    Example:
        >>> manifest = parse_manifest("http://example.com/live/stream.f4m")
        >>> manifest.medias[0].bootstrap_info.profile
        'named'
    """
    return ManifestParser(download=download, user_context=user_context).parse(url)


def parse_from_config(config: ParserConfig) -> Manifest:
    """
    Parse a manifest using a ParserConfig object.

    Args:
        config: ParserConfig with the URL and HTTP settings

    Returns:
        Fully resolved Manifest
    """
    downloader = HttpDownloader(
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
        headers=config.headers,
        user_agent=config.user_agent,
    )
    return parse_manifest(config.url, download=downloader)
