"""
Data models for F4MKit.

Defines the records extracted from a Flash Media Manifest. Auxiliary records
(bootstrap info, DRM headers, DVR info, cues, timecodes) are frozen because a
single record is broadcast onto every media it applies to. ``None`` always
means "not present in the manifest" and is distinct from a blank or zero value.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class BootstrapInfo:
    """Information needed to bootstrap playback of HTTP streamed media."""
    profile: str
    id: str = ""
    url: str = ""
    data: bytes = b""
    fragment_duration: Optional[float] = None  # F4M 3.0
    segment_duration: Optional[float] = None   # F4M 3.0


@dataclass(frozen=True)
class DrmAdditionalHeader:
    """DRM AdditionalHeader, inline (decoded) or referenced by URL."""
    id: str = ""
    url: str = ""
    data: bytes = b""
    drm_content_id: str = ""
    # Only for members of a drmAdditionalHeaderSet
    prefetch_deadline: Optional[float] = None
    start_timestamp: Optional[float] = None


@dataclass(frozen=True)
class DvrInfo:
    """Parameters describing how far back into a live stream a viewer may seek."""
    id: str = ""
    begin_offset: Optional[int] = None     # F4M 1.0
    end_offset: Optional[int] = None       # F4M 1.0
    offline: bool = False
    url: str = ""
    window_duration: Optional[int] = None  # F4M 2.0+


@dataclass(frozen=True)
class Cue:
    """An ad insertion cue point (``type`` is always ``spliceOut``)."""
    id: str
    time: float
    duration: float
    type: str = "spliceOut"
    avail_num: Optional[int] = None
    avails_expected: Optional[int] = None
    program_id: str = ""


@dataclass(frozen=True)
class SmpteTimecode:
    """Mapping from a SMPTE timecode to a media timestamp in seconds."""
    smpte: str
    timestamp: float
    date: str = ""
    timezone: str = ""


@dataclass(frozen=True)
class BestEffortFetchInfo:
    """Fragment/segment durations for best-effort fetching (set-level only)."""
    id: str = ""
    fragment_duration: Optional[float] = None
    segment_duration: Optional[float] = None


@dataclass
class Media:
    """One playable rendition of the presentation."""
    bitrate: str = ""  # kbps label, not guaranteed numeric
    width: Optional[int] = None
    height: Optional[int] = None
    stream_id: str = ""
    url: str = ""
    href: str = ""  # set-level manifests only, replaced during the merge
    metadata: bytes = b""
    xmp_metadata: bytes = b""  # F4M 1.0
    moov: bytes = b""          # F4M 1.0

    # Cross-reference keys
    bootstrap_info_id: str = ""
    drm_additional_header_id: str = ""
    drm_additional_header_set_id: str = ""
    dvr_info_id: str = ""
    cue_info_id: str = ""
    best_effort_fetch_info_id: str = ""

    # Bound manifest-scope records, None until bound
    bootstrap_info: Optional[BootstrapInfo] = None
    drm_additional_header: Optional[DrmAdditionalHeader] = None
    drm_additional_header_set: Optional[List[DrmAdditionalHeader]] = None
    dvr_info: Optional[DvrInfo] = None
    cue_info: Optional[List[Cue]] = None
    best_effort_fetch_info: Optional[BestEffortFetchInfo] = None

    alternate: bool = False
    type: str = ""
    label: str = ""
    lang: str = ""
    groupspec: str = ""
    multicast_stream_name: str = ""
    audio_codec: str = ""
    video_codec: str = ""
    smpte_time_codes: List[SmpteTimecode] = field(default_factory=list)


@dataclass
class AdaptiveSet:
    """F4M 3.0 group of alternate renditions sharing default attributes."""
    medias: List[Media] = field(default_factory=list)
    alternate: bool = False
    label: str = ""
    lang: str = ""
    audio_codec: str = ""
    type: str = ""


@dataclass
class Manifest:
    """Root of a parsed (and, for multi-level manifests, fully resolved) F4M document."""
    id: str = ""
    duration: float = 0.0
    start_time: str = ""
    mime_type: str = ""
    stream_type: str = ""
    delivery_type: str = ""
    label: str = ""
    lang: str = ""
    base_url: str = ""
    profiles: List[str] = field(default_factory=list)
    medias: List[Media] = field(default_factory=list)
    adaptive_sets: List[AdaptiveSet] = field(default_factory=list)


@dataclass
class ParserConfig:
    """Configuration for parsing a manifest with the built-in HTTP downloader."""
    url: str
    timeout: int = 30
    verify_ssl: bool = True
    headers: Dict[str, str] = field(default_factory=dict)
    user_agent: Optional[str] = None
