"""
F4MKit - Flash Media Manifest (F4M) Parsing Toolkit

A library for parsing the XML manifests used by HTTP Dynamic Streaming into
structured, fully resolved Python objects a media player can use.

Features:
- F4M 1.0, 2.0 and 3.0 grammars, detected from the document
- Single-level and multi-level (set-level + stream-level) manifests
- Bootstrap info, DRM headers, DVR info, cue points and SMPTE timecodes bound
  onto each media rendition
- Pluggable download function, with a requests-based default
- DVR info refresh for live streams

Example usage:
    >>> from f4mkit import parse_manifest
    >>>
    >>> manifest = parse_manifest("http://example.com/vod/movie.f4m")
    >>> for media in manifest.medias:
    ...     print(media.bitrate, media.url, media.bootstrap_info.profile)
"""

import logging

__version__ = "0.1.0"
__author__ = "F4MKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Data models
from .models import (
    Manifest,
    Media,
    AdaptiveSet,
    BootstrapInfo,
    DrmAdditionalHeader,
    DvrInfo,
    Cue,
    SmpteTimecode,
    BestEffortFetchInfo,
    ParserConfig,
)

# Errors
from .exceptions import (
    F4MError,
    InvalidURLError,
    ManifestDownloadError,
    ManifestXMLError,
    ManifestNamespaceError,
    DvrInfoError,
)

# Document state and version/level detection
from .document import (
    ManifestDocument,
    ManifestLevel,
    ManifestVersion,
    parse_version,
    detect_level,
)

# Main API
from .parser import ManifestParser, parse_manifest, parse_from_config, splice_media
from .dvr import update_dvr_info
from .downloader import HttpDownloader, DownloadFunction

# Utility functions
from .utils import (
    decode_base64,
    is_absolute_url,
    has_http_scheme,
    has_rtmfp_scheme,
    sanitize_base_url,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Main API
    "parse_manifest",
    "parse_from_config",
    "update_dvr_info",
    "ManifestParser",
    "HttpDownloader",
    "DownloadFunction",
    "splice_media",

    # Document state
    "ManifestDocument",
    "ManifestLevel",
    "ManifestVersion",
    "parse_version",
    "detect_level",

    # Models
    "Manifest",
    "Media",
    "AdaptiveSet",
    "BootstrapInfo",
    "DrmAdditionalHeader",
    "DvrInfo",
    "Cue",
    "SmpteTimecode",
    "BestEffortFetchInfo",
    "ParserConfig",

    # Errors
    "F4MError",
    "InvalidURLError",
    "ManifestDownloadError",
    "ManifestXMLError",
    "ManifestNamespaceError",
    "DvrInfoError",

    # Utility functions
    "decode_base64",
    "is_absolute_url",
    "has_http_scheme",
    "has_rtmfp_scheme",
    "sanitize_base_url",
]
