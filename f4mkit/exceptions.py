"""
Exceptions raised by F4MKit.

Only structurally required facts are fatal: the manifest URL, the download,
the XML document itself and its root namespace. Everything else found inside
a manifest is handled permissively and never raises.
"""

from typing import Optional


class F4MError(Exception):
    """Base class for all F4MKit errors."""


class InvalidURLError(F4MError, ValueError):
    """The URL is empty or does not use an http(s) scheme."""


class ManifestDownloadError(F4MError):
    """The download function did not return HTTP 200 with a non-empty body."""

    def __init__(self, url: str, status: Optional[int] = None):
        self.url = url
        self.status = status
        super().__init__(f"Failed to download {url} (status {status})")


class ManifestXMLError(F4MError):
    """The downloaded document is not well-formed XML."""


class ManifestNamespaceError(F4MError):
    """The root element is not a manifest in an F4M namespace."""


class DvrInfoError(F4MError):
    """The document fetched for a DVR info refresh is not a dvrInfo document."""
