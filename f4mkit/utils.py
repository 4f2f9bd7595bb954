"""
Shared utility functions for F4MKit.

Provides the small pure helpers used across the package: lenient base64
decoding, URL classification and resolution, and permissive number coercion.
"""

import base64
import binascii
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_WHITESPACE_PATTERN = re.compile(r'\s+')
_INT_PREFIX_PATTERN = re.compile(r'\s*[+-]?\d+')


def decode_base64(text: Optional[str]) -> bytes:
    """
    Decode base64 text to bytes.

    All whitespace is removed first (inline manifest payloads are usually
    wrapped and indented) and missing padding is repaired.

    Args:
        text: Base64 encoded text, may be None

    Returns:
        Decoded bytes, or b"" if the text is empty or malformed

    Example:
        >>> decode_base64("  aGVs\\n  bG8= ")
        b'hello'
    """
    if not text:
        return b""

    content = _WHITESPACE_PATTERN.sub('', text)
    if not content:
        return b""

    content += '=' * (-len(content) % 4)
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Invalid base64 content: {str(e)}")
        return b""


def is_absolute_url(url: str) -> bool:
    """Check if a URL carries a scheme (contains ``://``)."""
    return '://' in url


def _has_scheme(url: str, scheme: str) -> bool:
    return bool(url) and url[:len(scheme)].lower() == scheme


def has_http_scheme(url: str) -> bool:
    """
    Check if a URL starts with ``http`` (case-insensitive).

    Covers both http and https.

    Example:
        >>> has_http_scheme("HTTPS://example.com/live.f4m")
        True
    """
    return _has_scheme(url, 'http')


def has_rtmfp_scheme(url: str) -> bool:
    """Check if a URL starts with ``rtmfp`` (case-insensitive)."""
    return _has_scheme(url, 'rtmfp')


def sanitize_base_url(url: str) -> str:
    """
    Derive a base URL from a manifest URL.

    Strips the query and fragment, then truncates at the last ``/``.

    Args:
        url: URL of the manifest document

    Returns:
        Base URL without trailing slash

    Example:
        >>> sanitize_base_url("http://example.com/vod/movie.f4m?token=abc#t=10")
        'http://example.com/vod'
    """
    base_url = url.split('?', 1)[0]
    base_url = base_url.split('#', 1)[0]
    if '/' not in base_url:
        return base_url
    return base_url[:base_url.rfind('/')]


def resolve_url(url: str, base_url: str) -> str:
    """
    Resolve a manifest URL against the manifest base URL.

    Relative URLs (no ``://``) are prefixed with ``base_url + "/"``.
    Absolute URLs are returned unchanged.
    """
    if is_absolute_url(url):
        return url
    return f"{base_url}/{url}"


def to_int(text: Optional[str]) -> int:
    """
    Convert text to int, returning 0 when it does not start with a number.

    Reads the leading integer and ignores the rest ("360.0" and "360px"
    both give 360).
    """
    if text is None:
        return 0
    match = _INT_PREFIX_PATTERN.match(text)
    if not match:
        if text.strip():
            logger.debug(f"Not an int: {text!r}")
        return 0
    return int(match.group(0))


def to_float(text: Optional[str]) -> float:
    """Convert text to float, returning 0.0 when it is empty or not a number."""
    if text is None:
        return 0.0
    text = text.strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        logger.debug(f"Not a number: {text!r}")
        return 0.0
