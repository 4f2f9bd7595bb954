"""
Manifest downloader for F4MKit.

The parser never performs network I/O itself: it calls a download function
with the signature ``(user_context, url) -> (body, http_status)``. A status
of 200 with a non-empty body is success, anything else is a failed fetch.
``HttpDownloader`` is the default implementation, built on requests.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

import requests

from .exceptions import ManifestDownloadError

logger = logging.getLogger(__name__)

DownloadFunction = Callable[[Any, str], Tuple[bytes, int]]

DEFAULT_HEADERS = {
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
}

# Status reported when no HTTP response was received at all
NO_RESPONSE_STATUS = -1


class HttpDownloader:
    """
    Download function backed by requests.

    Instances are callables matching ``DownloadFunction``; the user context
    argument is accepted and ignored. Transport errors (connection refused,
    timeouts, TLS failures) are reported as status -1 instead of raising.
    """

    def __init__(
        self,
        timeout: int = 30,
        verify_ssl: bool = True,
        headers: Optional[Dict[str, str]] = None,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize HTTP downloader.

        Args:
            timeout: Request timeout in seconds (default: 30)
            verify_ssl: Whether to verify SSL certificates (default: True)
            headers: Extra request headers, merged over the default Accept headers
            user_agent: Optional User-Agent header value
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.headers = dict(DEFAULT_HEADERS)
        if headers:
            self.headers.update(headers)
        if user_agent:
            self.headers['User-Agent'] = user_agent

    def __call__(self, user_context: Any, url: str) -> Tuple[bytes, int]:
        """
        Download a URL.

        Args:
            user_context: Caller context (unused)
            url: URL to fetch

        Returns:
            Tuple of (body, http_status)
        """
        logger.debug(f"Downloading {url[:100]}")
        try:
            response = requests.get(
                url,
                headers=self.headers,
                timeout=self.timeout,
                verify=self.verify_ssl,
                allow_redirects=True,
            )
        except requests.RequestException as e:
            logger.warning(f"Failed to download {url[:100]}: {str(e)}")
            return b"", NO_RESPONSE_STATUS

        logger.debug(f"Downloaded {len(response.content)} bytes with status {response.status_code}")
        return response.content, response.status_code


def fetch(download: DownloadFunction, user_context: Any, url: str) -> bytes:
    """
    Fetch a document through a download function.

    Args:
        download: Download function
        user_context: Context passed through to the download function
        url: URL to fetch

    Returns:
        Document bytes

    Raises:
        ManifestDownloadError: If the status is not 200 or the body is empty
    """
    content, status = download(user_context, url)
    if status != 200 or not content:
        logger.error(f"Download of {url[:100]} failed with status {status}")
        raise ManifestDownloadError(url, status)
    return content
