"""
DVR info refresh for F4MKit.

Live presentations may publish their dvrInfo as a standalone XML document
(the ``url`` attribute of a manifest dvrInfo element) that players poll to
learn how far back into the stream they can seek.
"""

import dataclasses
import logging
from typing import Any, Dict, Optional

from .document import attributes, local_name, parse_xml
from .downloader import DownloadFunction, HttpDownloader, fetch
from .exceptions import DvrInfoError, InvalidURLError
from .models import DvrInfo
from .utils import has_http_scheme, to_int

logger = logging.getLogger(__name__)


def update_dvr_info(
    url: str,
    download: Optional[DownloadFunction] = None,
    user_context: Any = None,
    dvr_info: Optional[DvrInfo] = None,
) -> DvrInfo:
    """
    Fetch a dvrInfo document and read its attributes.

    The document is read without namespace or version handling: the root tag
    must be ``dvrInfo`` and ``id``, ``beginOffset``, ``endOffset``,
    ``windowDuration`` and ``offline`` are read off the root element.

    Args:
        url: http(s) URL of the dvrInfo document
        download: Download function (default: HttpDownloader)
        user_context: Opaque value handed to the download function
        dvr_info: Existing DvrInfo to update; attributes missing from the
            document keep their current value

    Returns:
        New DvrInfo with the refreshed values

    Raises:
        InvalidURLError: If the URL is empty or not http(s)
        ManifestDownloadError: If the download fails
        ManifestXMLError: If the document is not well-formed XML
        DvrInfoError: If the root element is not dvrInfo

    Example:
        >>> media = manifest.medias[0]
        >>> media.dvr_info = update_dvr_info(media.dvr_info.url, dvr_info=media.dvr_info)
    """
    if not url or not has_http_scheme(url):
        logger.error(f"Unable to download dvrInfo from {url[:100] if url else 'N/A'}")
        raise InvalidURLError(f"dvrInfo URL must use an http(s) scheme: {url}")

    if download is None:
        download = HttpDownloader()

    content = fetch(download, user_context, url)
    root = parse_xml(content)

    if local_name(root) != "dvrInfo":
        logger.error(f"Root tag of {url[:100]} is {local_name(root)}, not dvrInfo")
        raise DvrInfoError(f"Root element is not dvrInfo: {root.tag}")

    updates: Dict[str, Any] = {}
    for name, value in attributes(root):
        if name == "id":
            updates["id"] = value
        elif name == "beginOffset":
            updates["begin_offset"] = to_int(value)
        elif name == "endOffset":
            updates["end_offset"] = to_int(value)
        elif name == "windowDuration":
            updates["window_duration"] = to_int(value)
        elif name == "offline":
            updates["offline"] = True
        else:
            logger.debug(f"Ignoring dvrInfo attribute {name}")

    logger.info(f"Updated dvrInfo from {url[:100]}: {updates}")
    return dataclasses.replace(dvr_info or DvrInfo(), **updates)
