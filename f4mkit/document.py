"""
Manifest document state and XML adapter for F4MKit.

Wraps an lxml tree of one F4M document (root manifest or stream-level
sub-manifest) together with what identifies its grammar: the F4M namespace,
the format version and the manifest level. The version/level gating rules that
decide which elements and attributes are legal are plain functions of
``(level, major)`` so they can be checked without any I/O.
"""

import enum
import logging
import re
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from lxml import etree

from .exceptions import ManifestNamespaceError, ManifestXMLError
from .utils import decode_base64

logger = logging.getLogger(__name__)

F4M_NAMESPACE_BASE = "http://ns.adobe.com/f4m/"
F4M_PREFIX = "f4m"

# Leading digits of each part, so "3.0.1" reads as 3.0
_VERSION_PATTERN = re.compile(r"\s*(\d+)\.(\d+)")


class ManifestVersion(NamedTuple):
    """F4M format version, ``(major, minor)``."""
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


DEFAULT_VERSION = ManifestVersion(1, 0)


class ManifestLevel(enum.Enum):
    """Level of a manifest document."""
    SINGLE_LEVEL = "single-level"  # SLM, everything in one document
    SET_LEVEL = "set-level"        # MLM document referencing renditions by href
    STREAM_LEVEL = "stream-level"  # MLM document reached through a parent's href


def parse_version(text: Optional[str]) -> Tuple[ManifestVersion, bool]:
    """
    Parse a ``<major>.<minor>`` version string.

    The namespace suffix carries the version for F4M 1.0 and 2.0 ("1.0",
    "2.0"); F4M 3.0 documents carry it in the root ``version`` attribute.

    Args:
        text: Version string

    Returns:
        Tuple of (version, ok). Each part is read up to its first
        non-digit. On missing dot or non-numeric parts the
        version defaults to 1.0 and ok is False.

    Example:
        >>> parse_version("3.0")
        (ManifestVersion(major=3, minor=0), True)
        >>> parse_version("three")
        (ManifestVersion(major=1, minor=0), False)
    """
    match = _VERSION_PATTERN.match(text or "")
    if not match:
        return DEFAULT_VERSION, False
    return ManifestVersion(int(match.group(1)), int(match.group(2))), True


def detect_level(is_sub_manifest: bool, version_major: int, has_href_media: bool) -> ManifestLevel:
    """
    Detect the level of a manifest document.

    Args:
        is_sub_manifest: Document was reached through a set-level manifest href
        version_major: Major format version of the document
        has_href_media: Document contains at least one media with an href

    Returns:
        Detected ManifestLevel
    """
    if is_sub_manifest:
        return ManifestLevel.STREAM_LEVEL
    if version_major < 2:
        # href does not exist before F4M 2.0
        return ManifestLevel.SINGLE_LEVEL
    if has_href_media:
        return ManifestLevel.SET_LEVEL
    return ManifestLevel.SINGLE_LEVEL


def is_set_level(level: ManifestLevel) -> bool:
    return level is ManifestLevel.SET_LEVEL


def is_stream_level(level: ManifestLevel) -> bool:
    """Single-level manifests and multi-level stream-level manifests both describe streams."""
    return level in (ManifestLevel.SINGLE_LEVEL, ManifestLevel.STREAM_LEVEL)


def is_single_level(level: ManifestLevel) -> bool:
    return level is ManifestLevel.SINGLE_LEVEL


def is_multi_level_stream_level(level: ManifestLevel) -> bool:
    return level is ManifestLevel.STREAM_LEVEL


# Element gating

def reads_adaptive_sets(level: ManifestLevel, major: int) -> bool:
    return major >= 3 and not is_multi_level_stream_level(level)


def reads_dvr_infos(level: ManifestLevel, major: int) -> bool:
    # DVR info lives in the set-level manifest of an MLM
    return not is_multi_level_stream_level(level)


def reads_bootstrap_infos(level: ManifestLevel, major: int) -> bool:
    return not is_set_level(level)


def reads_drm_additional_headers(level: ManifestLevel, major: int) -> bool:
    return not is_set_level(level)


def reads_drm_additional_header_sets(level: ManifestLevel, major: int) -> bool:
    return major >= 3 and not is_set_level(level)


def reads_smpte_timecodes(level: ManifestLevel, major: int) -> bool:
    return major >= 3 and not is_set_level(level)


def reads_cue_infos(level: ManifestLevel, major: int) -> bool:
    return major >= 3 and not is_set_level(level)


def reads_best_effort_fetch_infos(level: ManifestLevel, major: int) -> bool:
    return major >= 3 and is_set_level(level)


def reads_profiles(level: ManifestLevel, major: int) -> bool:
    return major >= 2


# Media attribute gating

def reads_media_dvr_info_id(level: ManifestLevel, major: int) -> bool:
    return major == 1


def reads_media_href(level: ManifestLevel, major: int) -> bool:
    return major >= 2


def reads_media_v3_attributes(level: ManifestLevel, major: int) -> bool:
    """audioCodec, videoCodec, cueInfoId, bestEffortFetchInfoId, drmAdditionalHeaderSetId."""
    return major >= 3


def reads_media_set_level_attributes(level: ManifestLevel, major: int) -> bool:
    """bitrate, streamId, width, height, type, alternate, label, lang."""
    return not is_multi_level_stream_level(level)


def reads_media_v1_children(level: ManifestLevel, major: int) -> bool:
    """moov and xmpMetadata children."""
    return major == 1


def is_f4m_namespace(namespace: Optional[str]) -> bool:
    return bool(namespace) and namespace.startswith(F4M_NAMESPACE_BASE)


def parse_xml(content: bytes) -> etree._Element:
    """
    Parse raw document bytes into an lxml element tree.

    Raises:
        ManifestXMLError: If the content is not well-formed XML
    """
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as e:
        raise ManifestXMLError(f"Malformed XML document: {str(e)}") from e
    if root is None:
        raise ManifestXMLError("Empty XML document")
    return root


def local_name(node: etree._Element) -> str:
    return etree.QName(node).localname


def node_text(node: etree._Element) -> str:
    """Element text content with surrounding whitespace stripped."""
    return (node.text or "").strip()


def node_base64(node: etree._Element) -> bytes:
    return decode_base64(node.text)


def attributes(node: etree._Element) -> Iterator[Tuple[str, str]]:
    """
    Enumerate the unqualified attributes of a node in document order.

    Namespace-qualified attributes (``xml:lang`` and the like) are skipped.
    """
    for name, value in node.attrib.items():
        if name.startswith('{'):
            logger.debug(f"Ignoring qualified attribute {name}")
            continue
        yield name, value.strip()


class ManifestDocument:
    """
    State of one F4M document: source URL, XML tree, namespace, version and level.

    Created once per manifest document, root or sub-manifest.
    """

    def __init__(self, url: str, content: bytes, is_sub_manifest: bool = False):
        """
        Parse document bytes and detect namespace, version and level.

        Args:
            url: URL the document was fetched from
            content: Raw document bytes
            is_sub_manifest: Document was reached through a set-level href

        Raises:
            ManifestXMLError: If the content is not well-formed XML
            ManifestNamespaceError: If the root is not an F4M manifest element
        """
        self.url = url
        self.root = parse_xml(content)

        qname = etree.QName(self.root)
        if qname.localname != "manifest" or not is_f4m_namespace(qname.namespace):
            raise ManifestNamespaceError(
                f"Root element {self.root.tag!r} is not a manifest in an F4M namespace"
            )
        self.namespace: str = qname.namespace
        self.namespaces: Dict[str, str] = {F4M_PREFIX: self.namespace}

        self.version = self._detect_version()
        self.level = detect_level(is_sub_manifest, self.version.major, self._has_href_media())

        logger.info(f"Manifest {url[:100]}: F4M {self.version}, {self.level.value}")

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    def _detect_version(self) -> ManifestVersion:
        suffix = self.namespace[len(F4M_NAMESPACE_BASE):]
        version, ok = parse_version(suffix)
        if not ok:
            logger.warning(f"Cannot read version from namespace {self.namespace}, assuming {version}")

        version_attr = self.root.get("version")
        if version_attr:
            attr_version, ok = parse_version(version_attr)
            if ok:
                version = attr_version
            else:
                logger.warning(f"Invalid manifest version attribute {version_attr!r}, keeping {version}")
        return version

    def _has_href_media(self) -> bool:
        # A blank href is no href
        if self.query("media[normalize-space(@href)]"):
            return True
        return self.major >= 3 and bool(self.query("adaptiveSet", "media[normalize-space(@href)]"))

    def query(self, *steps: str) -> List[etree._Element]:
        """
        Select elements below the manifest root in the document namespace.

        Args:
            *steps: Location steps relative to the root element, each one
                qualified with the document namespace (``"media[@href]"``
                selects ``/manifest/media[@href]``)

        Returns:
            Matching elements in document order

        Example:
            >>> doc.query("smpteTimecodes", "smpteTimecode")
        """
        path = "/".join(f"{F4M_PREFIX}:{step}" for step in ("manifest",) + steps)
        return self.root.xpath(f"/{path}", namespaces=self.namespaces)

    def children(self, node: Optional[etree._Element] = None) -> Iterator[etree._Element]:
        """
        Iterate element children of a node (default: the root) that are in an F4M namespace.
        """
        parent = self.root if node is None else node
        for child in parent:
            if not isinstance(child.tag, str):
                continue
            if not is_f4m_namespace(etree.QName(child).namespace):
                logger.debug(f"Ignoring element {child.tag} outside the F4M namespace")
                continue
            yield child
