"""INSPIRE extended capabilities — metadata keys and raw XML embedding.

write_dom_element() replays an externally supplied XML fragment into a
capabilities translator (start / chars / end), so hand-written INSPIRE
metadata can be embedded in a generated capabilities document.
"""

from __future__ import annotations

import enum
import logging
from typing import Protocol
from xml.dom import minidom
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import quoteattr

from ringwise.config import (
    INSPIRE_COMMON_NAMESPACE,
    INSPIRE_DLS_NAMESPACE,
    INSPIRE_VS_NAMESPACE,
    settings,
)

logger = logging.getLogger(__name__)

__all__ = [
    "INSPIRE_COMMON_NAMESPACE",
    "INSPIRE_DLS_NAMESPACE",
    "INSPIRE_VS_NAMESPACE",
    "InspireMetadata",
    "Translator",
    "write_dom_element",
]

_ROOT_TAG = "rootTempDomNode"


class InspireMetadata(str, enum.Enum):
    CREATE_EXTENDED_CAPABILITIES = "inspire.createExtendedCapabilities"
    LANGUAGE = "inspire.language"
    SERVICE_METADATA_URL = "inspire.metadataURL"
    SERVICE_METADATA_TYPE = "inspire.metadataURLType"
    SERVICE_METADATA_HARDCODED_TEXT = "inspire.metadataHardcodedTextService"
    SPATIAL_DATASET_IDENTIFIER_TYPE = "inspire.spatialDatasetIdentifier"

    @property
    def key(self) -> str:
        return self.value


class Translator(Protocol):
    def start(self, name: str) -> None: ...

    def chars(self, text: str) -> None: ...

    def end(self, name: str) -> None: ...


def _parse_fragment(raw_xml: str, namespaces: dict[str, str]) -> minidom.Element | None:
    """Parse raw_xml under a temporary root. Returns the root, or None if malformed."""
    declarations = "".join(f" xmlns:{prefix}={quoteattr(uri)}" for prefix, uri in namespaces.items())
    xml = f"<{_ROOT_TAG}{declarations}>{raw_xml}</{_ROOT_TAG}>"
    try:
        document = minidom.parseString(xml)
    except ExpatError as e:
        logger.warning("Malformed capabilities fragment: %s", e)
        return None
    return document.documentElement


def _child_elements(node: minidom.Node) -> list[minidom.Element]:
    return [child for child in node.childNodes if child.nodeType == child.ELEMENT_NODE]


def _element_text(element: minidom.Element) -> str:
    """All text directly inside element, excluding text within its children."""
    return "".join(
        child.data
        for child in element.childNodes
        if child.nodeType in (child.TEXT_NODE, child.CDATA_SECTION_NODE)
    )


def _write_element(translator: Translator, element: minidom.Element) -> bool:
    # tagName is the name as written, prefix included
    name = element.tagName
    text = _element_text(element)

    translator.start(name)
    if text:
        translator.chars(text)
    for child in _child_elements(element):
        _write_element(translator, child)
    translator.end(name)
    return True


def write_dom_element(
    translator: Translator,
    raw_xml: str,
    namespaces: dict[str, str] | None = None,
) -> bool:
    """Write every top-level element of raw_xml to translator.

    namespaces maps prefix -> URI for prefixes the fragment may use without
    declaring them; defaults to the configured INSPIRE namespaces.

    Returns True if at least one element was written, False for malformed or
    element-free input.
    """
    if namespaces is None:
        namespaces = settings.capabilities_namespaces

    root = _parse_fragment(raw_xml, namespaces)
    if root is None:
        return False

    written = False
    for child in _child_elements(root):
        written |= _write_element(translator, child)
    return written
