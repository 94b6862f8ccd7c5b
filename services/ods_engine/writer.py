"""ODS Writer - Serializes value formats to OpenDocument data styles.

Each ValueFormat becomes one number:*-style element:
1. The element name follows the value type
2. Format attributes are copied verbatim from the attribute map
3. Every part becomes a number:* child, in part order
4. Text properties and style maps are written as style:* children
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List
from xml.etree import ElementTree as ET

from .format import ValueFormat
from .schemas import StyleOrigin, StyleUse, ValueType

logger = logging.getLogger(__name__)


# =============================================================================
# NAMESPACES
# =============================================================================

NS = {
    "office": "urn:oasis:names:tc:opendocument:xmlns:office:1.0",
    "style": "urn:oasis:names:tc:opendocument:xmlns:style:1.0",
    "number": "urn:oasis:names:tc:opendocument:xmlns:datastyle:1.0",
    "fo": "urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0",
    "text": "urn:oasis:names:tc:opendocument:xmlns:text:1.0",
    "table": "urn:oasis:names:tc:opendocument:xmlns:table:1.0",
    "svg": "urn:oasis:names:tc:opendocument:xmlns:svg-compatible:1.0",
}

for prefix, uri in NS.items():
    ET.register_namespace(prefix, uri)

ODF_VERSION = "1.3"

# Value type -> data style element
VALUE_TYPE_ELEMENTS: Dict[ValueType, str] = {
    ValueType.BOOLEAN: "number:boolean-style",
    ValueType.NUMBER: "number:number-style",
    ValueType.PERCENTAGE: "number:percentage-style",
    ValueType.CURRENCY: "number:currency-style",
    ValueType.TEXT: "number:text-style",
    ValueType.DATETIME: "number:date-style",
    ValueType.TIME_DURATION: "number:time-style",
}


def qname(name: str) -> str:
    """Convert a prefixed name like 'number:day' to ElementTree's {uri}local form."""
    prefix, sep, local = name.partition(":")
    if not sep:
        return name
    uri = NS.get(prefix)
    if uri is None:
        logger.warning(f"Unknown namespace prefix in {name!r}, writing it unqualified")
        return local
    return f"{{{uri}}}{local}"


# =============================================================================
# SERIALIZATION
# =============================================================================

def value_format_to_element(value_format: ValueFormat) -> ET.Element:
    """Build the number:*-style element for one value format."""
    el = ET.Element(qname(VALUE_TYPE_ELEMENTS[value_format.value_type]))
    el.set(qname("style:name"), value_format.name)
    for key, value in value_format.attr.items():
        el.set(qname(key), value)

    # style:text-properties comes first
    if len(value_format.textstyle) > 0:
        text_el = ET.SubElement(el, qname("style:text-properties"))
        for key, value in value_format.textstyle.items():
            text_el.set(qname(key), value)

    for part in value_format.parts:
        part_el = ET.SubElement(el, qname(f"number:{part.part_type.value}"))
        for key, value in part.attr.items():
            part_el.set(qname(key), value)
        if part.content is not None:
            part_el.text = part.content

    # style:map comes last
    for stylemap in value_format.stylemaps or []:
        map_el = ET.SubElement(el, qname("style:map"))
        map_el.set(qname("style:condition"), stylemap.condition)
        map_el.set(qname("style:apply-style-name"), stylemap.applied_style)
        if stylemap.base_cell:
            map_el.set(qname("style:base-cell-address"), stylemap.base_cell)

    return el


def value_format_to_xml(value_format: ValueFormat) -> str:
    """Serialize a single value format to an XML string."""
    return ET.tostring(value_format_to_element(value_format), encoding="unicode")


def write_value_formats(
    formats: Iterable[ValueFormat],
    origin: StyleOrigin = StyleOrigin.STYLES,
) -> bytes:
    """Write the value formats of one origin as an office:document-styles tree.

    Automatic formats go to office:automatic-styles, all others to
    office:styles. Formats of the other origin are left out.
    """
    root = ET.Element(qname("office:document-styles"))
    root.set(qname("office:version"), ODF_VERSION)
    styles_el = ET.SubElement(root, qname("office:styles"))
    auto_el = ET.SubElement(root, qname("office:automatic-styles"))

    written: List[str] = []
    for value_format in formats:
        if value_format.origin != origin:
            continue
        parent = auto_el if value_format.styleuse == StyleUse.AUTOMATIC else styles_el
        parent.append(value_format_to_element(value_format))
        written.append(value_format.name)

    logger.debug(f"Wrote {len(written)} value formats for origin {origin.value}")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)
