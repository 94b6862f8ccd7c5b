"""ODS Parser - Reads OpenDocument data styles into value formats.

Inverse of the writer:
- number:*-style elements become ValueFormats
- number:* children become FormatParts in document order
- style:text-properties and style:map are carried along
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple
from xml.etree import ElementTree as ET

from .format import FormatPart, ValueFormat
from .schemas import (
    DigitExpectedError,
    FormatError,
    FormatPartType,
    StyleMap,
    StyleOrigin,
    StyleUse,
    ValueType,
)
from .writer import NS, VALUE_TYPE_ELEMENTS, qname

logger = logging.getLogger(__name__)

_URI_PREFIXES = {uri: prefix for prefix, uri in NS.items()}

# {uri}local element name -> value type
_ELEMENT_VALUE_TYPES: Dict[str, ValueType] = {
    qname(tag): value_type for value_type, tag in VALUE_TYPE_ELEMENTS.items()
}

# Part attributes that must hold a non-negative integer
DIGIT_ATTRIBUTES = frozenset({
    "number:decimal-places",
    "number:min-decimal-places",
    "number:min-integer-digits",
    "number:min-exponent-digits",
    "number:denominator-value",
    "number:max-denominator-value",
    "number:min-denominator-digits",
    "number:min-numerator-digits",
    "number:position",
})


def _split_tag(tag: str) -> Tuple[Optional[str], str]:
    """Split '{uri}local' into (prefix, local). Unknown namespaces give prefix None."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return _URI_PREFIXES.get(uri), local
    return None, tag


def _prefixed(name: str) -> str:
    """'{uri}local' -> 'prefix:local' (unknown namespaces keep the local name)."""
    prefix, local = _split_tag(name)
    return f"{prefix}:{local}" if prefix else local


def _parse_part(el: ET.Element) -> FormatPart:
    prefix, local = _split_tag(el.tag)
    try:
        part_type = FormatPartType(local)
    except ValueError:
        raise FormatError(f"Unknown format part element: {prefix}:{local}")

    part = FormatPart.new(part_type)
    for name, value in el.attrib.items():
        key = _prefixed(name)
        if key in DIGIT_ATTRIBUTES and not value.isdigit():
            raise DigitExpectedError(f"Digit expected for {key}, got {value!r}")
        part.set_attr(key, value)

    if el.text is not None:
        part.set_content(el.text)
    elif part_type == FormatPartType.TEXT:
        part.set_content("")
    return part


def parse_value_format(
    el: ET.Element,
    origin: StyleOrigin = StyleOrigin.STYLES,
    styleuse: StyleUse = StyleUse.DEFAULT,
) -> ValueFormat:
    """Parse one number:*-style element."""
    value_type = _ELEMENT_VALUE_TYPES.get(el.tag)
    if value_type is None:
        raise FormatError(f"Not a data style element: {_prefixed(el.tag)}")

    value_format = ValueFormat(
        name=el.get(qname("style:name"), ""),
        value_type=value_type,
        origin=origin,
        styleuse=styleuse,
    )
    for name, value in el.attrib.items():
        key = _prefixed(name)
        if key != "style:name":
            value_format.attr.set_attr(key, value)

    for child in el:
        prefix, local = _split_tag(child.tag)
        if prefix == "number":
            value_format.push_part(_parse_part(child))
        elif prefix == "style" and local == "text-properties":
            for name, value in child.attrib.items():
                value_format.textstyle.set_attr(_prefixed(name), value)
        elif prefix == "style" and local == "map":
            value_format.push_stylemap(StyleMap(
                condition=child.get(qname("style:condition"), ""),
                applied_style=child.get(qname("style:apply-style-name"), ""),
                base_cell=child.get(qname("style:base-cell-address")),
            ))
        else:
            logger.warning(f"Skipping unsupported element {_prefixed(child.tag)} in {value_format.name}")

    return value_format


def parse_value_formats(xml: bytes, origin: StyleOrigin = StyleOrigin.STYLES) -> List[ValueFormat]:
    """Parse all data styles in office:styles and office:automatic-styles."""
    root = ET.fromstring(xml)

    formats: List[ValueFormat] = []
    containers = (
        ("office:styles", StyleUse.DEFAULT),
        ("office:automatic-styles", StyleUse.AUTOMATIC),
    )
    for container_name, styleuse in containers:
        for container in root.iter(qname(container_name)):
            for el in container:
                if el.tag in _ELEMENT_VALUE_TYPES:
                    formats.append(parse_value_format(el, origin, styleuse))

    logger.debug(f"Parsed {len(formats)} value formats")
    return formats
