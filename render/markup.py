"""
Shared element helpers for the SVG and HTML builders.
"""
import xml.etree.ElementTree as ET
from typing import Dict, Optional, Tuple

Box = Tuple[float, float, float, float]  # (min_x, min_y, max_x, max_y)

# Margin added on every side of a bounding box before framing it
FRAME_MARGIN = 0.5


def element(tag: str, *children: ET.Element, text: Optional[str] = None,
            attrib: Optional[Dict[str, str]] = None) -> ET.Element:
    """Create an element with string attributes, optional text and children."""
    elem = ET.Element(tag, {k: str(v) for k, v in (attrib or {}).items()})
    if text is not None:
        elem.text = text
    elem.extend(children)
    return elem


def add_attributes(elem: ET.Element, **attrs) -> ET.Element:
    """Set attributes in place; underscores in names become dashes."""
    for name, value in attrs.items():
        elem.set(name.replace("_", "-"), str(value))
    return elem


def format_style(**props) -> str:
    """
    CSS declaration list from keyword arguments.

    Example:
        format_style(fill="red", stroke_width=2) -> "fill:red;stroke-width:2"
    """
    return ";".join(f"{name.replace('_', '-')}:{value}" for name, value in props.items())


def with_style(elem: ET.Element, **props) -> ET.Element:
    """Set the style attribute; no-op when no properties are given."""
    if props:
        elem.set("style", format_style(**props))
    return elem


def title(text: str) -> ET.Element:
    """`title` element"""
    return element("title", text=text)


def enlarge(box: Box, margin: float = FRAME_MARGIN) -> Box:
    min_x, min_y, max_x, max_y = box
    return min_x - margin, min_y - margin, max_x + margin, max_y + margin


def to_string(elem: ET.Element) -> str:
    """Serialise an element tree to markup text."""
    return ET.tostring(elem, encoding="unicode")
