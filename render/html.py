"""
HTML element builders for simple documents embedding rendered tilings.
"""
import xml.etree.ElementTree as ET

from render.markup import Box, element, enlarge, title as title_element, with_style

# scale multiplier for div width
HTML_SCALE = 50


def html(*elems: ET.Element) -> ET.Element:
    """`html` element"""
    return element("html", *elems)


def head(*elems: ET.Element) -> ET.Element:
    """`head` element"""
    return element("head", *elems)


def body(*elems: ET.Element) -> ET.Element:
    """`body` element"""
    return element("body", *elems)


def html_titled(title: str, *elems: ET.Element) -> ET.Element:
    """
    `html` element with `head` and `body` children

    Args:
        title: given to `head`
        elems: placed in `body`
    """
    return html(head(title_element(title)), body(*elems))


def div(*elems: ET.Element) -> ET.Element:
    """`div` element"""
    return element("div", *elems)


def boxed_width(box: Box) -> int:
    """Pixel width of the box enlarged by half a unit on each side."""
    min_x, _, max_x, _ = enlarge(box)
    return int(max_x - min_x) * HTML_SCALE


def div_boxed(box: Box, *elems: ET.Element) -> ET.Element:
    """
    styled `div` element with width to fit a given box

    Args:
        box: (min_x, min_y, max_x, max_y) area to fit
        elems: placed in `div`
    """
    return with_style(div(*elems), width=f"{boxed_width(box)}px")


def h1(s: str) -> ET.Element:
    return element("h1", text=s)


def h2(s: str) -> ET.Element:
    return element("h2", text=s)


def h3(s: str) -> ET.Element:
    return element("h3", text=s)


def p(s: str) -> ET.Element:
    return element("p", text=s)
