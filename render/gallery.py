"""
HTML gallery of the registered tiling variants, one inline SVG per variant.
"""
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional

from core.variants import VARIANTS, get_variant
from render import html as H
from render.markup import to_string
from render.svg import tiling_to_svg

GALLERY_TITLE = "Uniform tessellations from the hexagonal lattice"


def variant_section(name: str, width: int, height: int) -> List[ET.Element]:
    """Heading, description and drawing (or the failure message) of one variant."""
    variant = get_variant(name)
    section = [H.h2(name), H.p(variant.description)]
    result = variant.build(width, height)
    if result.is_success:
        drawing = tiling_to_svg(result.tiling, title=name, description=variant.description)
        section.append(H.div_boxed(result.tiling.bounding_box(), drawing))
    else:
        section.append(H.p(f"Generation failed: {result.error}"))
    return section


def variant_gallery(names: Optional[Iterable[str]] = None, width: int = 8, height: int = 8) -> ET.Element:
    """Complete `html` document; all registered variants unless names are given."""
    elems: List[ET.Element] = [H.h1(GALLERY_TITLE)]
    for name in (names if names is not None else VARIANTS):
        elems.extend(variant_section(name, width, height))
    return H.html_titled(GALLERY_TITLE, *elems)


def gallery_markup(names: Optional[Iterable[str]] = None, width: int = 8, height: int = 8) -> str:
    return to_string(variant_gallery(names, width, height))
