"""
SVG element builders for plane geometry.

Points are (x, y) pairs (tuples or numpy rows) in tiling units; every
coordinate is multiplied by SCALE and rounded to 1/SVG_ACCURACY on output.

@see https://en.wikipedia.org/wiki/Scalable_Vector_Graphics
"""
import math
import xml.etree.ElementTree as ET
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from render.markup import Box, add_attributes, element, enlarge, title as title_element, with_style

Point = Tuple[float, float]

# scale multiplier for all elements
SCALE = 50.0

# round accuracy for scaling
SVG_ACCURACY = 1_000_000.0

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

ANIMATION_DURATION = "5s"

# Arrow head: side length and half-opening angle (radians)
ARROW_LENGTH = 0.1
ARROW_OPENING = 0.5


def rescale(value: float) -> float:
    """Scale and round half up to SVG_ACCURACY."""
    return math.floor(value * SVG_ACCURACY * SCALE + 0.5) / SVG_ACCURACY


def scaled(point: Sequence[float]) -> Point:
    return rescale(point[0]), rescale(point[1])


def format_points(points: Iterable[Sequence[float]]) -> str:
    """Space separated "x,y" pairs, scaled."""
    return " ".join(f"{x},{y}" for x, y in map(scaled, points))


def fill(color: str) -> Dict[str, str]:
    """`fill` attribute"""
    return {"fill": color}


def stroke(color: str) -> Dict[str, str]:
    """`stroke` attribute"""
    return {"stroke": color}


def framed_view_box(box: Box) -> str:
    """viewBox value: min corner and size of the box enlarged by half a unit."""
    min_x, min_y, max_x, max_y = enlarge(box)
    x, y = scaled((min_x, min_y))
    width, height = scaled((max_x - min_x, max_y - min_y))
    return f"{x} {y} {width} {height}"


def svg(box: Box, *elems: ET.Element) -> ET.Element:
    """
    `svg` element with `viewBox` to fit a given box

    Args:
        box: (min_x, min_y, max_x, max_y) area to fit
        elems: placed in `svg`
    """
    return element("svg", *elems, attrib={"viewBox": framed_view_box(box), "xmlns": SVG_NAMESPACE})


def metadata(*elems: ET.Element) -> ET.Element:
    """`metadata` element"""
    return element("metadata", *elems)


def desc(text: str) -> ET.Element:
    """`desc` element"""
    return element("desc", text=text)


def group(*elems: ET.Element, title: Optional[str] = None, description: Optional[str] = None) -> ET.Element:
    """
    `g` element with optional title and description placed first

    Args:
        elems: placed in `g`
        title: optional title
        description: optional description
    """
    heading: List[ET.Element] = []
    if title is not None:
        heading.append(title_element(title))
    if description is not None:
        heading.append(desc(description))
    return element("g", *heading, *elems)


def text(point: Sequence[float], s: str) -> ET.Element:
    """`text` element at the given point"""
    x, y = scaled(point)
    return element("text", text=s, attrib={"x": x, "y": y})


def rect(box: Box) -> ET.Element:
    """`rect` element covering the box"""
    min_x, min_y, max_x, max_y = box
    return element("rect", attrib={
        "width": rescale(max_x - min_x),
        "height": rescale(max_y - min_y),
        "x": rescale(min_x),
        "y": rescale(min_y),
    })


def polygon(points: Iterable[Sequence[float]], *elems: ET.Element) -> ET.Element:
    """`polygon` element, optionally wrapping child elements such as `animate`"""
    return element("polygon", *elems, attrib={"points": format_points(points)})


def polyline(points: Iterable[Sequence[float]], *elems: ET.Element) -> ET.Element:
    """`polyline` element, optionally wrapping child elements such as `animate`"""
    return element("polyline", *elems, attrib={"points": format_points(points)})


def line(point1: Sequence[float], point2: Sequence[float]) -> ET.Element:
    """`line` element between two endpoints"""
    x1, y1 = scaled(point1)
    x2, y2 = scaled(point2)
    return element("line", attrib={"x1": x1, "y1": y1, "x2": x2, "y2": y2})


def circle(center: Sequence[float], radius: float) -> ET.Element:
    """`circle` element"""
    cx, cy = scaled(center)
    return element("circle", attrib={"cx": cx, "cy": cy, "r": rescale(radius)})


def animate(**attrs: str) -> ET.Element:
    """`animate` element with attributes"""
    return add_attributes(element("animate"), **attrs)


def _points_animation(start: Iterable[Sequence[float]],
                      end: Iterable[Sequence[float]],
                      frames: Iterable[Iterable[Sequence[float]]]) -> ET.Element:
    return element("animate", attrib={
        "attributeName": "points",
        "dur": ANIMATION_DURATION,
        "from": format_points(start),
        "to": format_points(end),
        "values": ";".join(format_points(f) for f in frames),
    })


def animated_polygon(points_series: Sequence[Sequence[Sequence[float]]]) -> ET.Element:
    """
    Polygon morphing through a series of point lists, resting on the last one.

    Raises:
        ValueError: If fewer than two frames are given
    """
    if len(points_series) < 2:
        raise ValueError("An animated polygon needs at least two frames")
    animation = _points_animation(points_series[0], points_series[-1], points_series[1:-1])
    return polygon(points_series[-1], animation)


def animated_polyline(points: Sequence[Sequence[float]]) -> ET.Element:
    """
    Polyline developing sequentially from start to end.

    Raises:
        ValueError: If fewer than two points are given
    """
    if len(points) < 2:
        raise ValueError("An animated polyline needs at least two points")
    prefixes = [list(points[:k]) for k in range(1, len(points) + 1)]
    animation = _points_animation(prefixes[0], prefixes[-1], prefixes[1:-1])
    return polyline(points, animation)


def arrow_head_points(tip: Sequence[float], origin: Sequence[float]) -> List[Point]:
    """Triangle with its apex on tip, opening back towards origin."""
    angle = math.atan2(origin[1] - tip[1], origin[0] - tip[0]) % (2 * math.pi)

    def vertex(upper: bool) -> Point:
        variation = ARROW_OPENING if upper else -ARROW_OPENING
        return (tip[0] + ARROW_LENGTH * math.cos(angle + variation),
                tip[1] + ARROW_LENGTH * math.sin(angle + variation))

    return [(tip[0], tip[1]), vertex(True), vertex(False)]


def arrow_head(tip: Sequence[float], origin: Sequence[float], *elems: ET.Element) -> ET.Element:
    """
    Arrow head as a triangle

    Args:
        tip: endpoint carrying the arrow
        origin: other endpoint of the segment
    """
    return polygon(arrow_head_points(tip, origin), *elems)


def animated_arrow_head(points: Sequence[Sequence[float]]) -> ET.Element:
    """Arrow head travelling along the points, resting on the final segment."""
    if len(points) < 2:
        raise ValueError("An animated arrow head needs at least two points")
    listed = [points[0]] + list(points)
    segments = list(zip(listed, listed[1:]))  # (origin, tip)
    frames = [arrow_head_points(tip, origin) for origin, tip in segments]
    animation = _points_animation(frames[0], frames[-1], frames[1:-1])
    origin, tip = segments[-1]
    return arrow_head(tip, origin, animation)


def animated_polyline_arrow(points: Sequence[Sequence[float]],
                            arrow_head_style: Optional[Dict[str, str]] = None,
                            polyline_style: Optional[Dict[str, str]] = None) -> ET.Element:
    """
    Animated polyline with an arrow head following its growing end

    Args:
        points: spatial coordinates of the polyline
        arrow_head_style: style properties for the arrow head
        polyline_style: style properties for the polyline
    """
    return group(
        with_style(animated_polyline(points), **(polyline_style or {})),
        with_style(animated_arrow_head(points), **(arrow_head_style or {})),
    )


def tiling_to_svg(tiling, hexagon_fill: str = "#f6d186", triangle_fill: str = "#94c7e8",
                  stroke_color: str = "black", title: Optional[str] = None,
                  description: Optional[str] = None) -> ET.Element:
    """
    Full `svg` document for a Tiling: hexagons and triangles in separate groups.

    Args:
        tiling: core.tiling.Tiling to draw
        title, description: optional text for an outer group
    """
    hexagons = group(*(
        add_attributes(polygon(tiling.polygon_points(idx)), **fill(hexagon_fill), **stroke(stroke_color))
        for idx in tiling.hexagons
    ), title="hexagons")
    triangles = group(*(
        add_attributes(polygon(tiling.polygon_points(idx)), **fill(triangle_fill), **stroke(stroke_color))
        for idx in tiling.triangles
    ), title="triangles")
    return svg(tiling.bounding_box(), group(hexagons, triangles, title=title, description=description))
