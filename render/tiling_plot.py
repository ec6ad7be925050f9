# render/tiling_plot.py
"""
Matplotlib renderer for generated tilings.

Draws every polygon of a Tiling as a patch, colouring hexagons and triangles
differently, and optionally labels interior vertices with their vertex
configuration.
"""

from typing import Dict, Optional

import matplotlib.patches as patches

from core.tiling import Tiling


class TilingRenderer:
    """
    Render a Tiling on a matplotlib axis.
    Colours are looked up by polygon size; unknown sizes use `other_color`.
    """

    def __init__(self, hexagon_color: str = "#F6D186", triangle_color: str = "#94C7E8",
                 other_color: str = "#DDDDDD", edge_color: str = "black",
                 linewidth: float = 0.8, padding: float = 0.5):
        """
        Initialize the renderer.

        Args:
            hexagon_color: Face colour of hexagons
            triangle_color: Face colour of triangles
            other_color: Face colour of any other polygon
            edge_color: Outline colour
            linewidth: Outline width in points
            padding: Margin around the tiling in tiling units
        """
        if linewidth < 0 or padding < 0:
            raise ValueError(f"linewidth and padding must be non-negative: {linewidth}, {padding}")
        self.colors: Dict[int, str] = {6: hexagon_color, 3: triangle_color}
        self.other_color = other_color
        self.edge_color = edge_color
        self.linewidth = float(linewidth)
        self.pad = float(padding)

    def _draw_polygon(self, ax, tiling: Tiling, idx: int):
        points = tiling.polygon_points(idx)
        poly = patches.Polygon(
            points, closed=True,
            facecolor=self.colors.get(len(points), self.other_color),
            edgecolor=self.edge_color,
            linewidth=self.linewidth
        )
        ax.add_patch(poly)

    def _label_configurations(self, ax, tiling: Tiling, fontsize: float):
        for v in tiling.interior_vertices:
            x, y = tiling.vertices[v]
            ax.text(x, y, tiling.vertex_configuration(v),
                    ha='center', va='center', fontsize=fontsize, color='black')

    def render(self, tiling: Tiling, ax=None, *, show_configurations: bool = False,
               title: Optional[str] = None, fontsize: float = 5) -> object:
        """
        Render a complete tiling.

        Args:
            tiling: Tiling to draw
            ax: Optional matplotlib axis (creates new figure if None)
            show_configurations: Write each interior vertex's configuration on it
            title: Optional axis title

        Returns:
            Matplotlib axis object
        """
        if ax is None:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(10, 8))

        for idx in range(len(tiling.polygons)):
            self._draw_polygon(ax, tiling, idx)

        if show_configurations:
            self._label_configurations(ax, tiling, fontsize)

        min_x, min_y, max_x, max_y = tiling.bounding_box()
        ax.set_aspect('equal')
        ax.set_xlim(min_x - self.pad, max_x + self.pad)
        ax.set_ylim(min_y - self.pad, max_y + self.pad)
        ax.axis('off')
        if title:
            ax.set_title(title)

        return ax


# Standalone testing
if __name__ == "__main__":
    import matplotlib.pyplot as plt
    from core.variants import VARIANTS

    fig, axes = plt.subplots(2, 4, figsize=(16, 8))
    for ax, variant in zip(axes.flat, VARIANTS.values()):
        result = variant.build(10, 10)
        if result.is_success:
            TilingRenderer().render(result.tiling, ax, title=variant.signature)
        else:
            ax.set_title(result.error)
    for ax in list(axes.flat)[len(VARIANTS):]:
        ax.axis('off')

    plt.tight_layout()
    plt.show()
