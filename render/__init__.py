# render/__init__.py
"""
Uniform Hex Tessellations - Render Package
SVG/HTML markup builders and the matplotlib tiling renderer.
"""
from .svg import tiling_to_svg
from .tiling_plot import TilingRenderer
from .gallery import variant_gallery, gallery_markup
from .markup import to_string

__all__ = ['tiling_to_svg', 'TilingRenderer', 'variant_gallery', 'gallery_markup', 'to_string']
