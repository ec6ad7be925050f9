"""
Uniform Hex Tessellations - Utilities Package
Axial lattice coordinate helpers and vertex-configuration notation.
"""
from .axial import cell_center, hex_corners, corner_cells, edge_cells, wrap, wrap_all
from .notation import format_configuration, parse_configuration, parse_signature, format_signature

__all__ = [
    'cell_center', 'hex_corners', 'corner_cells', 'edge_cells', 'wrap', 'wrap_all',
    'format_configuration', 'parse_configuration', 'parse_signature', 'format_signature',
]
