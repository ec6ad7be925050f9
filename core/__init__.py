"""
Uniform Hex Tessellations - Core Package
Lattice builder, tiling model, uniformity analysis, and the named tiling variants.
"""
from .types import CellMotif, GenerationFailure, GenerationResult, ValidationError
from .tiling import Tiling
from .lattice import hexagon_rect
from .symmetry import UniformityReport, analyze_uniformity
from .variants import TilingVariant, VARIANTS, generate, generate_many, get_variant, list_variants

__all__ = [
    'CellMotif', 'GenerationFailure', 'GenerationResult', 'ValidationError',
    'Tiling', 'hexagon_rect', 'UniformityReport', 'analyze_uniformity',
    'TilingVariant', 'VARIANTS', 'generate', 'generate_many', 'get_variant', 'list_variants',
]
