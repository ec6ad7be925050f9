"""
Pattern selector: named uniform tilings over the rectangular hex lattice.

Each variant binds a signature to a fixed classification predicate. The
public functions (two_uniform, two_uniform2, ...) only forward their
dimensions and predicate to the lattice builder and hand back whatever it
returns, failures included.
"""
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from core import predicates
from core.lattice import hexagon_rect
from core.symmetry import UniformityReport, analyze_uniformity
from core.types import ClassificationPredicate, GenerationResult, ValidationError
from utils.notation import parse_signature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TilingVariant:
    """
    Immutable binding of a tiling signature to its predicate.

    Attributes:
        name: Registry key, also the name of the generating function
        signature: Vertex orbits, e.g. "[2×(3⁶);(3⁴.6)]"
        predicate: (i, j) -> True for a rosette, False for a hexagon
        period: Translation period of the predicate along i and j
        transitivity: Tile orbit count t, when known
        edge_types: Edge orbit count e, when known
    """
    name: str
    signature: str
    predicate: ClassificationPredicate
    period: int
    transitivity: Optional[int] = None
    edge_types: Optional[int] = None

    @property
    def configurations(self) -> Counter:
        """Configuration -> number of vertex orbits with it."""
        return parse_signature(self.signature)

    @property
    def uniformity(self) -> int:
        return sum(self.configurations.values())

    @property
    def description(self) -> str:
        text = f"{self.uniformity}-uniform tessellation {self.signature}"
        if self.transitivity is not None and self.edge_types is not None:
            text += f" (t={self.transitivity}, e={self.edge_types})"
        return text

    def build(self, width: int, height: int) -> GenerationResult:
        return hexagon_rect(width, height, self.predicate)

    def analyze(self) -> UniformityReport:
        return analyze_uniformity(self.predicate, self.period)

    def check_uniformity(self) -> List[ValidationError]:
        """
        Compare the predicate's periodic tiling with the registered signature.

        Returns:
            List of ValidationError; empty when everything matches
        """
        report = self.analyze()
        errors: List[ValidationError] = []
        if report.vertex_orbits != self.configurations:
            errors.append(ValidationError(
                "error", f"Vertex orbits {report.signature} differ from {self.signature}", location=self.name))
        if self.transitivity is not None and report.transitivity != self.transitivity:
            errors.append(ValidationError(
                "error", f"Tile orbits t={report.transitivity}, expected {self.transitivity}", location=self.name))
        if self.edge_types is not None and report.edge_types != self.edge_types:
            errors.append(ValidationError(
                "error", f"Edge orbits e={report.edge_types}, expected {self.edge_types}", location=self.name))
        return errors

    def __str__(self):
        return f"{self.name}: {self.description}"


# =============================================================================
# REGISTRY
# =============================================================================

VARIANTS: Dict[str, TilingVariant] = {
    v.name: v for v in (
        TilingVariant("two_uniform", "[(3⁶);(3².6²)]",
                      predicates.two_uniform, period=3, transitivity=2, edge_types=3),
        TilingVariant("two_uniform2", "[(3⁶);(3⁴.6)]",
                      predicates.two_uniform2, period=3, transitivity=3, edge_types=3),
        TilingVariant("three_uniform_one_one_one", "[(3⁶);(3².6²);(6³)]",
                      predicates.three_uniform_one_one_one, period=2, transitivity=2, edge_types=3),
        TilingVariant("three_uniform_one_one_one2", "[(3⁶);(3⁴.6);(3².6²)]",
                      predicates.three_uniform_one_one_one2, period=4, transitivity=5, edge_types=8),
        TilingVariant("three_uniform_one_one_one3", "[(3⁶);(3⁴.6);(3².6²)]",
                      predicates.three_uniform_one_one_one3, period=2, transitivity=3, edge_types=5),
        TilingVariant("three_uniform_two_one", "[2×(3⁶);(3⁴.6)]",
                      predicates.three_uniform_two_one, period=2, transitivity=3, edge_types=4),
        TilingVariant("seven_uniform_four_two_one", "[(3⁶);2×(3².6²);4×(6³)]",
                      predicates.seven_uniform_four_two_one, period=10),
    )
}


def list_variants() -> List[str]:
    """Variant names in definition order."""
    return list(VARIANTS)


def get_variant(name: str) -> TilingVariant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown tiling variant {name!r}; known: {', '.join(VARIANTS)}") from None


def generate(name: str, width: int, height: int) -> GenerationResult:
    """Build the named variant; the builder's result is returned unchanged."""
    result = get_variant(name).build(width, height)
    if not result.is_success:
        logger.debug("Variant %s failed at %sx%s: %s", name, width, height, result.error)
    return result


def generate_many(requests: Sequence[Tuple[str, int, int]],
                  max_workers: Optional[int] = None) -> List[GenerationResult]:
    """
    Run several (name, width, height) requests concurrently.

    Results come back in request order; one failing request never affects
    another.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(generate, name, w, h) for name, w, h in requests]
        return [f.result() for f in futures]


# =============================================================================
# ONE FUNCTION PER TILING
# =============================================================================

def two_uniform(width: int, height: int) -> GenerationResult:
    """2-uniform tessellation [(3⁶);(3².6²)] (t=2, e=3)"""
    return VARIANTS["two_uniform"].build(width, height)


def two_uniform2(width: int, height: int) -> GenerationResult:
    """2-uniform tessellation [(3⁶);(3⁴.6)] (t=3, e=3)"""
    return VARIANTS["two_uniform2"].build(width, height)


def three_uniform_one_one_one(width: int, height: int) -> GenerationResult:
    """3-uniform tessellation [(3⁶);(3².6²);(6³)] (t=2, e=3)"""
    return VARIANTS["three_uniform_one_one_one"].build(width, height)


def three_uniform_one_one_one2(width: int, height: int) -> GenerationResult:
    """3-uniform tessellation [(3⁶);(3⁴.6);(3².6²)] (t=5, e=8)"""
    return VARIANTS["three_uniform_one_one_one2"].build(width, height)


def three_uniform_one_one_one3(width: int, height: int) -> GenerationResult:
    """3-uniform tessellation [(3⁶);(3⁴.6);(3².6²)] (t=3, e=5)"""
    return VARIANTS["three_uniform_one_one_one3"].build(width, height)


def three_uniform_two_one(width: int, height: int) -> GenerationResult:
    """3-uniform tessellation [2×(3⁶);(3⁴.6)] (t=3, e=4)"""
    return VARIANTS["three_uniform_two_one"].build(width, height)


def seven_uniform_four_two_one(width: int, height: int) -> GenerationResult:
    """7-uniform tessellation [(3⁶);2×(3².6²);4×(6³)]"""
    return VARIANTS["seven_uniform_four_two_one"].build(width, height)
