"""
Shared types for the uniform hex tessellation generator.
Separated to avoid circular imports between modules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from core.tiling import Tiling

# (i, j) -> True selects a triangulated rosette, False a whole hexagon
ClassificationPredicate = Callable[[int, int], bool]


class CellMotif(Enum):
    """The two local motifs a lattice cell can hold."""
    HEXAGON = "hexagon"   # One regular hexagon
    ROSETTE = "rosette"   # Six triangles around a centre vertex

    @classmethod
    def from_predicate(cls, value: bool) -> "CellMotif":
        return cls.ROSETTE if value else cls.HEXAGON


class ValidationError:
    """Represents a validation error with severity and description."""
    def __init__(self, severity: str, message: str, location: Optional[Tuple] = None):
        self.severity = severity  # "error", "warning", "info"
        self.message = message
        self.location = location

    def __str__(self):
        loc_str = f" at {self.location}" if self.location is not None else ""
        return f"{self.severity.upper()}: {self.message}{loc_str}"

    def __repr__(self):
        return f"ValidationError({self.severity!r}, {self.message!r}, {self.location!r})"


class GenerationFailure(Exception):
    """A lattice build that could not produce a valid tiling."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation call: a tiling or a diagnostic, never both.

    Failures are ordinary values; use unwrap() to turn one into an exception.
    """
    tiling: Optional["Tiling"] = None
    error: Optional[str] = None

    # Tiling is unhashable, so results are too
    __hash__ = None

    def __post_init__(self):
        if (self.tiling is None) == (self.error is None):
            raise ValueError("GenerationResult needs exactly one of tiling or error")

    @classmethod
    def success(cls, tiling: "Tiling") -> "GenerationResult":
        return cls(tiling=tiling)

    @classmethod
    def failure(cls, message: str) -> "GenerationResult":
        return cls(error=message)

    @property
    def is_success(self) -> bool:
        return self.tiling is not None

    def unwrap(self) -> "Tiling":
        """Return the tiling, or raise GenerationFailure with the diagnostic."""
        if self.tiling is None:
            raise GenerationFailure(self.error)
        return self.tiling

    def __str__(self):
        if self.is_success:
            return f"Success({self.tiling})"
        return f"Failure({self.error})"
