import os
import sys
import pytest

import matplotlib
matplotlib.use("Agg")

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.variants import VARIANTS, get_variant


@pytest.fixture
def build_variant():
    """Returns a function that builds a named variant and unwraps the tiling."""
    def _build(name, width=12, height=12):
        result = get_variant(name).build(width, height)
        assert result.is_success, f"{name} {width}x{height} failed: {result.error}"
        return result.tiling
    return _build


@pytest.fixture(params=list(VARIANTS))
def variant(request):
    """Every registered variant in turn."""
    return VARIANTS[request.param]
