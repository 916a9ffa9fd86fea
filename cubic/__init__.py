"""Real-root search for cubic polynomials within a bracketing interval.

This package provides:
- CubicPolynomial: immutable cubic with scalar and vectorised evaluation
- find_root: fixed-direction bisection over a bracket, returning None when
  no root is isolated
- iter_search: the same search exposed one iteration at a time
"""

from .polynomial import CubicPolynomial
from .rootfinding import (
    DEFAULT_TOLERANCE,
    RootFindingError,
    RootResult,
    SearchState,
    find_root,
    iter_search,
    require_root,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Types
    "CubicPolynomial",
    "RootResult",
    "SearchState",
    # Search
    "find_root",
    "iter_search",
    "require_root",
    "DEFAULT_TOLERANCE",
    # Exceptions
    "RootFindingError",
]
