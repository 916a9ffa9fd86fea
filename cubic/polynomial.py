"""Cubic polynomial value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .rootfinding import DEFAULT_TOLERANCE, RootResult, find_root


@dataclass(frozen=True)
class CubicPolynomial:
    """f(x) = a*x^3 + b*x^2 + c*x + d with real coefficients.

    Attributes:
        a: Cubic coefficient
        b: Quadratic coefficient
        c: Linear coefficient
        d: Constant term
    """

    a: float
    b: float
    c: float
    d: float

    @classmethod
    def from_coefficients(cls, values: Sequence[float]) -> CubicPolynomial:
        """Build from ``(a, b, c, d)``, highest power first."""
        values = tuple(values)
        if len(values) != 4:
            raise ValueError(
                f"A cubic needs exactly 4 coefficients, got {len(values)}"
            )
        a, b, c, d = values
        return cls(a, b, c, d)

    @property
    def coefficients(self) -> Tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)

    def evaluate(self, x: float) -> float:
        """Value of the polynomial at ``x``.

        Plain IEEE double arithmetic: overflow gives +/-inf and inf - inf gives
        NaN, never an exception.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            x = np.asarray(x, dtype=float)
            return self.a * x**3 + self.b * x**2 + self.c * x + self.d

    __call__ = evaluate

    def evaluate_many(self, xs: Sequence[float]) -> np.ndarray:
        """Evaluate at multiple points."""
        points = np.asarray(xs, dtype=float)
        return self.evaluate(points)

    def find_root(
        self, start: float, end: float, tolerance: float = DEFAULT_TOLERANCE
    ) -> RootResult | None:
        """Search ``[start, end]`` for a root; see :func:`cubic.rootfinding.find_root`."""
        return find_root(self, start, end, tolerance)
