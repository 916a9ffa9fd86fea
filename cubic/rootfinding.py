"""Bracketed root search for cubic polynomials (fixed-direction bisection)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import logging

if TYPE_CHECKING:
    from .polynomial import CubicPolynomial

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-7


@dataclass(frozen=True)
class RootResult:
    value: float
    iterations: int


@dataclass(frozen=True)
class SearchState:
    """Bracket and midpoint evaluation for one iteration of the search.

    Attributes:
        lo: Bracket start when the midpoint was taken
        hi: Bracket end when the midpoint was taken
        iterations: Iterations consumed so far, counting this one
        midpoint: Point evaluated in this iteration
        value: Polynomial value at ``midpoint``
        converged: Whether ``value`` is close enough to zero to stop
    """

    lo: float
    hi: float
    iterations: int
    midpoint: float
    value: float
    converged: bool

    @property
    def width(self) -> float:
        return abs(self.hi - self.lo)


class RootFindingError(RuntimeError):
    """Raised when a root is required but the bracket collapsed without one."""


def iter_search(
    polynomial: CubicPolynomial,
    start: float,
    end: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Iterator[SearchState]:
    """Yield the state of every iteration of the bracketed search.

    The direction flag is taken once from the original ``start``/``end`` and
    kept for the whole search. The midpoint is ``start + |end - start| / 2``,
    which overshoots ``start`` when the bracket is given in descending order.

    The generator stops after yielding a converged state, or without yielding
    anything more once the bracket is narrower than ``tolerance``.
    """
    increasing = polynomial.evaluate(end) > polynomial.evaluate(start)
    iterations = 0

    while True:
        iterations += 1
        if abs(end - start) < tolerance:
            logger.debug(
                "Bracket collapsed at iter %s: [%s, %s] narrower than %s",
                iterations,
                start,
                end,
                tolerance,
            )
            return

        mid = start + abs(end - start) / 2.0
        value = polynomial.evaluate(mid)
        converged = abs(value) < tolerance or value == 0.0
        logger.debug(
            "Bisect iter %s: lo=%s hi=%s mid=%s value=%s", iterations, start, end, mid, value
        )
        yield SearchState(start, end, iterations, mid, value, converged)
        if converged:
            return

        if value < 0.0:
            if increasing:
                start = mid
            else:
                end = mid
        else:
            if increasing:
                end = mid
            else:
                start = mid


def find_root(
    polynomial: CubicPolynomial,
    start: float,
    end: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> RootResult | None:
    """Search ``[start, end]`` for a root of ``polynomial``.

    Parameters
    ----------
    polynomial:
        Cubic to search.
    start, end:
        Initial bracket. Order matters: see :func:`iter_search`.
    tolerance:
        Both the bracket-width threshold and the "close enough to zero"
        threshold for the function value. Not validated.

    Returns
    -------
    RootResult | None
        The midpoint that satisfied the value test and the number of
        iterations consumed, or ``None`` when the bracket collapsed first.
    """
    for state in iter_search(polynomial, start, end, tolerance):
        if state.converged:
            logger.debug("Root %s found in %s iterations", state.midpoint, state.iterations)
            return RootResult(state.midpoint, state.iterations)
    return None


def require_root(
    polynomial: CubicPolynomial,
    start: float,
    end: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> RootResult:
    """Like :func:`find_root` but raise :class:`RootFindingError` when no root is found."""
    result = find_root(polynomial, start, end, tolerance)
    if result is None:
        raise RootFindingError(
            f"No root of {polynomial} found in [{start}, {end}] "
            f"at tolerance {tolerance}"
        )
    return result
