"""Search a hard-coded cubic for a root and print the outcome."""

import sys

from cubic.polynomial import CubicPolynomial
from cubic.rootfinding import DEFAULT_TOLERANCE, find_root

EXAMPLE_COEFFICIENTS = (2.0, 4.0, -3.0, -3.0)
EXAMPLE_BRACKET = (-1.0, 0.0)


def main() -> int:
    equation = CubicPolynomial.from_coefficients(EXAMPLE_COEFFICIENTS)
    start, end = EXAMPLE_BRACKET

    root = find_root(equation, start, end, DEFAULT_TOLERANCE)
    if root is None:
        print("No root found")
        return 1

    print(f"found the root {root.value} in {root.iterations} iterations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
