"""Cubic spline control points through a run of knots.

Given knots K[0..n], solves for the two Bézier control scalars of each of
the n segments so the piecewise cubic passes through every knot with
matched slope and curvature at the interior knots. One axis at a time:
callers solve x and y separately and recombine index-wise.

The first-control values p1 satisfy a tridiagonal system::

    row 0         : 2·p1[0] +   p1[1]               = K[0] + 2·K[1]
    row i (1..n-2): p1[i-1] + 4·p1[i] +   p1[i+1]   = 4·K[i] + 2·K[i+1]
    row n-1       : 2·p1[n-2] + 7·p1[n-1]           = 8·K[n-1] + K[n]

solved with the Thomas algorithm. The second-control values follow::

    p2[i]   = 2·K[i+1] - p1[i+1]      (i < n-1)
    p2[n-1] = (K[n] + p1[n-1]) / 2

With a single segment (n = 1) the last row replaces row 0, giving
7·p1[0] = 8·K[0] + K[1].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class SplineError(ValueError):
    """Raised when the knot sequence cannot define a spline."""

    pass


@dataclass(frozen=True, slots=True)
class ControlPoints:
    """First and second control scalars, one pair per segment."""

    p1: tuple[float, ...]
    p2: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.p1)


def tridiagonal_system(
    knots: Sequence[float],
) -> tuple[list[float], list[float], list[float], list[float]]:
    """Build the (a, b, c, r) coefficient rows for the p1 system.

    Raises
    ------
    SplineError
        If fewer than 2 knots are given.
    """
    n = len(knots) - 1
    if n < 1:
        raise SplineError(f"At least 2 knots are required, got {len(knots)}")

    a = [0.0] * n
    b = [0.0] * n
    c = [0.0] * n
    r = [0.0] * n

    a[0] = 0
    b[0] = 2
    c[0] = 1
    r[0] = knots[0] + 2 * knots[1]

    for i in range(1, n - 1):
        a[i] = 1
        b[i] = 4
        c[i] = 1
        r[i] = 4 * knots[i] + 2 * knots[i + 1]

    a[n - 1] = 2
    b[n - 1] = 7
    c[n - 1] = 0
    r[n - 1] = 8 * knots[n - 1] + knots[n]

    return a, b, c, r


def compute_control_points(knots: Sequence[float]) -> ControlPoints:
    """Solve the control scalars of a cubic spline through ``knots``.

    Parameters
    ----------
    knots : Sequence[float]
        Values the curve must pass through, at least 2.

    Returns
    -------
    ControlPoints
        ``p1`` and ``p2`` of length ``len(knots) - 1``.

    Raises
    ------
    SplineError
        If fewer than 2 knots are given.
    """
    a, b, c, r = tridiagonal_system(knots)
    n = len(knots) - 1

    # Forward elimination
    for i in range(1, n):
        m = a[i] / b[i - 1]
        b[i] = b[i] - m * c[i - 1]
        r[i] = r[i] - m * r[i - 1]

    # Back substitution
    p1 = [0.0] * n
    p1[n - 1] = r[n - 1] / b[n - 1]
    for i in range(n - 2, -1, -1):
        p1[i] = (r[i] - c[i] * p1[i + 1]) / b[i]

    p2 = [0.0] * n
    for i in range(n - 1):
        p2[i] = 2 * knots[i + 1] - p1[i + 1]
    p2[n - 1] = 0.5 * (knots[n] + p1[n - 1])

    return ControlPoints(p1=tuple(p1), p2=tuple(p2))
