"""Geometric operations on solved wave curves.

Provides:
    - Cubic Bézier evaluation (vectorised over segments and parameters)
    - Sampling a piecewise-cubic spline into a polyline
    - Polyline bounding box

Used by:
    - Renderer: per-layer extents (warns when a layer leaves the canvas)
    - Tests: checking that solved splines pass through their knots and
      that collinear knots yield a straight curve

Coordinates are SVG user units (top-left origin, +Y down).
"""

from typing import Tuple

import numpy as np


def bezier_cubic_eval(
    p1: np.ndarray,
    p2: np.ndarray,
    p3: np.ndarray,
    p4: np.ndarray,
    t: np.ndarray
) -> np.ndarray:
    """Evaluate cubic Bézier curves at parameters t.

    Parameters
    ----------
    p1, p2, p3, p4 : np.ndarray
        Start, two control points and end, shape (..., 2)
    t : np.ndarray
        Parameter values in [0, 1], shape (N,)

    Returns
    -------
    np.ndarray
        Points on curve, shape (..., N, 2)

    Notes
    -----
    B(t) = (1-t)³·p1 + 3(1-t)²t·p2 + 3(1-t)t²·p3 + t³·p4
    """
    t = np.atleast_1d(np.asarray(t, dtype=np.float64))
    p1, p2, p3, p4 = (np.asarray(p, dtype=np.float64)[..., None, :] for p in (p1, p2, p3, p4))
    t = t[:, None]

    one_minus_t = 1.0 - t
    b0 = one_minus_t ** 3
    b1 = 3.0 * (one_minus_t ** 2) * t
    b2 = 3.0 * one_minus_t * (t ** 2)
    b3 = t ** 3

    return b0 * p1 + b1 * p2 + b2 * p3 + b3 * p4


def sample_spline(
    knots: np.ndarray,
    first_controls: np.ndarray,
    second_controls: np.ndarray,
    samples_per_segment: int = 16
) -> np.ndarray:
    """Sample a piecewise-cubic spline into a polyline.

    Parameters
    ----------
    knots : np.ndarray
        Points the curve passes through, shape (N+1, 2)
    first_controls, second_controls : np.ndarray
        Control points of each segment, shape (N, 2)
    samples_per_segment : int
        Evaluations per segment, excluding the shared end point

    Returns
    -------
    np.ndarray
        Polyline vertices, shape (N*samples_per_segment + 1, 2); the
        knots appear exactly at every samples_per_segment-th vertex.

    Raises
    ------
    ValueError
        If shapes disagree or samples_per_segment < 1.
    """
    knots = np.asarray(knots, dtype=np.float64)
    first_controls = np.asarray(first_controls, dtype=np.float64)
    second_controls = np.asarray(second_controls, dtype=np.float64)

    if samples_per_segment < 1:
        raise ValueError(f"samples_per_segment must be >= 1, got {samples_per_segment}")
    n = knots.shape[0] - 1
    if n < 1 or first_controls.shape != (n, 2) or second_controls.shape != (n, 2):
        raise ValueError(
            f"Expected knots (N+1, 2) and controls (N, 2), got {knots.shape}, "
            f"{first_controls.shape}, {second_controls.shape}"
        )

    t = np.arange(samples_per_segment, dtype=np.float64) / samples_per_segment
    segments = bezier_cubic_eval(knots[:-1], first_controls, second_controls, knots[1:], t)

    return np.concatenate([segments.reshape(-1, 2), knots[-1:]], axis=0)


def polyline_bbox(points: np.ndarray) -> Tuple[float, float, float, float]:
    """Compute axis-aligned bounding box of a polyline.

    Returns
    -------
    Tuple[float, float, float, float]
        (xmin, ymin, xmax, ymax); (0, 0, 0, 0) if there are no points.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.shape[0] == 0:
        return (0.0, 0.0, 0.0, 0.0)

    xmin, ymin = points.min(axis=0)
    xmax, ymax = points.max(axis=0)
    return (float(xmin), float(ymin), float(xmax), float(ymax))
