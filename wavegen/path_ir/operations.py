"""Path IR -- the vocabulary between solved curves and SVG path data.

Every path command is an immutable, slotted dataclass. Coordinates are
absolute SVG user units (top-left origin, +Y down). A layer outline is a
list of commands; :mod:`wavegen.svg.path_serializer` turns it into the
``d`` attribute string.

Layer outline
-------------
``build_layer_path`` closes the region under a wave::

    MoveTo(left corner) → LineTo(first knot) → CurveTo × (knots - 1)
    → LineTo(right corner) → LineTo(left corner) → ClosePath
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Sequence

from wavegen.engine.points import Point
from wavegen.engine.spline import compute_control_points

PathCommands = list["PathCommand"]
"""One closed outline, ready for serialization."""


@dataclass(frozen=True, slots=True)
class PathCommand(ABC):
    """Base class for all path commands."""

    pass


@dataclass(frozen=True, slots=True)
class MoveTo(PathCommand):
    """Start a new subpath at ``(x, y)``."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo(PathCommand):
    """Straight segment to ``(x, y)``."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CurveTo(PathCommand):
    """Cubic Bézier segment from the current point to ``(x, y)``.

    Parameters
    ----------
    x1, y1 : float
        First control point.
    x2, y2 : float
        Second control point.
    x, y : float
        End point.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ClosePath(PathCommand):
    """Close the current subpath."""

    pass


def build_layer_path(
    points: Sequence[Point],
    left_corner: Point,
    right_corner: Point,
) -> PathCommands:
    """Build the closed outline of one layer.

    Parameters
    ----------
    points : Sequence[Point]
        Layer knots, left to right, at least 2.
    left_corner, right_corner : Point
        Bottom corners of the canvas the region is closed against.

    Returns
    -------
    PathCommands
        ``len(points) + 4`` commands, starting with ``MoveTo`` and
        ending with ``ClosePath``.

    Raises
    ------
    SplineError
        If fewer than 2 points are given.
    """
    xs = [p.x for p in points]
    ys = [p.y for p in points]

    x_controls = compute_control_points(xs)
    y_controls = compute_control_points(ys)

    commands: PathCommands = [
        MoveTo(left_corner.x, left_corner.y),
        LineTo(xs[0], ys[0]),
    ]
    for i in range(len(xs) - 1):
        commands.append(
            CurveTo(
                x1=x_controls.p1[i],
                y1=y_controls.p1[i],
                x2=x_controls.p2[i],
                y2=y_controls.p2[i],
                x=xs[i + 1],
                y=ys[i + 1],
            )
        )
    commands.append(LineTo(right_corner.x, right_corner.y))
    commands.append(LineTo(left_corner.x, left_corner.y))
    commands.append(ClosePath())

    return commands


def curve_segments(commands: Sequence[PathCommand]) -> list[CurveTo]:
    """Return the cubic segments of an outline, in order."""
    return [cmd for cmd in commands if isinstance(cmd, CurveTo)]
