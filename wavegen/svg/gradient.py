"""Linear-gradient helpers: evenly spaced stops and angle endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from wavegen.svg.path_serializer import format_number


@dataclass(frozen=True, slots=True)
class GradientStop:
    """One color stop; ``offset`` is a percentage."""

    offset: float
    color: str

    def to_svg(self) -> str:
        return f"<stop offset='{format_number(self.offset)}%' stop-color='{self.color}' />"


def distribute_gradient_stops(
    colors: Sequence[str],
    range_from: float,
    range_to: float,
) -> list[GradientStop]:
    """Spread ``colors`` evenly over ``[range_from, range_to]`` percent.

    Stop ``i`` sits at ``range_from + i * step`` with
    ``step = (range_to - range_from) / (len(colors) - 1)``; input order
    is kept. Fewer than 2 colors give no stops.
    """
    if len(colors) < 2:
        return []

    step_size = (range_to - range_from) / (len(colors) - 1)
    return [
        GradientStop(offset=range_from + (i * step_size), color=color)
        for i, color in enumerate(colors)
    ]


def format_gradient_stops(stops: Sequence[GradientStop]) -> str:
    return "".join(stop.to_svg() for stop in stops)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def gradient_endpoints(angle_deg: float) -> tuple[int, int, int, int]:
    """Return ``(x1, y1, x2, y2)`` percentages for a gradient angle.

    The start point is the angle projected onto a centered 100% square,
    the end point its antipode. Values are rounded half-up to whole
    percents.
    """
    angle = angle_deg * (math.pi / 180)
    return (
        _round_half_up(50 + math.sin(angle) * 50),
        _round_half_up(50 + math.cos(angle) * 50),
        _round_half_up(50 + math.sin(angle + math.pi) * 50),
        _round_half_up(50 + math.cos(angle + math.pi) * 50),
    )
