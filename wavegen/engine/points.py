"""Layer point generation: jittered sample points per wave layer.

Each layer is a left-to-right run of ``segments + 1`` points over a
regular grid. The two edge points sit exactly on x = 0 and x = width;
every interior point is jittered in both axes by values drawn from a
:class:`~wavegen.engine.sequence.SeedSequence`.

Draw order is part of the output contract: each interior point draws its
y jitter first, then its x jitter. Anchors draw nothing.

Layout modes
------------
``classic``
    Layers stacked one cell apart, flat baselines.
``chairLeft`` / ``chairRight``
    Every baseline is pushed down by ``layers * 75`` and each interior
    point steps a further 75 below the previous one, so layers descend
    like a staircase. The two names currently produce the same geometry.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from wavegen.engine.sequence import SeedSequence

logger = logging.getLogger(__name__)

CHAIR_STEP = 75
"""Vertical step (user units) used by the chair layouts."""


class LayoutMode(str, Enum):
    """How layer baselines are offset."""

    CLASSIC = "classic"
    CHAIR_LEFT = "chairLeft"
    CHAIR_RIGHT = "chairRight"

    @property
    def is_chair(self) -> bool:
        return self is not LayoutMode.CLASSIC


@dataclass(frozen=True, slots=True)
class Point:
    """A 2-D sample point in SVG user units."""

    x: float
    y: float


Layer = tuple[Point, ...]


def generate_layers(
    width: float,
    height: float,
    segments: int,
    layers: int,
    variance: float,
    mode: LayoutMode | str,
    sequence: SeedSequence,
) -> list[Layer]:
    """Generate the sample points of every layer, top layer first.

    Parameters
    ----------
    width, height : float
        Canvas size, both > 0.
    segments : int
        Grid columns per layer (>= 1); each layer gets segments + 1 points.
    layers : int
        Number of layers (>= 1).
    variance : float
        Jitter magnitude multiplier (>= 0); 0 gives a regular grid.
        Each interior x moves at most ``cell_width * variance / 4`` from
        its column, so x is non-decreasing along a layer only while
        variance <= 2. Larger values are accepted and may fold the curve
        back on itself.
    mode : LayoutMode | str
        Baseline offset rule.
    sequence : SeedSequence
        Value stream; advanced by 2 * (segments - 1) per layer.

    Returns
    -------
    list[Layer]
        ``layers`` tuples of ``segments + 1`` points.

    Raises
    ------
    ValueError
        If a size or count is out of range or not finite, or the mode is
        unknown.
    """
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"width and height must be finite, got {width} x {height}")
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be > 0, got {width} x {height}")
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")
    if layers < 1:
        raise ValueError(f"layers must be >= 1, got {layers}")
    if not math.isfinite(variance):
        raise ValueError(f"variance must be finite, got {variance}")
    if variance < 0:
        raise ValueError(f"variance must be >= 0, got {variance}")
    mode = LayoutMode(mode)

    cell_width = width / segments
    cell_height = height / (layers + 1)
    move_limit_x = cell_width * variance * 0.5
    move_limit_y = cell_height * variance

    drawing: list[Layer] = []
    y = move_limit_y
    if mode.is_chair:
        y += layers * CHAIR_STEP

    for layer_index in range(layers):
        level = 0
        points = [Point(0.0, y)]

        x = cell_width
        for _ in range(segments - 1):
            jittered_y = y - move_limit_y / 2 + sequence.next() * move_limit_y + level
            jittered_x = x - move_limit_x / 2 + sequence.next() * move_limit_x
            points.append(Point(jittered_x, jittered_y))

            if mode.is_chair:
                level += CHAIR_STEP
            x += cell_width

        points.append(Point(width, y + level))

        logger.debug(
            "Layer %d: %d points, baseline y=%.3f", layer_index, len(points), y
        )
        drawing.append(tuple(points))
        y += cell_height

    return drawing
