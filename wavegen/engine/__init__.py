"""
Geometry engine.

Deterministic jitter sequence, layer point generation, and the cubic
spline control-point solver. Pure computation: no I/O, no global state.
"""

from wavegen.engine.points import CHAIR_STEP, Layer, LayoutMode, Point, generate_layers
from wavegen.engine.sequence import SeedSequence
from wavegen.engine.spline import (
    ControlPoints,
    SplineError,
    compute_control_points,
    tridiagonal_system,
)

__all__ = [
    "CHAIR_STEP",
    "ControlPoints",
    "Layer",
    "LayoutMode",
    "Point",
    "SeedSequence",
    "SplineError",
    "compute_control_points",
    "generate_layers",
    "tridiagonal_system",
]
