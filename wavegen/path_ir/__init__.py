"""
Path intermediate representation.

Defines layer outlines as immutable command dataclasses. This vocabulary
is the contract between the spline solver and SVG path serialization.
"""

from wavegen.path_ir.operations import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    PathCommands,
    build_layer_path,
    curve_segments,
)

__all__ = [
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathCommands",
    "build_layer_path",
    "curve_segments",
]
