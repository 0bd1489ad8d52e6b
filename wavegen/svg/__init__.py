"""
SVG output.

Serializes layer outlines to path data, lays out gradient stops, and
assembles the final ``<svg>`` document.
"""

from wavegen.svg.gradient import (
    GradientStop,
    distribute_gradient_stops,
    format_gradient_stops,
    gradient_endpoints,
)
from wavegen.svg.path_serializer import (
    PathError,
    PathSerializer,
    format_number,
    generate_path,
    serialize_path,
)
from wavegen.svg.renderer import OPACITY_TABLE, SVG_NS, SvgImage, Wave, layer_opacities

__all__ = [
    "GradientStop",
    "OPACITY_TABLE",
    "PathError",
    "PathSerializer",
    "SVG_NS",
    "SvgImage",
    "Wave",
    "distribute_gradient_stops",
    "format_gradient_stops",
    "format_number",
    "generate_path",
    "gradient_endpoints",
    "layer_opacities",
    "serialize_path",
]
