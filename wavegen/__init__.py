"""wavegen: procedural layered-wave SVG generator.

Generates decorative wave images: stacked horizontal layers, each a
closed region under a smooth cubic spline through jittered sample points.

Architecture layers (strict one-way dependency):
    scripts/ → svg/ → path_ir/ → engine/ → (nothing)
    configs/ → engine/ ; everything may use utils/

Key invariants:
    - Deterministic: same options (including seed) → identical SVG
    - Each layer has segments + 1 knots spanning x = 0 .. width
    - Geometry engine is pure: no I/O, no global state
    - YAML-only option files
"""

__version__ = "1.0.0"

from wavegen.configs.loader import ConfigError, WaveConfig, load_config, normalize_options
from wavegen.svg.renderer import SvgImage, Wave

__all__ = [
    "ConfigError",
    "SvgImage",
    "Wave",
    "WaveConfig",
    "load_config",
    "normalize_options",
]
