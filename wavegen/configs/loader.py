"""Configuration loader for the wave generator.

Turns raw options (a YAML file, CLI flags or keyword arguments) into a
frozen :class:`WaveConfig`. Missing or out-of-range values fall back to
the defaults below, the same way the browser version of the generator
treats its options object:

==================  ======================  ==============================
key                 default                 replaced when
==================  ======================  ==============================
width / height      100 / 50                missing or <= 0
layers / segments   2 / 10                  missing or <= 0
variance            0.75                    missing or < 0
seed                0                       missing
mode                classic                 missing
fill / stroke       #000000 / none          missing or empty
stroke_width        0                       missing
gradient            False                   missing
gradient_angle      270                     missing or <= 0
gradient_colors     #F78DA7, #8ED1FC        missing or empty
==================  ======================  ==============================

Usage::

    from wavegen.configs.loader import load_config, normalize_options
    cfg = load_config()                        # packaged wave.yaml
    cfg = load_config("waves/header.yaml")     # explicit path
    cfg = normalize_options({"layers": 3, "seed": 7})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from wavegen.engine.points import LayoutMode
from wavegen.utils.validators import WaveOptionsV1, load_wave_options

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "wave.yaml"

DEFAULT_WIDTH = 100.0
DEFAULT_HEIGHT = 50.0
DEFAULT_LAYERS = 2
DEFAULT_SEGMENTS = 10
DEFAULT_VARIANCE = 0.75
DEFAULT_FILL = "#000000"
DEFAULT_STROKE = "none"
DEFAULT_GRADIENT_ANGLE = 270.0
DEFAULT_GRADIENT_COLORS = ("#F78DA7", "#8ED1FC")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GradientConfig:
    """Linear-gradient fill settings."""

    enabled: bool
    angle_deg: float
    colors: tuple[str, ...]

    @property
    def active(self) -> bool:
        """True when the gradient is on and has enough colors to draw."""
        return self.enabled and len(self.colors) >= 2


@dataclass(frozen=True)
class WaveConfig:
    """Fully-populated options for one wave image."""

    width: float
    height: float
    layers: int
    segments: int
    variance: float
    seed: int
    mode: LayoutMode
    fill: str
    stroke: str
    stroke_width: float
    gradient: GradientConfig

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping using the option-file keys."""
        return {
            "width": self.width,
            "height": self.height,
            "layers": self.layers,
            "segments": self.segments,
            "variance": self.variance,
            "seed": self.seed,
            "mode": self.mode.value,
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke_width": self.stroke_width,
            "gradient": self.gradient.enabled,
            "gradient_angle": self.gradient.angle_deg,
            "gradient_colors": list(self.gradient.colors),
        }


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def _positive(value: float | None, default: float) -> float:
    return value if value is not None and value > 0 else default


def _non_empty(value: str | None, default: str) -> str:
    return value if value else default


def _from_options(opts: WaveOptionsV1) -> WaveConfig:
    colors = tuple(opts.gradient_colors) if opts.gradient_colors else DEFAULT_GRADIENT_COLORS
    variance = opts.variance if opts.variance is not None and opts.variance >= 0 else DEFAULT_VARIANCE

    return WaveConfig(
        width=float(_positive(opts.width, DEFAULT_WIDTH)),
        height=float(_positive(opts.height, DEFAULT_HEIGHT)),
        layers=int(_positive(opts.layers, DEFAULT_LAYERS)),
        segments=int(_positive(opts.segments, DEFAULT_SEGMENTS)),
        variance=float(variance),
        seed=opts.seed or 0,
        mode=LayoutMode(opts.mode or LayoutMode.CLASSIC),
        fill=_non_empty(opts.fill, DEFAULT_FILL),
        stroke=_non_empty(opts.stroke, DEFAULT_STROKE),
        stroke_width=float(opts.stroke_width or 0),
        gradient=GradientConfig(
            enabled=bool(opts.gradient),
            angle_deg=float(_positive(opts.gradient_angle, DEFAULT_GRADIENT_ANGLE)),
            colors=colors,
        ),
    )


def _validate_config(cfg: WaveConfig) -> None:
    """Check the values that have no default to fall back on.

    Raises
    ------
    ConfigError
        If stroke_width is negative.
    """
    if cfg.stroke_width < 0:
        raise ConfigError(f"stroke_width must be >= 0, got {cfg.stroke_width}")


def normalize_options(options: Mapping[str, Any] | None = None, **overrides: Any) -> WaveConfig:
    """Validate raw options and fill in defaults.

    Parameters
    ----------
    options : Mapping[str, Any] | None
        Raw options; snake_case or camelCase keys.
    **overrides
        Applied on top of ``options``; ``None`` values are ignored.

    Returns
    -------
    WaveConfig
        Frozen, fully-populated configuration.

    Raises
    ------
    ConfigError
        If a key is unknown, a value has the wrong type or is not
        finite, or stroke_width is negative.
    """
    merged = dict(options or {})
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        opts = WaveOptionsV1(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid wave options: {e}") from e

    cfg = _from_options(opts)
    _validate_config(cfg)
    return cfg


def load_config(path: str | Path | None = None, **overrides: Any) -> WaveConfig:
    """Load and normalize wave options from YAML.

    Parameters
    ----------
    path : str | Path | None
        Options file. ``None`` loads the default shipped alongside this
        module.
    **overrides
        Option values that take precedence over the file.

    Returns
    -------
    WaveConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If the file is empty or fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading wave options from %s", path)

    try:
        opts = load_wave_options(path)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigError(str(e)) from e

    return normalize_options(opts.model_dump(exclude_none=True), **overrides)
