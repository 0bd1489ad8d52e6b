"""Schema validation for wave option files.

Option files are YAML mappings validated with pydantic before they reach
the config loader. The schema checks *types and vocabulary* only: values
such as ``width: 0`` or ``gradient_angle: -10`` are legal here and are
replaced by defaults during normalization (see
:func:`wavegen.configs.loader.normalize_options`).

Both snake_case keys and the camelCase names used by the browser version
of the generator are accepted (``stroke_width`` / ``strokeW``,
``gradient_colors`` / ``gradientColors``, ``width`` / ``w`` ...).
Unknown keys are rejected so typos fail fast.

Usage:
    from wavegen.utils import validators
    options = validators.load_wave_options("waves/header.yaml")
"""

from pathlib import Path
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# Characters that would break out of a single-quoted XML attribute
MARKUP_CHARS = ("'", "<", "&")


# ============================================================================
# WAVE OPTIONS V1
# ============================================================================

class WaveOptionsV1(BaseModel):
    """Raw wave options (all optional, defaults applied later)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, allow_inf_nan=False)

    width: Optional[float] = Field(None, alias="w", description="Canvas width (user units)")
    height: Optional[float] = Field(None, alias="h", description="Canvas height (user units)")
    layers: Optional[int] = Field(None, description="Number of wave layers")
    segments: Optional[int] = Field(None, description="Grid columns per layer")
    variance: Optional[float] = Field(None, description="Jitter multiplier")
    seed: Optional[int] = Field(None, description="Starting seed of the jitter sequence")
    mode: Optional[Literal["classic", "chairLeft", "chairRight"]] = Field(
        None, description="Layout mode"
    )
    fill: Optional[str] = Field(None, description="Fill color")
    stroke: Optional[str] = Field(None, description="Stroke color")
    stroke_width: Optional[float] = Field(None, alias="strokeW", description="Stroke width")
    gradient: Optional[bool] = Field(None, description="Fill layers with a linear gradient")
    gradient_angle: Optional[float] = Field(
        None, alias="gradientAngle", description="Gradient angle in degrees"
    )
    gradient_colors: Optional[List[str]] = Field(
        None, alias="gradientColors", description="Gradient colors, in order"
    )

    @field_validator("gradient_colors")
    @classmethod
    def validate_colors(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None:
            for i, color in enumerate(v):
                if not color.strip():
                    raise ValueError(f"gradient color {i} is empty")
                if any(ch in color for ch in MARKUP_CHARS):
                    raise ValueError(f"gradient color {i} contains markup characters: {color!r}")
        return v

    @field_validator("fill", "stroke")
    @classmethod
    def validate_paint(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and any(ch in v for ch in MARKUP_CHARS):
            raise ValueError(f"Paint value contains markup characters: {v!r}")
        return v


# ============================================================================
# PUBLIC API
# ============================================================================

def load_wave_options(path: Union[str, Path]) -> WaveOptionsV1:
    """Load and validate wave options from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to an options file

    Returns
    -------
    WaveOptionsV1
        Validated (not yet defaulted) options

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If the file is empty, not a mapping, or fails validation
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Wave options not found: {path}")

    data = fs.load_yaml(path)
    if data is None:
        raise ValueError(f"Empty wave options file: {path}")
    if not isinstance(data, dict):
        raise ValueError(
            f"Wave options at {path} must be a mapping, got {type(data).__name__}"
        )

    try:
        return WaveOptionsV1(**data)
    except ValidationError as e:
        raise ValueError(f"Wave options validation failed at {path}: {e}") from e
