"""Path serializer -- Path IR commands to SVG path data.

Output uses absolute commands, a single space between commands and a
comma inside each coordinate pair::

    M 0,50 L 0,12.5 C 11.1,10.2 22.4,14.9 33.3,13.7 ... L 100,50 L 0,50 Z

Numbers are printed the way JavaScript's ``Number#toString`` prints them
(``50`` rather than ``50.0``, ``1e-7`` rather than ``1e-07``), so paths
generated here match paths generated by the browser-side version of the
wave generator character for character.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from wavegen.engine.points import Point
from wavegen.path_ir.operations import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    build_layer_path,
)

logger = logging.getLogger(__name__)


class PathError(Exception):
    """Raised when a command list cannot be serialized."""

    pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Format a number with JavaScript ``Number#toString`` rules.

    Integral values print without a fractional part, other values use the
    shortest repr that round-trips. Exponent notation is used only below
    1e-6 and from 1e21 up, written as ``1e-7`` / ``1.5e+21``.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    text = repr(float(value))
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]

    mantissa, _, exp = text.partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    all_digits = int_part + frac_part
    # value == 0.<digits> * 10**point
    point = len(int_part) + (int(exp) if exp else 0)
    digits = all_digits.lstrip("0")
    point -= len(all_digits) - len(digits)
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * (-point) + digits
    else:
        e = point - 1
        e_str = f"e+{e}" if e >= 0 else f"e-{-e}"
        body = digits + e_str if k == 1 else f"{digits[0]}.{digits[1:]}{e_str}"

    return sign + body


def _pair(x: float, y: float) -> str:
    return f"{format_number(x)},{format_number(y)}"


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class PathSerializer:
    """Convert Path IR commands to an SVG ``d`` attribute string."""

    def serialize(self, commands: Sequence[PathCommand]) -> str:
        """Serialize one outline.

        Parameters
        ----------
        commands : Sequence[PathCommand]
            Outline commands; the first must be ``MoveTo``.

        Returns
        -------
        str
            Path data with space-separated commands.

        Raises
        ------
        PathError
            If the list is empty, does not start with ``MoveTo``, or holds
            an unknown command type.
        """
        if not commands:
            raise PathError("Cannot serialize an empty path")
        if not isinstance(commands[0], MoveTo):
            raise PathError(
                f"Path must start with MoveTo, got {type(commands[0]).__name__}"
            )

        return " ".join(self._serialize_command(cmd) for cmd in commands)

    def _serialize_command(self, cmd: PathCommand) -> str:
        if isinstance(cmd, MoveTo):
            return f"M {_pair(cmd.x, cmd.y)}"
        if isinstance(cmd, LineTo):
            return f"L {_pair(cmd.x, cmd.y)}"
        if isinstance(cmd, CurveTo):
            return (
                f"C {_pair(cmd.x1, cmd.y1)} {_pair(cmd.x2, cmd.y2)} "
                f"{_pair(cmd.x, cmd.y)}"
            )
        if isinstance(cmd, ClosePath):
            return "Z"
        raise PathError(f"Unsupported path command: {type(cmd).__name__}")


_default_serializer = PathSerializer()


def serialize_path(commands: Sequence[PathCommand]) -> str:
    """Serialize with a shared :class:`PathSerializer`."""
    return _default_serializer.serialize(commands)


def generate_path(
    points: Sequence[Point],
    left_corner: Point,
    right_corner: Point,
) -> str:
    """Solve and serialize the closed outline of one layer."""
    return serialize_path(build_layer_path(points, left_corner, right_corner))
