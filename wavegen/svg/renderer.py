"""Wave renderer -- options to a layered SVG document.

Pipeline per render call::

    WaveConfig ─► generate_layers (fresh SeedSequence) ─► build_layer_path
               ─► PathSerializer ─► <path> elements ─► <svg> markup

Layers are emitted top layer first, so later (lower) layers paint over
earlier ones. Each layer takes its fill opacity from the tail of
:data:`OPACITY_TABLE`; with more layers than table entries, the
remaining layers are fully opaque.

Every call starts from ``config.seed``: rendering the same config twice
yields identical markup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from wavegen.configs.loader import WaveConfig, normalize_options
from wavegen.engine.points import Layer, Point, generate_layers
from wavegen.engine.sequence import SeedSequence
from wavegen.path_ir.operations import PathCommands, build_layer_path, curve_segments
from wavegen.svg.gradient import (
    distribute_gradient_stops,
    format_gradient_stops,
    gradient_endpoints,
)
from wavegen.svg.path_serializer import format_number, serialize_path
from wavegen.utils.geometry import polyline_bbox, sample_spline

logger = logging.getLogger(__name__)

OPACITY_TABLE = (0.265, 0.4, 0.53, 1)
SVG_NS = "http://www.w3.org/2000/svg"

GRADIENT_ID = "gradient"
GRADIENT_RANGE = (5, 95)


@dataclass(frozen=True)
class SvgImage:
    """Rendered image description: canvas size, namespace, one path per layer."""

    w: float
    h: float
    xmlns: str
    paths: tuple[str, ...]


def layer_opacities(count: int) -> list[float]:
    """Fill opacities for ``count`` layers, top layer first."""
    if count <= 0:
        return []
    tail = list(OPACITY_TABLE[-count:])
    return tail + [1] * (count - len(tail))


def _outline_polyline(commands: PathCommands, samples_per_segment: int) -> np.ndarray:
    start = commands[1]
    curves = curve_segments(commands)
    knots = np.array([(start.x, start.y)] + [(c.x, c.y) for c in curves])
    first = np.array([(c.x1, c.y1) for c in curves])
    second = np.array([(c.x2, c.y2) for c in curves])
    return sample_spline(knots, first, second, samples_per_segment)


class Wave:
    """Layered wave image generator.

    Parameters
    ----------
    config : WaveConfig | None
        Normalized options. When omitted, ``options`` are normalized.
    **options
        Raw options (see :func:`wavegen.configs.loader.normalize_options`).

    Examples
    --------
    >>> Wave(layers=3, seed=42, gradient=True).render()
    "<svg id='svg' viewBox='0 0 100 50' ..."
    """

    def __init__(self, config: WaveConfig | None = None, **options: Any) -> None:
        if config is not None and options:
            raise TypeError("Pass either a WaveConfig or raw options, not both")
        self._cfg = config if config is not None else normalize_options(options)

    @property
    def config(self) -> WaveConfig:
        return self._cfg

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def generate_points(self) -> list[Layer]:
        """Sample points of every layer, from a fresh seed sequence."""
        cfg = self._cfg
        return generate_layers(
            width=cfg.width,
            height=cfg.height,
            segments=cfg.segments,
            layers=cfg.layers,
            variance=cfg.variance,
            mode=cfg.mode,
            sequence=SeedSequence(cfg.seed),
        )

    def _outlines(self, drawing: Sequence[Layer]) -> list[PathCommands]:
        left = Point(0.0, self._cfg.height)
        right = Point(self._cfg.width, self._cfg.height)
        return [build_layer_path(layer, left, right) for layer in drawing]

    def _image(self, outlines: Sequence[PathCommands]) -> SvgImage:
        return SvgImage(
            w=self._cfg.width,
            h=self._cfg.height,
            xmlns=SVG_NS,
            paths=tuple(serialize_path(outline) for outline in outlines),
        )

    def generate_svg(self) -> SvgImage:
        """Build the image description (no markup)."""
        return self._image(self._outlines(self.generate_points()))

    def layer_extents(self, samples_per_segment: int = 16) -> list[tuple[float, float, float, float]]:
        """Bounding box ``(xmin, ymin, xmax, ymax)`` of each layer's curve.

        The box covers the sampled spline only, not the canvas corners
        the outline is closed against.
        """
        outlines = self._outlines(self.generate_points())
        return [
            polyline_bbox(_outline_polyline(outline, samples_per_segment))
            for outline in outlines
        ]

    def _warn_off_canvas(self, outlines: Sequence[PathCommands]) -> None:
        h = self._cfg.height
        for index, outline in enumerate(outlines):
            _, ymin, _, ymax = polyline_bbox(_outline_polyline(outline, 8))
            if ymin < 0 or ymax > h:
                logger.warning(
                    "Layer %d spans y=[%.2f, %.2f], outside canvas height %s",
                    index, ymin, ymax, format_number(h),
                )

    # ------------------------------------------------------------------
    # Markup
    # ------------------------------------------------------------------

    def _gradient_defs(self) -> str:
        g = self._cfg.gradient
        x1, y1, x2, y2 = gradient_endpoints(g.angle_deg)
        stops = format_gradient_stops(distribute_gradient_stops(g.colors, *GRADIENT_RANGE))
        return (
            f"<defs><linearGradient id='{GRADIENT_ID}' x1='{x1}%' y1='{y1}%' "
            f"x2='{x2}%' y2='{y2}%'>{stops}</linearGradient></defs>"
        )

    def render(self) -> str:
        """Render the complete ``<svg>`` document."""
        cfg = self._cfg
        use_gradient = cfg.gradient.active

        outlines = self._outlines(self.generate_points())
        self._warn_off_canvas(outlines)
        svg = self._image(outlines)
        opacity = layer_opacities(len(svg.paths))

        fill = f"url(#{GRADIENT_ID})" if use_gradient else cfg.fill
        parts = [self._gradient_defs()] if use_gradient else []
        for index, d in enumerate(svg.paths):
            logger.debug("Layer %d path: %d chars", index, len(d))
            parts.append(
                f"<path d='{d}' stroke='{cfg.stroke}' "
                f"stroke-width='{format_number(cfg.stroke_width)}' fill='{fill}' "
                f"fill-opacity='{format_number(opacity[index])}'></path>"
            )

        logger.info(
            "Rendered %d layer(s), %d segment(s) each, seed=%d, mode=%s%s",
            cfg.layers, cfg.segments, cfg.seed, cfg.mode.value,
            ", gradient" if use_gradient else "",
        )

        return (
            f"<svg id='svg' viewBox='0 0 {format_number(svg.w)} {format_number(svg.h)}' "
            f"xmlns='{svg.xmlns}'>{''.join(parts)}</svg>"
        )
