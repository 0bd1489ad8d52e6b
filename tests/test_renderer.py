"""Tests for the Wave renderer (options → SVG markup).

Validates:
    - End-to-end flat wave from zero variance
    - Determinism for a fixed seed
    - Document structure, paint attributes and per-layer opacity
    - Gradient definitions
    - Layer extents and the off-canvas warning
"""

from __future__ import annotations

import logging
import re

import pytest

from wavegen.configs.loader import ConfigError, normalize_options
from wavegen.engine.points import Point
from wavegen.svg.renderer import OPACITY_TABLE, SVG_NS, SvgImage, Wave, layer_opacities


@pytest.fixture
def flat_wave() -> Wave:
    return Wave(width=100, height=50, layers=1, segments=2, variance=0, seed=0)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults(self) -> None:
        cfg = Wave().config
        assert (cfg.width, cfg.height, cfg.layers, cfg.segments) == (100.0, 50.0, 2, 10)

    def test_from_config(self) -> None:
        cfg = normalize_options(layers=4, seed=3)
        assert Wave(cfg).config is cfg

    def test_config_and_options_conflict(self) -> None:
        with pytest.raises(TypeError):
            Wave(normalize_options(), layers=3)

    @pytest.mark.parametrize("options", [{"width": float("inf")}, {"height": float("nan")}])
    def test_non_finite_canvas_rejected(self, options: dict) -> None:
        with pytest.raises(ConfigError):
            Wave(**options)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class TestGeometry:
    def test_flat_points(self, flat_wave: Wave) -> None:
        assert flat_wave.generate_points() == [
            (Point(0.0, 0.0), Point(50.0, 0.0), Point(100.0, 0.0)),
        ]

    def test_flat_image(self, flat_wave: Wave) -> None:
        svg = flat_wave.generate_svg()
        assert isinstance(svg, SvgImage)
        assert (svg.w, svg.h, svg.xmlns) == (100.0, 50.0, SVG_NS)
        assert len(svg.paths) == 1

        d = svg.paths[0]
        assert d.startswith("M 0,50 L 0,0 C ")
        assert d.endswith(" L 100,50 L 0,50 Z")
        assert d.count(" C ") == 2

    def test_one_path_per_layer(self) -> None:
        svg = Wave(layers=5, segments=6, seed=12).generate_svg()
        assert len(svg.paths) == 5
        for d in svg.paths:
            assert d.startswith("M 0,50 L 0,")
            assert d.count(" C ") == 6
            assert d.endswith(" L 100,50 L 0,50 Z")

    def test_each_call_restarts_sequence(self) -> None:
        wave = Wave(seed=21)
        assert wave.generate_points() == wave.generate_points()

    def test_flat_layer_extents(self) -> None:
        extents = Wave(height=40, layers=3, segments=4, variance=0).layer_extents()
        for index, (xmin, ymin, xmax, ymax) in enumerate(extents):
            assert (xmin, xmax) == pytest.approx((0.0, 100.0))
            assert ymin == pytest.approx(10.0 * index)
            assert ymax == pytest.approx(10.0 * index)

    def test_extents_cover_knots(self) -> None:
        wave = Wave(layers=2, segments=8, seed=7)
        for layer, (_, ymin, _, ymax) in zip(wave.generate_points(), wave.layer_extents()):
            for p in layer:
                assert ymin <= p.y <= ymax


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


class TestRender:
    def test_document_frame(self, flat_wave: Wave) -> None:
        markup = flat_wave.render()
        assert markup.startswith(
            "<svg id='svg' viewBox='0 0 100 50' xmlns='http://www.w3.org/2000/svg'>"
        )
        assert markup.endswith("</path></svg>")
        assert markup.count("<path ") == 1
        assert "<defs>" not in markup

    def test_path_attributes(self, flat_wave: Wave) -> None:
        markup = flat_wave.render()
        d = flat_wave.generate_svg().paths[0]
        assert (
            f"<path d='{d}' stroke='none' stroke-width='0' fill='#000000' "
            f"fill-opacity='1'></path>"
        ) in markup

    def test_custom_paint(self) -> None:
        markup = Wave(fill="#0693E3", stroke="#333", stroke_width=1.5).render()
        assert markup.count("fill='#0693E3'") == 2
        assert markup.count("stroke='#333' stroke-width='1.5'") == 2

    def test_same_seed_same_markup(self) -> None:
        options = dict(layers=3, segments=7, variance=0.9, seed=42)
        assert Wave(**options).render() == Wave(**options).render()

    def test_different_seed_different_markup(self) -> None:
        assert Wave(seed=1).render() != Wave(seed=2).render()

    def test_layer_opacities_in_markup(self) -> None:
        markup = Wave(layers=3).render()
        assert re.findall(r"fill-opacity='([^']+)'", markup) == ["0.4", "0.53", "1"]

    def test_logs_summary(self, flat_wave: Wave, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="wavegen.svg.renderer"):
            flat_wave.render()
        assert "Rendered 1 layer(s), 2 segment(s) each, seed=0, mode=classic" in caplog.text


class TestOpacity:
    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, []),
            (1, [1]),
            (2, [0.53, 1]),
            (3, [0.4, 0.53, 1]),
            (4, list(OPACITY_TABLE)),
            (6, [0.265, 0.4, 0.53, 1, 1, 1]),
        ],
    )
    def test_tail_of_table(self, count: int, expected: list[float]) -> None:
        assert layer_opacities(count) == expected


class TestGradient:
    def test_gradient_defs(self) -> None:
        markup = Wave(gradient=True).render()
        assert (
            "<defs><linearGradient id='gradient' x1='0%' y1='50%' x2='100%' y2='50%'>"
            "<stop offset='5%' stop-color='#F78DA7' />"
            "<stop offset='95%' stop-color='#8ED1FC' />"
            "</linearGradient></defs>"
        ) in markup
        assert markup.count("fill='url(#gradient)'") == 2
        assert "fill='#000000'" not in markup

    def test_gradient_angle_and_colors(self) -> None:
        markup = Wave(gradient=True, gradient_angle=90,
                      gradient_colors=["red", "green", "blue"]).render()
        assert "x1='100%' y1='50%' x2='0%' y2='50%'" in markup
        assert re.findall(r"<stop offset='([^']+)%'", markup) == ["5", "50", "95"]

    def test_single_color_disables_gradient(self) -> None:
        markup = Wave(gradient=True, gradient_colors=["#fff"], fill="#123456").render()
        assert "<defs>" not in markup
        assert "fill='#123456'" in markup

    def test_gradient_off_by_default(self) -> None:
        assert "linearGradient" not in Wave().render()


class TestOffCanvas:
    def test_chair_mode_warns(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="wavegen.svg.renderer"):
            Wave(mode="chairLeft", layers=2, segments=4).render()
        assert "outside canvas height 50" in caplog.text

    def test_flat_wave_does_not_warn(self, flat_wave: Wave, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="wavegen.svg.renderer"):
            flat_wave.render()
        assert "outside canvas" not in caplog.text
