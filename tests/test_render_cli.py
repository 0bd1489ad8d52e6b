"""Tests for the wavegen command-line entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wavegen.configs.loader import load_config
from wavegen.scripts.render_wave import EXIT_CONFIG, EXIT_OK, build_parser, main
from wavegen.svg.renderer import Wave
from wavegen.utils.logging_config import pop_context, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    setup_logging(log_level="WARNING", to_stderr=False, capture_warnings=False)
    logging.captureWarnings(False)
    root.setLevel(level)
    pop_context()


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    def test_unset_flags_are_none(self) -> None:
        args = build_parser().parse_args([])
        assert args.layers is None
        assert args.gradient is None
        assert args.config is None

    def test_gradient_toggle(self) -> None:
        parser = build_parser()
        assert parser.parse_args(["--gradient"]).gradient is True
        assert parser.parse_args(["--no-gradient"]).gradient is False

    def test_gradient_colors(self) -> None:
        args = build_parser().parse_args(["--gradient-colors", "#111", "#222", "#333"])
        assert args.gradient_colors == ["#111", "#222", "#333"]

    def test_mode_choices(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--mode", "zigzag"])


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMain:
    def test_stdout(self, capsys) -> None:
        assert main(["--seed", "5", "--log-level", "WARNING"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out == Wave(load_config(seed=5)).render() + "\n"

    def test_output_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "wave.svg"
        code = main(["-o", str(target), "--layers", "3", "--seed", "4",
                     "--gradient", "--gradient-colors", "#0693E3", "#8ED1FC"])
        assert code == EXIT_OK
        expected = Wave(load_config(layers=3, seed=4, gradient=True,
                                    gradient_colors=["#0693E3", "#8ED1FC"])).render()
        assert target.read_text(encoding="utf-8") == expected

    def test_config_file_with_overrides(self, tmp_path: Path) -> None:
        options = tmp_path / "header.yaml"
        options.write_text("width: 640\nheight: 160\nsegments: 6\n", encoding="utf-8")
        target = tmp_path / "header.svg"

        assert main(["-c", str(options), "--segments", "3", "-o", str(target)]) == EXIT_OK
        markup = target.read_text(encoding="utf-8")
        assert "viewBox='0 0 640 160'" in markup
        assert markup.count(" C ") == 2 * 3

    def test_dump_config(self, tmp_path: Path) -> None:
        dumped = tmp_path / "resolved.yaml"
        assert main(["-o", str(tmp_path / "w.svg"), "--dump-config", str(dumped),
                     "--seed", "9", "--mode", "chairRight"]) == EXIT_OK
        assert load_config(dumped) == load_config(seed=9, mode="chairRight")

    def test_missing_config(self, tmp_path: Path, caplog) -> None:
        with caplog.at_level(logging.ERROR):
            code = main(["-c", str(tmp_path / "nope.yaml")])
        assert code == EXIT_CONFIG
        assert "not found" in caplog.text

    def test_invalid_config(self, tmp_path: Path) -> None:
        options = tmp_path / "bad.yaml"
        options.write_text("colour: blue\n", encoding="utf-8")
        target = tmp_path / "w.svg"
        assert main(["-c", str(options), "-o", str(target)]) == EXIT_CONFIG
        assert not target.exists()

    def test_invalid_flag_value(self, tmp_path: Path) -> None:
        assert main(["--stroke-width", "-2", "-o", str(tmp_path / "w.svg")]) == EXIT_CONFIG

    @pytest.mark.parametrize("flag", ["--width", "--height", "--variance"])
    def test_non_finite_flag(self, tmp_path: Path, flag: str) -> None:
        target = tmp_path / "w.svg"
        assert main([flag, "inf", "-o", str(target)]) == EXIT_CONFIG
        assert not target.exists()

    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "run.log"
        assert main(["-o", str(tmp_path / "w.svg"), "--log-file", str(log_file),
                     "--seed", "2"]) == EXIT_OK
        text = log_file.read_text(encoding="utf-8")
        assert "Rendered 2 layer(s)" in text
        assert "app=wavegen seed=2" in text
