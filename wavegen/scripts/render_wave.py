#!/usr/bin/env python3
"""
Render Wave Script.

Render a layered wave SVG from an options file and/or command-line flags.

Usage:
    wavegen                                   # packaged defaults → stdout
    wavegen --config waves/header.yaml -o header.svg
    wavegen --layers 4 --seed 42 --gradient --gradient-colors "#0693E3" "#8ED1FC"
    python -m wavegen.scripts.render_wave --mode chairLeft --segments 6

Flags override values from ``--config``. Exit codes: 0 on success, 2 on
invalid options or a missing options file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wavegen.configs.loader import ConfigError, load_config
from wavegen.svg.renderer import Wave
from wavegen.utils import fs
from wavegen.utils.logging_config import push_context, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavegen",
        description="Render a layered wave SVG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Defaults from the packaged wave.yaml, printed to stdout
  wavegen

  # Options file plus overrides, written atomically
  wavegen --config waves/header.yaml --seed 7 -o out/header.svg

  # Save the fully-resolved options next to the image
  wavegen --layers 3 -o out/wave.svg --dump-config out/wave.yaml
""",
    )

    parser.add_argument("--config", "-c", type=Path, default=None,
                        help="Options YAML (default: packaged wave.yaml)")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="SVG output path (default: stdout)")
    parser.add_argument("--dump-config", type=Path, default=None,
                        help="Write the resolved options to this YAML file")

    # Geometry
    parser.add_argument("--width", type=float, help="Canvas width")
    parser.add_argument("--height", type=float, help="Canvas height")
    parser.add_argument("--layers", type=int, help="Number of layers")
    parser.add_argument("--segments", type=int, help="Grid columns per layer")
    parser.add_argument("--variance", type=float, help="Jitter multiplier")
    parser.add_argument("--seed", type=int, help="Starting seed")
    parser.add_argument("--mode", choices=["classic", "chairLeft", "chairRight"],
                        help="Layout mode")

    # Paint
    parser.add_argument("--fill", help="Fill color")
    parser.add_argument("--stroke", help="Stroke color")
    parser.add_argument("--stroke-width", type=float, help="Stroke width")
    parser.add_argument("--gradient", action=argparse.BooleanOptionalAction, default=None,
                        help="Fill layers with a linear gradient")
    parser.add_argument("--gradient-angle", type=float, help="Gradient angle (degrees)")
    parser.add_argument("--gradient-colors", nargs="+", metavar="COLOR",
                        help="Gradient colors, in order")

    # Logging
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", default=None, help="Also log to this file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for wave rendering."""
    args = build_parser().parse_args(argv)

    setup_logging(log_level=args.log_level, log_file=args.log_file,
                  context={"app": "wavegen"})

    try:
        cfg = load_config(
            args.config,
            width=args.width,
            height=args.height,
            layers=args.layers,
            segments=args.segments,
            variance=args.variance,
            seed=args.seed,
            mode=args.mode,
            fill=args.fill,
            stroke=args.stroke,
            stroke_width=args.stroke_width,
            gradient=args.gradient,
            gradient_angle=args.gradient_angle,
            gradient_colors=args.gradient_colors,
        )
    except (ConfigError, FileNotFoundError) as e:
        logger.error("%s", e)
        return EXIT_CONFIG

    push_context(seed=cfg.seed)
    markup = Wave(cfg).render()

    if args.output is None:
        sys.stdout.write(markup + "\n")
    else:
        fs.atomic_write_text(args.output, markup)
        logger.info("Wrote %s (%d bytes)", args.output, len(markup))

    if args.dump_config is not None:
        fs.atomic_yaml_dump(cfg.to_dict(), args.dump_config)
        logger.info("Wrote resolved options to %s", args.dump_config)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
