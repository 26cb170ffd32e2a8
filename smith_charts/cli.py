"""
Command-line interface for SmithCharts package.

Provides argparse-based CLI with subcommands for drawing a single chart and
for replaying the staged demo sequence through one live chart.

Usage:
    smith-charts render --output smith.png
    smith-charts render --real 0.5 1 2 --imag 0.5 1 2 --real-color orange --output smith.svg
    smith-charts demo --output-dir frames/
"""

import argparse
import sys
from typing import Optional

from .api import DEMO_STAGES, create_smith_chart, render_sequence
from .config import Config
from .logging_config import setup_logging
from .exceptions import SmithChartsError


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file
    """
    if getattr(args, 'silent', False):
        verbosity = -2  # ERROR
    elif getattr(args, 'quiet', False):
        verbosity = -1  # WARNING
    elif getattr(args, 'verbose', False):
        verbosity = 1  # DEBUG
    else:
        verbosity = 0  # INFO

    log_file = getattr(args, 'log_file', None)
    setup_logging(verbosity=verbosity, log_file=log_file)


def positive_float(value: str) -> float:
    """
    Parse a strictly positive float.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive number
    """
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Value must be positive, got {value}")
    return number


def load_config(config_path: Optional[str]) -> Config:
    """
    Load configuration from file, or return defaults when no path is given.

    Raises:
        SmithChartsError: If the file cannot be loaded
    """
    if config_path is None:
        return Config()
    return Config.load_from_file(config_path)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Copy command-line overrides onto ``config`` and validate the result."""
    if getattr(args, "real", None):
        config.real_line_values = list(args.real)
    if getattr(args, "imag", None):
        config.imag_line_values = list(args.imag)
    if getattr(args, "real_color", None):
        config.real_line_color = args.real_color
    if getattr(args, "imag_color", None):
        config.imag_line_color = args.imag_color
    if getattr(args, "margin", None) is not None:
        config.margin = args.margin
    if getattr(args, "dpi", None):
        config.default_dpi = args.dpi
    if getattr(args, "background_color", None):
        config.background_color = args.background_color
    config.validate()
    return config


def _cli_print(args: argparse.Namespace, *values: object, **kwargs) -> None:
    """Print unless --silent was provided."""
    if getattr(args, "silent", False):
        return
    print(*values, **kwargs)


def cmd_render(args: argparse.Namespace) -> int:
    """Handle 'render' subcommand."""
    try:
        config = apply_overrides(load_config(args.config), args)
        _cli_print(
            args,
            f"Drawing Smith chart: {len(config.real_line_values)} resistance, "
            f"{len(config.imag_line_values)} reactance values"
        )

        output_path = create_smith_chart(output_path=args.output, config=config)

        if getattr(args, "silent", False):
            print(str(output_path))
        else:
            print(f"Success! Chart saved to: {output_path}")
        return 0

    except SmithChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_demo(args: argparse.Namespace) -> int:
    """Handle 'demo' subcommand."""
    _cli_print(args, f"Rendering {len(DEMO_STAGES)} demo stages into: {args.output_dir}")

    try:
        config = apply_overrides(load_config(args.config), args)
        frames = render_sequence(
            DEMO_STAGES,
            output_dir=args.output_dir,
            prefix=args.prefix,
            config=config,
            file_format=args.format
        )

        if getattr(args, "silent", False):
            print(str(args.output_dir))
        else:
            print("\nDemo complete!")
            for frame in frames:
                print(f"  {frame}")
        return 0

    except SmithChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="smith-charts",
        description="Draw Smith chart grids",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    def _add_common_globalish_args(p: argparse.ArgumentParser) -> None:
        """Add args that users reasonably expect to work after subcommands too.

        Argparse only treats options as "global" when they appear before the
        subcommand token, so the same options are added to each subparser.
        """
        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Enable DEBUG logging"
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Suppress INFO logging (WARNING+ only)"
        )
        p.add_argument(
            "--silent",
            action="store_true",
            help="Suppress most console output (prints only final output path(s))"
        )
        p.add_argument(
            "--log-file",
            type=str,
            help="Write logs to file"
        )

    def _add_chart_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--config",
            type=str,
            help="Config file path (YAML/JSON)"
        )
        p.add_argument(
            "--margin",
            type=float,
            help="Margin around the unit disk as a fraction of its diameter"
        )
        p.add_argument(
            "--dpi",
            type=int,
            help="Override DPI setting"
        )
        p.add_argument(
            "--background-color",
            type=str,
            default=None,
            help="Figure background color (Matplotlib color spec)"
        )

    _add_common_globalish_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========================================================================
    # render subcommand
    # ========================================================================
    parser_render = subparsers.add_parser(
        "render",
        help="Draw a single Smith chart"
    )
    _add_common_globalish_args(parser_render)
    _add_chart_args(parser_render)
    parser_render.add_argument(
        "--output",
        type=str,
        required=True,
        help="Output file path (.png, .svg, .pdf, ...)"
    )
    parser_render.add_argument(
        "--real",
        type=positive_float,
        nargs="+",
        help="Normalized resistance values to draw"
    )
    parser_render.add_argument(
        "--imag",
        type=positive_float,
        nargs="+",
        help="Normalized reactance magnitudes to draw"
    )
    parser_render.add_argument(
        "--real-color",
        type=str,
        help="Color of resistance circles"
    )
    parser_render.add_argument(
        "--imag-color",
        type=str,
        help="Color of reactance arcs"
    )
    parser_render.set_defaults(func=cmd_render)

    # ========================================================================
    # demo subcommand
    # ========================================================================
    parser_demo = subparsers.add_parser(
        "demo",
        help="Replay the staged demo through one chart, saving a frame per stage"
    )
    _add_common_globalish_args(parser_demo)
    _add_chart_args(parser_demo)
    parser_demo.add_argument(
        "--output-dir",
        type=str,
        default="frames",
        help="Directory for frame files (default: frames)"
    )
    parser_demo.add_argument(
        "--prefix",
        type=str,
        default="smith",
        help="Frame file name prefix (default: smith)"
    )
    parser_demo.add_argument(
        "--format",
        type=str,
        default="png",
        help="Frame file format (default: png)"
    )
    parser_demo.set_defaults(func=cmd_demo)

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    setup_logging_from_args(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
