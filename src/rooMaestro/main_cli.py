"""
Command-line interface entry point for rooMaestro.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from rooMaestro.core.config import build_config
from rooMaestro.core.log_config import logger, setup_logging
from rooMaestro.core.mode_management import generate_modes_config
from rooMaestro.ui.common_formatters import pretty_print_modes

console = Console()
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roomaestro",
        description="rooMaestro: Generate the .roomodes registry for the Maestro mode set."
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--global",
        dest="use_global",
        action="store_true",
        help="Write to the Roo Code global custom modes file instead of the project .roomodes."
    )
    target.add_argument(
        "-o", "--output",
        type=Path,
        help="Path of the file to write (default: .roomodes)."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--modes",
        nargs="+",
        metavar="NAME",
        help="Mode names to register (default: the built-in Maestro mode set)."
    )
    source.add_argument(
        "--from-markdown",
        type=Path,
        metavar="DIR",
        help="Build modes from the *-mode.md documents in DIR."
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)."
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for log files (default: $ROOMAESTRO_LOG_DIR or ~/.rooMaestro/logs)."
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr and show a table of the generated modes."
    )
    return parser


def config_options(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "output_path": args.output,
        "use_global": args.use_global,
        "output_format": args.format,
        "markdown_dir": args.from_markdown,
    }
    if args.modes:
        options["mode_names"] = args.modes
    return options


def cli_main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, verbose=args.verbose)

    try:
        config = build_config(**config_options(args))
        modes = generate_modes_config(config, console=console)
        if args.verbose:
            pretty_print_modes(modes, console=console)
        return 0
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        return 1
    except Exception as e:
        # Traceback only reaches the debug log file
        logger.debug(f"Generation failed: {e}", exc_info=True)
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(cli_main())
