"""Command-line interface for the txtdoc plain text renderer.

This module provides the ``txtdoc`` command, which reads a pandoc JSON
document tree (as produced by ``pandoc -t json``) and writes it as
width-constrained plain text.

Environment Variable Support
----------------------------
Renderer options can be set through environment variables named
TXTDOC_<OPTION_NAME>, and a configuration file can be named with
TXTDOC_CONFIG. Command line arguments always override environment variables,
which override the configuration file.

Examples
--------
Render to standard output::

    $ pandoc README.md -t json | txtdoc -

Render to a file with a narrower width::

    $ txtdoc document.json --out document.txt --max-width 72

Use environment variables for defaults::

    $ export TXTDOC_MAX_WIDTH=100
    $ txtdoc document.json

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from typing import Optional

from txtdoc import __version__
from txtdoc.api import render
from txtdoc.ast.pandoc_json import json_to_document
from txtdoc.config import CONFIG_ENV_VAR, get_env_overrides, load_config_with_priority, options_from_config
from txtdoc.constants import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED_CONSTRUCT,
    EXIT_USAGE_ERROR,
)
from txtdoc.exceptions import ConfigError, TxtdocError, UnsupportedConstructError, ValidationError
from txtdoc.logging_utils import configure_logging, resolve_log_level
from txtdoc.options.txt import TxtRendererOptions
from txtdoc.utils.io_utils import read_text_input, write_content

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """Argparse type accepting positive integers only."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value} is not a valid integer") from None
    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``txtdoc`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="txtdoc",
        description="Render a pandoc JSON document tree as width-constrained plain text.",
        epilog="Exit codes: 0 success, 1 loading or rendering error, 2 usage or configuration error, "
        "3 construct not representable in plain text (math, figures, line blocks).",
    )

    parser.add_argument("input", help="Pandoc JSON file to render, or '-' to read from standard input")
    parser.add_argument("--out", "-o", metavar="PATH", help="Output file path (default: standard output)")

    max_width_field = TxtRendererOptions.__dataclass_fields__["max_width"]
    parser.add_argument(
        "--max-width",
        type=positive_int,
        metavar="N",
        default=None,
        help=f"{max_width_field.metadata['help']} (default: {max_width_field.default})",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unknown pandoc elements with a warning instead of failing",
    )

    # Configuration
    parser.add_argument(
        "--config",
        metavar="PATH",
        help=f"Configuration file (.toml, .yaml, .json or pyproject.toml). Also read from {CONFIG_ENV_VAR}.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Do not discover or load a configuration file",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose logging and timing information",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Use rich formatting for status and error messages (requires the 'rich' extra)",
    )
    parser.add_argument("--version", "-v", action="version", version=f"txtdoc {__version__}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to the CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The exit code for the exception type

    """
    if isinstance(exception, UnsupportedConstructError):
        return EXIT_UNSUPPORTED_CONSTRUCT

    if isinstance(exception, (ConfigError, ValidationError, FileNotFoundError, IsADirectoryError)):
        return EXIT_USAGE_ERROR

    return EXIT_ERROR


class _Reporter:
    """Print status and error messages to stderr, through rich when requested."""

    def __init__(self, use_rich: bool):
        self.console = None
        if use_rich:
            try:
                from rich.console import Console

                self.console = Console(stderr=True)
            except ImportError:
                logger.warning("rich is not installed; install it with: pip install 'txtdoc[rich]'")

    def error(self, message: str) -> None:
        if self.console is not None:
            self.console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
        else:
            print(f"Error: {message}", file=sys.stderr)

    def status(self, message: str) -> None:
        if self.console is not None:
            self.console.print(f"[green]{message}[/green]", highlight=False)


def _resolve_options(parsed_args: argparse.Namespace) -> TxtRendererOptions:
    """Merge config file, environment and command line into renderer options."""
    config, config_path = load_config_with_priority(
        explicit_path=parsed_args.config,
        env_var_path=os.environ.get(CONFIG_ENV_VAR),
        no_config=parsed_args.no_config,
    )
    options = options_from_config(config, source=str(config_path) if config_path else None)
    options = options_from_config(get_env_overrides(), base=options, source="environment")

    if parsed_args.max_width is not None:
        options = options.create_updated(max_width=parsed_args.max_width)

    logger.debug(f"Resolved options: {options}")
    return options


def main(args: Optional[list[str]] = None) -> int:
    """Execute the ``txtdoc`` command.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else resolve_log_level(parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    reporter = _Reporter(parsed_args.rich)

    try:
        options = _resolve_options(parsed_args)

        if parsed_args.input == "-":
            source = read_text_input(sys.stdin)
        else:
            source = read_text_input(parsed_args.input)

        document = json_to_document(source, strict_mode=not parsed_args.lenient)
        text = render(document, options)

        if parsed_args.out:
            write_content(text, parsed_args.out)
            reporter.status(f"Wrote {parsed_args.out}")
        else:
            sys.stdout.write(text if text.endswith("\n") else text + "\n")
    except (TxtdocError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        reporter.error(str(e))
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
