"""
CLI argument utilities.

This module provides utilities for adding common command-line arguments
to argparse parsers across different CLI commands.
"""

import argparse
from .. import config


def add_output_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add common output-related arguments to an argparse parser.

    Args:
        parser: The argument parser to add arguments to

    Returns:
        The parser with added arguments
    """
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help=f"Output directory for files (default: '{config.DEFAULT_OUTPUT_DIR}' in input directory)"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show a progress bar"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce output verbosity"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Increase output verbosity"
    )
    return parser


def add_pages_arg(parser: argparse.ArgumentParser, required: bool = False,
                  help: str = 'Pages to use, e.g. "1,3,5-10" (default: all pages)') -> argparse.ArgumentParser:
    """
    Add a `--pages` selector argument.

    Args:
        parser: The argument parser to add arguments to
        required: Whether the selector must be given
        help: Help text for the argument

    Returns:
        The parser with added arguments
    """
    parser.add_argument(
        "--pages",
        type=str,
        default=None,
        required=required,
        help=help
    )
    return parser


def add_password_arg(parser: argparse.ArgumentParser, required: bool = True) -> argparse.ArgumentParser:
    """Add a `--password` argument."""
    parser.add_argument(
        "--password",
        type=str,
        default=None,
        required=required,
        help="Document password"
    )
    return parser
