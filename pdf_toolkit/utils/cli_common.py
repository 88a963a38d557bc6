"""
Common CLI utilities shared across all command-line interfaces.

This module provides shared utilities for CLI modules to reduce code duplication
and maintain consistent behavior across all CLI commands.
"""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from .. import config


def setup_logging() -> None:
    """
    Configure logging for CLI usage.

    Sets up a standard logging configuration with timestamp, level, and message
    formatting that is consistent across all CLI commands.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


class BaseArgumentParser:
    """
    Base argument parser class that provides common CLI argument patterns.

    This class centralizes common argument parsing patterns used across
    different CLI commands to ensure consistency and reduce duplication.
    """

    @staticmethod
    def create_base_parser(prog: str, description: str, epilog: Optional[str] = None) -> argparse.ArgumentParser:
        """
        Create a base argument parser with standard configuration.

        Args:
            prog: Program name for the parser
            description: Description of the command
            epilog: Optional epilog text with examples

        Returns:
            Configured ArgumentParser instance
        """
        return argparse.ArgumentParser(
            prog=prog,
            description=description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=epilog
        )

    @staticmethod
    def add_input_path_argument(parser: argparse.ArgumentParser, help: str = "Path to the PDF file") -> None:
        """
        Add a single input PDF argument to parser.

        Args:
            parser: ArgumentParser to add argument to
            help: Help text for the argument
        """
        parser.add_argument("input_path", help=help)


def validate_common_arguments(args: argparse.Namespace) -> bool:
    """
    Validate common argument patterns.

    Args:
        args: Parsed arguments namespace

    Returns:
        True if arguments are valid, False otherwise
    """
    if getattr(args, 'verbose', False) and getattr(args, 'quiet', False):
        logging.error("--verbose and --quiet cannot be used together")
        return False
    return True


def configure_logging_level(args: argparse.Namespace) -> None:
    """
    Configure logging level based on verbose/quiet arguments.

    Args:
        args: Parsed arguments with potential verbose/quiet flags
    """
    if getattr(args, 'quiet', False):
        logging.getLogger().setLevel(logging.WARNING)
    elif getattr(args, 'verbose', False):
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def check_input_files(paths: list[str]) -> bool:
    """
    Check that every input path is an existing PDF file.

    Args:
        paths: Input file paths from the command line

    Returns:
        True if all inputs are usable, False otherwise
    """
    for path in paths:
        if not os.path.isfile(path):
            logging.error(f"Input file does not exist: {path}")
            return False
        ext = Path(path).suffix.lower()
        if ext not in config.get_supported_formats():
            logging.error(f"Unsupported file format '{ext}': {path}")
            return False
    return True


def read_input_file(path: str) -> tuple[bytes, str]:
    """Read an input file, returning its bytes and base name."""
    with open(path, "rb") as f:
        return f.read(), os.path.basename(path)


def resolve_output_dir(output_dir: Optional[str], first_input: str) -> str:
    """
    Pick the output directory for a command.

    Defaults to `config.DEFAULT_OUTPUT_DIR` next to the first input file.
    """
    if output_dir:
        return output_dir
    return os.path.join(os.path.dirname(os.path.abspath(first_input)), config.DEFAULT_OUTPUT_DIR)
