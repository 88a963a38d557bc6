"""
Shared command runner for the page-tool CLIs.

Every command parses its own arguments, then hands a callable that produces an
OutputArtifact to `run_command`, which handles validation, the progress bar,
writing the output and mapping errors to exit codes.
"""

import argparse
import logging
import sys
from typing import Callable

from ..assembly import OutputArtifact, ProgressReporter, TqdmProgressReporter, save_artifact
from ..errors import AssemblyError, DocumentLoadError, PageSelectionError, PasswordError
from ..utils import check_input_files, configure_logging_level, resolve_output_dir, validate_common_arguments

Operation = Callable[[ProgressReporter], OutputArtifact]


def run_command(args: argparse.Namespace, inputs: list[str], label: str, operation: Operation) -> list[str]:
    """
    Run one page operation from the command line.

    Args:
        args: Parsed arguments with output_dir, no_progress, quiet and verbose
        inputs: Input file paths, checked before anything is read
        label: Progress bar label
        operation: Callable taking a progress reporter and returning the artifact

    Returns:
        Paths of the written files. Exits with status 1 on any handled error.
    """
    configure_logging_level(args)
    if not validate_common_arguments(args) or not check_input_files(inputs):
        sys.exit(1)

    output_dir = resolve_output_dir(args.output_dir, inputs[0])
    show_progress = not (getattr(args, 'no_progress', False) or getattr(args, 'quiet', False))

    try:
        with TqdmProgressReporter(label, disable=not show_progress) as reporter:
            artifact = operation(reporter)
        paths = save_artifact(artifact, output_dir, unpack_bundle=getattr(args, 'unpack', False))
    except PageSelectionError as e:
        logging.error(f"Invalid page range: {e}")
        sys.exit(1)
    except DocumentLoadError as e:
        logging.error(f"Could not read file: {e}")
        sys.exit(1)
    except AssemblyError as e:
        logging.error(f"Operation failed, no output written: {e}")
        sys.exit(1)
    except (PasswordError, ValueError) as e:
        logging.error(f"Error: {e}")
        sys.exit(1)
    except OSError as e:
        logging.error(f"File error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user.")
        sys.exit(1)

    for path in paths:
        logging.info(f"✅ Saved: {path}")
    return paths
