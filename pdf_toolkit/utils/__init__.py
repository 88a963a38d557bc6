"""
Utility modules for the PDF page toolkit.

This package provides page selector parsing and the shared command-line
helpers used by the CLI commands.
"""

from .page_selection import PageIndexSet, PageOrder, parse_page_selector, parse_page_order, split_selector_list
from .cli_args import add_output_args, add_pages_arg, add_password_arg
from .cli_common import setup_logging, BaseArgumentParser, validate_common_arguments, configure_logging_level, check_input_files, read_input_file, resolve_output_dir

__all__ = [
    'PageIndexSet', 'PageOrder', 'parse_page_selector', 'parse_page_order', 'split_selector_list',
    'add_output_args', 'add_pages_arg', 'add_password_arg',
    'setup_logging', 'BaseArgumentParser', 'validate_common_arguments', 'configure_logging_level', 'check_input_files', 'read_input_file', 'resolve_output_dir'
]
