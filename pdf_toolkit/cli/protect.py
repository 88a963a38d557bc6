"""
CLI for password-protecting and unlocking PDF files.
"""

import getpass
import logging
import sys

from ..operations import protect_document, unlock_document
from ..utils import (
    BaseArgumentParser,
    add_output_args,
    add_password_arg,
    check_input_files,
    read_input_file,
    setup_logging,
)
from .common import run_command


def create_protect_parser():
    """Create argument parser for protect command."""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-protect",
        description="Encrypt a PDF so that it needs a password to open."
    )
    BaseArgumentParser.add_input_path_argument(parser)
    add_password_arg(parser, required=False)
    add_output_args(parser)
    return parser


def create_unlock_parser():
    """Create argument parser for unlock command."""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-unlock",
        description="Remove password protection from a PDF you know the password for."
    )
    BaseArgumentParser.add_input_path_argument(parser)
    add_password_arg(parser, required=False)
    add_output_args(parser)
    return parser


def _prompt_new_password() -> str:
    password = getpass.getpass("Password: ")
    confirm = getpass.getpass("Confirm password: ")
    if password != confirm:
        logging.error("Passwords do not match")
        sys.exit(1)
    return password


def main():
    """Main entry point for pdf-protect command."""
    setup_logging()
    parser = create_protect_parser()
    args = parser.parse_args()
    password = args.password
    if password is None:
        if not check_input_files([args.input_path]):
            sys.exit(1)
        password = _prompt_new_password()

    def operation(reporter):
        data, name = read_input_file(args.input_path)
        return protect_document(data, name, password, reporter)

    run_command(args, [args.input_path], "Protecting", operation)


def unlock_main():
    """Main entry point for pdf-unlock command."""
    setup_logging()
    parser = create_unlock_parser()
    args = parser.parse_args()

    def operation(reporter):
        data, name = read_input_file(args.input_path)
        return unlock_document(data, name, args.password, reporter)

    run_command(args, [args.input_path], "Unlocking", operation)


if __name__ == "__main__":
    main()
