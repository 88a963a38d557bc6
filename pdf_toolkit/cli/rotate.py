"""
CLI for rotating PDF pages.
"""

from ..operations import rotate_pages
from ..utils import BaseArgumentParser, add_output_args, add_pages_arg, read_input_file, setup_logging
from .common import run_command


def create_parser():
    """Create argument parser for rotate command."""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-rotate",
        description="Rotate pages of a PDF clockwise."
    )
    BaseArgumentParser.add_input_path_argument(parser)
    parser.add_argument(
        "--angle",
        type=int,
        default=90,
        help="Clockwise rotation in degrees, a multiple of 90 (default: 90)"
    )
    add_pages_arg(parser, help='Pages to rotate, e.g. "1,3,5-10" (default: all pages)')
    add_output_args(parser)
    return parser


def main():
    """Main entry point for pdf-rotate command."""
    setup_logging()
    parser = create_parser()
    args = parser.parse_args()

    def operation(reporter):
        data, name = read_input_file(args.input_path)
        return rotate_pages(data, name, args.angle, args.pages, reporter)

    run_command(args, [args.input_path], "Rotating", operation)


if __name__ == "__main__":
    main()
