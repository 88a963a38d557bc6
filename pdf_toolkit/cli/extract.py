"""
CLI for extracting pages from a PDF.
"""

from ..operations import extract_pages
from ..utils import BaseArgumentParser, add_output_args, add_pages_arg, read_input_file, setup_logging
from .common import run_command


def create_parser():
    """Create argument parser for extract command."""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-extract",
        description="Extract selected pages from a PDF into a new document."
    )
    BaseArgumentParser.add_input_path_argument(parser)
    add_pages_arg(parser, required=True, help='Pages to extract, e.g. "1,3,5-10"')
    add_output_args(parser)
    return parser


def main():
    """Main entry point for pdf-extract command."""
    setup_logging()
    parser = create_parser()
    args = parser.parse_args()

    def operation(reporter):
        data, name = read_input_file(args.input_path)
        return extract_pages(data, name, args.pages, reporter)

    run_command(args, [args.input_path], "Extracting", operation)


if __name__ == "__main__":
    main()
