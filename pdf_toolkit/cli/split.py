"""
CLI for splitting a PDF into several files.
"""

from ..assembly import SplitMode
from ..operations import split_document
from ..utils import BaseArgumentParser, add_output_args, read_input_file, setup_logging
from .common import run_command


def create_parser():
    """Create argument parser for split command."""
    epilog = """
Examples:
  # One file per page (page-1.pdf, page-2.pdf, ...)
  pdf-split report.pdf

  # One file per range (split-1.pdf = pages 1-3, split-2.pdf = page 5, ...)
  pdf-split report.pdf --ranges "1-3,5,8-10"

  # Write the files directly instead of a zip archive
  pdf-split report.pdf --unpack
"""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-split",
        description="Split a PDF into one file per page or one file per page range.",
        epilog=epilog
    )
    BaseArgumentParser.add_input_path_argument(parser)
    parser.add_argument(
        "--ranges",
        type=str,
        default=None,
        help='Comma-separated page ranges, each becoming its own file (default: split every page)'
    )
    parser.add_argument(
        "--unpack",
        action="store_true",
        help="Write the split files directly instead of a zip archive"
    )
    add_output_args(parser)
    return parser


def main():
    """Main entry point for pdf-split command."""
    setup_logging()
    parser = create_parser()
    args = parser.parse_args()
    mode = SplitMode.RANGES if args.ranges else SplitMode.ALL

    def operation(reporter):
        data, name = read_input_file(args.input_path)
        return split_document(data, name, mode, ranges=args.ranges, reporter=reporter)

    run_command(args, [args.input_path], "Splitting", operation)


if __name__ == "__main__":
    main()
