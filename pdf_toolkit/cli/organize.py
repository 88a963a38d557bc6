"""
CLI for reordering, removing and duplicating PDF pages.
"""

from ..operations import organize_pages
from ..utils import BaseArgumentParser, add_output_args, read_input_file, setup_logging
from .common import run_command


def create_parser():
    """Create argument parser for organize command."""
    epilog = """
Examples:
  # Move page 3 to the front
  pdf-organize deck.pdf --order "3,1,2,4-10"

  # Drop page 3 of a 5 page file
  pdf-organize deck.pdf --order "1,2,4,5"

  # Duplicate page 2
  pdf-organize deck.pdf --order "1,2,2,3"
"""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-organize",
        description="Rebuild a PDF with its pages in a new order.",
        epilog=epilog
    )
    BaseArgumentParser.add_input_path_argument(parser)
    parser.add_argument(
        "--order",
        type=str,
        required=True,
        help='New page order, e.g. "3,1,2,5-7"'
    )
    add_output_args(parser)
    return parser


def main():
    """Main entry point for pdf-organize command."""
    setup_logging()
    parser = create_parser()
    args = parser.parse_args()

    def operation(reporter):
        data, name = read_input_file(args.input_path)
        return organize_pages(data, name, args.order, reporter)

    run_command(args, [args.input_path], "Organizing", operation)


if __name__ == "__main__":
    main()
