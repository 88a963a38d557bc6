"""
CLI for merging PDF files.
"""

from ..operations import merge_documents
from ..utils import BaseArgumentParser, add_output_args, read_input_file, setup_logging
from .common import run_command


def create_parser():
    """Create argument parser for merge command."""
    epilog = """
Examples:
  # Merge two files, in order
  pdf-merge cover.pdf report.pdf

  # Merge into a specific directory
  pdf-merge a.pdf b.pdf c.pdf --output-dir merged/
"""
    parser = BaseArgumentParser.create_base_parser(
        prog="pdf-merge",
        description="Merge PDF files into one document, in the order given.",
        epilog=epilog
    )
    parser.add_argument("input_paths", nargs="+", help="PDF files to merge (at least two)")
    add_output_args(parser)
    return parser


def main():
    """Main entry point for pdf-merge command."""
    setup_logging()
    parser = create_parser()
    args = parser.parse_args()

    def operation(reporter):
        files = [read_input_file(path) for path in args.input_paths]
        return merge_documents(files, reporter)

    run_command(args, args.input_paths, "Merging", operation)


if __name__ == "__main__":
    main()
