"""
Unit tests for CLI commands.
"""

import pytest
import os
import sys
import tempfile
import shutil
from argparse import Namespace
from unittest.mock import patch

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from pdf_toolkit.assembly import SingleFile
from pdf_toolkit.cli import extract, merge, organize, protect, rotate, split
from pdf_toolkit.cli.common import run_command
from pdf_toolkit.errors import CopyFailedError, DocumentLoadError, EmptySelectionError
from tests.helpers import build_numbered_pdf, page_width, read_rotations, read_widths, read_zip


class TestCLICommands:
    """Test cases for CLI commands."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.test_dir = tempfile.mkdtemp()
        self.output_dir = os.path.join(self.test_dir, "out")

    def teardown_method(self):
        """Cleanup after each test method."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _write_pdf(self, name, page_count, offset=0):
        path = os.path.join(self.test_dir, name)
        with open(path, "wb") as f:
            f.write(build_numbered_pdf(page_count, offset))
        return path

    def _read_output(self, name):
        with open(os.path.join(self.output_dir, name), "rb") as f:
            return f.read()

    @pytest.mark.parametrize("module,prog", [
        (merge, "pdf-merge"),
        (split, "pdf-split"),
        (extract, "pdf-extract"),
        (organize, "pdf-organize"),
        (rotate, "pdf-rotate"),
    ])
    def test_create_parser(self, module, prog):
        parser = module.create_parser()
        assert parser.prog == prog

    def test_protect_parsers(self):
        assert protect.create_protect_parser().prog == "pdf-protect"
        assert protect.create_unlock_parser().prog == "pdf-unlock"

    def test_help_functionality(self):
        parser = split.create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(['--help'])
        assert exc_info.value.code == 0

    def test_extract_requires_pages(self):
        with pytest.raises(SystemExit) as exc_info:
            extract.create_parser().parse_args(['doc.pdf'])
        assert exc_info.value.code == 2

    def test_merge_main(self):
        first = self._write_pdf("a.pdf", 2)
        second = self._write_pdf("b.pdf", 1, offset=50)

        with patch('sys.argv', ['pdf-merge', first, second, '--output-dir', self.output_dir, '--no-progress']):
            merge.main()

        assert read_widths(self._read_output("merged-document.pdf")) == [
            page_width(1), page_width(2), page_width(1, 50)
        ]

    def test_split_main_zip(self):
        path = self._write_pdf("doc.pdf", 3)

        with patch('sys.argv', ['pdf-split', path, '--output-dir', self.output_dir, '--quiet']):
            split.main()

        contents = read_zip(self._read_output("split-pdfs.zip"))
        assert list(contents) == ["page-1.pdf", "page-2.pdf", "page-3.pdf"]

    def test_split_main_ranges_unpacked(self):
        path = self._write_pdf("doc.pdf", 5)

        with patch('sys.argv', ['pdf-split', path, '--ranges', '1-2,5', '--unpack',
                                '--output-dir', self.output_dir, '--no-progress']):
            split.main()

        assert read_widths(self._read_output("split-1.pdf")) == [page_width(1), page_width(2)]
        assert read_widths(self._read_output("split-2.pdf")) == [page_width(5)]

    def test_extract_main(self):
        path = self._write_pdf("doc.pdf", 5)

        with patch('sys.argv', ['pdf-extract', path, '--pages', '2,4', '--output-dir', self.output_dir,
                                '--no-progress']):
            extract.main()

        assert read_widths(self._read_output("extracted-pages.pdf")) == [page_width(2), page_width(4)]

    def test_extract_main_bad_selector(self):
        path = self._write_pdf("doc.pdf", 5)

        with patch('sys.argv', ['pdf-extract', path, '--pages', '9-12', '--output-dir', self.output_dir,
                                '--no-progress']):
            with pytest.raises(SystemExit) as exc_info:
                extract.main()

        assert exc_info.value.code == 1
        assert not os.path.exists(self.output_dir)

    def test_organize_main(self):
        path = self._write_pdf("deck.pdf", 3)

        with patch('sys.argv', ['pdf-organize', path, '--order', '3,2,1', '--output-dir', self.output_dir,
                                '--no-progress']):
            organize.main()

        assert read_widths(self._read_output("organized-deck.pdf")) == [page_width(3), page_width(2), page_width(1)]

    def test_rotate_main(self):
        path = self._write_pdf("deck.pdf", 2)

        with patch('sys.argv', ['pdf-rotate', path, '--angle', '270', '--pages', '1',
                                '--output-dir', self.output_dir, '--no-progress']):
            rotate.main()

        assert read_rotations(self._read_output("rotated-deck.pdf")) == [270, 0]

    def test_protect_and_unlock_main(self):
        path = self._write_pdf("deck.pdf", 2)

        with patch('sys.argv', ['pdf-protect', path, '--password', 'secret',
                                '--output-dir', self.output_dir, '--no-progress']):
            protect.main()
        protected = os.path.join(self.output_dir, "protected-deck.pdf")

        with patch('sys.argv', ['pdf-unlock', protected, '--password', 'secret',
                                '--output-dir', self.output_dir, '--no-progress']):
            protect.unlock_main()

        assert read_widths(self._read_output("unlocked-protected-deck.pdf")) == [page_width(1), page_width(2)]

    def test_protect_prompts_for_password(self):
        path = self._write_pdf("deck.pdf", 1)

        with patch('sys.argv', ['pdf-protect', path, '--output-dir', self.output_dir, '--no-progress']):
            with patch('pdf_toolkit.cli.protect.getpass.getpass', side_effect=['secret', 'other']):
                with pytest.raises(SystemExit) as exc_info:
                    protect.main()

        assert exc_info.value.code == 1

    def test_protect_missing_file_exits_before_prompt(self):
        missing = os.path.join(self.test_dir, "missing.pdf")

        with patch('sys.argv', ['pdf-protect', missing, '--output-dir', self.output_dir, '--no-progress']):
            with patch('pdf_toolkit.cli.protect.getpass.getpass') as mock_getpass:
                with pytest.raises(SystemExit) as exc_info:
                    protect.main()

        assert exc_info.value.code == 1
        mock_getpass.assert_not_called()

    def test_protect_short_password(self):
        path = self._write_pdf("deck.pdf", 1)

        with patch('sys.argv', ['pdf-protect', path, '--password', 'abc',
                                '--output-dir', self.output_dir, '--no-progress']):
            with pytest.raises(SystemExit) as exc_info:
                protect.main()

        assert exc_info.value.code == 1


class TestRunCommand:
    """Test cases for the shared command runner."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.test_dir = tempfile.mkdtemp()
        self.input_path = os.path.join(self.test_dir, "doc.pdf")
        with open(self.input_path, "wb") as f:
            f.write(build_numbered_pdf(1))
        self.args = Namespace(output_dir=os.path.join(self.test_dir, "out"), no_progress=True,
                              quiet=False, verbose=False)

    def teardown_method(self):
        """Cleanup after each test method."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_writes_artifact(self):
        paths = run_command(self.args, [self.input_path], "Test", lambda reporter: SingleFile(b"x", "x.pdf"))
        assert paths == [os.path.join(self.args.output_dir, "x.pdf")]

    def test_default_output_dir(self):
        self.args.output_dir = None
        paths = run_command(self.args, [self.input_path], "Test", lambda reporter: SingleFile(b"x", "x.pdf"))
        assert paths == [os.path.join(self.test_dir, "pdf_output", "x.pdf")]

    def test_missing_input(self):
        with pytest.raises(SystemExit) as exc_info:
            run_command(self.args, [os.path.join(self.test_dir, "missing.pdf")], "Test",
                        lambda reporter: SingleFile(b"x", "x.pdf"))
        assert exc_info.value.code == 1

    def test_wrong_extension(self):
        other = os.path.join(self.test_dir, "notes.txt")
        with open(other, "w") as f:
            f.write("text")
        with pytest.raises(SystemExit):
            run_command(self.args, [other], "Test", lambda reporter: SingleFile(b"x", "x.pdf"))

    def test_verbose_and_quiet_conflict(self):
        self.args.verbose = True
        self.args.quiet = True
        with pytest.raises(SystemExit):
            run_command(self.args, [self.input_path], "Test", lambda reporter: SingleFile(b"x", "x.pdf"))

    @pytest.mark.parametrize("error", [
        EmptySelectionError(),
        DocumentLoadError("bad file"),
        CopyFailedError(2, "doc.pdf"),
        ValueError("bad value"),
    ])
    def test_errors_exit_without_output(self, error):
        def failing(reporter):
            raise error

        with pytest.raises(SystemExit) as exc_info:
            run_command(self.args, [self.input_path], "Test", failing)

        assert exc_info.value.code == 1
        assert not os.path.exists(self.args.output_dir)
