"""
Unit tests for the pypdf document backend.
"""

import pytest
import os
import sys

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from pdf_toolkit.documents import PagedDocument, PypdfBackend, get_document_backend
from pdf_toolkit.errors import DocumentLoadError
from tests.helpers import build_encrypted_pdf, build_numbered_pdf, page_width, read_rotations, read_widths


class TestPypdfBackend:
    """Test cases for PypdfBackend."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.backend = PypdfBackend()

    def test_load(self):
        document = self.backend.load(build_numbered_pdf(3), "three.pdf")

        assert isinstance(document, PagedDocument)
        assert document.page_count == 3
        assert len(document) == 3
        assert document.name == "three.pdf"

    def test_load_garbage(self):
        with pytest.raises(DocumentLoadError):
            self.backend.load(b"this is not a pdf", "notes.txt")

    def test_load_empty(self):
        with pytest.raises(DocumentLoadError):
            self.backend.load(b"", "empty.pdf")

    def test_load_encrypted_without_password(self):
        with pytest.raises(DocumentLoadError) as exc_info:
            self.backend.load(build_encrypted_pdf(2, "secret"), "locked.pdf")
        assert "password" in str(exc_info.value)

    def test_load_encrypted_wrong_password(self):
        with pytest.raises(DocumentLoadError):
            self.backend.load(build_encrypted_pdf(2, "secret"), "locked.pdf", password="guess")

    def test_load_encrypted_with_password(self):
        document = self.backend.load(build_encrypted_pdf(2, "secret"), "locked.pdf", password="secret")
        assert document.page_count == 2

    def test_create_is_empty(self):
        assert self.backend.create("new.pdf").page_count == 0

    def test_copy_page_appends(self):
        source = self.backend.load(build_numbered_pdf(3), "src.pdf")
        target = self.backend.create()

        self.backend.copy_page(target, source, 2)
        self.backend.copy_page(target, source, 0)

        assert read_widths(self.backend.serialize(target)) == [page_width(3), page_width(1)]
        assert source.page_count == 3

    def test_copy_into_loaded_document_is_rejected(self):
        source = self.backend.load(build_numbered_pdf(1), "src.pdf")
        other = self.backend.load(build_numbered_pdf(1), "other.pdf")
        with pytest.raises(TypeError):
            self.backend.copy_page(other, source, 0)

    def test_copy_page_out_of_range(self):
        source = self.backend.load(build_numbered_pdf(1), "src.pdf")
        with pytest.raises(IndexError):
            self.backend.copy_page(self.backend.create(), source, 5)

    def test_rotate_page(self):
        source = self.backend.load(build_numbered_pdf(2), "src.pdf")
        target = self.backend.create()
        self.backend.copy_page(target, source, 0)
        self.backend.copy_page(target, source, 1)

        self.backend.rotate_page(target, 1, 90)

        assert read_rotations(self.backend.serialize(target)) == [0, 90]

    def test_encrypt(self):
        source = self.backend.load(build_numbered_pdf(2), "src.pdf")
        target = self.backend.create()
        self.backend.copy_page(target, source, 0)

        self.backend.encrypt(target, "secret")
        data = self.backend.serialize(target)

        with pytest.raises(DocumentLoadError):
            self.backend.load(data, "protected.pdf")
        assert read_widths(data, password="secret") == [page_width(1)]

    def test_serialize_loaded_document(self):
        data = build_numbered_pdf(2)
        document = self.backend.load(data, "src.pdf")
        assert read_widths(self.backend.serialize(document)) == read_widths(data)

    def test_global_backend_is_shared(self):
        assert get_document_backend() is get_document_backend()
