"""
Pytest configuration and fixtures for PDF page toolkit tests.
"""

import pytest
import os
import sys
import tempfile
import shutil
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.helpers import build_numbered_pdf


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def five_page_pdf():
    """Bytes of a 5 page PDF with distinct page widths."""
    return build_numbered_pdf(5)


@pytest.fixture
def pdf_file(temp_dir):
    """Write a numbered PDF to disk and return its path."""
    def _write(page_count: int, name: str = "sample.pdf", offset: int = 0) -> str:
        path = os.path.join(temp_dir, name)
        with open(path, "wb") as f:
            f.write(build_numbered_pdf(page_count, offset))
        return path
    return _write
