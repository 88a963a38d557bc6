"""
Zip archive writer for bundled outputs.
"""

from __future__ import annotations

import zipfile
from io import BytesIO


class ZipArchive:
    """In-memory zip archive: add entries, then finalize to bytes."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        self._buffer = BytesIO()
        self._zip = zipfile.ZipFile(self._buffer, mode="w", compression=compression)
        self._finalized = False

    def add_entry(self, name: str, data: bytes) -> None:
        if self._finalized:
            raise RuntimeError("Archive already finalized")
        self._zip.writestr(name, data)

    def finalize(self) -> bytes:
        if not self._finalized:
            self._zip.close()
            self._finalized = True
        return self._buffer.getvalue()
