"""
Output packaging.

Decides whether an operation's result is delivered as one file or as a
bundle of files, and names everything deterministically. Encoding is left to
the serialize callable and the archive writer.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from .. import config
from ..documents import PagedDocument
from .archive import ZipArchive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamingPolicy:
    """
    Output naming rules for one kind of operation.

    Attributes:
        single_name: File name when the result is a single document
        part_template: Bundle entry name, formatted with `n`
        bundle_name: Archive name when the result is a bundle
        multi_file: Always bundle, even for a single result
    """
    single_name: str = config.DEFAULT_DOCUMENT_NAME
    part_template: str = "part-{n}.pdf"
    bundle_name: str = "documents.zip"
    multi_file: bool = False

    def part_name(self, number: int) -> str:
        return self.part_template.format(n=number)

    @classmethod
    def prefixed(cls, prefix: str, original_name: str) -> NamingPolicy:
        """Single-file policy named `<prefix><original_name>`."""
        base = os.path.basename(original_name or '') or config.DEFAULT_DOCUMENT_NAME
        return cls(single_name=f"{prefix}{base}")


MERGE_NAMING = NamingPolicy(single_name=config.MERGED_FILE_NAME)
EXTRACT_NAMING = NamingPolicy(single_name=config.EXTRACTED_FILE_NAME)
SPLIT_ALL_NAMING = NamingPolicy(
    part_template=config.SPLIT_PAGE_TEMPLATE,
    bundle_name=config.SPLIT_BUNDLE_NAME,
    multi_file=True,
)
SPLIT_RANGES_NAMING = NamingPolicy(
    part_template=config.SPLIT_RANGE_TEMPLATE,
    bundle_name=config.SPLIT_BUNDLE_NAME,
    multi_file=True,
)


@dataclass(frozen=True)
class SingleFile:
    """One output document."""
    data: bytes
    name: str


@dataclass(frozen=True)
class BundleEntry:
    """One named document inside a bundle."""
    name: str
    data: bytes


@dataclass(frozen=True)
class Bundle:
    """Several output documents delivered together as an archive."""
    name: str
    entries: tuple[BundleEntry, ...]

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def to_archive(self, archive_factory: Callable[[], ZipArchive] = ZipArchive) -> bytes:
        """Pack the entries, in order, into archive bytes."""
        archive = archive_factory()
        for entry in self.entries:
            archive.add_entry(entry.name, entry.data)
        return archive.finalize()


OutputArtifact = Union[SingleFile, Bundle]


class OutputPackager:
    """Turns assembled documents into an OutputArtifact."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def package(self, documents: Sequence[PagedDocument], policy: NamingPolicy,
                serialize: Callable[[PagedDocument], bytes],
                numbers: Optional[Sequence[int]] = None) -> OutputArtifact:
        """
        Package results.

        Args:
            documents: Assembled documents, in output order
            policy: Naming rules for this operation
            serialize: Encodes a document to bytes
            numbers: Number used to name each bundle entry (default 1..N)

        Returns:
            SingleFile or Bundle

        Raises:
            ValueError: If there is nothing to package or entry names collide
        """
        if not documents:
            raise ValueError("No documents to package")

        if len(documents) == 1 and not policy.multi_file:
            self.logger.debug(f"Packaging single file {policy.single_name}")
            return SingleFile(data=serialize(documents[0]), name=policy.single_name)

        if numbers is None:
            numbers = range(1, len(documents) + 1)
        if len(numbers) != len(documents):
            raise ValueError("Each document needs exactly one entry number")

        names = [policy.part_name(number) for number in numbers]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate entry names in bundle: {names}")

        entries = tuple(
            BundleEntry(name=name, data=serialize(document))
            for name, document in zip(names, documents)
        )
        self.logger.debug(f"Packaging {len(entries)} files into {policy.bundle_name}")
        return Bundle(name=policy.bundle_name, entries=entries)


def save_artifact(artifact: OutputArtifact, output_dir: str, unpack_bundle: bool = False) -> list[str]:
    """
    Write an artifact to disk.

    Args:
        artifact: Result of an operation
        output_dir: Directory to write into, created if missing
        unpack_bundle: Write bundle entries as separate files instead of a zip

    Returns:
        Paths of the written files. When any write fails, the files written
        so far are removed before the error is raised.
    """
    os.makedirs(output_dir, exist_ok=True)

    if isinstance(artifact, SingleFile):
        items = [(artifact.name, artifact.data)]
    elif unpack_bundle:
        items = [(entry.name, entry.data) for entry in artifact.entries]
    else:
        items = [(artifact.name, artifact.to_archive())]

    staged = []
    try:
        for name, data in items:
            staged.append((_write_temp(output_dir, data), os.path.join(output_dir, name)))
    except BaseException:
        for temp_path, _ in staged:
            _remove_quietly(temp_path)
        raise

    # Temp files are moved into place only once every entry is on disk
    written = []
    try:
        for temp_path, path in staged:
            os.replace(temp_path, path)
            written.append(path)
            logger.debug(f"Wrote {path}")
    except BaseException:
        for path in written:
            _remove_quietly(path)
        for temp_path, _ in staged[len(written):]:
            _remove_quietly(temp_path)
        raise
    return written


def _write_temp(output_dir: str, data: bytes) -> str:
    """Write data to a new temp file inside output_dir and return its path."""
    fd, temp_path = tempfile.mkstemp(suffix=".part", dir=output_dir)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except BaseException:
        _remove_quietly(temp_path)
        raise
    return temp_path


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except OSError as e:
        logger.warning(f"Could not remove {path}: {e}")
