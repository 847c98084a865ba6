"""Byte-level access to the file that backs a field store."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .errors import FileProblemError

logger = logging.getLogger(__name__)

ERASE_BYTE = b"#"


class BaseFileManager(ABC):
    """Reads and writes raw bytes at given offsets.

    Callers are expected to have validated offsets and lengths already.
    """

    @abstractmethod
    def read(self, offset, length):
        """Return exactly ``length`` bytes starting at ``offset``."""

    @abstractmethod
    def write(self, offset, data):
        """Write all of ``data`` starting at ``offset``."""

    def erase(self, offset, length):
        """Overwrite ``length`` bytes at ``offset`` with the erase byte."""
        self.write(offset, ERASE_BYTE * length)


class FileManager(BaseFileManager):
    """A file manager over an existing file opened for reading and writing."""

    def __init__(self, path):
        self.path = path
        try:
            self._file = open(path, "r+b")
        except OSError as exc:
            raise FileProblemError(f"Could not open {path!s} for reading and writing: {exc}") from exc

    def _seek(self, offset):
        if self._file.closed:
            raise FileProblemError("File is not open")
        try:
            self._file.seek(offset)
        except (OSError, ValueError) as exc:
            raise FileProblemError(f"Failed to seek file to offset {offset}: {exc}") from exc

    def read(self, offset, length):
        self._seek(offset)
        try:
            data = self._file.read(length)
        except OSError as exc:
            raise FileProblemError(f"Could not read from file: {exc}") from exc
        if len(data) != length:
            raise FileProblemError(
                f"Could not read all bytes! wanted number is {length}, actual is {len(data)}"
            )
        return data

    def write(self, offset, data):
        self._seek(offset)
        try:
            self._file.write(bytes(data))
            self._file.flush()
        except OSError as exc:
            raise FileProblemError(f"Could not write to file: {exc}") from exc

    def close(self):
        """Close the underlying file; later reads and writes fail."""
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False