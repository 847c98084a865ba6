"""Fixed-size fields stored in a file, with checksums and crash recovery.

Every field is laid out as a two-byte header followed by its data. The
header holds a writing flag (``y`` once a write has finished) and a
checksum of the data. One extra slot after the last field, as large as
the biggest field, holds a backup of the field being overwritten so that
an interrupted write can be undone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import (
    DataCorruptedError,
    DataNotWrittenError,
    FieldStoreError,
    FileProblemError,
    GeneralError,
    InvalidIndexError,
)

logger = logging.getLogger(__name__)

MAX_FILE_CAPACITY = 100
HEADER_SIZE = 2
FLAG_INDEX = 0
CHECKSUM_INDEX = 1
WRITING_DONE = b"y"
WRITING_NOT_DONE = b"n"
EMPTY_BYTE = b"#"


@dataclass(frozen=True)
class FileField:
    """A field's identifier and its fixed size in bytes."""

    index: int
    size: int


def calculate_checksum(data):
    """Return the one-byte checksum of ``data``."""
    return (sum(data) % 256) % 255


class MemoryManager:
    """Reads, writes and restores fixed-size fields through a file manager."""

    def __init__(self, file_manager, fields):
        self._file = file_manager
        self.fields = tuple(fields)
        self._biggest = max((field.size for field in self.fields), default=0)
        total = sum(field.size + HEADER_SIZE for field in self.fields)
        self.backup_offset = total
        if total + self._biggest > MAX_FILE_CAPACITY:
            logger.warning(
                "Fields need %d bytes, more than the capacity of %d",
                total + self._biggest,
                MAX_FILE_CAPACITY,
            )
        self.validate_all_fields()

    @property
    def backup_index(self):
        """Index of the slot that holds the backup copy."""
        return len(self.fields)

    def _check_index(self, index):
        if not 0 <= index <= self.backup_index:
            raise InvalidIndexError(f"Invalid field index {index}!")

    def field_length(self, index):
        """Return the data size of a field; the backup slot has the biggest size."""
        self._check_index(index)
        if index == self.backup_index:
            return self._biggest
        return self.fields[index].size

    def field_offset(self, index):
        """Return the file offset of a field's header."""
        self._check_index(index)
        return sum(field.size + HEADER_SIZE for field in self.fields[:index])

    def read_field(self, index, validate_checksum=True):
        """Return the data of a field, checking its writing flag and checksum."""
        self._check_index(index)
        offset = self.field_offset(index)
        size = self.field_length(index)
        raw = self._file.read(offset, size + HEADER_SIZE)
        if raw[FLAG_INDEX:FLAG_INDEX + 1] != WRITING_DONE:
            raise DataNotWrittenError(f"Field {index} flags are invalid! writing did not finish")
        data = raw[HEADER_SIZE:]
        if validate_checksum and raw[CHECKSUM_INDEX] != calculate_checksum(data):
            raise DataCorruptedError(f"Checksum of field {index} is invalid!")
        return data

    def write_field(self, index, data, backup=True, leave_unfinished=False):
        """Write a field's data, backing up the old contents first if asked.

        With ``leave_unfinished`` the writing flag is left unset, as if the
        write had been interrupted.
        """
        self._check_index(index)
        data = bytes(data)
        size = self.field_length(index)
        if index == self.backup_index:
            if len(data) > size:
                raise GeneralError(
                    f"Backup data of size {len(data)} exceeds backup size {size}"
                )
            data = data.ljust(size, b"\0")
        elif len(data) != size:
            raise GeneralError(
                f"Field {index} does not match field length! size is {len(data)}, "
                f"required size is {size}"
            )

        offset = self.field_offset(index)
        if backup:
            self._back_up_field(index)

        self._file.write(offset + FLAG_INDEX, WRITING_NOT_DONE)
        self._file.write(offset + CHECKSUM_INDEX, bytes([calculate_checksum(data)]))
        self._file.write(offset + HEADER_SIZE, data)
        if leave_unfinished:
            return
        self._file.write(offset + FLAG_INDEX, WRITING_DONE)

    def erase_field(self, index):
        """Fill a field with the empty byte."""
        self._check_index(index)
        self.write_field(index, EMPTY_BYTE * self.field_length(index), backup=False)

    def initialize_all_fields(self):
        """Reset every field to empty data with a finished header."""
        for index, field in enumerate(self.fields):
            empty = EMPTY_BYTE * field.size
            offset = self.field_offset(index)
            self._file.write(offset, WRITING_DONE + bytes([calculate_checksum(empty)]))
            self._file.write(offset + HEADER_SIZE, empty)

    def validate_all_fields(self):
        """Find fields whose write did not finish and restore the first from backup.

        Returns the indices of the fields found unfinished.
        """
        corrupted = []
        for index in range(len(self.fields)):
            try:
                header = self._file.read(self.field_offset(index), HEADER_SIZE)
            except FileProblemError as exc:
                logger.error("Failed reading field %d headers: %s", index, exc)
                header = EMPTY_BYTE * HEADER_SIZE
            if header[FLAG_INDEX:FLAG_INDEX + 1] == WRITING_DONE:
                continue
            logger.warning("Found corrupted field %d", index)
            corrupted.append(index)
            if len(corrupted) == 1:
                try:
                    self._restore_field(index)
                except FieldStoreError as exc:
                    logger.error("Could not restore field %d: %s", index, exc)
                else:
                    logger.info("Restored field %d", index)
            else:
                logger.error(
                    "Too many corrupted fields, cannot restore; %d found", len(corrupted)
                )
        return corrupted

    def _back_up_field(self, index):
        try:
            data = self.read_field(index)
            self.write_field(self.backup_index, data, backup=False)
        except FieldStoreError as exc:
            logger.warning("Could not back up field %d: %s", index, exc)

    def _restore_field(self, index):
        data = self.read_field(self.backup_index, validate_checksum=False)
        self.write_field(index, data[: self.field_length(index)], backup=False)