"""Error codes and the exceptions raised by the field store."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes that identify each kind of failure."""

    OK = 0
    GENERAL_ERROR = 1
    DATA_NOT_WRITTEN = 2
    DATA_CORRUPTED = 3
    FILE_PROBLEM = 4
    INVALID_INDEX = 5


class FieldStoreError(Exception):
    """Base class for every error the field store raises."""

    code: ErrorCode = ErrorCode.GENERAL_ERROR

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class GeneralError(FieldStoreError):
    """A request that cannot be carried out, such as a wrongly sized field."""

    code = ErrorCode.GENERAL_ERROR


class DataNotWrittenError(FieldStoreError):
    """A field whose last write never finished."""

    code = ErrorCode.DATA_NOT_WRITTEN


class DataCorruptedError(FieldStoreError):
    """A field whose stored checksum does not match its data."""

    code = ErrorCode.DATA_CORRUPTED


class FileProblemError(FieldStoreError):
    """The backing file could not be opened, read or written."""

    code = ErrorCode.FILE_PROBLEM


class InvalidIndexError(FieldStoreError):
    """A field index outside the configured fields and backup slot."""

    code = ErrorCode.INVALID_INDEX