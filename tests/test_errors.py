import pytest

from fieldstore.errors import (
    DataCorruptedError,
    DataNotWrittenError,
    ErrorCode,
    FieldStoreError,
    FileProblemError,
    GeneralError,
    InvalidIndexError,
)
from fieldstore.file_manager import FileManager


@pytest.mark.parametrize(
    "cls, code",
    [
        (GeneralError, ErrorCode.GENERAL_ERROR),
        (DataNotWrittenError, ErrorCode.DATA_NOT_WRITTEN),
        (DataCorruptedError, ErrorCode.DATA_CORRUPTED),
        (FileProblemError, ErrorCode.FILE_PROBLEM),
        (InvalidIndexError, ErrorCode.INVALID_INDEX),
    ],
)
def test_each_error_carries_its_code(cls, code):
    err = cls("boom")
    assert err.code == code
    assert isinstance(err, FieldStoreError)


@pytest.mark.parametrize(
    "cls, value",
    [
        (GeneralError, 1),
        (DataNotWrittenError, 2),
        (DataCorruptedError, 3),
        (FileProblemError, 4),
        (InvalidIndexError, 5),
    ],
)
def test_error_code_values_match_format(cls, value):
    assert cls("boom").code == value


def test_message_is_kept():
    err = InvalidIndexError("Invalid field index 9!")
    assert err.message == "Invalid field index 9!"
    assert str(err) == "Invalid field index 9!"


def test_errors_can_be_caught_by_base_class(tmp_path):
    with pytest.raises(FieldStoreError) as info:
        FileManager(tmp_path / "absent.bin")
    assert info.value.code == ErrorCode.FILE_PROBLEM