# fieldstore

`fieldstore` stores a fixed set of fields in one file. Each field has a fixed size. On disk, every field is two header bytes followed by its data:

- **byte 0**: the write flag. `y` means the last write finished. `n` means it did not.
- **byte 1**: a one-byte checksum of the data, `(sum of bytes % 256) % 255`. The function `calculate_checksum` computes it.

A backup slot follows the last field. It is as large as the largest field. Before a field is overwritten, its old contents can be copied into this slot. If a write stops partway and leaves the flag at `n`, `validate_all_fields()` restores the field from the backup.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Usage

```python
from fieldstore.file_manager import FileManager
from fieldstore.memory_manager import FileField, MemoryManager

fields = [FileField(0, 4), FileField(1, 6), FileField(2, 10), FileField(3, 20)]

# The file must already exist; FileManager opens it for reading and writing.
with FileManager("store.bin") as fm:
    store = MemoryManager(fm, fields)       # also runs validate_all_fields()
    store.initialize_all_fields()           # every field becomes b"#" padding

    store.write_field(0, b"aaaa")           # backs up the old contents first
    print(store.read_field(0))              # b"aaaa"

    store.erase_field(0)                    # back to b"####"

    # Simulate an interrupted write, then recover from it.
    store.write_field(0, b"bbbb", leave_unfinished=True)
    print(store.validate_all_fields())      # [0]; field 0 restored from the backup slot
```

### `MemoryManager`

- `read_field(index, validate_checksum=True)` returns the field's data as `bytes`. It raises `DataNotWrittenError` if the write flag is not `y`. When `validate_checksum` is true, it raises `DataCorruptedError` if the stored checksum does not match the data.
- `write_field(index, data, backup=True, leave_unfinished=False)` writes data whose length must be exactly the field's size. With `backup`, the current contents are first copied into the backup slot. If that copy fails, a warning is logged and the write still goes ahead. With `leave_unfinished`, the flag stays at `n`.
- `erase_field(index)` fills a field with `#`.
- `initialize_all_fields()` resets every field to `#` data with a finished header.
- `validate_all_fields()` returns the indices of fields whose flag is not `y`. Only the first of them is restored from the backup slot. Any others are logged and left as they are.
- `field_offset(index)` and `field_length(index)` give the layout of a field. The index `backup_index`, which equals the number of fields, refers to the backup slot.
- `backup_offset` is the file offset where the backup slot starts.

If the fields and the backup slot together need more than 100 bytes, a warning is logged. No error is raised.

### Errors

Every failure raises a subclass of `fieldstore.errors.FieldStoreError`:

| Exception             | Raised when                                                  |
|-----------------------|--------------------------------------------------------------|
| `InvalidIndexError`   | the index is negative or beyond the backup slot              |
| `GeneralError`        | the data length does not match the field size                |
| `DataNotWrittenError` | the write flag shows an unfinished write                     |
| `DataCorruptedError`  | the stored checksum does not match the data                  |
| `FileProblemError`    | the file cannot be opened, sought, read or written           |

Each exception has a `code` attribute that holds the matching `ErrorCode` member.

### Storage backends

`FileManager` works on an existing file and can be used as a context manager. To use a different storage, subclass `BaseFileManager` and implement `read(offset, length)` and `write(offset, data)`. `erase(offset, length)` is already provided: it fills the range with `#`.

## Command line

```
fieldstore [PATH]
```

`PATH` defaults to `batz` and must already exist. The command runs a demonstration against that file:

1. It sets up four fields of sizes 4, 6, 10 and 20, initialises them and fills each one with a letter.
2. It prints the first field.
3. It tries to overwrite field 0 with six bytes. The field holds four, so a warning is printed.
4. It validates all fields, reads field 0 again and erases it.

On success the exit status is 0. If the store raises an error, the command prints it and exits with status 1.

## Limitations

The package offers no command for reading or editing individual fields of an arbitrary store. The layout of fields is given in code, not stored in the file.