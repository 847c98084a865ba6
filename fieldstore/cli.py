"""Command that exercises a field store file end to end."""

from __future__ import annotations

import argparse
import sys

from .errors import FieldStoreError
from .file_manager import FileManager
from .memory_manager import FileField, MemoryManager

DEMO_FIELDS = (FileField(0, 4), FileField(1, 6), FileField(2, 10), FileField(3, 20))


def _run_demo(file_manager):
    store = MemoryManager(file_manager, DEMO_FIELDS)
    store.initialize_all_fields()
    for field, letter in zip(DEMO_FIELDS, "abcd"):
        store.write_field(field.index, letter.encode() * field.size, backup=False)

    first = store.read_field(0)
    print(f"aaaa2: {first.decode('ascii', 'replace')}")

    try:
        store.write_field(0, b"bbbbbb", backup=True)
    except FieldStoreError as exc:
        print(f"warning: {exc}", file=sys.stderr)

    store.validate_all_fields()
    store.read_field(0)
    store.erase_field(0)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="fieldstore",
        description="Initialize, write, read, validate and erase fields in a store file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="batz",
        help="existing file to use as the store (default: batz)",
    )
    args = parser.parse_args(argv)
    try:
        with FileManager(args.path) as file_manager:
            _run_demo(file_manager)
    except FieldStoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())