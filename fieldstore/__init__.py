"""Fixed-size field storage in one file, with checksums, write flags and backup-slot recovery."""

__version__ = "0.1.0"
__all__ = ["errors", "file_manager", "memory_manager", "cli"]