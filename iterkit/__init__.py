"""Iterator adaptors: fixed-size tuples and windows, uniqueness, positions and zipping."""

__version__ = "0.1.0"

__all__ = ["tuples", "unique", "with_position", "zip_eq", "zip_longest", "ziptuple"]