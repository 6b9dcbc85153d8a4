"""
Exceptions raised while loading dictionary data.

Lookup misses are never exceptions: an unknown prefix, headword or
reference target is an empty result.
"""

from pathlib import Path


class SanastoError(Exception):
    """Base exception for sanasto."""
    pass


class GlossLoadError(SanastoError):
    """A gloss record could not be parsed; the whole load is aborted.

    Attributes:
        path: File being loaded, or None for in-memory records
        line_number: 1-based line (or record) number of the bad record
    """

    def __init__(self, message: str, path: Path | None = None, line_number: int | None = None) -> None:
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}"
        if line_number is not None:
            location = f"{location}:{line_number}" if location else f"record {line_number}"
        super().__init__(f"{location}: {message}" if location else message)
