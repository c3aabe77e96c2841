"""Exception types raised while compiling, storing and rendering svg libraries."""

from pathlib import Path


class SvgError(Exception):
    """Base class for all inline_svg errors."""


class FileError(SvgError):
    """An svg file could not be compiled into the library.

    Raised at build time. Not meant to be caught and retried: the build
    should stop and the file should be fixed.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"SVG file {str(path)!r} is invalid: {reason}")


class NotFoundError(SvgError, KeyError):
    """A key was requested that is not in the library."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"SVG {key!r} not found")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class StorageError(SvgError):
    """A library artifact could not be written, or is missing or malformed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"SVG library {str(path)!r}: {reason}")
