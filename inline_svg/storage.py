"""Write compiled svg libraries to disk and load them back.

Two artifact formats are supported:

- ``yaml``: a flat ``key: markup`` mapping
- ``python``: an auto-generated module holding a ``Dict[str, str]``, which the
  application can simply import
"""

import logging
import runpy
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import yaml

from .config import FORMAT_SUFFIXES, StorageFormat
from .errors import StorageError
from .library import Library

logger = logging.getLogger(__name__)

PYTHON_HEADER = """\
# AUTO-GENERATED STORAGE FILE - DO NOT EDIT BY HAND
# Stores {count} compiled SVG icons, keyed by path relative to the svg folder.
# Regenerate with: python -m inline_svg compile <svg folder> -o <this file>

from typing import Dict

"""


def storage_format(path: Path, fmt: StorageFormat | None = None) -> StorageFormat:
    """Return the artifact format, inferring it from the suffix if not given."""
    if fmt is not None:
        return fmt
    try:
        return FORMAT_SUFFIXES[path.suffix.lower()]
    except KeyError:
        raise StorageError(path, f"unknown library format for suffix {path.suffix!r}") from None


def dump_python(library: Library, variable: str = "SVGS") -> str:
    """Render a library as python module source."""
    lines = [PYTHON_HEADER.format(count=len(library)), f"{variable}: Dict[str, str] = {{"]
    for key in sorted(library):
        lines.append(f"    {key!r}: {library[key]!r},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def dump_yaml(library: Library) -> str:
    """Render a library as YAML."""
    return yaml.safe_dump(dict(library), allow_unicode=True, sort_keys=True, width=float("inf"))


def save_library(
    library: Library,
    path: Path | str,
    fmt: StorageFormat | None = None,
    variable: str = "SVGS",
) -> Path:
    """Write a compiled library to disk.

    Args:
        library: Compiled library
        path: Output file, parent folders are created
        fmt: ``yaml`` or ``python`` (default: from the file suffix)
        variable: Name of the dict in a generated python module

    Returns:
        The path written
    """
    path = Path(path)
    fmt = storage_format(path, fmt)
    content = dump_python(library, variable) if fmt == "python" else dump_yaml(library)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise StorageError(path, f"could not be written ({exc.strerror or exc})") from exc
    logger.debug("Wrote %d svgs to %s (%s)", len(library), path, fmt)
    return path


def _validate(path: Path, data: object) -> Library:
    if not isinstance(data, Mapping):
        raise StorageError(path, f"expected a mapping, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise StorageError(path, f"entry {key!r} is not a string -> string pair")
    return MappingProxyType(dict(data))


def load_library(
    path: Path | str,
    fmt: StorageFormat | None = None,
    variable: str = "SVGS",
) -> Library:
    """Load a library written by ``save_library``.

    Raises:
        StorageError: The file is missing, of unknown format, or malformed
    """
    path = Path(path)
    fmt = storage_format(path, fmt)
    if not path.is_file():
        raise StorageError(path, "file not found")

    if fmt == "python":
        namespace = runpy.run_path(str(path))
        if variable not in namespace:
            raise StorageError(path, f"module defines no {variable!r}")
        data = namespace[variable]
    else:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise StorageError(path, f"invalid YAML ({exc})") from exc
        if data is None:
            data = {}

    return _validate(path, data)
