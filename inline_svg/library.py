"""Compile folders of svg files into an immutable library of inline markup."""

import logging
from collections.abc import Iterable, Iterator, KeysView, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from markupsafe import Markup

from .errors import FileError
from .render import render

logger = logging.getLogger(__name__)

Library = Mapping[str, str]

SVG_OPEN = "<svg"
SVG_CLOSE = "</svg>"
SVG_SUFFIX = ".svg"


def find_svg_files(svg_root: Path) -> list[Path]:
    """List every ``*.svg`` file below a root folder, sorted by path.

    Hidden files and anything inside a hidden folder are skipped.

    Args:
        svg_root: Folder to search recursively

    Returns:
        Sorted list of svg file paths (empty if the folder does not exist)
    """
    if not svg_root.is_dir():
        return []
    paths = []
    for path in svg_root.rglob(f"*{SVG_SUFFIX}"):
        relative = path.relative_to(svg_root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file():
            paths.append(path)
    return sorted(paths)


def svg_key(path: Path, svg_root: Path) -> str:
    """Build the library key for an svg file.

    The key is the path relative to the root, with forward slashes and
    without the ``.svg`` suffix: ``assets/svg/heroicons/calendar.svg``
    compiled from ``assets/svg`` becomes ``heroicons/calendar``.
    """
    key = path.relative_to(svg_root).as_posix().strip("/")
    return key.removesuffix(SVG_SUFFIX)


def extract_svg(content: str) -> str | None:
    """Return the text between the ``<svg`` marker and the first ``</svg>``.

    Returns None unless the content holds exactly one opening marker
    followed by at least one closing marker.
    """
    if content.count(SVG_OPEN) != 1:
        return None
    _, body = content.split(SVG_OPEN, 1)
    if SVG_CLOSE not in body:
        return None
    inner, _ = body.split(SVG_CLOSE, 1)
    return inner


def read_svg(path: Path, svg_root: Path) -> tuple[str, str]:
    """Read one svg file and return its key and library value.

    Anything before the ``<svg`` tag or after the ``</svg>`` tag is treated as
    comment and dropped. The value keeps the closing tag.

    Args:
        path: Path to the svg file
        svg_root: Root folder the key is relative to

    Returns:
        (key, markup) tuple

    Raises:
        FileError: The file can't be read, isn't UTF-8, or has no single svg tag
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileError(path, f"could not be read ({exc.strerror or exc})") from exc

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileError(path, "is not valid UTF-8 text") from exc

    inner = extract_svg(content)
    if inner is None:
        raise FileError(path, f"must contain a single {SVG_OPEN}...{SVG_CLOSE} tag")

    return svg_key(path, svg_root), inner + SVG_CLOSE


def compile_library(svg_root: Path | str, library: Library | None = None) -> Library:
    """Compile a folder of ``*.svg`` files into a library you can render from.

    The folder and its subfolders are traversed and every svg file is added
    under its key (see ``svg_key``). Pass the result of a previous call as
    ``library`` to fold several folders into one library. The input library
    is never modified.

    A file whose key is already in the library overwrites the earlier entry
    and logs a warning.

    Args:
        svg_root: Folder to compile
        library: Existing library to extend

    Returns:
        New read-only library

    Raises:
        FileError: On the first invalid svg file. Nothing is returned.
    """
    svg_root = Path(svg_root)
    compiled: dict[str, str] = dict(library or {})

    paths = find_svg_files(svg_root)
    for path in paths:
        key, svg = read_svg(path, svg_root)
        if key in compiled:
            logger.warning("SVG file: %s overwrites existing svg: %s", path, key)
        compiled[key] = svg

    logger.debug("Compiled %d svg files from %s", len(paths), svg_root)
    return MappingProxyType(compiled)


def compile_libraries(svg_roots: Iterable[Path | str], library: Library | None = None) -> Library:
    """Compile several folders in order into a single library."""
    result = MappingProxyType(dict(library or {}))
    for svg_root in svg_roots:
        result = compile_library(svg_root, result)
    return result


class SvgLibrary(Mapping[str, str]):
    """Read-only set of compiled svgs with a render accessor.

    Build it once when the application starts and hand it to whatever
    renders templates::

        icons = SvgLibrary.compile("assets/svg")
        icons.render("heroicons/user", class_="h-5 w-5 inline")

    It is itself a read-only mapping of key -> markup, so it can be passed
    anywhere a library is expected, including ``compile_library``.

    Attributes:
        library: The underlying read-only mapping of key -> markup
    """

    def __init__(self, library: Library | None = None):
        self._library: Library = MappingProxyType(dict(library or {}))

    @classmethod
    def compile(cls, *svg_roots: Path | str) -> "SvgLibrary":
        """Compile one or more svg folders."""
        return cls(compile_libraries(svg_roots))

    @classmethod
    def load(cls, path: Path | str, variable: str = "SVGS") -> "SvgLibrary":
        """Load a library previously written with ``save_library``."""
        from .storage import load_library

        return cls(load_library(path, variable=variable))

    @property
    def library(self) -> Library:
        return self._library

    def render(self, key: str, /, *pairs: tuple[str, Any], **attrs: Any) -> Markup:
        """Render an svg as a safe string.

        Positional ``(name, value)`` pairs are emitted before keyword
        attributes. Trailing underscores let keyword names dodge Python
        keywords (``class_`` becomes ``class``).
        """
        named = [(name.rstrip("_") or name, value) for name, value in attrs.items()]
        return render(self._library, key, [*pairs, *named])

    def keys(self) -> KeysView[str]:
        return self._library.keys()

    def __getitem__(self, key: str) -> str:
        return self._library[key]

    def __contains__(self, key: object) -> bool:
        return key in self._library

    def __iter__(self) -> Iterator[str]:
        return iter(self._library)

    def __len__(self) -> int:
        return len(self._library)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} svgs)"
