"""
Simple and fast inline svg library and renderer for web applications.

Svg files are read once, at build or startup time, into a read-only library.
Templates then render from memory without touching the filesystem.

Usage:
    python -m inline_svg compile assets/svg -o build/icons.yaml
    python -m inline_svg render build/icons.yaml heroicons/user -a class="h-5 w-5"
    python -m inline_svg list build/icons.yaml
"""

from .config import CompileConfig, load_yaml, load_compile_config
from .errors import SvgError, FileError, NotFoundError, StorageError
from .library import (
    Library,
    SvgLibrary,
    compile_library,
    compile_libraries,
    read_svg,
    svg_key,
)
from .render import render, render_attrs
from .storage import save_library, load_library

__all__ = [
    # Config
    "CompileConfig",
    "load_yaml",
    "load_compile_config",
    # Errors
    "SvgError",
    "FileError",
    "NotFoundError",
    "StorageError",
    # Library
    "Library",
    "SvgLibrary",
    "compile_library",
    "compile_libraries",
    "read_svg",
    "svg_key",
    # Render
    "render",
    "render_attrs",
    # Storage
    "save_library",
    "load_library",
]
