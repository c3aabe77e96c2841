from pathlib import Path

import pytest

from inline_svg import compile_library

TESTS_DIR = Path(__file__).parent
SVG_DIR = TESTS_DIR / "svgs"
SVG_INVALID_DIR = TESTS_DIR / "svg_invalid"


@pytest.fixture(scope="session")
def library():
    return compile_library(SVG_DIR)


@pytest.fixture
def svg_tree(tmp_path):
    """Return a helper that writes svg files below tmp_path/svgs."""
    root = tmp_path / "svgs"

    def write(rel: str, content: str) -> Path:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    root.mkdir()
    write.root = root
    return write
