"""Configuration models and loaders for svg library compilation."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

StorageFormat = Literal["yaml", "python"]

FORMAT_SUFFIXES: dict[str, StorageFormat] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".py": "python",
}


class CompileConfig(BaseModel):
    """Which folders to compile and where to write the library."""

    roots: list[Path] = Field(..., min_length=1, description="Svg folders, compiled in order")
    output: Path | None = Field(None, description="Library artifact to write")
    format: StorageFormat | None = Field(None, description="Artifact format (default: from suffix)")
    variable: str = Field("SVGS", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")

    def get_format(self) -> StorageFormat | None:
        """Return format, defaulting to the one implied by the output suffix."""
        if self.format is not None:
            return self.format
        if self.output is None:
            return None
        return FORMAT_SUFFIXES.get(self.output.suffix.lower())


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_compile_config(path: Path) -> CompileConfig:
    """Load compile configuration from a YAML file.

    Relative ``roots`` and ``output`` are resolved against the folder holding
    the config file.

    Example file::

        roots:
          - assets/svg
          - vendor/heroicons
        output: build/icons.py
        variable: ICONS
    """
    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    base = path.parent

    def resolve(value: Any) -> Any:
        if value is None:
            return None
        p = Path(value)
        return p if p.is_absolute() else base / p

    roots = data.get("roots", [])
    if isinstance(roots, (str, Path)):
        roots = [roots]

    return CompileConfig(
        roots=[resolve(root) for root in roots],
        output=resolve(data.get("output")),
        format=data.get("format"),
        variable=data.get("variable", "SVGS"),
    )
