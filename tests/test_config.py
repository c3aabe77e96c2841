from pathlib import Path

import pytest
from pydantic import ValidationError

from inline_svg import CompileConfig, load_compile_config


def test_load_compile_config_resolves_relative_paths(tmp_path):
    config_path = tmp_path / "svg_config.yaml"
    config_path.write_text(
        "roots:\n"
        "  - assets/svg\n"
        "  - /opt/icons\n"
        "output: build/icons.py\n"
        "variable: ICONS\n"
    )

    config = load_compile_config(config_path)

    assert config.roots == [tmp_path / "assets" / "svg", Path("/opt/icons")]
    assert config.output == tmp_path / "build" / "icons.py"
    assert config.variable == "ICONS"
    assert config.get_format() == "python"


def test_single_root_string_is_accepted(tmp_path):
    config_path = tmp_path / "svg_config.yaml"
    config_path.write_text("roots: svg\n")

    config = load_compile_config(config_path)

    assert config.roots == [tmp_path / "svg"]
    assert config.output is None
    assert config.get_format() is None


def test_explicit_format_wins():
    config = CompileConfig(roots=[Path("svg")], output=Path("icons.txt"), format="yaml")
    assert config.get_format() == "yaml"


def test_roots_are_required(tmp_path):
    config_path = tmp_path / "svg_config.yaml"
    config_path.write_text("output: icons.yaml\n")

    with pytest.raises(ValidationError):
        load_compile_config(config_path)


def test_variable_must_be_identifier():
    with pytest.raises(ValidationError):
        CompileConfig(roots=[Path("svg")], variable="not valid")


@pytest.mark.parametrize("content", ["- svg\n- more\n", "just a string\n"])
def test_config_must_be_a_mapping(tmp_path, content):
    config_path = tmp_path / "svg_config.yaml"
    config_path.write_text(content)

    with pytest.raises(ValueError, match="expected a mapping"):
        load_compile_config(config_path)
