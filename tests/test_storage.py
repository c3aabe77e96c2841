import pytest

from inline_svg import SvgLibrary, StorageError, load_library, save_library

from .conftest import SVG_DIR


@pytest.mark.parametrize("name", ["icons.yaml", "icons.yml", "icons.py"])
def test_saved_library_loads_back(library, tmp_path, name):
    path = save_library(library, tmp_path / "build" / name)

    assert path.exists()
    assert dict(load_library(path)) == dict(library)


def test_python_module_is_generated_source(library, tmp_path):
    path = save_library(library, tmp_path / "icons.py", variable="ICONS")
    source = path.read_text(encoding="utf-8")

    assert source.startswith("# AUTO-GENERATED STORAGE FILE")
    assert "ICONS: Dict[str, str] = {" in source
    assert source.index("'more/cube'") < source.index("'nested/list'") < source.index("'x'")
    assert dict(load_library(path, variable="ICONS")) == dict(library)


def test_explicit_format_overrides_suffix(library, tmp_path):
    path = save_library(library, tmp_path / "icons.txt", fmt="yaml")
    assert dict(load_library(path, fmt="yaml")) == dict(library)


def test_unknown_suffix_raises(library, tmp_path):
    with pytest.raises(StorageError, match="unknown library format"):
        save_library(library, tmp_path / "icons.json")


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(StorageError, match="file not found"):
        load_library(tmp_path / "missing.yaml")


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "icons.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(StorageError, match="expected a mapping"):
        load_library(path)


def test_load_rejects_non_string_values(tmp_path):
    path = tmp_path / "icons.yaml"
    path.write_text("x: 1\n")
    with pytest.raises(StorageError, match="not a string"):
        load_library(path)


def test_load_python_module_without_variable(tmp_path):
    path = tmp_path / "icons.py"
    path.write_text("OTHER = {}\n")
    with pytest.raises(StorageError, match="defines no 'SVGS'"):
        load_library(path)


def test_empty_yaml_is_empty_library(tmp_path):
    path = tmp_path / "icons.yaml"
    path.write_text("")
    assert dict(load_library(path)) == {}


def test_svg_library_load(tmp_path):
    path = save_library(SvgLibrary.compile(SVG_DIR).library, tmp_path / "icons.py")
    icons = SvgLibrary.load(path)

    assert icons.render("nested/list", class_="icon").startswith('<svg class="icon" xmlns=')


def test_save_to_unwritable_path_raises(library, tmp_path):
    target = tmp_path / "icons.yaml"
    target.mkdir()
    with pytest.raises(StorageError, match="could not be written"):
        save_library(library, target)
