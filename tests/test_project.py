from pathlib import Path

from nodescaler.project import relative_to_root


def test_root_contains_package():
    root = Path(relative_to_root(""))
    assert (root / "nodescaler" / "project.py").is_file()


def test_joins_relative_path():
    joined = Path(relative_to_root("charts/values.yaml"))
    assert joined == Path(relative_to_root("")) / "charts" / "values.yaml"


def test_absolute_path_is_joined_under_root():
    assert Path(relative_to_root("/charts")) == Path(relative_to_root("charts"))


def test_path_is_cleaned():
    assert Path(relative_to_root("a/../b")) == Path(relative_to_root("b"))