"""Unit tests for file and path helpers."""

from pathlib import Path

import pytest

from cloudops_utils.infrastructure.files import (
    file_base,
    file_contents,
    file_extension,
    file_name,
    file_path,
    find_ancestor_dir,
    find_dir,
    find_file,
    find_files,
    first_file_contents,
    format_path,
)


@pytest.mark.parametrize(
    "path,directory,name,base,extension",
    [
        ("deploy/config/app.json", "deploy/config", "app.json", "app", "json"),
        ("archive.tar.gz", "", "archive.tar.gz", "archive.tar", "gz"),
        ("/opt/Makefile", "/opt", "Makefile", "Makefile", "Makefile"),
    ],
)
def test_path_parts(path: str, directory: str, name: str, base: str, extension: str) -> None:
    """Test splitting paths into their parts."""
    assert file_path(path) == directory
    assert file_name(path) == name
    assert file_base(path) == base
    assert file_extension(path) == extension


def test_format_path() -> None:
    """Test joining path parts."""
    assert format_path("a", "b", "c.txt") == "a/b/c.txt"


def test_file_contents(tmp_path: Path) -> None:
    """Test reading present and missing files."""
    present = tmp_path / "present.txt"
    present.write_text("data")

    assert file_contents(present) == "data"
    assert file_contents(tmp_path / "missing.txt") is None
    assert first_file_contents([tmp_path / "missing.txt", present]) == "data"
    assert first_file_contents([tmp_path / "missing.txt"]) is None


def test_find_ancestor_dir_by_name(tmp_path: Path) -> None:
    """Test walking up to a named directory."""
    start = tmp_path / "project" / "src" / "pkg"
    start.mkdir(parents=True)

    assert find_ancestor_dir("project", str(start)) == str(tmp_path / "project")
    assert find_ancestor_dir("no-such-dir", str(start)) is None


def test_find_ancestor_dir_by_marker(tmp_path: Path) -> None:
    """Test walking up to a directory holding a marker file."""
    root = tmp_path / "repo"
    start = root / "a" / "b"
    start.mkdir(parents=True)
    (root / "marker.cfg").write_text("")

    assert find_ancestor_dir("marker.cfg", str(start)) == str(root)


def test_find_ancestor_dir_checks_filesystem_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a marker file at the filesystem root is found."""
    checked: list[str] = []

    def fake_isfile(path: str) -> bool:
        checked.append(path)
        return path == "/marker.cfg"

    monkeypatch.setattr("cloudops_utils.infrastructure.files.os.path.isfile", fake_isfile)

    assert find_ancestor_dir("marker.cfg", "/srv/app") == "/"
    assert checked == ["/srv/app/marker.cfg", "/srv/marker.cfg", "/marker.cfg"]


def test_find_files_and_dirs(tmp_path: Path) -> None:
    """Test recursive glob lookups."""
    nested = tmp_path / "infra" / "modules"
    nested.mkdir(parents=True)
    (nested / "main.tf").write_text("")
    (tmp_path / "infra" / "vars.tf").write_text("")

    assert find_dir(str(tmp_path), "modules") == str(nested)
    assert find_dir(str(tmp_path), "main.tf") == str(nested)
    assert find_file(f"{tmp_path}/**/main.tf") == str(nested / "main.tf")
    assert find_files(f"{tmp_path}/**/*.tf") == [
        str(tmp_path / "infra" / "modules" / "main.tf"),
        str(tmp_path / "infra" / "vars.tf"),
    ]
    assert find_file(f"{tmp_path}/**/*.py") is None
