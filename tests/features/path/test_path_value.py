"""
Summary: Behaviour of the immutable Path value and its derived views.
Why: Guard the documented examples and laws (round trip, reconstruction, dotfile parts) of the public type.
"""

from __future__ import annotations

import os
from pathlib import PurePosixPath

import pytest
from pytest_mock import MockerFixture

from pathvalue import Path, PosixPath, PurePath, WindowsPath, joinpath
from pathvalue.features.path.domain.errors import PathPreconditionError
from pathvalue.features.path.usecases.ports import FilesystemPort
from pathvalue.shared.file_info import FilePermission

pytestmark = pytest.mark.skipif(os.name == "nt", reason="examples use the POSIX host flavor")

EXAMPLE = "/home/adam/nim/NimPathlib/NimPathlib.nim"


def test_round_trip_preserves_text() -> None:
    for text in ["", "a//b", "/home/adam/", "C:\\x", "../up"]:
        assert str(Path(text)) == text


def test_construction_accepts_path_like_values() -> None:
    assert str(Path(PurePosixPath("/srv/data"))) == "/srv/data"
    assert Path(Path("x")) == Path("x")


def test_construction_rejects_bytes() -> None:
    with pytest.raises(TypeError):
        _ = Path(b"/tmp")  # type: ignore[arg-type]


def test_equality_is_textual() -> None:
    assert Path("a/b") == Path("a/b")
    assert Path("a/b") != Path("a//b")
    assert Path("a/b") != "a/b"
    assert Path("/srv/a.txt").relative_to("srv") == Path("a.txt")
    assert str(Path("/srv/a.txt").relative_to("srv")) == "a.txt"
    assert len({Path("a"), Path("a"), Path("b")}) == 2


def test_path_is_immutable() -> None:
    path = Path("/tmp")

    with pytest.raises(AttributeError):
        path._text = "/etc"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del path._text


def test_repr_and_fspath() -> None:
    path = Path("/tmp/x")

    assert repr(path) == "Path('/tmp/x')"
    assert os.fspath(path) == "/tmp/x"


def test_documented_views() -> None:
    path = Path(EXAMPLE)

    assert path.name == "NimPathlib.nim"
    assert path.stem == "NimPathlib"
    assert path.suffix == ".nim"
    assert path.suffixes == [".nim"]
    assert path.root == "/"
    assert path.drive == ""
    assert path.anchor == "/"
    assert path.parent == Path("/home/adam/nim/NimPathlib")
    assert path.parts == ("/", "home", "adam", "nim", "NimPathlib", "NimPathlib", ".nim")
    assert path.parents == tuple(Path(p) for p in ["/", "home", "adam", "nim", "NimPathlib"])
    assert path.is_absolute()
    assert not path.is_reserved()


def test_dotfile_has_empty_stem() -> None:
    path = Path("/home/adam/.gitignore")

    assert path.name == ".gitignore"
    assert path.stem == ""
    assert path.suffix == ".gitignore"


def test_trailing_separator_has_empty_name() -> None:
    path = Path("/home/adam/")

    assert path.name == ""
    assert path.parent == Path("/home/adam")


@pytest.mark.parametrize("text", [EXAMPLE, "code/example.nim", "/a/b/c", "/home"])
def test_parent_and_name_reconstruct_the_path(text: str) -> None:
    path = Path(text)

    assert path.parent / path.name == path


def test_bare_name_has_dot_parent() -> None:
    path = Path("archive.tar.gz")

    assert path.parent == Path(".")
    assert path.parent / path.name == Path("./archive.tar.gz")


def test_stem_and_suffix_reconstruct_the_name() -> None:
    for text in ["a.tar.gz", ".gitignore", "file.", "noext"]:
        path = Path(text)
        assert path.stem + path.suffix == path.name


def test_division_operator() -> None:
    assert Path("/home/adam/") / "nim" / "x" == Path("/home/adam/nim/x")
    assert "/srv" / Path("data") == Path("/srv/data")
    assert Path("base") / Path("leaf") == Path("base/leaf")


def test_joinpath_collapses_seams() -> None:
    assert Path("/srv/").joinpath("/data", "logs") == Path("/srv/data/logs")
    assert joinpath("/srv", "data") == Path("/srv/data")


def test_module_joinpath_requires_an_argument() -> None:
    with pytest.raises(PathPreconditionError):
        _ = joinpath()


def test_with_name_and_with_suffix() -> None:
    path = Path(EXAMPLE)

    assert path.with_name("README.md") == Path("/home/adam/nim/NimPathlib/README.md")
    assert path.with_suffix(".py") == Path("/home/adam/nim/NimPathlib/NimPathlib.py")
    assert path.with_suffix("").suffix == ""


def test_relative_to() -> None:
    path = Path("/home/adam/nim/code.nim")

    assert path.relative_to("nim") == Path("code.nim")
    assert path.relative_to(Path("/home")) == Path("adam/nim/code.nim")
    with pytest.raises(PathPreconditionError):
        _ = path.relative_to("usr")


def test_as_posix_and_as_uri() -> None:
    path = Path(EXAMPLE)

    assert path.as_posix() == EXAMPLE
    assert Path(path.as_posix()).as_posix() == path.as_posix()
    assert path.as_uri() == "file://" + EXAMPLE
    with pytest.raises(PathPreconditionError):
        _ = Path("relative").as_uri()


def test_flavor_aliases_name_the_same_type() -> None:
    assert PosixPath is Path
    assert WindowsPath is Path
    assert PurePath is Path


def test_components_snapshot_matches_properties() -> None:
    path = Path("docs/guide.md")
    components = path.components()

    assert components.name == path.name
    assert components.parts == path.parts
    assert components.is_absolute is False


def test_derived_paths_keep_the_filesystem(mocker: MockerFixture) -> None:
    filesystem = mocker.create_autospec(FilesystemPort, instance=True)
    path = Path("/srv/data/file.txt", filesystem=filesystem)
    filesystem.is_file.return_value = True

    assert path.parent.is_file()
    filesystem.is_file.assert_called_once_with("/srv/data")


def test_exists_checks_file_then_directory(mocker: MockerFixture) -> None:
    filesystem = mocker.create_autospec(FilesystemPort, instance=True)
    filesystem.is_file.return_value = False
    filesystem.is_dir.return_value = True

    assert Path("/srv", filesystem=filesystem).exists()
    filesystem.is_dir.assert_called_once_with("/srv")


def test_chmod_accepts_permission_sets(mocker: MockerFixture) -> None:
    filesystem = mocker.create_autospec(FilesystemPort, instance=True)
    path = Path("/srv/run.sh", filesystem=filesystem)

    path.chmod({FilePermission.USER_READ, FilePermission.USER_WRITE, FilePermission.USER_EXEC})
    path.chmod(0o644)

    assert filesystem.chmod.call_args_list == [
        mocker.call("/srv/run.sh", 0o700),
        mocker.call("/srv/run.sh", 0o644),
    ]


def test_rename_returns_the_new_location(mocker: MockerFixture) -> None:
    filesystem = mocker.create_autospec(FilesystemPort, instance=True)
    source = Path("/srv/a.txt", filesystem=filesystem)

    moved = source.rename("/srv/b.txt")

    assert moved == Path("/srv/b.txt")
    assert source == Path("/srv/a.txt")
    filesystem.move.assert_called_once_with("/srv/a.txt", "/srv/b.txt")


def test_replace_clears_an_existing_directory(mocker: MockerFixture) -> None:
    filesystem = mocker.create_autospec(FilesystemPort, instance=True)
    filesystem.is_dir.return_value = True
    filesystem.is_symlink.return_value = False

    _ = Path("/srv/new", filesystem=filesystem).replace("/srv/old")

    filesystem.remove_tree.assert_called_once_with("/srv/old")
    filesystem.move.assert_called_once_with("/srv/new", "/srv/old")


def test_replace_leaves_symlinked_directories(mocker: MockerFixture) -> None:
    filesystem = mocker.create_autospec(FilesystemPort, instance=True)
    filesystem.is_dir.return_value = True
    filesystem.is_symlink.return_value = True

    _ = Path("/srv/new", filesystem=filesystem).replace("/srv/link")

    filesystem.remove_tree.assert_not_called()
