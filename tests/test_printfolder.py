import io

import pytest

from iconlist.filedata import FileData, FileType
from iconlist.flags import Options, SortType, parse_flags
from iconlist.printfolder import TREE_BRANCH, is_printable, list_entries, print_folder


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "beta.txt").write_text("hello")
    (tmp_path / "Alpha.txt").write_text("x")
    (tmp_path / ".hidden").write_text("")
    sub = tmp_path / "zdir"
    sub.mkdir()
    (sub / "inner.md").write_text("abc")
    return tmp_path


def _names(output):
    return [line.strip().split()[-1] for line in output.splitlines() if line.strip()]


def test_list_entries_includes_dot_entries(tree):
    names = {fd.name for fd in list_entries(str(tree), Options())}
    assert names == {".", "..", "beta.txt", "Alpha.txt", ".hidden", "zdir"}


def test_list_entries_types(tree):
    types = {fd.name: fd.type for fd in list_entries(str(tree), Options())}
    assert types["zdir"] is FileType.DIR
    assert types["beta.txt"] is FileType.FILE


def test_list_entries_missing_folder(tmp_path):
    assert list_entries(str(tmp_path / "missing"), Options()) == []


def test_is_printable_hides_dotfiles():
    options = Options()
    assert not is_printable(FileData(".hidden", FileType.FILE), options)
    assert is_printable(FileData("shown", FileType.FILE), options)


def test_is_printable_rejects_none_and_unknown_type():
    options = Options()
    assert not is_printable(None, options)
    assert not is_printable(FileData("link", None), options)


def test_print_folder_dirs_first_then_names(tree):
    out = io.StringIO()
    print_folder(str(tree), 0, Options(), {}, out)
    assert _names(out.getvalue()) == ["zdir", "Alpha.txt", "beta.txt"]


def test_print_folder_sort_by_name(tree):
    out = io.StringIO()
    options = Options(sort_type=SortType.NAME)
    print_folder(str(tree), 0, options, {}, out)
    assert _names(out.getvalue()) == ["Alpha.txt", "beta.txt", "zdir"]


def test_print_folder_recursive_branch(tree):
    out = io.StringIO()
    options = parse_flags(["list", str(tree), "-R"])
    print_folder(str(tree), 0, options, {}, out)
    lines = out.getvalue().splitlines()
    branch = [line for line in lines if line.startswith(TREE_BRANCH)]
    assert len(branch) == 1
    assert "inner.md" in branch[0]
    assert ".hidden" not in out.getvalue()


def test_print_folder_show_hidden_lists_dot_entries(tree):
    out = io.StringIO()
    options = parse_flags(["list", str(tree), "-a"])
    print_folder(str(tree), 0, options, {}, out)
    names = _names(out.getvalue())
    assert ".hidden" in names
    assert "." in names and ".." in names


def test_print_folder_uses_icons(tree):
    out = io.StringIO()
    print_folder(str(tree), 0, Options(), {"txt": "ICON"}, out)
    assert "ICON Alpha.txt" in out.getvalue()


def test_print_folder_missing_prints_nothing(tmp_path):
    out = io.StringIO()
    print_folder(str(tmp_path / "nope"), 0, Options(), {}, out)
    assert out.getvalue() == ""