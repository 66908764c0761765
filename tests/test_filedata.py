import os

import pytest

from iconlist.colors import ORANGE, RESET
from iconlist.filedata import (
    FileData,
    FileType,
    Permissions,
    build_path,
    compare_by_name,
    compare_dir_first,
    compare_ignore_case,
    file_extension,
    filedata_from_entry,
    get_permissions,
    get_size,
    is_valid_type,
    truncate_name,
)
from iconlist.flags import Options


def test_permissions_from_mode_owner_only():
    perms = Permissions.from_mode(0o700)
    assert perms.owner == "rwx"
    assert perms.group == "---"
    assert perms.others == "---"


def test_permissions_string_is_nine_characters():
    text = str(Permissions.from_mode(0o754))
    assert len(text) == 9
    assert set(text) <= set("rwx-")


def test_permissions_parts_are_independent():
    combined = Permissions.from_mode(0o754)
    assert combined.owner == Permissions.from_mode(0o700).owner
    assert combined.group == Permissions.from_mode(0o050).group
    assert combined.others == Permissions.from_mode(0o004).others


def test_get_permissions_matches_stat_mode(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("x")
    os.chmod(path, 0o640)
    mode = os.stat(path).st_mode
    assert get_permissions(str(path)) == Permissions.from_mode(mode)


def test_get_permissions_missing_file_is_all_clear(tmp_path):
    assert get_permissions(str(tmp_path / "nope")) == Permissions.from_mode(0)


def test_get_size(tmp_path):
    content = b"hello world"
    path = tmp_path / "f.bin"
    path.write_bytes(content)
    assert get_size(str(path)) == len(content)


def test_get_size_missing_raises(tmp_path):
    with pytest.raises(OSError):
        get_size(str(tmp_path / "missing"))


def test_file_extension():
    assert file_extension("main.c") == "c"
    assert file_extension("archive.tar.gz") == "tar.gz"
    assert file_extension("Makefile") is None


def test_truncate_short_name_unchanged():
    assert truncate_name("short", 20) == "short"


def test_truncate_long_name():
    name = "a_really_long_filename_here.txt"
    result = truncate_name(name, 20)
    assert len(result) == 17
    assert result.endswith("...")
    assert result.startswith(name[:14])


def test_build_path():
    assert build_path("a", "b") == "a/b"


def test_compare_ignore_case():
    assert compare_ignore_case("abc", "ABC") == 0
    assert compare_ignore_case("a", "b") < 0
    assert compare_ignore_case("b", "A") > 0
    assert compare_ignore_case("ab", "a") > 0
    assert compare_ignore_case("a", "ab") < 0


def test_compare_ignore_case_antisymmetric():
    pairs = [("Zeta", "alpha"), ("x1", "X2"), ("same", "SAME")]
    for a, b in pairs:
        assert compare_ignore_case(a, b) == -compare_ignore_case(b, a)


def test_compare_by_name():
    a = FileData("Alpha", FileType.FILE)
    b = FileData("beta", FileType.DIR)
    assert compare_by_name(a, b) < 0
    assert compare_by_name(b, a) > 0


def test_compare_dir_first():
    directory = FileData("zzz", FileType.DIR)
    regular = FileData("aaa", FileType.FILE)
    assert compare_dir_first(directory, regular) == -1
    assert compare_dir_first(regular, directory) == 1
    other_dir = FileData("AAA", FileType.DIR)
    assert compare_dir_first(other_dir, directory) < 0


def test_is_valid_type():
    assert is_valid_type(FileType.FILE) is True
    assert is_valid_type(FileType.DIR) is True
    assert is_valid_type(None) is False


def test_render_file_without_icon():
    options = Options()
    text = FileData("notes", FileType.FILE).render(options, {})
    assert text.startswith("notes")
    assert len(text) == options.col_width


def test_render_file_with_icon():
    options = Options()
    text = FileData("main.py", FileType.FILE).render(options, {"py": "I"})
    assert text.startswith("I main.py")
    assert len(text) == options.col_width


def test_render_file_with_size():
    options = Options(log_dim=True)
    text = FileData("data.bin", FileType.FILE, size=42).render(options, {})
    assert text.endswith("42 B")


def test_render_dir():
    options = Options()
    text = FileData("src", FileType.DIR).render(options, {})
    assert text.startswith(ORANGE + "\ue5ff" + RESET + " src")
    assert text.endswith("\n")


def test_render_with_permissions():
    options = Options(show_permissions=True)
    perms = Permissions.from_mode(0o700)
    text = FileData("f", FileType.FILE, permissions=perms).render(options, {})
    assert str(perms) in text
    assert len(text) == 2 * options.col_width


def test_filedata_from_entry_with_size(tmp_path):
    content = b"hello"
    path = tmp_path / "f.txt"
    path.write_bytes(content)
    data = filedata_from_entry("f.txt", FileType.FILE, str(path), Options(log_dim=True))
    assert data.name == "f.txt"
    assert data.size == len(content)
    assert data.permissions is None


def test_filedata_from_entry_unreadable_size(tmp_path):
    missing = str(tmp_path / "gone")
    assert filedata_from_entry("gone", FileType.FILE, missing, Options(log_dim=True)) is None


def test_filedata_from_entry_without_size(tmp_path):
    missing = str(tmp_path / "gone")
    data = filedata_from_entry("gone", FileType.FILE, missing, Options())
    assert data.size == 0
    assert data.type is FileType.FILE