import pytest

from iconlist import colors
from iconlist.theme import DEFAULT_THEME_NAME, Theme, parse_theme


@pytest.fixture
def icon_file(tmp_path):
    path = tmp_path / "icons.txt"
    path.write_text(
        "# comment line\n"
        "\n"
        "py  X blue\n"
        "c Y nosuchcolor\n"
        "short\n"
        "two fields\n"
        "rs Z red extra\n"
        "py W green\n"
        "h Y nosuchcolor\n"
        "h Q cyan\n"
        "go G orange",
        encoding="utf-8",
    )
    return path


def test_theme_name(icon_file):
    assert parse_theme(icon_file).name == DEFAULT_THEME_NAME


def test_icon_is_wrapped_in_colour(icon_file):
    icons = parse_theme(icon_file).icons
    assert icons["py"] == colors.BLUE + "X" + colors.RESET
    assert icons["rs"] == colors.RED + "Z" + colors.RESET


def test_last_line_without_newline(icon_file):
    icons = parse_theme(icon_file).icons
    assert icons["go"] == colors.ORANGE + "G" + colors.RESET


def test_unknown_colour_and_short_lines_skipped(icon_file):
    icons = parse_theme(icon_file).icons
    assert "c" not in icons
    assert "short" not in icons
    assert "two" not in icons
    assert set(icons) == {"py", "rs", "h", "go"}


def test_later_valid_entry_after_unknown_colour(icon_file):
    icons = parse_theme(icon_file).icons
    assert icons["h"] == colors.CYAN + "Q" + colors.RESET


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_theme(tmp_path / "missing.txt")


def test_theme_defaults_to_no_icons():
    assert Theme("x").icons == {}