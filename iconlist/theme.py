"""Icon themes read from a plain-text configuration file."""

from dataclasses import dataclass, field

from iconlist import colors

ICON_PATH = "./storage/icons.txt"
DEFAULT_THEME_NAME = "default"

_COLOR_NAMES = {
    "black": colors.BLACK,
    "red": colors.RED,
    "green": colors.GREEN,
    "yellow": colors.YELLOW,
    "blue": colors.BLUE,
    "magenta": colors.MAGENTA,
    "cyan": colors.CYAN,
    "white": colors.WHITE,
    "gray": colors.GRAY,
    "purple": colors.PURPLE,
    "orange": colors.ORANGE,
}


@dataclass
class Theme:
    """A named mapping from file extension to coloured icon."""

    name: str
    icons: dict = field(default_factory=dict)


def parse_theme(config_path=ICON_PATH):
    """Read an icon file of ``<extension> <icon> <color>`` lines.

    Comment and blank lines, lines with fewer than three fields and lines
    naming an unknown colour are skipped; the first entry for a key wins.
    Raises OSError when the file cannot be opened.
    """
    theme = Theme(DEFAULT_THEME_NAME)
    with open(config_path, "rb") as handle:
        for raw in handle:
            if raw[:1] in (b"#", b"\n"):
                continue
            tokens = [token for token in raw.split(b" ") if token]
            if len(tokens) < 3:
                continue
            key, icon, color = (
                token.decode("utf-8", "replace") for token in tokens[:3]
            )
            if "\n" in color:
                color = color[: color.rindex("\n")]
            code = _COLOR_NAMES.get(color)
            if code is None or key in theme.icons:
                continue
            theme.icons[key] = code + icon + colors.STD_COLOR
    return theme