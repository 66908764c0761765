"""ANSI escape sequences for terminal colours and text styles."""

RESET = "\033[0m"
STD_COLOR = RESET

# foreground colours
BLACK = "\033[38;2;0;0;0m"
RED = "\033[38;2;178;34;34m"
GREEN = "\033[38;2;34;139;34m"
YELLOW = "\033[38;2;219;200;0m"
BLUE = "\033[38;2;70;130;180m"
MAGENTA = "\033[38;2;199;21;133m"
CYAN = "\033[38;2;0;206;209m"
WHITE = "\033[38;2;245;245;245m"
ORANGE = "\033[38;2;255;165;0m"
PINK = "\033[38;2;255;192;203m"
PURPLE = "\033[38;2;128;0;128m"
BROWN = "\033[38;2;165;42;42m"
OLIVE = "\033[38;2;128;128;0m"
TEAL = "\033[38;2;0;128;128m"
NAVY = "\033[38;2;0;0;128m"
GRAY = "\033[38;2;128;128;128m"

# background colours
BG_BLACK = "\033[48;2;0;0;0m"
BG_RED = "\033[48;2;178;34;34m"
BG_GREEN = "\033[48;2;34;139;34m"
BG_YELLOW = "\033[48;2;255;215;0m"
BG_BLUE = "\033[48;2;70;130;180m"
BG_MAGENTA = "\033[48;2;199;21;133m"
BG_CYAN = "\033[48;2;0;206;209m"
BG_WHITE = "\033[48;2;245;245;245m"
BG_DARK_BLUE = "\033[48;2;40;44;52m"
BG_ORANGE = "\033[48;2;255;165;0m"
BG_PINK = "\033[48;2;255;192;203m"
BG_PURPLE = "\033[48;2;128;0;128m"
BG_BROWN = "\033[48;2;165;42;42m"
BG_OLIVE = "\033[48;2;128;128;0m"
BG_TEAL = "\033[48;2;0;128;128m"
BG_NAVY = "\033[48;2;0;0;128m"
BG_GRAY = "\033[48;2;128;128;128m"

# text styles
BOLD = "\033[1m"
UNDERLINE = "\033[4m"
INVERT = "\033[7m"

_CHANNEL_MAX = 0xFFFF


def get_ansi_color(red, green, blue, is_fg=True):
    """Return the 24-bit colour escape for a foreground or background."""
    for channel in (red, green, blue):
        if not 0 <= channel <= _CHANNEL_MAX:
            raise ValueError(f"colour channel out of range: {channel}")
    layer = 38 if is_fg else 48
    return f"\033[{layer};2;{red};{green};{blue}m"