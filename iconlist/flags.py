"""Command-line options and the ignore patterns they imply."""

import re
from dataclasses import dataclass, field
from enum import Enum, auto

ROOT_LEVEL = 0

IGNORE_HIDDEN_FILES = "^[.]"
IGNORE_CURRENT_DIR = r"^\.$"
IGNORE_PREV_DIR = r"^\.\.$"


class SortType(Enum):
    """How entries of a folder are ordered."""

    NONE = auto()
    NAME = auto()
    DIRFIRST = auto()


class Flag(str, Enum):
    """Single-letter switches understood on the command line."""

    LOG_DIM = "d"
    RECURSIVE = "R"
    SHOW_HIDDEN = "a"
    VERSION = "V"
    PERMISSIONS = "l"
    HELP = "h"


def _default_patterns():
    return [IGNORE_HIDDEN_FILES]


@dataclass
class Options:
    """Settings that drive a listing."""

    ignore_patterns: list = field(default_factory=_default_patterns)
    root_path: str = "."
    col_width: int = 20
    sort_type: SortType = SortType.DIRFIRST
    log_dim: bool = False
    recursive: bool = False
    show_hidden: bool = False
    show_version: bool = False
    show_permissions: bool = False
    help: bool = False


def _set_ignore_patterns(options):
    if options.show_hidden:
        options.ignore_patterns = []
    if options.recursive and not options.ignore_patterns:
        options.ignore_patterns = [IGNORE_CURRENT_DIR, IGNORE_PREV_DIR]


def parse_flags(argv):
    """Build options from an argument vector whose first item is the program name."""
    options = Options()
    args = list(argv)
    if len(args) < 2:
        return options
    index = 1
    if not args[1].startswith("-"):
        options.root_path = args[1]
        index = 2
        if len(args) < 3:
            return options
    switches = args[index]
    options.log_dim = Flag.LOG_DIM.value in switches
    options.recursive = Flag.RECURSIVE.value in switches
    options.show_hidden = Flag.SHOW_HIDDEN.value in switches
    options.show_version = Flag.VERSION.value in switches
    options.show_permissions = Flag.PERMISSIONS.value in switches
    options.help = Flag.HELP.value in switches
    _set_ignore_patterns(options)
    return options


def is_valid_folder(name, options):
    """Tell whether a name escapes every ignore pattern; a bad pattern rejects it."""
    for pattern in options.ignore_patterns:
        try:
            compiled = re.compile(pattern)
        except re.error:
            return False
        if compiled.search(name):
            return False
    return True