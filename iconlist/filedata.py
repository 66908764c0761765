"""Directory entries: metadata, comparison and rendering."""

import os
import stat
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from iconlist.colors import ORANGE, STD_COLOR

PERMISSIONS_LENGTH = 9
DIR_ICON = "\ue5ff"


class FileType(IntEnum):
    """Directory-entry types that can be listed."""

    FILE = 8
    DIR = 4


def is_valid_type(file_type):
    """Tell whether an entry type is one that is listed."""
    return file_type in (FileType.FILE, FileType.DIR)


def _triad(mode, read, write, execute):
    return "".join(
        char if mode & bit else "-"
        for char, bit in (("r", read), ("w", write), ("x", execute))
    )


@dataclass(frozen=True)
class Permissions:
    """Read/write/execute bits for owner, group and others."""

    owner: str
    group: str
    others: str

    @classmethod
    def from_mode(cls, mode):
        return cls(
            owner=_triad(mode, stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
            group=_triad(mode, stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
            others=_triad(mode, stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
        )

    def __str__(self):
        return self.owner + self.group + self.others


def get_permissions(path):
    """Permissions of the file at ``path``; all bits clear if it cannot be read."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        mode = 0
    return Permissions.from_mode(mode)


def get_size(path):
    """Size in bytes found by seeking to the end; raises OSError if unopenable."""
    fd = os.open(path, os.O_RDONLY)
    try:
        return os.lseek(fd, 0, os.SEEK_END)
    except OSError:
        return 0
    finally:
        os.close(fd)


def file_extension(name):
    """Everything after the first dot, or None."""
    _, dot, rest = name.partition(".")
    return rest if dot else None


def truncate_name(name, col_width):
    """Shorten a name that does not fit its column, ending it with dots."""
    if len(name) < col_width - 2:
        return name
    return name[: max(col_width - 6, 0)] + "..."


def build_path(path, name):
    """Join a folder and an entry name with a slash."""
    return f"{path}/{name}"


def _signed_bytes(text):
    return [b - 256 if b > 127 else b for b in text.encode("utf-8", "surrogateescape")]


def _lower(code):
    return code + 32 if 65 <= code <= 90 else code


def compare_ignore_case(a, b):
    """Byte-wise, ASCII case-insensitive comparison returning the first difference."""
    if a is None or b is None:
        return 0
    left, right = _signed_bytes(a), _signed_bytes(b)
    for ca, cb in zip(left, right):
        diff = _lower(ca) - _lower(cb)
        if diff:
            return diff
    shared = min(len(left), len(right))
    tail_a = _lower(left[shared]) if len(left) > shared else 0
    tail_b = _lower(right[shared]) if len(right) > shared else 0
    return tail_a - tail_b


def compare_by_name(a, b):
    """Order entries by name, ignoring case."""
    if a is None or b is None:
        return 0
    return compare_ignore_case(a.name, b.name)


def compare_dir_first(a, b):
    """Order directories before files, each group by name."""
    if a is None or b is None:
        return 0
    a_dir = a.type is FileType.DIR
    b_dir = b.type is FileType.DIR
    if a_dir and not b_dir:
        return -1
    if b_dir and not a_dir:
        return 1
    return compare_ignore_case(a.name, b.name)


@dataclass
class FileData:
    """One directory entry as listed."""

    name: str
    type: Optional[FileType]
    size: int = 0
    permissions: Optional[Permissions] = None

    def _permissions_column(self, options):
        if not options.show_permissions:
            return ""
        text = str(self.permissions) if self.permissions else ""
        return text + " " * (options.col_width - PERMISSIONS_LENGTH)

    def _render_dir(self, options):
        name = truncate_name(self.name, options.col_width)
        return (
            f"{ORANGE}{DIR_ICON}{STD_COLOR} "
            + name.ljust(options.col_width - 2)
            + self._permissions_column(options)
            + "\n"
        )

    def _render_file(self, options, icons):
        name = truncate_name(self.name, options.col_width)
        extension = file_extension(self.name)
        icon = icons.get(extension) if extension is not None else None
        if icon:
            text = f"{icon} " + name.ljust(options.col_width - 2)
        else:
            text = name.ljust(options.col_width)
        text += self._permissions_column(options)
        if options.log_dim:
            text += f"{self.size} B"
        return text

    def render(self, options, icons):
        """Text for this entry; directories end with a newline, files do not."""
        if self.type is FileType.DIR:
            return self._render_dir(options)
        if self.type is FileType.FILE:
            return self._render_file(options, icons)
        return ""


def filedata_from_entry(name, file_type, path, options):
    """Collect what the options ask for; None if the size cannot be read."""
    permissions = get_permissions(path) if options.show_permissions else None
    size = 0
    if options.log_dim:
        try:
            size = get_size(path)
        except OSError:
            return None
    return FileData(name=name, type=file_type, size=size, permissions=permissions)