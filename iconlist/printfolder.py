"""Walking a folder and printing its entries as an indented tree."""

import os
import sys
from functools import cmp_to_key

from iconlist.filedata import (
    FileType,
    build_path,
    compare_by_name,
    compare_dir_first,
    filedata_from_entry,
    is_valid_type,
)
from iconlist.flags import SortType, is_valid_folder

TREE_BRANCH = "  L\t"

_SORT_KEYS = {
    SortType.DIRFIRST: cmp_to_key(compare_dir_first),
    SortType.NAME: cmp_to_key(compare_by_name),
}


def is_printable(filedata, options):
    """Tell whether an entry is listed: a file or folder that no pattern hides."""
    return (
        filedata is not None
        and is_valid_type(filedata.type)
        and is_valid_folder(filedata.name, options)
    )


def _entry_type(entry):
    if entry.is_symlink():
        return None
    if entry.is_dir(follow_symlinks=False):
        return FileType.DIR
    if entry.is_file(follow_symlinks=False):
        return FileType.FILE
    return None


def _raw_entries(folder):
    yield ".", FileType.DIR
    yield "..", FileType.DIR
    with os.scandir(folder) as entries:
        for entry in entries:
            yield entry.name, _entry_type(entry)


def list_entries(folder, options):
    """Entries of a folder, including "." and "..", in directory order.

    An unreadable folder yields an empty list; entries whose data cannot be
    collected are left out.
    """
    try:
        raw = list(_raw_entries(folder))
    except OSError:
        return []
    result = []
    for name, file_type in raw:
        filedata = filedata_from_entry(
            name, file_type, build_path(folder, name), options
        )
        if filedata is not None:
            result.append(filedata)
    return result


def print_folder(folder, level=0, options=None, icons=None, out=None):
    """Print the entries of ``folder``, descending into subfolders if recursive."""
    from iconlist.flags import Options

    if options is None:
        options = Options()
    if icons is None:
        icons = {}
    if out is None:
        out = sys.stdout
    entries = list_entries(folder, options)
    sort_key = _SORT_KEYS.get(options.sort_type)
    if sort_key is not None:
        entries.sort(key=sort_key)
    is_first = True
    for filedata in entries:
        if not is_printable(filedata, options):
            continue
        if is_first and level:
            out.write("\t" * (level - 1) + TREE_BRANCH)
            is_first = False
        else:
            out.write("\t" * level)
        out.write(filedata.render(options, icons))
        if filedata.type is FileType.DIR and options.recursive:
            print_folder(
                build_path(folder, filedata.name), level + 1, options, icons, out
            )
        elif filedata.type is not FileType.DIR:
            out.write("\n")