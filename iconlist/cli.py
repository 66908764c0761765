"""Command-line entry point."""

import sys

from iconlist.flags import ROOT_LEVEL, parse_flags
from iconlist.printfolder import print_folder
from iconlist.theme import ICON_PATH, parse_theme

PROGRAM_NAME = "list"
VERSION = "Version 2.3"
LOG_PATH = "./changes.log"

LIST_HELP_STRING = (
    "Usage: list <path> -flags\t\n"
    "Options:\t\t\t\t\t\n"
    "\t-d\tLog dimensions\t\t\n"
    "\t-R\tRecursive\t\t\t\n"
    "\t-a\tShow hidden files\t\n"
    "\t-V\tShow version\t\t\n"
    "\t-l\tShow permissions\t\n"
    "\t-h\tShow help\t\t\t\n"
)


def print_change_log(path=LOG_PATH, out=None):
    """Copy the change log to ``out``, or say that there is none."""
    if out is None:
        out = sys.stdout
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            out.write(handle.read())
    except OSError:
        out.write("No change log found\n")


def _list(options):
    try:
        theme = parse_theme(ICON_PATH)
    except OSError:
        return
    print_folder(options.root_path, ROOT_LEVEL, options, theme.icons, sys.stdout)


def main(argv=None):
    """Run the listing command; ``argv`` excludes the program name."""
    if argv is None:
        argv = sys.argv[1:]
    options = parse_flags([PROGRAM_NAME, *argv])
    if options.help:
        print(VERSION)
        sys.stdout.write(LIST_HELP_STRING)
    elif not options.show_version:
        _list(options)
    else:
        print(VERSION)
        print_change_log(LOG_PATH, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())