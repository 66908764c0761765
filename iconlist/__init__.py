"""Directory listing with file-type icons, plus small data structures and algorithms."""

__version__ = "2.3.0"

__all__ = [
    "algebra",
    "binarytree",
    "cli",
    "colors",
    "filedata",
    "flags",
    "graph",
    "hashing",
    "heap",
    "matrix",
    "printfolder",
    "sorting",
    "theme",
]