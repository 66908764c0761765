# iconlist

`iconlist` lists the contents of a directory. It puts an icon and a colour,
chosen by file extension, next to each file. It can also show sizes and
permission bits, and it can walk into subdirectories and print them as an
indented tree.

The package also includes a few small data structures and algorithms: a
directed weighted graph, a binary heap, a binary tree, matrices, vectors and
complex numbers, sorting and searching routines, and hash functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
iconlist [path] [-flags]
```

Without a path, the current directory is listed. All flags go together in one
argument after the path, for example `iconlist src -Rl`. Each flag letter is
looked for anywhere in that argument.

| Flag | Meaning |
|------|---------|
| `-d` | Append each file's size in bytes (`123 B`) |
| `-R` | List subdirectories recursively |
| `-a` | Show hidden entries, including `.` and `..` |
| `-V` | Print the version, then the change log |
| `-l` | Show permissions (`rwxr-xr-x` style) |
| `-h` | Print the version and a help text |

The listing works like this:

- Names that start with a dot are hidden unless `-a` is given.
- With `-R -a`, `.` and `..` are left out so the walk does not loop.
- Directories come first, then files. Each group is sorted by name, with
  ASCII upper and lower case treated the same.
- Columns are 20 characters wide. Names that do not fit are cut short and end
  in `...`.
- Directories get a fixed orange folder icon. Files get the icon for their
  extension, which is everything after the first dot in the name.

The command reads its icons from `./storage/icons.txt` in the current
directory. If that file is missing, nothing is printed. `-V` reads the change
log from `./changes.log` and prints `No change log found` if that file is
missing.

## Icons file

Each line holds an extension, an icon and a colour name, separated by spaces:

```
# extension icon colour
py 🐍 yellow
md 📝 blue
```

The parser skips lines that start with `#`, empty lines, lines with fewer than
three fields, and lines whose colour it does not know. If an extension appears
more than once, the first entry wins. The known colours are `black`, `red`,
`green`, `yellow`, `blue`, `magenta`, `cyan`, `white`, `gray`, `purple` and
`orange`.

```python
from iconlist.theme import parse_theme

theme = parse_theme("icons.txt")   # raises OSError if the file cannot be opened
theme.icons["py"]                  # coloured icon string
```

## Using the listing from code

```python
import sys
from iconlist.flags import parse_flags
from iconlist.printfolder import print_folder
from iconlist.theme import parse_theme

options = parse_flags(["iconlist", ".", "-l"])   # first item is the program name
theme = parse_theme("icons.txt")
print_folder(".", 0, options, theme.icons, sys.stdout)
```

Other pieces you can use on their own:

- `iconlist.flags`: `Options`, `SortType`, `Flag` and `is_valid_folder`.
- `iconlist.filedata`: `FileData.render`, `Permissions.from_mode`,
  `get_permissions`, `get_size`, `truncate_name` and the comparators
  `compare_by_name` and `compare_dir_first`.
- `iconlist.printfolder`: `list_entries` and `is_printable`.
- `iconlist.colors`: ANSI escape constants and
  `get_ansi_color(red, green, blue, is_fg)`.

## Data structures and algorithms

```python
from iconlist.graph import example_graph

graph = example_graph()
print(graph.to_mermaid("LR"))
```

- `iconlist.graph`: `Graph`, `Vertex`, `Edge` and `VertexStatus`. A `Graph`
  provides `bfs`, `dfs` (returns vertices in finishing order), `dijkstra`
  (returns the path as a list of vertices), `to_mermaid` and `write_mermaid`.
  The module also has `edge_relax`, `build_path` and `example_graph`.
- `iconlist.heap`: `Heap` and `HeapEntry`, a binary min-heap or max-heap with
  an optional capacity. The heap has `insert`, `poll_min`/`poll_max`,
  `get_min`/`get_max` and `replace_key`.
- `iconlist.binarytree`: `TreeNode`, with `tree_depth`, `max_nodes_number`,
  `is_leaf`, `has_two_nodes`, `set_deep_left` and `delete_node`.
- `iconlist.matrix`: `Matrix` supports `+`, `scaled`, `product`, `transpose`,
  `suppressed` (minor removal), `det2`, `det3`, `determinant` (Laplace
  expansion) and `fill`. `inverse` returns the matrix of minors and does not
  divide by the determinant.
- `iconlist.algebra`: `Complex`, `Vector2`, `Vector3` and `UVector2`. Some of
  these use their own formulas instead of the textbook ones:
  - `Complex` division divides by the modulus, not by its square.
  - `dot` uses `self.x * other.x + other.y * other.y` (plus `self.z * other.z`
    for `Vector3`).
  - `Vector3.cross` sums its cross terms and does not subtract them.

  Each method's docstring gives the exact formula.
- `iconlist.sorting`: the sorts are `bubblesort`, `insertionsort`,
  `mergesort`, `quicksort` and `countingsort`.
  - `bubblesort`, `insertionsort`, `mergesort` and `quicksort` sort in place.
  - `countingsort` returns a new list and prints each placement to standard
    output.
  - `linear_search` finds the first matching item. `binary_search` expects
    items ordered from greatest to least. Both raise `ValueError` when the
    target is not found.
  - `format_log` and `format_int_array` build coloured log lines.
- `iconlist.hashing`: `hash_string`, `hash_int`, `hash_generic` and
  `hash_universal`, all using 64-bit unsigned arithmetic, and
  `uint_to_string` for binary formatting.

## What it does not do

- The command has no option to choose the icons file, the change-log file,
  the column width or the sort order. These can be set only through
  `Options` and `parse_theme` when the package is used from code.
- The command does not follow symbolic links. Entries that are neither
  regular files nor directories are not listed.