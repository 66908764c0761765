"""Comparison-based sorting and searching, with small logging helpers."""

import sys
from enum import Enum, auto

_GRN = "\033[0;32m"
_HGRN = "\033[0;92m"
_HYEL = "\033[0;93m"
_HRED = "\033[0;91m"
_RESET = "\033[0m"


class LogType(Enum):
    """Severity of a log message."""

    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    FATAL = auto()


_LOG_STYLES = {
    LogType.INFO: (_HGRN, "INFO"),
    LogType.WARNING: (_HYEL, "WARNING"),
    LogType.ERROR: (_HRED, "ERROR"),
    LogType.FATAL: (_HRED, "FATAL"),
}


def format_log(kind, message):
    """A coloured ``[LEVEL] message`` line."""
    color, label = _LOG_STYLES[kind]
    return f"{color}[{label}]{_RESET} {message}\n"


def format_int_array(values, highlight=None):
    """Tab-separated values in brackets, the one at ``highlight`` in green."""
    cells = "".join(
        f"{_GRN}{value}{_RESET}\t" if i == highlight else f"{value}\t"
        for i, value in enumerate(values)
    )
    return f"[\t{cells}]\n"


def bubblesort(items, cmp):
    """Sort ``items`` in place by repeated adjacent swaps."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(items) - 1):
            if cmp(items[i], items[i + 1]) > 0:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True


def insertionsort(items, cmp):
    """Sort ``items`` in place by insertion."""
    for i in range(1, len(items)):
        current = i
        while current > 0 and cmp(items[current], items[current - 1]) < 0:
            items[current], items[current - 1] = items[current - 1], items[current]
            current -= 1


def _merge_sorted(seq, cmp):
    if len(seq) < 2:
        return list(seq)
    mid = (len(seq) - 1) // 2 + 1
    left = _merge_sorted(seq[:mid], cmp)
    right = _merge_sorted(seq[mid:], cmp)
    merged = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if cmp(left[li], right[ri]) > 0:
            merged.append(right[ri])
            ri += 1
        else:
            merged.append(left[li])
            li += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def mergesort(items, cmp):
    """Stable merge sort of ``items`` in place."""
    items[:] = _merge_sorted(items, cmp)


def _quicksort(items, low, high):
    if low >= high:
        return
    left, right = low, high
    pivot = items[low]
    while left < right:
        while items[right] > pivot:
            right -= 1
        while left < right and items[left] <= pivot:
            left += 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    if low != right:
        items[low] = items[right]
        items[right] = pivot
    if right - 1 > low:
        _quicksort(items, low, right - 1)
    if right + 1 < high:
        _quicksort(items, right + 1, high)


def quicksort(items):
    """Sort a list of integers in place, the first element of each range as pivot."""
    _quicksort(items, 0, len(items) - 1)


def countingsort(items, k):
    """Return the non-negative integers of ``items`` (all at most ``k``) sorted.

    Each placement is traced to standard output as a bracketed array.
    """
    for value in items:
        if not 0 <= value <= k:
            raise ValueError(f"value {value} outside 0..{k}")
    counts = [0] * (k + 1)
    for value in items:
        counts[value] += 1
    for i in range(1, k + 1):
        counts[i] += counts[i - 1]
    dest = [0] * len(items)
    for value in reversed(items):
        position = counts[value] - 1
        dest[position] = value
        counts[value] -= 1
        sys.stdout.write(format_int_array(dest, position))
    return dest


def linear_search(items, target, cmp):
    """Index of the first item comparing equal to ``target``; ValueError if none."""
    for index, item in enumerate(items):
        if cmp(item, target) == 0:
            return index
    raise ValueError("target not found")


def binary_search(items, target, cmp):
    """Index of ``target`` in items ordered from greatest to least by ``cmp``.

    Raises ValueError when it is not found.
    """
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        result = cmp(items[mid], target)
        if result == 0:
            return mid
        if result > 0:
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError("target not found")