""" Conversion of optional, possibly negative indices into offsets.

Every function here is total: out-of-range input is clamped, never rejected.
"""

from typing import Optional, Tuple

from pystr.util import clamp, coalesce


def wrap(index: int, size: int) -> int:
    """ Negative indices count from the end (applied once, not modulo). """
    if index < 0:
        return index + size
    return index


def normalize(index: Optional[int], default: int, size: int) -> int:
    """ Resolve an optional index into an offset within [0, size].

    :param index: Requested index, or None to use `default`.
    :param default: Returned as-is when `index` is None.
    :param size: Length of the text being indexed.
    """
    if index is None:
        return default
    return clamp(wrap(index, size), 0, size)


def normalize_step_bound(index: Optional[int], size: int, step: int, is_end: bool) -> int:
    """ Resolve a slice bound, taking the walk direction into account.

    Forward walks clamp into [0, size]. Reverse walks clamp into [-1, size-1],
    where -1 stands for "just before the first character".
    """
    if step > 0:
        if index is None:
            return size if is_end else 0
        return clamp(wrap(index, size), 0, size)

    if index is None:
        return -1 if is_end else size - 1
    return clamp(wrap(index, size), -1, size - 1)


def search_window(start: Optional[int], end: Optional[int], size: int) -> Tuple[int, int]:
    """ Resolve the (start, end) pair a needle is searched for within.

    `start` is not clamped from above: a start past the end of the text yields
    an inverted window, which matches nothing (not even the empty string).
    """
    start = max(wrap(coalesce(start, 0), size), 0)
    end = normalize(end, size, size)
    return start, end
