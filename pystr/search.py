""" Operations built from the slicing engine plus substring search.

Substring search itself is left to the host string: `str.find` and `str.rfind`
are only ever called on a window already extracted by `slice_onestep`, so
every bound these functions accept goes through pystr's own normalization.
"""

from typing import List, Optional, Tuple, Union

from pystr.common import PyTypeError, PyValueError
from pystr.offsets import search_window
from pystr.slicing import getitem, slice_onestep
from pystr.utils.substring_trie import TextView, affix_trie, has_affix

Affix = Union[str, Tuple[str, ...]]


def _find_forward(haystack: str, needle: str, from_offset: int = 0) -> int:
    return haystack.find(needle, from_offset)


def _find_backward(haystack: str, needle: str) -> int:
    return haystack.rfind(needle)


# **** find ****

def find(text: str, sub: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    """ Lowest offset of `sub` within text[start:end], or -1.

    The empty string is found at the (clamped) start of the window, including
    the position just past the last character.
    """
    lo, hi = search_window(start, end, len(text))
    if hi - lo < len(sub):
        return -1
    if not sub:
        return lo

    pos = _find_forward(slice_onestep(text, start, end), sub)
    if pos == -1:
        return -1
    return pos + lo


def rfind(text: str, sub: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    """ Highest offset of `sub` within text[start:end], or -1. """
    lo, hi = search_window(start, end, len(text))
    if hi - lo < len(sub):
        return -1
    if not sub:
        return hi

    pos = _find_backward(slice_onestep(text, start, end), sub)
    if pos == -1:
        return -1
    return pos + lo


def index(text: str, sub: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    found = find(text, sub, start, end)
    if found == -1:
        raise PyValueError('substring not found')
    return found


def rindex(text: str, sub: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    found = rfind(text, sub, start, end)
    if found == -1:
        raise PyValueError('substring not found')
    return found


def count(text: str, sub: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    """ Number of non-overlapping occurrences of `sub` in text[start:end].

    An empty `sub` matches in every gap between characters and at both ends.
    """
    if not sub:
        return len(slice_onestep(text, start, end)) + 1

    counter = 0
    found = find(text, sub, start, end)
    while found != -1:
        counter += 1
        found = find(text, sub, found + len(sub), end)
    return counter


def contains(text: str, sub: str) -> bool:
    return find(text, sub) != -1


# **** startswith/endswith ****

def _affixes(affix: Affix, method: str) -> Tuple[str, ...]:
    if isinstance(affix, str):
        return (affix,)
    if isinstance(affix, tuple):
        return affix
    raise PyTypeError(
        f'{method} first arg must be str or a tuple of str, not {type(affix).__name__}')


def startswith(text: str, prefix: Affix, start: Optional[int] = None, end: Optional[int] = None) -> bool:
    """ True if text[start:end] begins with `prefix` (or any prefix in a tuple). """
    affixes = _affixes(prefix, 'startswith')
    lo, hi = search_window(start, end, len(text))
    if lo > hi:
        return False
    return has_affix(affix_trie(affixes), TextView(text, lo, hi))


def endswith(text: str, suffix: Affix, start: Optional[int] = None, end: Optional[int] = None) -> bool:
    """ True if text[start:end] ends with `suffix` (or any suffix in a tuple). """
    affixes = _affixes(suffix, 'endswith')
    lo, hi = search_window(start, end, len(text))
    if lo > hi:
        return False
    return has_affix(affix_trie(affixes, reverse=True), TextView(text, lo, hi, reverse=True))


# **** partition ****

def _check_sep(sep: str) -> None:
    if not sep:
        raise PyValueError('empty separator')


def _partition_at(text: str, pos: int, sep: str) -> List[str]:
    return [
        slice_onestep(text, None, pos),
        slice_onestep(text, pos, pos + len(sep)),
        slice_onestep(text, pos + len(sep)),
    ]


def partition(text: str, sep: str) -> List[str]:
    """ Split around the first `sep`: [head, sep, tail], or [text, "", ""]. """
    _check_sep(sep)
    pos = find(text, sep)
    if pos == -1:
        return [text, '', '']
    return _partition_at(text, pos, sep)


def rpartition(text: str, sep: str) -> List[str]:
    """ Split around the last `sep`: [head, sep, tail], or ["", "", text]. """
    _check_sep(sep)
    pos = rfind(text, sep)
    if pos == -1:
        return ['', '', text]
    return _partition_at(text, pos, sep)


# **** split ****

def _split_whitespace(text: str, maxsplit: int) -> List[str]:
    size = len(text)
    out = []
    i = 0
    while True:
        while i < size and text[i].isspace():
            i += 1
        if i == size:
            break
        if maxsplit == 0:
            # The remainder keeps its trailing whitespace.
            out.append(slice_onestep(text, i))
            break

        j = i
        while j < size and not text[j].isspace():
            j += 1
        out.append(slice_onestep(text, i, j))
        maxsplit -= 1
        i = j
    return out


def _rsplit_whitespace(text: str, maxsplit: int) -> List[str]:
    out = []
    i = len(text) - 1
    while True:
        while i >= 0 and text[i].isspace():
            i -= 1
        if i < 0:
            break
        if maxsplit == 0:
            out.append(slice_onestep(text, 0, i + 1))
            break

        j = i
        while j >= 0 and not text[j].isspace():
            j -= 1
        out.append(slice_onestep(text, j + 1, i + 1))
        maxsplit -= 1
        i = j
    out.reverse()
    return out


def split(text: str, sep: Optional[str] = None, maxsplit: int = -1) -> List[str]:
    """ Split text into fragments, left to right.

    :param sep: Delimiter. None splits on runs of whitespace and drops empty
        fragments at either end. An explicit delimiter keeps empty fragments.
    :param maxsplit: Maximum number of splits; negative means unlimited.
    :raises PyValueError: `sep` is empty.
    """
    if sep is None:
        return _split_whitespace(text, maxsplit)
    _check_sep(sep)

    out = []
    start = 0
    end = find(text, sep, start)
    while end != -1 and maxsplit != 0:
        out.append(slice_onestep(text, start, end))
        maxsplit -= 1
        start = end + len(sep)
        end = find(text, sep, start)
    out.append(slice_onestep(text, start))
    return out


def rsplit(text: str, sep: Optional[str] = None, maxsplit: int = -1) -> List[str]:
    """ Like split(), but `maxsplit` counts delimiters from the right. """
    if sep is None:
        return _rsplit_whitespace(text, maxsplit)
    _check_sep(sep)

    out = []
    end = len(text)
    start = rfind(text, sep, 0, end)
    while start != -1 and maxsplit != 0:
        out.append(slice_onestep(text, start + len(sep), end))
        maxsplit -= 1
        end = start
        start = rfind(text, sep, 0, end)
    out.append(slice_onestep(text, 0, end))

    # Fragments were collected right to left.
    out.reverse()
    return out


# **** replace ****

def replace(text: str, old: str, new: str, count: int = -1) -> str:
    """ Replace up to `count` occurrences of `old` (negative: all of them).

    An empty `old` matches before every character and once at the end.
    """
    size = len(text)
    pieces = []

    if not old:
        for pos in range(size + 1):
            if 0 <= count <= pos:
                pieces.append(slice_onestep(text, pos))
                break
            pieces.append(new)
            if pos < size:
                pieces.append(getitem(text, pos))
        return ''.join(pieces)

    pos = 0
    times = 0
    while count < 0 or times < count:
        found = find(text, old, pos)
        if found == -1:
            break
        pieces.append(slice_onestep(text, pos, found))
        pieces.append(new)
        pos = found + len(old)
        times += 1

    pieces.append(slice_onestep(text, pos))
    return ''.join(pieces)
