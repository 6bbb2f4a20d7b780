from typing import Iterable, Iterator

import pygtrie

from pystr.common import PyTypeError


class TextView:
    """ Read-only window [start, end) of a string, optionally read backwards.

    pygtrie walks keys by iterating them, so a view lets a trie match against
    part of a string without copying it out first.
    """

    def __init__(self, string: str, start: int, end: int, reverse: bool = False):
        if not 0 <= start <= end <= len(string):
            raise IndexError("out of bounds TextView constructor")

        self.string = string
        self.start = start
        self.end = end
        self.reverse = reverse
        self.len = end - start

    def _offset(self, idx: int) -> int:
        if idx < 0:
            idx += self.len
        if not 0 <= idx < self.len:
            raise IndexError("TextView index out of range")
        if self.reverse:
            return self.end - 1 - idx
        return self.start + idx

    def __getitem__(self, item):
        if isinstance(item, int):
            return self.string[self._offset(item)]
        else:
            raise TypeError(f"unhandled TextView index {type(item)}")

    def __iter__(self) -> Iterator[str]:
        for idx in range(self.len):
            yield self.string[self._offset(idx)]

    def __len__(self):
        return self.len

    def __str__(self):
        return "".join(self)


def affix_trie(affixes: Iterable[str], reverse: bool = False) -> pygtrie.CharTrie:
    """ Build a trie holding every affix (reversed, for suffix matching).

    :raises PyTypeError: an affix is not a string.
    """
    trie = pygtrie.CharTrie()
    for affix in affixes:
        if not isinstance(affix, str):
            raise PyTypeError(
                f'tuple for startswith/endswith must only contain str, not {type(affix).__name__}')
        key = ''.join(reversed(affix)) if reverse else affix
        trie[key] = True
    return trie


def has_affix(trie: pygtrie.CharTrie, view: TextView) -> bool:
    """ True if some key stored in `trie` is a prefix of `view`. """
    return bool(trie.shortest_prefix(view))
