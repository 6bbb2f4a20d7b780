""" Character-class predicates over whole texts.

Per-character Unicode classification is taken from the host `str` methods;
these functions only combine the per-character answers the way Python's
string predicates do (empty-text results, cased-character requirements).
"""

import unicodedata

from more_itertools import pairwise


def is_cased(ch: str) -> bool:
    """ Whether a single character has case (upper, lower or title). """
    return ch.isupper() or ch.islower() or ch.istitle()


def is_titlecase(ch: str) -> bool:
    # str.istitle() is also True for a lone uppercase letter.
    return unicodedata.category(ch) == 'Lt'


def _nonempty_all(text: str, pred) -> bool:
    return len(text) > 0 and all(pred(ch) for ch in text)


def isalnum(text: str) -> bool:
    return _nonempty_all(
        text, lambda ch: ch.isalpha() or ch.isdecimal() or ch.isdigit() or ch.isnumeric())


def isalpha(text: str) -> bool:
    return _nonempty_all(text, str.isalpha)


def isascii(text: str) -> bool:
    return all(ord(ch) < 0x80 for ch in text)


def isdecimal(text: str) -> bool:
    return _nonempty_all(text, str.isdecimal)


def isdigit(text: str) -> bool:
    return _nonempty_all(text, str.isdigit)


def isnumeric(text: str) -> bool:
    return _nonempty_all(text, str.isnumeric)


def isprintable(text: str) -> bool:
    return all(ch.isprintable() for ch in text)


def isspace(text: str) -> bool:
    return _nonempty_all(text, str.isspace)


def islower(text: str) -> bool:
    """ At least one cased character, and every cased character is lowercase. """
    cased = False
    for ch in text:
        if ch.isupper() or is_titlecase(ch):
            return False
        if ch.islower():
            cased = True
    return cased


def isupper(text: str) -> bool:
    """ At least one cased character, and every cased character is uppercase. """
    cased = False
    for ch in text:
        if ch.islower() or is_titlecase(ch):
            return False
        if ch.isupper():
            cased = True
    return cased


def istitle(text: str) -> bool:
    """ Uppercase characters only follow uncased ones and lowercase characters
    only follow cased ones. Requires at least one cased character.
    """
    cased = False
    # A space before the first character marks the start of a word.
    for prev, ch in pairwise(' ' + text):
        if ch.isupper() or ch.istitle():
            if is_cased(prev):
                return False
            cased = True
        elif ch.islower():
            if not is_cased(prev):
                return False
            cased = True
    return cased
