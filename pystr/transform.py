""" Case, padding, whitespace and line transforms.

Case mappings of single characters come from the host `str`; everything that
involves positions (fill widths, tab columns, strip bounds, line breaks) is
computed here and extracted through the slicing engine.
"""

from typing import Iterable, List, Optional

from more_itertools import pairwise, peekable

from pystr.common import DEFAULT_FILLCHAR, DEFAULT_TABSIZE, PyTypeError
from pystr.predicates import is_cased
from pystr.search import replace, startswith
from pystr.slicing import getitem, slice_onestep


# **** Concatenation ****

def add(text: str, other: str) -> str:
    return text + other


def mul(text: str, times: int) -> str:
    if times <= 0:
        return ''
    return text * times


def join(sep: str, items: Iterable[str]) -> str:
    """ Concatenate `items`, placing `sep` between neighbours.

    :raises PyTypeError: an item is not a string.
    """
    out = []
    for idx, item in enumerate(items):
        if not isinstance(item, str):
            raise PyTypeError(
                f'sequence item {idx}: expected str instance, {type(item).__name__} found')
        if idx:
            out.append(sep)
        out.append(item)
    return ''.join(out)


# **** Case ****

def lower(text: str) -> str:
    return text.lower()


def upper(text: str) -> str:
    return text.upper()


def casefold(text: str) -> str:
    return text.casefold()


def capitalize(text: str) -> str:
    if not text:
        return ''
    return getitem(text, 0).title() + slice_onestep(text, 1).lower()


def swapcase(text: str) -> str:
    out = []
    for ch in text:
        if ch.isupper():
            out.append(ch.lower())
        elif ch.islower():
            out.append(ch.upper())
        else:
            out.append(ch)
    return ''.join(out)


def title(text: str) -> str:
    """ Title-case each word, lowercasing the rest of it.

    A word starts at any character whose predecessor is uncased.
    """
    out = []
    for prev, ch in pairwise(' ' + text):
        out.append(ch.lower() if is_cased(prev) else ch.title())
    return ''.join(out)


# **** Padding ****

def _check_fillchar(fillchar: str) -> None:
    if len(fillchar) != 1:
        raise PyTypeError('The fill character must be exactly one character long')


def center(text: str, width: int, fillchar: str = DEFAULT_FILLCHAR) -> str:
    """ Center text within `width` columns.

    An odd amount of fill around an even-length text puts the extra fill
    character on the left (http://bugs.python.org/issue23624).
    """
    _check_fillchar(fillchar)
    size = len(text)
    if size >= width:
        return text

    fill = width - size
    left = fill // 2
    if fill % 2 != 0 and size % 2 == 0:
        left = (fill + 1) // 2
    return mul(fillchar, left) + text + mul(fillchar, fill - left)


def ljust(text: str, width: int, fillchar: str = DEFAULT_FILLCHAR) -> str:
    _check_fillchar(fillchar)
    return text + mul(fillchar, width - len(text))


def rjust(text: str, width: int, fillchar: str = DEFAULT_FILLCHAR) -> str:
    _check_fillchar(fillchar)
    return mul(fillchar, width - len(text)) + text


def zfill(text: str, width: int) -> str:
    """ Left-pad with zeros, keeping a leading sign in front. """
    middle = 1 if startswith(text, ('-', '+')) else 0
    return slice_onestep(text, None, middle) + \
        mul('0', width - len(text)) + \
        slice_onestep(text, middle)


def expandtabs(text: str, tabsize: int = DEFAULT_TABSIZE) -> str:
    """ Replace tabs with spaces up to the next multiple of `tabsize` columns.

    Columns restart after \\r and \\n. A non-positive `tabsize` drops tabs.
    """
    if tabsize <= 0:
        return replace(text, '\t', '')

    out = []
    column = 0
    for ch in text:
        if ch == '\t':
            nspace = tabsize - column % tabsize
            out.append(mul(' ', nspace))
            column += nspace
        elif ch == '\r' or ch == '\n':
            out.append(ch)
            column = 0
        else:
            out.append(ch)
            column += 1
    return ''.join(out)


# **** Whitespace ****

def _strip_pred(chars: Optional[str]):
    if chars is None:
        return str.isspace
    return lambda ch: ch in chars


def _lstrip_offset(text: str, chars: Optional[str]) -> int:
    pred = _strip_pred(chars)
    start = 0
    while start < len(text) and pred(text[start]):
        start += 1
    return start


def _rstrip_offset(text: str, chars: Optional[str]) -> int:
    pred = _strip_pred(chars)
    end = len(text)
    while end > 0 and pred(text[end - 1]):
        end -= 1
    return end


def lstrip(text: str, chars: Optional[str] = None) -> str:
    """ Remove leading characters found in `chars` (whitespace if None). """
    return slice_onestep(text, _lstrip_offset(text, chars))


def rstrip(text: str, chars: Optional[str] = None) -> str:
    """ Remove trailing characters found in `chars` (whitespace if None). """
    return slice_onestep(text, None, _rstrip_offset(text, chars))


def strip(text: str, chars: Optional[str] = None) -> str:
    return slice_onestep(text, _lstrip_offset(text, chars), _rstrip_offset(text, chars))


# **** Lines ****

LINE_BREAKS = '\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029'


def splitlines(text: str, keepends: bool = False) -> List[str]:
    """ Split at line boundaries. \\r\\n counts as a single boundary.

    A trailing line break does not produce an empty final line.
    """
    lines = []
    line_start = 0
    chars = peekable(enumerate(text))
    for pos, ch in chars:
        if ch not in LINE_BREAKS:
            continue

        line_end = pos + 1
        if ch == '\r' and chars.peek((None, None))[1] == '\n':
            next(chars)
            line_end += 1

        lines.append(slice_onestep(text, line_start, line_end if keepends else pos))
        line_start = line_end

    if line_start < len(text):
        lines.append(slice_onestep(text, line_start))
    return lines


# **** repr ****

_ESCAPES = {'\t': '\\t', '\n': '\\n', '\r': '\\r'}


def py_repr(text: str) -> str:
    """ Python's repr() of a string: quoted, with escapes. """
    quote = "'"
    if "'" in text and '"' not in text:
        quote = '"'

    out = [quote]
    for ch in text:
        if ch == quote or ch == '\\':
            out.append('\\' + ch)
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif not ch.isprintable():
            code = ord(ch)
            if code < 0x100:
                out.append('\\x%02x' % code)
            elif code < 0x10000:
                out.append('\\u%04x' % code)
            else:
                out.append('\\U%08x' % code)
        else:
            out.append(ch)
    out.append(quote)
    return ''.join(out)
