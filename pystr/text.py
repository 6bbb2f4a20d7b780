import functools
from typing import Iterable, Iterator

from pystr import predicates, search, transform
from pystr.common import PyTypeError
from pystr.slicing import getitem, slice_text


def _unwrap(value):
    if isinstance(value, Text):
        return value.value
    if isinstance(value, tuple):
        return tuple(_unwrap(item) for item in value)
    return value


def _wrap(result):
    if isinstance(result, str):
        return Text(result)
    if isinstance(result, list):
        return [_wrap(item) for item in result]
    return result


def _method(func):
    """ Expose `func(text, ...)` as a Text method returning Text values. """

    @functools.wraps(func)
    def method(self, *args, **kwargs):
        args = [_unwrap(arg) for arg in args]
        kwargs = {key: _unwrap(arg) for key, arg in kwargs.items()}
        return _wrap(func(self.value, *args, **kwargs))

    return method


class Text:
    """ Immutable string value whose indexing and methods follow Python `str`.

    Compares and hashes equal to a plain `str` with the same content.
    """

    __slots__ = ('_value',)

    def __init__(self, value=''):
        value = _unwrap(value)
        if not isinstance(value, str):
            raise PyTypeError(f'Text() argument must be str, not {type(value).__name__}')
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    # **** Sequence protocol ****

    def __getitem__(self, item):
        if isinstance(item, int):
            return Text(getitem(self._value, item))
        elif isinstance(item, slice):
            return Text(slice_text(self._value, item.start, item.stop, item.step))
        else:
            raise PyTypeError(f'string indices must be integers, not {type(item).__name__}')

    def __len__(self):
        return len(self._value)

    def __iter__(self) -> Iterator['Text']:
        for ch in self._value:
            yield Text(ch)

    def __contains__(self, item):
        return search.contains(self._value, _unwrap(item))

    # **** Operators ****

    def __add__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return Text(transform.add(self._value, other))

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return Text(transform.add(other, self._value))

    def __mul__(self, times):
        if not isinstance(times, int):
            return NotImplemented
        return Text(transform.mul(self._value, times))

    __rmul__ = __mul__

    def __eq__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return self._value == other

    def __ne__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return self._value != other

    def __lt__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return self._value < other

    def __le__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return self._value <= other

    def __gt__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return self._value > other

    def __ge__(self, other):
        other = _unwrap(other)
        if not isinstance(other, str):
            return NotImplemented
        return self._value >= other

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return self._value

    def __repr__(self):
        return transform.py_repr(self._value)

    # **** Methods ****

    def join(self, items: Iterable) -> 'Text':
        return Text(transform.join(self._value, (_unwrap(item) for item in items)))

    # search
    find = _method(search.find)
    rfind = _method(search.rfind)
    index = _method(search.index)
    rindex = _method(search.rindex)
    count = _method(search.count)
    startswith = _method(search.startswith)
    endswith = _method(search.endswith)
    partition = _method(search.partition)
    rpartition = _method(search.rpartition)
    split = _method(search.split)
    rsplit = _method(search.rsplit)
    replace = _method(search.replace)

    # predicates
    isalnum = _method(predicates.isalnum)
    isalpha = _method(predicates.isalpha)
    isascii = _method(predicates.isascii)
    isdecimal = _method(predicates.isdecimal)
    isdigit = _method(predicates.isdigit)
    islower = _method(predicates.islower)
    isnumeric = _method(predicates.isnumeric)
    isprintable = _method(predicates.isprintable)
    isspace = _method(predicates.isspace)
    istitle = _method(predicates.istitle)
    isupper = _method(predicates.isupper)

    # transforms
    capitalize = _method(transform.capitalize)
    casefold = _method(transform.casefold)
    center = _method(transform.center)
    expandtabs = _method(transform.expandtabs)
    ljust = _method(transform.ljust)
    lower = _method(transform.lower)
    lstrip = _method(transform.lstrip)
    rjust = _method(transform.rjust)
    rstrip = _method(transform.rstrip)
    splitlines = _method(transform.splitlines)
    strip = _method(transform.strip)
    swapcase = _method(transform.swapcase)
    title = _method(transform.title)
    upper = _method(transform.upper)
    zfill = _method(transform.zfill)
