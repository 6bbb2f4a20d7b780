""" Python string semantics, computed by an explicit offset/slicing engine. """

from pystr.common import PyStrError, PyValueError, PyIndexError, PyTypeError
from pystr.offsets import normalize, normalize_step_bound, search_window
from pystr.slicing import getitem, length, slice_onestep, slice_text
from pystr.search import (
    contains, count, endswith, find, index, partition, replace, rfind, rindex,
    rpartition, rsplit, split, startswith,
)
from pystr.predicates import (
    isalnum, isalpha, isascii, isdecimal, isdigit, islower, isnumeric,
    isprintable, isspace, istitle, isupper,
)
from pystr.transform import (
    add, capitalize, casefold, center, expandtabs, join, ljust, lower, lstrip,
    mul, py_repr, rjust, rstrip, splitlines, strip, swapcase, title, upper, zfill,
)
from pystr.text import Text

# Every operation taking the text as its first argument, by method name.
OPERATIONS = {
    'add': add,
    'capitalize': capitalize,
    'casefold': casefold,
    'center': center,
    'contains': contains,
    'count': count,
    'endswith': endswith,
    'expandtabs': expandtabs,
    'find': find,
    'getitem': getitem,
    'index': index,
    'isalnum': isalnum,
    'isalpha': isalpha,
    'isascii': isascii,
    'isdecimal': isdecimal,
    'isdigit': isdigit,
    'islower': islower,
    'isnumeric': isnumeric,
    'isprintable': isprintable,
    'isspace': isspace,
    'istitle': istitle,
    'isupper': isupper,
    'join': join,
    'len': length,
    'ljust': ljust,
    'lower': lower,
    'lstrip': lstrip,
    'mul': mul,
    'partition': partition,
    'replace': replace,
    'repr': py_repr,
    'rfind': rfind,
    'rindex': rindex,
    'rjust': rjust,
    'rpartition': rpartition,
    'rsplit': rsplit,
    'rstrip': rstrip,
    'slice': slice_text,
    'split': split,
    'splitlines': splitlines,
    'startswith': startswith,
    'strip': strip,
    'swapcase': swapcase,
    'title': title,
    'upper': upper,
    'zfill': zfill,
}
