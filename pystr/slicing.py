""" Element access and slice extraction over a text.

All offsets reaching the host string here are already normalized, so the
only host operations used are single-character access and contiguous runs.
"""

from typing import Optional

from pystr.common import PyIndexError, PyValueError
from pystr.offsets import normalize, normalize_step_bound, wrap
from pystr.util import coalesce


def length(text: str) -> int:
    return len(text)


def _substr(text: str, start: int, end: int) -> str:
    # Caller guarantees 0 <= start <= end <= len(text).
    return text[start:end]


def _is_identity(text: str, start, end, step=None) -> bool:
    size = len(text)
    return (start is None or start == 0) and \
        (end is None or end == size) and \
        (step is None or step == 1)


def getitem(text: str, index: int) -> str:
    """ text[index], with a single negative wraparound. """
    size = len(text)
    offset = wrap(index, size)
    if not 0 <= offset < size:
        raise PyIndexError('string index out of range')
    return _substr(text, offset, offset + 1)


def slice_onestep(text: str, start: Optional[int] = None, end: Optional[int] = None) -> str:
    """ text[start:end]. Both bounds clamp into [0, size]. """
    if _is_identity(text, start, end):
        return text

    size = len(text)
    start = normalize(start, 0, size)
    end = normalize(end, size, size)
    if start < end:
        return _substr(text, start, end)
    return ''


def slice_text(
        text: str,
        start: Optional[int] = None,
        end: Optional[int] = None,
        step: Optional[int] = None,
) -> str:
    """ text[start:end:step].

    :raises PyValueError: step is 0.
    """
    if step == 0:
        raise PyValueError('slice step cannot be zero')
    if _is_identity(text, start, end, step):
        return text

    size = len(text)
    step = coalesce(step, 1)
    start = normalize_step_bound(start, size, step, is_end=False)
    end = normalize_step_bound(end, size, step, is_end=True)

    if step == 1:
        if start <= end:
            return _substr(text, start, end)
        return ''

    out = []
    index = start
    if step > 0:
        while index < end:
            out.append(text[index])
            index += step
    else:
        while index > end:
            out.append(text[index])
            index += step
    return ''.join(out)
