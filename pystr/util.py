from typing import TypeVar, Optional


def clamp(value: int, lo: int, hi: int) -> int:
    return min(max(value, lo), hi)


T = TypeVar("T")


def coalesce(*args: Optional[T]) -> T:
    """ First argument that is not None; omitted slice bounds and steps fall back
    to their defaults this way. """
    if len(args) == 0:
        raise TypeError("coalesce expected >=1 argument, got 0")
    for arg in args:
        if arg is not None:
            return arg
    raise TypeError("coalesce() called with all None")
