# chat_server/core/pagination.py

from typing import Sequence, TypeVar

from chat_server.core.errors import OutOfRangeError


T = TypeVar("T")


def paginate(items: Sequence[T], limit: int, offset: int) -> list[T]:
    """
    Returns the [offset, offset + limit) window of `items`.

    Callers guarantee limit > 0 and offset >= 0. An offset at or past the end
    raises OutOfRangeError; a limit running past the end is truncated.
    """
    if offset >= len(items):
        raise OutOfRangeError(offset, len(items))
    return list(items[offset:offset + limit])
