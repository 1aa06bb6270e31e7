"""
Pagination cursors.

A cursor is the creation time of the last post a client has seen, as a
string of milliseconds since the Unix epoch. Post.createdAt is exposed in
the same form, so clients pass it back unchanged.
"""

from datetime import datetime, timedelta

EPOCH = datetime(1970, 1, 1)
ONE_MILLISECOND = timedelta(milliseconds=1)


class InvalidCursorError(ValueError):
    pass


def encode_cursor(created_at: datetime) -> str:
    """Encode a naive UTC datetime as epoch milliseconds"""
    return str((created_at - EPOCH) // ONE_MILLISECOND)


def decode_cursor(cursor: str) -> datetime:
    """
    Decode epoch milliseconds into a naive UTC datetime.

    Raises:
        InvalidCursorError: cursor is not an integer string in datetime range
    """
    try:
        return EPOCH + int(cursor) * ONE_MILLISECOND
    except (ValueError, OverflowError) as e:
        raise InvalidCursorError(f"Invalid cursor: {cursor!r}") from e
