"""Time source used for every persisted timestamp."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as a naive datetime.

    Timestamps are stored without zone information; every one of them is UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
