"""Date utility functions for chart request windows."""

from datetime import datetime, timedelta, timezone


def get_lookback_window(days: int, now: datetime | None = None) -> tuple[int, int]:
    """Get the unix timestamps bounding a lookback window.

    Args:
        days: Number of days to look back.
        now: End of the window. If None, uses the current UTC time.

    Returns:
        Tuple of (period1, period2) unix timestamps in seconds.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    start = now - timedelta(days=days)
    return int(start.timestamp()), int(now.timestamp())
