"""Rush-hour ETA multiplier."""

RUSH_HOUR_WINDOWS: list[tuple[int, int]] = [(12, 14), (19, 21)]
RUSH_HOUR_MULTIPLIER: float = 1.5


def rush_hour_multiplier(hour: int) -> float:
    """Return ETA multiplier for a local hour (lunch and dinner windows are half-open)."""
    for start, end in RUSH_HOUR_WINDOWS:
        if start <= hour < end:
            return RUSH_HOUR_MULTIPLIER
    return 1.0


def is_rush_hour(hour: int) -> bool:
    return rush_hour_multiplier(hour) > 1.0
