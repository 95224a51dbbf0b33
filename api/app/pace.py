import math


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def calculate_pace(distance: float, duration: float) -> str:
    """Minutes per kilometer as ``M:SS``.

    Seconds are rounded on their own and never carried into the minutes,
    so a pace just under a whole minute renders as ``5:60``.
    """
    pace_minutes = duration / distance
    minutes = math.floor(pace_minutes)
    seconds = _round_half_up((pace_minutes - minutes) * 60)
    return f"{minutes}:{seconds:02d}"
