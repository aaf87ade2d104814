def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def progress_percentage(start: float, current: float, goal: float) -> float:
    """
    Percentage of the way from the start weight to the goal weight, in
    [0, 100]. Works for both loss (goal < start) and gain (goal > start)
    goals; moving away from the goal past the start reads as 0.
    """
    total_delta = start - goal
    current_delta = start - current
    if total_delta == 0:
        return 0.0
    return _clamp(current_delta / total_delta * 100, 0.0, 100.0)


def weight_change(start: float, current: float) -> float:
    """Weight lost since the start; negative when weight was gained."""
    return start - current
