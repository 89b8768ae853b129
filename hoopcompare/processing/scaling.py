"""Map raw statistics onto the bounded 0-100 radar scale."""

AXIS_CEILING = 100.0


def normalize_value(value: float, reference_max: float) -> float:
    """Scale a value against its reference maximum, capped at 100.

    The lower end is not clamped; statistics are non-negative.

    Args:
        value: Raw statistic (percentages already multiplied by 100)
        reference_max: Per-category denominator

    Returns:
        min(100, value / reference_max * 100)
    """
    if reference_max <= 0:
        raise ValueError(f"reference_max must be positive, got {reference_max}")
    return min(AXIS_CEILING, (value / reference_max) * 100)
