import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round a number with halves going up, e.g. 82.5 -> 83 and 2.5 -> 3.

    The built-in round() rounds halves to even, which does not match how
    dashboard figures are presented.

    Args:
        value (float): The number to round.
        digits (int): Number of decimal places to keep.

    Returns:
        float: The rounded value. Use int() on the result when digits is 0.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def percentage(part: int, whole: int) -> int:
    """Return part/whole as a half-up rounded percentage, or 0 when whole is 0."""
    if whole == 0:
        return 0
    return int(round_half_up(part / whole * 100))
