"""
Tolerance-aware numeric comparisons.

Host platforms report geometry as floats that pick up rounding noise
(43.99999 for a 44pt button). Size and frame checks go through these helpers
so that noise never turns into a violation.
"""


def is_more_than_or_equal(value: float, target: float, tolerance: float = 0.0) -> bool:
    """
    Check value >= target, allowing value to fall short by up to `tolerance`.

    Args:
        value: Measured value
        target: Threshold
        tolerance: Allowed shortfall (sign is ignored)

    Returns:
        True if value >= target - |tolerance|
    """
    return value >= target - abs(tolerance)


def is_within_tolerance(first: float, second: float, tolerance: float = 0.0) -> bool:
    """True if the two values differ by no more than |tolerance|."""
    return abs(first - second) <= abs(tolerance)
