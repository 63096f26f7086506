"""Unit Conversions — pure numeric helpers for altitude data.

Invariants:
    - No rounding: results follow plain IEEE-754 double arithmetic
"""

FEET_TO_METERS = 0.3048


def feet_to_meters(feet: float) -> float:
    """Convert an altitude in feet to meters."""
    return feet * FEET_TO_METERS
