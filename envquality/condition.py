"""
Condition module for the EnvQuality classifier.

This module defines the Condition enumeration, the six ordinal
environmental-quality labels produced by the classifier, together with the
canonical order in which the defuzzifier scans them.
"""

from enum import Enum


class Condition(str, Enum):
    """
    Ordinal environmental-quality labels, from best to worst.

    Members compare equal to their string values, so a Condition can be used
    wherever the plain label ("excellent", "poor", ...) is expected.
    """

    EXCELLENT = "excellent"
    GOOD = "good"
    SUITABLE = "suitable"
    MODERATE = "moderate"
    POOR = "poor"
    HAZARDOUS = "hazardous"


# Scan order used by the defuzzifier; earlier labels win ties
CANONICAL_ORDER: tuple[Condition, ...] = (
    Condition.EXCELLENT,
    Condition.GOOD,
    Condition.SUITABLE,
    Condition.MODERATE,
    Condition.POOR,
    Condition.HAZARDOUS,
)

# Returned when no activation exceeds zero
DEFAULT_CONDITION = Condition.MODERATE
