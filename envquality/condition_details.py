"""
Condition details module for the EnvQuality classifier.

This module holds the static presentation data for each Condition (display
label, advisory message and colour classes) and the lookup that resolves a
condition to it. Unknown labels resolve to the "moderate" entry, mirroring
the defuzzifier's own default.
"""

from dataclasses import dataclass
from typing import Union

from .condition import DEFAULT_CONDITION, Condition


@dataclass(frozen=True)
class ConditionDetails:
    """
    Display data for one condition.

    Attributes:
        label: Human-readable label
        message: Short advisory message
        color: Gradient classes for the status card
        text_color: Text colour class
        bg_color: Background colour class
    """

    label: str
    message: str
    color: str
    text_color: str
    bg_color: str


CONDITION_DETAILS: dict[Condition, ConditionDetails] = {
    Condition.EXCELLENT: ConditionDetails(
        label="Excellent",
        message="Perfect air quality and climate conditions",
        color="from-green-500 to-emerald-500",
        text_color="text-green-600",
        bg_color="bg-green-50",
    ),
    Condition.GOOD: ConditionDetails(
        label="Good",
        message="Air quality is acceptable and conditions are pleasant",
        color="from-blue-500 to-cyan-500",
        text_color="text-blue-600",
        bg_color="bg-blue-50",
    ),
    Condition.SUITABLE: ConditionDetails(
        label="Suitable",
        message="Conditions are acceptable for most activities",
        color="from-teal-500 to-green-500",
        text_color="text-teal-600",
        bg_color="bg-teal-50",
    ),
    Condition.MODERATE: ConditionDetails(
        label="Moderate",
        message="Acceptable but may affect sensitive individuals",
        color="from-yellow-500 to-orange-400",
        text_color="text-yellow-700",
        bg_color="bg-yellow-50",
    ),
    Condition.POOR: ConditionDetails(
        label="Poor",
        message="Consider limiting outdoor exposure",
        color="from-orange-500 to-red-500",
        text_color="text-orange-600",
        bg_color="bg-orange-50",
    ),
    Condition.HAZARDOUS: ConditionDetails(
        label="Hazardous",
        message="Health warning! Avoid outdoor activities",
        color="from-red-600 to-red-800",
        text_color="text-red-700",
        bg_color="bg-red-50",
    ),
}


def get_condition_details(condition: Union[Condition, str, None]) -> ConditionDetails:
    """
    Looks up the display data for a condition.

    Args:
        condition: A Condition, its string label, or any other value

    Returns:
        The matching ConditionDetails, or the "moderate" entry when the value
        is not a recognized label
    """
    try:
        key = Condition(condition)
    except ValueError:
        # Unrecognized label: fall back to the default condition's details
        key = DEFAULT_CONDITION

    return CONDITION_DETAILS[key]
