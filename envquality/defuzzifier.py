"""
Defuzzifier module for the EnvQuality classifier.

This module contains the Defuzzifier, which turns an ActivationVector into a
single Condition by picking the strongest activation.
"""

from .condition import CANONICAL_ORDER, DEFAULT_CONDITION, Condition
from .rule_aggregator import ActivationVector


class Defuzzifier:
    """
    Argmax defuzzifier with a fixed default and a fixed tie-break order.

    This is not a centroid method: no weighting or normalization is applied.
    """

    def defuzzify(self, activations: ActivationVector) -> Condition:
        """
        Selects the condition with the greatest activation.

        Conditions are scanned in canonical order (excellent, good, suitable,
        moderate, poor, hazardous) and the running best is replaced only on a
        strictly greater value. Consequently:
        - on an exact tie, the earlier condition in canonical order wins
        - if nothing exceeds 0 (including all-NaN activations), the result is
          "moderate"

        Args:
            activations: Activation strengths from the RuleAggregator

        Returns:
            The winning Condition
        """
        best_condition = DEFAULT_CONDITION
        best_value = 0.0

        for condition in CANONICAL_ORDER:
            value = activations.strength(condition)
            # NaN fails this comparison and never becomes the best
            if value > best_value:
                best_condition = condition
                best_value = value

        return best_condition
