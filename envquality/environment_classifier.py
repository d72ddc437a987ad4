"""
Environment classifier module for the EnvQuality classifier.

This module contains the EnvironmentClassifier, which runs the membership
evaluation, rule aggregation and defuzzification steps in sequence. It is
pure and stateless: each call is independent, raises nothing, and may be
made concurrently from any number of callers.
"""

from typing import Optional

from .classification_result import ClassificationResult
from .condition import Condition
from .defuzzifier import Defuzzifier
from .membership import MembershipEvaluator
from .rule_aggregator import RuleAggregator
from .sensor_reading import SensorReading


class EnvironmentClassifier:
    """
    Fuzzy-inference classifier for combined air quality and climate readings.

    Maps (gas deviation, temperature, humidity) to one of six Condition
    labels. Components can be injected for testing; by default the standard
    evaluator, rule base and defuzzifier are used.
    """

    def __init__(
        self,
        evaluator: Optional[MembershipEvaluator] = None,
        aggregator: Optional[RuleAggregator] = None,
        defuzzifier: Optional[Defuzzifier] = None,
    ) -> None:
        self.evaluator = evaluator or MembershipEvaluator()
        self.aggregator = aggregator or RuleAggregator()
        self.defuzzifier = defuzzifier or Defuzzifier()

    def evaluate(
        self,
        deviation: float,
        temperature_celsius: float,
        relative_humidity_percent: float,
    ) -> ClassificationResult:
        """
        Runs the full pipeline and keeps every intermediate vector.

        Args:
            deviation: Raw gas value minus baseline
            temperature_celsius: Ambient temperature in Celsius
            relative_humidity_percent: Relative humidity in percent

        Returns:
            ClassificationResult with the condition, memberships and activations
        """
        aqi = self.evaluator.aqi_membership(deviation)
        temperature = self.evaluator.temperature_membership(temperature_celsius)
        humidity = self.evaluator.humidity_membership(relative_humidity_percent)

        activations = self.aggregator.aggregate(aqi, temperature, humidity)
        condition = self.defuzzifier.defuzzify(activations)

        return ClassificationResult(
            condition=condition,
            deviation=deviation,
            aqi=aqi,
            temperature=temperature,
            humidity=humidity,
            activations=activations,
        )

    def classify(self, reading: SensorReading) -> ClassificationResult:
        """Classifies a SensorReading, using only its deviation, temperature and humidity."""
        return self.evaluate(
            reading.deviation,
            reading.temperature_celsius,
            reading.relative_humidity_percent,
        )

    def classify_values(
        self,
        raw_gas_value: float,
        baseline_value: float,
        temperature_celsius: float,
        relative_humidity_percent: float,
    ) -> Condition:
        """
        Returns only the condition for four raw values.

        Args:
            raw_gas_value: Raw gas-sensor value
            baseline_value: Baseline the raw value is compared against
            temperature_celsius: Ambient temperature in Celsius
            relative_humidity_percent: Relative humidity in percent

        Returns:
            The selected Condition
        """
        deviation = raw_gas_value - baseline_value
        return self.evaluate(deviation, temperature_celsius, relative_humidity_percent).condition
