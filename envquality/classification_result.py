"""
Classification result module for the EnvQuality classifier.

This module defines the ClassificationResult dataclass which bundles the
final condition with the intermediate vectors that produced it, for
diagnostics and testing.
"""

from dataclasses import dataclass

from .condition import Condition
from .membership import AqiMembership, HumidityMembership, TemperatureMembership
from .rule_aggregator import ActivationVector


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of one classifier evaluation.

    Attributes:
        condition: The selected environmental condition
        deviation: Gas deviation the evaluation was based on
        aqi: Membership of the gas deviation
        temperature: Membership of the temperature
        humidity: Membership of the humidity
        activations: Activation strength of every condition
    """

    condition: Condition
    deviation: float
    aqi: AqiMembership
    temperature: TemperatureMembership
    humidity: HumidityMembership
    activations: ActivationVector
