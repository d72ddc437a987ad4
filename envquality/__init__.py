"""
EnvQuality: fuzzy-inference classification of air quality and climate readings.

The classifier maps a gas-sensor deviation, a temperature and a relative
humidity to one of six condition labels.
"""

from .condition import CANONICAL_ORDER, Condition
from .condition_details import ConditionDetails, get_condition_details
from .environment_classifier import EnvironmentClassifier
from .classification_result import ClassificationResult
from .sensor_reading import SensorReadError, SensorReading

__all__ = [
    'CANONICAL_ORDER',
    'ClassificationResult',
    'Condition',
    'ConditionDetails',
    'EnvironmentClassifier',
    'SensorReadError',
    'SensorReading',
    'get_condition_details',
]
