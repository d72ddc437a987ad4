"""
Batch classification module for the EnvQuality classifier.

This module classifies tables of recorded sensor readings, for example a CSV
export of the sensor module, row by row with the same classifier used for
live readings.
"""

from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .condition import CANONICAL_ORDER
from .environment_classifier import EnvironmentClassifier

REQUIRED_COLUMNS = [
    "raw_gas_value",
    "baseline_value",
    "temperature_celsius",
    "relative_humidity_percent",
]


def classify_frame(
    df: pd.DataFrame,
    classifier: Optional[EnvironmentClassifier] = None,
) -> pd.DataFrame:
    """
    Classifies every row of a DataFrame of readings.

    Non-finite values are not rejected; such rows follow the classifier's
    own degradation rules.

    Args:
        df: DataFrame with the columns in REQUIRED_COLUMNS
        classifier: Classifier to use; a default one is created if None

    Returns:
        A copy of ``df`` with added columns ``deviation``, one
        ``activation_<label>`` per condition, and ``condition``

    Raises:
        ValueError: If a required column is missing
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    classifier = classifier or EnvironmentClassifier()
    result = df.copy()
    result["deviation"] = result["raw_gas_value"].astype(float) - result["baseline_value"].astype(float)

    activations = {condition.value: [] for condition in CANONICAL_ORDER}
    conditions = []
    for deviation, temperature, humidity in zip(
        result["deviation"],
        result["temperature_celsius"].astype(float),
        result["relative_humidity_percent"].astype(float),
    ):
        evaluation = classifier.evaluate(deviation, temperature, humidity)
        for label, value in evaluation.activations.to_dict().items():
            activations[label].append(value)
        conditions.append(evaluation.condition.value)

    for label, values in activations.items():
        result[f"activation_{label}"] = values
    result["condition"] = conditions

    return result


def classify_csv(
    csv_path: Union[str, Path],
    classifier: Optional[EnvironmentClassifier] = None,
) -> pd.DataFrame:
    """
    Loads a CSV file of readings and classifies it.

    Args:
        csv_path: Path to a CSV file with the columns in REQUIRED_COLUMNS
        classifier: Classifier to use; a default one is created if None

    Returns:
        The classified DataFrame (see classify_frame)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a required column is missing
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Readings file not found: {csv_path}")

    df = pd.read_csv(csv_path)
    return classify_frame(df, classifier)
