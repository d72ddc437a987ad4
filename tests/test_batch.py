"""
Tests for batch classification of recorded readings.

Tests cover:
- Classification of a DataFrame and of a CSV file
- Input DataFrame left unchanged
- Error scenarios: missing columns, missing file
"""

import pandas as pd
import pytest

from envquality.batch import REQUIRED_COLUMNS, classify_csv, classify_frame


@pytest.fixture
def readings():
    """Fixture providing two recorded readings (clean air and the demo reading)."""
    return pd.DataFrame({
        "raw_gas_value": [200, 306],
        "baseline_value": [200, 200],
        "temperature_celsius": [22.0, 26.7],
        "relative_humidity_percent": [45.0, 52.0],
    })


class TestClassifyFrame:
    """Test suite for classify_frame / classify_csv."""

    def test_conditions_and_activations(self, readings):
        result = classify_frame(readings)

        assert list(result["condition"]) == ["excellent", "poor"]
        assert list(result["deviation"]) == [0.0, 106.0]
        assert result.loc[0, "activation_excellent"] == pytest.approx(1.0)
        assert result.loc[0, "activation_good"] == pytest.approx(0.25)
        assert result.loc[1, "activation_poor"] == pytest.approx(0.72)

    def test_activation_columns_in_canonical_order(self, readings):
        result = classify_frame(readings)
        activation_columns = [c for c in result.columns if c.startswith("activation_")]
        assert activation_columns == [
            "activation_excellent",
            "activation_good",
            "activation_suitable",
            "activation_moderate",
            "activation_poor",
            "activation_hazardous",
        ]

    def test_input_not_modified(self, readings):
        before = readings.copy()
        classify_frame(readings)
        pd.testing.assert_frame_equal(readings, before)

    def test_missing_values_degrade_to_moderate(self):
        df = pd.DataFrame({
            "raw_gas_value": [float("nan")],
            "baseline_value": [200],
            "temperature_celsius": [22.0],
            "relative_humidity_percent": [45.0],
        })
        assert classify_frame(df).loc[0, "condition"] == "moderate"

    def test_empty_frame(self):
        df = pd.DataFrame({column: pd.Series(dtype=float) for column in REQUIRED_COLUMNS})
        result = classify_frame(df)
        assert len(result) == 0
        assert "condition" in result.columns

    # ==================== Error Scenarios ====================

    def test_missing_column_raises(self, readings):
        with pytest.raises(ValueError, match="relative_humidity_percent"):
            classify_frame(readings.drop(columns=["relative_humidity_percent"]))

    def test_classify_csv(self, readings, tmp_path):
        csv_path = tmp_path / "readings.csv"
        readings.to_csv(csv_path, index=False)

        result = classify_csv(csv_path)

        assert list(result["condition"]) == ["excellent", "poor"]

    def test_classify_csv_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            classify_csv(tmp_path / "missing.csv")
