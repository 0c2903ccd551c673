"""Unit tests for bill field rules"""

import pytest
from datetime import date, datetime

from src.domain.bill_rules import (
    compute_totals,
    coerce_date,
    coerce_number,
    normalize_bill_fields,
    validate_mobile,
)


def make_payload(**overrides):
    payload = {
        "Name": "Asha",
        "Mobile": "9876543210",
        "Date": "2024-01-05",
        "Morning": 2,
        "Evening": 1.5,
        "Rate": 50,
    }
    payload.update(overrides)
    return payload


class TestComputeTotals:
    """Test derived totals"""

    def test_example_bill(self):
        assert compute_totals(2.0, 1.5, 50.0) == (3.5, 175.0)

    @pytest.mark.parametrize(
        "morning,evening,rate",
        [(0.0, 0.0, 0.01), (1.25, 0.75, 42.5), (10.0, 3.3, 61.0)],
    )
    def test_totals_follow_formula(self, morning, evening, rate):
        total_liters, total_amount = compute_totals(morning, evening, rate)

        assert total_liters == morning + evening
        assert total_amount == (morning + evening) * rate


class TestCoercion:
    """Test raw value coercion"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2024-01-05", date(2024, 1, 5)),
            ("2024-01-05T10:30:00", date(2024, 1, 5)),
            ("2024-01-05T10:30:00Z", date(2024, 1, 5)),
            ("2024-01-05T10:30:00+05:30", date(2024, 1, 5)),
            (date(2024, 1, 5), date(2024, 1, 5)),
            (datetime(2024, 1, 5, 8, 0), date(2024, 1, 5)),
        ],
    )
    def test_valid_dates(self, raw, expected):
        assert coerce_date(raw) == expected

    @pytest.mark.parametrize("raw", ["", "not-a-date", "2024-02-30", "2024-13-01", 20240105, None])
    def test_invalid_dates(self, raw):
        assert coerce_date(raw) is None

    @pytest.mark.parametrize(
        "raw,expected",
        [(2, 2.0), (1.5, 1.5), ("2", 2.0), (" 1.25 ", 1.25), ("-3", -3.0)],
    )
    def test_valid_numbers(self, raw, expected):
        assert coerce_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "12abc", True, False, "nan", "inf", [1], {"a": 1}])
    def test_invalid_numbers(self, raw):
        assert coerce_number(raw) is None

    @pytest.mark.parametrize("mobile", ["9876543210", "0000000000"])
    def test_valid_mobile(self, mobile):
        assert validate_mobile(mobile)

    @pytest.mark.parametrize(
        "mobile",
        [
            "987654321",
            "98765432101",
            "98765abcde",
            "+919876543210",
            "98765 43210",
            "9876543210\n",
            "٩٨٧٦٥٤٣٢١٠",
        ],
    )
    def test_invalid_mobile(self, mobile):
        assert not validate_mobile(mobile)


class TestNormalizeBillFields:
    """Test full payload normalization"""

    def test_valid_payload(self):
        result = normalize_bill_fields(make_payload())

        assert result.is_ok()
        fields = result.value
        assert fields.name == "Asha"
        assert fields.mobile == "9876543210"
        assert fields.bill_date == date(2024, 1, 5)
        assert fields.morning == 2.0
        assert fields.evening == 1.5
        assert fields.rate == 50.0

    def test_string_values_are_coerced(self):
        result = normalize_bill_fields(
            make_payload(Morning="2", Evening="1.5", Rate="50", Mobile=9876543210)
        )

        assert result.is_ok()
        assert result.value.morning == 2.0
        assert result.value.mobile == "9876543210"

    def test_zero_quantities_are_accepted(self):
        result = normalize_bill_fields(make_payload(Morning=0, Evening=0))

        assert result.is_ok()

    def test_minimum_rate_is_accepted(self):
        result = normalize_bill_fields(make_payload(Rate=0.01))

        assert result.is_ok()

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name_rejected(self, name):
        result = normalize_bill_fields(make_payload(Name=name))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert "Name" in result.error.details

    @pytest.mark.parametrize("mobile", ["12345", "12345678901", "abcdefghij", " 9876543210 ", "٩٨٧٦٥٤٣٢١٠"])
    def test_bad_mobile_rejected(self, mobile):
        result = normalize_bill_fields(make_payload(Mobile=mobile))

        assert result.is_err()
        assert result.error.details["Mobile"] == "Mobile number must be 10 digits"

    def test_bad_date_rejected(self):
        result = normalize_bill_fields(make_payload(Date="05/01/2024"))

        assert result.is_err()
        assert result.error.details["Date"] == "Invalid date"

    @pytest.mark.parametrize("rate", [0, -1, 0.001])
    def test_rate_below_minimum_rejected(self, rate):
        result = normalize_bill_fields(make_payload(Rate=rate))

        assert result.is_err()
        assert result.error.details["Rate"] == "Rate must be at least 0.01"

    @pytest.mark.parametrize("field_name", ["Morning", "Evening"])
    def test_negative_quantity_rejected(self, field_name):
        result = normalize_bill_fields(make_payload(**{field_name: -0.5}))

        assert result.is_err()
        assert result.error.details[field_name] == f"{field_name} must be at least 0"

    @pytest.mark.parametrize("field_name", ["Morning", "Evening", "Rate"])
    def test_non_numeric_rejected(self, field_name):
        result = normalize_bill_fields(make_payload(**{field_name: "two"}))

        assert result.is_err()
        assert result.error.details[field_name] == f"{field_name} must be a number"

    def test_all_problems_reported(self):
        result = normalize_bill_fields({})

        assert result.is_err()
        assert set(result.error.details) == {"Name", "Mobile", "Date", "Morning", "Evening", "Rate"}
        assert result.error.message.startswith("Bill validation failed: ")
