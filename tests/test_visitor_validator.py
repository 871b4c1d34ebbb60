# tests/test_visitor_validator.py
"""Unit tests for gate form validation."""

import pytest
from app.services.errors import InvalidId, InvalidMobile, MissingName, InvalidPlate
from app.services.visitor_validator import (
    CheckInForm,
    normalize_car_plate,
    normalize_mobile_number,
    validate_check_in,
    validate_id_number,
    validate_names,
)


def make_form(**overrides):
    fields = dict(id_number="24807965", first_name="Edward", last_name="John",
                  car_plate="KBM243T", mobile_number="0712345678")
    fields.update(overrides)
    return CheckInForm(**fields)


class TestIdNumber:
    def test_eight_digits_accepted(self):
        assert validate_id_number("24807965") == "24807965"

    @pytest.mark.parametrize("value", ["", None, "2480796", "248079655", "2480796a", " 24807965", "24807965\n", "２４８０７９６５"])
    def test_anything_else_rejected(self, value):
        with pytest.raises(InvalidId):
            validate_id_number(value)

    def test_custom_message(self):
        with pytest.raises(InvalidId) as exc:
            validate_id_number("123", "Please enter a valid 8-digit ID")
        assert exc.value.message == "Please enter a valid 8-digit ID"


class TestMobileNumber:
    @pytest.mark.parametrize("value", ["0712345678", "254712345678", "+254712345678", "712345678"])
    def test_prefixes_normalized_to_country_code(self, value):
        assert normalize_mobile_number(value) == "254712345678"

    def test_airtel_range_accepted(self):
        assert normalize_mobile_number("0110123456") == "254110123456"

    @pytest.mark.parametrize("value", ["", None, "0812345678", "071234567", "07123456789", "+1712345678"])
    def test_invalid_numbers_rejected(self, value):
        with pytest.raises(InvalidMobile):
            normalize_mobile_number(value)


class TestNames:
    def test_names_trimmed(self):
        assert validate_names("  Edward ", "John\t") == ("Edward", "John")

    @pytest.mark.parametrize("first,last", [("", "John"), ("Edward", "   "), (None, "John")])
    def test_blank_name_rejected(self, first, last):
        with pytest.raises(MissingName):
            validate_names(first, last)


class TestCarPlate:
    @pytest.mark.parametrize("value", ["KBM243T", "kbm243t", " KbM243t "])
    def test_plate_uppercased(self, value):
        assert normalize_car_plate(value) == "KBM243T"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_plate_is_absent(self, value):
        assert normalize_car_plate(value) is None

    @pytest.mark.parametrize("value", ["KB243T", "KBM2430", "KBM 243T", "KBM243TT"])
    def test_bad_format_rejected(self, value):
        with pytest.raises(InvalidPlate):
            normalize_car_plate(value)


class TestCheckInForm:
    def test_web_form_ignores_mobile(self):
        clean = validate_check_in(make_form(mobile_number="not-a-number"), require_mobile=False)
        assert clean.mobile_number is None
        assert clean.car_plate == "KBM243T"

    def test_kiosk_form_requires_mobile(self):
        with pytest.raises(InvalidMobile):
            validate_check_in(make_form(mobile_number=""), require_mobile=True)

    def test_first_failure_wins(self):
        with pytest.raises(InvalidId):
            validate_check_in(make_form(id_number="123", first_name="", car_plate="bad"))

    def test_names_checked_before_plate(self):
        with pytest.raises(MissingName):
            validate_check_in(make_form(last_name=" ", car_plate="bad"))
