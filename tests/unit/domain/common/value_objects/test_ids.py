"""Tests for identifier value objects."""

import dataclasses

import pytest

from cargo.domain.common.exceptions import MissingRequiredFieldError, ValidationError
from cargo.domain.common.value_objects import UnLocode, VoyageNumber


class TestVoyageNumber:
    def test_same_value(self) -> None:
        assert VoyageNumber("0101") == VoyageNumber("0101")
        assert VoyageNumber("0101").same_value_as(VoyageNumber("0101"))
        assert hash(VoyageNumber("0101")) == hash(VoyageNumber("0101"))

    def test_different_value(self) -> None:
        assert VoyageNumber("0101") != VoyageNumber("0102")
        assert not VoyageNumber("0101").same_value_as(None)

    def test_empty_value_allowed(self) -> None:
        assert str(VoyageNumber("")) == ""

    def test_missing_value_raises_error(self) -> None:
        with pytest.raises(MissingRequiredFieldError, match="value is required"):
            VoyageNumber(None)  # type: ignore[arg-type]

    def test_non_string_value_raises_error(self) -> None:
        with pytest.raises(TypeError):
            VoyageNumber(101)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        number = VoyageNumber("0101")
        with pytest.raises(dataclasses.FrozenInstanceError):
            number.value = "0202"  # type: ignore[misc]

    def test_to_primitive(self) -> None:
        assert VoyageNumber("0101").to_primitive() == "0101"

    def test_not_interchangeable_with_unlocode(self) -> None:
        assert VoyageNumber("CNHKG") != UnLocode("CNHKG")


class TestUnLocode:
    def test_normalizes_to_upper_case(self) -> None:
        assert UnLocode("cnhkg") == UnLocode("CNHKG")
        assert str(UnLocode("cnhkg")) == "CNHKG"

    @pytest.mark.parametrize("value", ["", "CNHK", "CNHKGX", "12345", "CNHK1", "CN-HK"])
    def test_invalid_code_raises_error(self, value: str) -> None:
        with pytest.raises(ValidationError, match="Invalid UN/LOCODE"):
            UnLocode(value)

    def test_digits_two_to_nine_allowed(self) -> None:
        assert str(UnLocode("SE2A9")) == "SE2A9"
