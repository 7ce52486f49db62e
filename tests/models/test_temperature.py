from __future__ import annotations

import pydantic
import pytest

from tempconv.models.temperature import (
    Temperature,
    TemperatureUnit,
    UnitParseError,
    celsius_to_fahrenheit,
    convert,
    fahrenheit_to_celsius,
    parse_unit,
    parse_value,
)

F = TemperatureUnit.FAHRENHEIT
C = TemperatureUnit.CELSIUS


class TestParseUnit:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("f", F),
            ("F", F),
            ("fahrenheit", F),
            ("FaHrEnHeIt", F),
            ("c", C),
            ("C", C),
            ("celcius", C),
            ("CELCIUS", C),
        ],
    )
    def test_accepts_known_tokens(self, text: str, expected: TemperatureUnit) -> None:
        assert parse_unit(text) is expected

    @pytest.mark.parametrize("text", ["x", "", "celsius", "k", "kelvin", "ff", " c", "quit"])
    def test_rejects_other_tokens(self, text: str) -> None:
        with pytest.raises(UnitParseError):
            parse_unit(text)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown temperature unit"):
            parse_unit("rankine")


class TestTemperatureUnit:
    def test_symbols(self) -> None:
        assert F.value == "F"
        assert C.value == "C"

    def test_other(self) -> None:
        assert F.other is C
        assert C.other is F


class TestConvert:
    def test_freezing_point(self) -> None:
        assert convert(32.0, F, C) == 0.0
        assert convert(0.0, C, F) == 32.0

    def test_boiling_point(self) -> None:
        assert convert(100.0, C, F) == 212.0

    def test_body_temperature_is_whole(self) -> None:
        assert convert(98.6, F, C) == 37.0

    def test_fractional_result(self) -> None:
        assert convert(1.0, C, F) == pytest.approx(33.8)

    def test_scales_cross_at_minus_forty(self) -> None:
        assert convert(-40.0, F, C) == pytest.approx(-40.0)
        assert convert(-40.0, C, F) == pytest.approx(-40.0)

    @pytest.mark.parametrize("unit", [F, C])
    def test_same_unit_is_identity(self, unit: TemperatureUnit) -> None:
        assert convert(12.34, unit, unit) == 12.34

    @pytest.mark.parametrize("value", [-459.67, -40.0, 0.0, 1.5, 98.6, 451.0, 1e6])
    def test_round_trip(self, value: float) -> None:
        back = convert(convert(value, F, C), C, F)
        assert back == pytest.approx(value)

    def test_helpers_match_convert(self) -> None:
        assert fahrenheit_to_celsius(212.0) == convert(212.0, F, C)
        assert celsius_to_fahrenheit(37.0) == convert(37.0, C, F)


class TestTemperature:
    def test_convert_to_returns_new_instance(self) -> None:
        original = Temperature(value=100.0, unit=C)
        converted = original.convert_to(F)

        assert converted == Temperature(value=212.0, unit=F)
        assert original == Temperature(value=100.0, unit=C)

    def test_to_celsius_and_fahrenheit(self) -> None:
        t = Temperature(value=32.0, unit=F)
        assert t.to_celsius() == Temperature(value=0.0, unit=C)
        assert t.to_fahrenheit() == t

    def test_structural_equality(self) -> None:
        assert Temperature(value=1.0, unit=C) == Temperature(value=1.0, unit=C)
        assert Temperature(value=1.0, unit=C) != Temperature(value=1.0, unit=F)

    def test_is_frozen(self) -> None:
        t = Temperature(value=1.0, unit=C)
        with pytest.raises(pydantic.ValidationError):
            t.value = 2.0  # type: ignore[misc]


class TestParseValue:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("32", 32.0), ("-12.5", -12.5), ("+4", 4.0), ("1e3", 1000.0), (".5", 0.5)],
    )
    def test_accepts_numbers(self, text: str, expected: float) -> None:
        assert parse_value(text) == expected

    def test_accepts_non_finite(self) -> None:
        assert parse_value("inf") == float("inf")
        assert parse_value("nan") != parse_value("nan")

    @pytest.mark.parametrize("text", ["1_000", "1_0.5", "", "warm", "12c", "1,5"])
    def test_rejects_other_text(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_value(text)
