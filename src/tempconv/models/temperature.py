"""Temperature units and conversions between Fahrenheit and Celsius."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class UnitParseError(ValueError):
    """Raised when a token does not name a supported temperature unit."""


class TemperatureUnit(StrEnum):
    """Supported temperature scales; the value is the printed symbol."""

    FAHRENHEIT = "F"
    CELSIUS = "C"

    @property
    def other(self) -> TemperatureUnit:
        """Return the unit a reading in this unit converts to."""
        if self is TemperatureUnit.FAHRENHEIT:
            return TemperatureUnit.CELSIUS
        return TemperatureUnit.FAHRENHEIT


# "celcius" is the accepted spelling; "celsius" is not a token.
_UNIT_TOKENS: dict[str, TemperatureUnit] = {
    "f": TemperatureUnit.FAHRENHEIT,
    "fahrenheit": TemperatureUnit.FAHRENHEIT,
    "c": TemperatureUnit.CELSIUS,
    "celcius": TemperatureUnit.CELSIUS,
}


def parse_unit(text: str) -> TemperatureUnit:
    """Parse *text* case-insensitively into a :class:`TemperatureUnit`.

    Raises :class:`UnitParseError` for anything other than ``f``,
    ``fahrenheit``, ``c`` or ``celcius``.
    """
    try:
        return _UNIT_TOKENS[text.lower()]
    except KeyError:
        raise UnitParseError(f"Unknown temperature unit: {text!r}") from None


def parse_value(text: str) -> float:
    """Parse *text* as a temperature value.

    Accepts the same literals as :func:`float` except digit-group
    underscores (``1_000``), which raise :class:`ValueError`.
    """
    if "_" in text:
        raise ValueError(f"Invalid temperature value: {text!r}")
    return float(text)


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32.0) * (5.0 / 9.0)


def celsius_to_fahrenheit(c: float) -> float:
    return (c * (9.0 / 5.0)) + 32.0


def convert(value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> float:
    """Convert *value* from *from_unit* to *to_unit*.

    Converting to the same unit returns *value* unchanged.
    """
    if from_unit is to_unit:
        return value
    if from_unit is TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_celsius(value)
    return celsius_to_fahrenheit(value)


class Temperature(BaseModel):
    """A temperature reading: a value tagged with its unit."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: TemperatureUnit

    def convert_to(self, unit: TemperatureUnit) -> Temperature:
        return Temperature(value=convert(self.value, self.unit, unit), unit=unit)

    def to_celsius(self) -> Temperature:
        return self.convert_to(TemperatureUnit.CELSIUS)

    def to_fahrenheit(self) -> Temperature:
        return self.convert_to(TemperatureUnit.FAHRENHEIT)
