"""Render a conversion as the equation that produced it."""

from __future__ import annotations

from tempconv.models.temperature import TemperatureUnit

_TEMPLATES: dict[TemperatureUnit, str] = {
    TemperatureUnit.FAHRENHEIT: "({original}°{ou} - 32) * (5/9) = {converted}°{cu}",
    TemperatureUnit.CELSIUS: "({original}°{ou} * 9/5) + 32 = {converted}°{cu}",
}


def format_equation(
    original_value: float,
    original_unit: TemperatureUnit,
    converted_value: float,
    converted_unit: TemperatureUnit,
) -> str:
    """Return the conversion equation for display, prefixed with a newline.

    The template follows *original_unit*.  Whether the *converted* value is a
    whole number decides the precision of both sides: whole results print both
    numbers without a decimal point, anything else (including ``inf`` and
    ``nan``) prints both with one decimal place.  So ``98.6°F`` renders as
    ``(99°F - 32) * (5/9) = 37°C``.
    """
    if float(converted_value).is_integer():
        original = f"{original_value:.0f}"
        converted = str(int(converted_value))
    else:
        original = f"{original_value:.1f}"
        converted = f"{converted_value:.1f}"

    equation = _TEMPLATES[original_unit].format(
        original=original,
        ou=original_unit.value,
        converted=converted,
        cu=converted_unit.value,
    )
    return f"\n{equation}"
