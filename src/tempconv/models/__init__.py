from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.temperature import (
    Temperature,
    TemperatureUnit,
    UnitParseError,
    convert,
    parse_unit,
    parse_value,
)

__all__ = [
    # config
    "AppSettings",
    # temperature
    "Temperature",
    "TemperatureUnit",
    "UnitParseError",
    "convert",
    "parse_unit",
    "parse_value",
]
