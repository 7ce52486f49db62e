"""Interactive Celsius/Fahrenheit temperature converter."""

__version__ = "0.1.0"
