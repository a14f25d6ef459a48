"""FlightPrep: weight and balance and navigation log calculations for light aircraft."""

__version__ = "0.1.0"
