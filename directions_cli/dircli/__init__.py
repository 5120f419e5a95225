"""Round-trip validation CLI for Directions API responses."""

__version__ = "0.1.0"
