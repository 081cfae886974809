"""Frandy tiered-subscription revenue simulator."""

__version__ = "1.0.0"
