"""Presentation helpers — formatting and allocation table conversion."""

from frandy_simulator.reporting.formatting import format_currency, format_number, format_percent
from frandy_simulator.reporting.tables import allocation_frame, allocation_from_frame

__all__ = [
    "allocation_frame",
    "allocation_from_frame",
    "format_currency",
    "format_number",
    "format_percent",
]
