"""Tests for reporting/formatting.py."""

from __future__ import annotations

from frandy_simulator.reporting.formatting import format_currency, format_number, format_percent


def test_format_number_groups_thousands():
    assert format_number(1_234_567) == "1,234,567"
    assert format_number(1_234_567.6) == "1,234,568"
    assert format_number(0) == "0"


def test_format_currency_eok():
    assert format_currency(1_234_000_000) == "12.34억원"
    assert format_currency(100_000_000) == "1.00억원"


def test_format_currency_man():
    assert format_currency(35_000_000) == "3500만원"
    assert format_currency(12_345) == "1만원"
    assert format_currency(0) == "0만원"


def test_format_percent():
    assert format_percent(0.1234) == "12.3%"
    assert format_percent(1) == "100.0%"
