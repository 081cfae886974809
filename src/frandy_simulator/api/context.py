"""Schema and defaults helpers for API consumers."""

from __future__ import annotations

from frandy_simulator.config.scenario import Scenario


def get_scenario_schema() -> dict:
    """Return the full JSON Schema for Scenario."""
    return Scenario.model_json_schema()


def get_default_scenario() -> dict:
    """Return default Scenario as a JSON-serializable dict."""
    return Scenario().model_dump(mode="json")
