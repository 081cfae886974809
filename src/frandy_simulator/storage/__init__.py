"""Named scenario slots."""

from frandy_simulator.storage.slots import (
    ScenarioSnapshot,
    SlotError,
    SlotNotFoundError,
    SlotStore,
    SlotSummary,
)

__all__ = [
    "ScenarioSnapshot",
    "SlotError",
    "SlotNotFoundError",
    "SlotStore",
    "SlotSummary",
]
