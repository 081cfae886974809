"""Scenario slots — full scenario snapshots saved under numbered slots.

Each slot is one JSON file (``slot-<n>.json``) holding a
``ScenarioSnapshot``: the distribution, tier prices, onboarding fees,
allocation, and simulation settings, plus a display name and timestamp.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from frandy_simulator.config.scenario import Scenario

logger = logging.getLogger(__name__)

DEFAULT_MAX_SLOTS = 5


class SlotError(Exception):
    """A slot cannot be read or written."""


class SlotNotFoundError(SlotError):
    """Nothing has been saved in the requested slot."""


class ScenarioSnapshot(BaseModel):
    """Everything needed to restore a scenario."""

    slot: int
    name: str
    saved_at: datetime
    scenario: Scenario = Field(default_factory=Scenario)


class SlotSummary(BaseModel):
    slot: int
    name: str
    saved_at: datetime


class SlotStore:
    """Numbered scenario slots in a directory.

    Parameters
    ----------
    directory : Path | str
        Where slot files live; created on first save.
    max_slots : int
        Valid slots are ``1..max_slots``.
    """

    def __init__(self, directory: Path | str, max_slots: int = DEFAULT_MAX_SLOTS) -> None:
        self.directory = Path(directory)
        self.max_slots = max_slots

    def _path(self, slot: int) -> Path:
        if not 1 <= slot <= self.max_slots:
            raise SlotError(f"slot must be between 1 and {self.max_slots}, got {slot}")
        return self.directory / f"slot-{slot}.json"

    def save(self, slot: int, scenario: Scenario, name: str | None = None) -> ScenarioSnapshot:
        """Overwrite ``slot`` with ``scenario``."""
        path = self._path(slot)
        snapshot = ScenarioSnapshot(
            slot=slot,
            name=name or f"Slot {slot}",
            saved_at=datetime.now(timezone.utc),
            scenario=scenario,
        )
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Saved scenario %r to slot %d", snapshot.name, slot)
        return snapshot

    def load(self, slot: int) -> ScenarioSnapshot:
        """Read ``slot``; raises ``SlotNotFoundError`` when it is empty."""
        path = self._path(slot)
        if not path.exists():
            raise SlotNotFoundError(f"slot {slot} is empty")
        try:
            snapshot = ScenarioSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise SlotError(f"slot {slot} holds an unreadable snapshot") from exc
        logger.info("Loaded scenario %r from slot %d", snapshot.name, slot)
        return snapshot

    def list_slots(self) -> list[SlotSummary]:
        """Occupied slots in slot order; unreadable files are skipped."""
        summaries: list[SlotSummary] = []
        for slot in range(1, self.max_slots + 1):
            path = self._path(slot)
            if not path.exists():
                continue
            try:
                snapshot = ScenarioSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
            except ValidationError:
                logger.warning("Skipping unreadable slot file %s", path)
                continue
            summaries.append(SlotSummary(slot=slot, name=snapshot.name, saved_at=snapshot.saved_at))
        return summaries

    def delete(self, slot: int) -> None:
        path = self._path(slot)
        if not path.exists():
            raise SlotNotFoundError(f"slot {slot} is empty")
        path.unlink()
        logger.info("Cleared slot %d", slot)
