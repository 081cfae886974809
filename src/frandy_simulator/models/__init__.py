"""Result models — simulation output contracts."""

from frandy_simulator.models.results import (
    AllocationCheck,
    BracketBreakdown,
    BracketCheck,
    MonthlyLedgerEntry,
    OptionOutcome,
    QuarterlyLedgerEntry,
    QuarterlySimulationResult,
    SimulationResult,
    TierBreakdown,
)

__all__ = [
    "AllocationCheck",
    "BracketBreakdown",
    "BracketCheck",
    "MonthlyLedgerEntry",
    "OptionOutcome",
    "QuarterlyLedgerEntry",
    "QuarterlySimulationResult",
    "SimulationResult",
    "TierBreakdown",
]
