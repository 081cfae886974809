"""Engine — apportionment, allocation, and revenue simulation."""

from frandy_simulator.engine.apportion import apportion
from frandy_simulator.engine.allocation import (
    check_allocation,
    initial_allocation,
    reapportion_allocation,
    rebalance_allocation,
)
from frandy_simulator.engine.activation import simulate
from frandy_simulator.engine.influx import simulate_quarterly_influx
from frandy_simulator.engine.orchestrator import run_scenario
from frandy_simulator.engine.comparison import compare_options

__all__ = [
    "apportion",
    "check_allocation",
    "initial_allocation",
    "reapportion_allocation",
    "rebalance_allocation",
    "simulate",
    "simulate_quarterly_influx",
    "run_scenario",
    "compare_options",
]
