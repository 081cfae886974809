"""Tests for the HTTP API layer.

Covers:
  - Schema / defaults endpoints
  - /simulate (+ narrative) with partial scenarios
  - Allocation endpoints
  - Option comparison
  - Scenario slots
  - Deep merge utility and narrative text
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from frandy_simulator.api.server import app, _deep_merge, _build_scenario
from frandy_simulator.api.narrative import generate_comparison_narrative, generate_narrative
from frandy_simulator.config import Scenario
from frandy_simulator.engine.comparison import compare_options
from frandy_simulator.engine.orchestrator import run_scenario


client = TestClient(app)


@pytest.fixture
def slot_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("FRANDY_SLOT_DIR", str(tmp_path))
    return tmp_path


# ═══════════════════════════════════════════════════════════════════════════
# Basics
# ═══════════════════════════════════════════════════════════════════════════

class TestBasics:

    def test_health(self):
        assert client.get("/health").json() == {"status": "ok"}

    def test_schema_lists_sections(self):
        props = client.get("/schema").json()["properties"]
        for key in ("brand_distribution", "tiers", "onboarding_costs", "allocation", "simulation"):
            assert key in props

    def test_defaults_round_trip_into_scenario(self):
        data = client.get("/scenario/defaults").json()
        assert Scenario(**data) == Scenario()


# ═══════════════════════════════════════════════════════════════════════════
# Simulation
# ═══════════════════════════════════════════════════════════════════════════

class TestSimulate:

    def test_defaults(self):
        body = client.post("/simulate", json={}).json()
        assert body["result"]["total_revenue"] == 541_000_000
        assert len(body["result"]["monthly_ledger"]) == 12
        assert body["allocation_check"]["is_balanced"] is True
        assert "REVENUE SUMMARY" in body["narrative"]

    def test_partial_override_onboarding(self):
        body = client.post("/simulate", json={"scenario": {"simulation": {"include_onboarding": True}}}).json()
        assert body["result"]["onboarding_revenue"] == 183_000_000

    def test_distribution_edit_does_not_rebalance(self):
        dist = Scenario().model_dump(mode="json")["brand_distribution"]
        dist[0]["brand_count"] = 10
        body = client.post("/simulate", json={"scenario": {"brand_distribution": dist}}).json()
        assert body["result"]["total_revenue"] == 541_000_000
        assert body["allocation_check"]["is_balanced"] is False
        assert body["allocation_check"]["warnings"]

    def test_quarterly_time_base(self):
        body = client.post(
            "/simulate", json={"scenario": {"simulation": {"time_base": "quarterly_influx"}}}
        ).json()
        assert len(body["result"]["quarterly_ledger"]) == 4

    def test_invalid_payload_rejected(self):
        resp = client.post("/simulate", json={"scenario": {"onboarding_costs": {"1-50": -5}}})
        assert resp.status_code == 422

    def test_influx_curve_above_one_rejected(self):
        resp = client.post(
            "/simulate", json={"scenario": {"simulation": {"monthly_influx": [0.5] * 12}}}
        )
        assert resp.status_code == 422

    def test_narrative_endpoint(self):
        body = client.post("/simulate/narrative", json={}).json()
        assert body["headline_metrics"]["total_revenue"] == 541_000_000
        assert "TARGET" in body["narrative"]


# ═══════════════════════════════════════════════════════════════════════════
# Allocation
# ═══════════════════════════════════════════════════════════════════════════

class TestAllocation:

    def test_rebalance(self):
        dist = Scenario().model_dump(mode="json")["brand_distribution"]
        body = client.post("/allocation/rebalance", json={"brand_distribution": dist}).json()
        pro3 = next(a for a in body["allocation"] if a["tier_id"] == "pro3")
        assert pro3["count_by_bracket"]["51-100"] == 11

    def test_rebalance_uses_scenario_tier_ratios(self):
        dist = Scenario().model_dump(mode="json")["brand_distribution"]
        body = client.post("/allocation/rebalance", json={
            "brand_distribution": dist,
            "scenario": {"simulation": {"tier_ratios": {"premium": 1.0}}},
        }).json()
        totals = {a["tier_id"]: sum(a["count_by_bracket"].values()) for a in body["allocation"]}
        assert totals["premium"] == 45
        assert totals["pro3"] == 0

    def test_rebalance_huge_ratios_conserve_brands(self):
        dist = Scenario().model_dump(mode="json")["brand_distribution"]
        body = client.post("/allocation/rebalance", json={
            "brand_distribution": dist,
            "tier_ratios": {"pro1": 1e308, "pro3": 1e308},
        }).json()
        counts = [c for a in body["allocation"] for c in a["count_by_bracket"].values()]
        assert sum(counts) == 45
        assert min(counts) >= 0

    def test_reapportion(self):
        data = Scenario().model_dump(mode="json")
        dist = data["brand_distribution"]
        for d in dist:
            d["brand_count"] *= 2
        body = client.post(
            "/allocation/reapportion",
            json={"allocation": data["allocation"], "brand_distribution": dist},
        ).json()
        assert sum(sum(a["count_by_bracket"].values()) for a in body["allocation"]) == 90

    def test_check(self):
        data = Scenario().model_dump(mode="json")
        body = client.post(
            "/allocation/check",
            json={"allocation": [], "brand_distribution": data["brand_distribution"]},
        ).json()
        assert body["allocated_total"] == 0
        assert body["expected_total"] == 45
        assert body["is_balanced"] is False


# ═══════════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════════

class TestCompare:

    def test_default_options(self):
        body = client.post("/simulate/compare", json={}).json()
        assert len(body["outcomes"]) == 3
        assert body["outcomes"][0]["is_recommended"] is True
        assert "STRATEGY OPTIONS" in body["comparison_narrative"]

    def test_custom_option_and_target(self):
        body = client.post(
            "/simulate/compare",
            json={"options": [{"name": "flat"}], "target_revenue": 541_000_000},
        ).json()
        assert body["outcomes"][0]["achievement_rate_pct"] == 100.0


# ═══════════════════════════════════════════════════════════════════════════
# Slots
# ═══════════════════════════════════════════════════════════════════════════

class TestSlots:

    def test_save_list_load_delete(self, slot_dir):
        resp = client.put("/slots/2", json={"name": "Plan B", "scenario": {"simulation": {"target_revenue": 7}}})
        assert resp.status_code == 200
        assert client.get("/slots").json()["slots"][0]["name"] == "Plan B"
        loaded = client.get("/slots/2").json()
        assert loaded["scenario"]["simulation"]["target_revenue"] == 7
        assert client.delete("/slots/2").status_code == 200
        assert client.get("/slots/2").status_code == 404

    def test_empty_slot_404(self, slot_dir):
        assert client.get("/slots/1").status_code == 404

    def test_out_of_range_400(self, slot_dir):
        assert client.put("/slots/9", json={}).status_code == 400


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

class TestHelpers:

    def test_deep_merge(self):
        base = {"a": {"b": 1, "c": 2}, "d": [1]}
        _deep_merge(base, {"a": {"b": 5}, "d": [2, 3]})
        assert base == {"a": {"b": 5, "c": 2}, "d": [2, 3]}

    def test_build_scenario_keeps_unmentioned_onboarding(self):
        scenario = _build_scenario({"onboarding_costs": {"1-50": 1}})
        assert scenario.onboarding_costs["1-50"] == 1
        assert scenario.onboarding_costs["400+"] == 8_000_000

    def test_narrative_flags_missed_target_and_dormant_tier(self):
        scenario = Scenario()
        scenario.tiers[3] = scenario.tiers[3].model_copy(update={"launch_month": 13})
        text = generate_narrative(run_scenario(scenario), 1_000_000_000, ["check me"])
        assert "missed" in text
        assert "pro3" in text.split("NOTES")[1]
        assert "check me" in text

    def test_narrative_separates_unpriced_from_dormant(self):
        scenario = Scenario()
        scenario.tiers[1] = scenario.tiers[1].model_copy(update={"price_by_bracket": {}})
        notes = generate_narrative(run_scenario(scenario), 1_000_000_000).split("NOTES")[1]
        assert "launch after December" not in notes
        assert "priced at zero" in notes
        assert "pro1" in notes

    def test_launched_tiers_are_not_dormant(self):
        text = generate_narrative(run_scenario(Scenario()), 500_000_000)
        assert "NOTES" not in text

    def test_comparison_narrative_names_recommendation(self):
        text = generate_comparison_narrative(compare_options(Scenario()))
        assert "Recommended" in text
        assert "Option 1: 2x price" in text.split("Recommended")[1]
