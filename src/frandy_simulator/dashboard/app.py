"""Frandy KPI Simulator — Streamlit dashboard.

Layout: sidebar inputs → two tabs (Simulator | Options).
Run with:  streamlit run src/frandy_simulator/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from frandy_simulator.config import (
    BRACKETS,
    BracketDistribution,
    Scenario,
    SimulationConfig,
    Tier,
    TIER_IDS,
    TierAllocation,
)
from frandy_simulator.engine.allocation import check_allocation, rebalance_allocation
from frandy_simulator.engine.comparison import compare_options
from frandy_simulator.engine.orchestrator import run_scenario
from frandy_simulator.models.results import SimulationResult
from frandy_simulator.reporting.formatting import format_currency, format_number
from frandy_simulator.reporting.tables import allocation_frame, allocation_from_frame

# ---------------------------------------------------------------------------
# Defaults for sidebar inputs
# ---------------------------------------------------------------------------
_DEF = Scenario()
_DEF_SIM = SimulationConfig()

st.set_page_config(page_title="Frandy KPI Simulator", page_icon="📊", layout="wide")

if "allocation" not in st.session_state:
    st.session_state["allocation"] = [a.model_dump() for a in _DEF.allocation]

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.header("Scenario Inputs")

with st.sidebar.expander("Simulation", expanded=True):
    time_base = st.selectbox(
        "Time base", ["monthly_activation", "quarterly_influx"],
        help="Monthly activation switches each tier on at its launch month. "
             "Quarterly influx spreads sign-ups along the influx curve.",
    )
    include_onboarding = st.checkbox("Include onboarding fees", _DEF_SIM.include_onboarding)
    target_revenue = st.number_input("Target revenue (KRW)", 0, 100_000_000_000, _DEF_SIM.target_revenue, 10_000_000)

distribution: list[BracketDistribution] = []
with st.sidebar.expander("Brand distribution", expanded=True):
    for d in _DEF.brand_distribution:
        c1, c2 = st.columns(2)
        count = c1.number_input(f"{d.bracket} brands", 0, 10_000, d.brand_count, key=f"bc_{d.bracket}")
        stores = c2.number_input(f"{d.bracket} avg stores", 0, 100_000, d.avg_stores_per_brand, key=f"as_{d.bracket}")
        distribution.append(BracketDistribution(bracket=d.bracket, brand_count=count, avg_stores_per_brand=stores))

onboarding: dict = {}
with st.sidebar.expander("Onboarding fees"):
    for b in BRACKETS:
        onboarding[b] = st.number_input(f"{b} fee (KRW)", 0, 1_000_000_000, _DEF.onboarding_costs[b], 100_000, key=f"ob_{b}")

tiers: list[Tier] = []
with st.sidebar.expander("Tier prices & launch months"):
    for t in _DEF.tiers:
        st.markdown(f"**{t.id}**")
        launch = st.number_input(f"{t.id} launch month", 1, 13, t.launch_month, key=f"lm_{t.id}",
                                 help="13 = not launched this year")
        prices = {
            b: st.number_input(f"{t.id} {b} (KRW/mo)", 0, 100_000_000, t.price(b), 50_000, key=f"pr_{t.id}_{b}")
            for b in BRACKETS
        }
        tiers.append(Tier(id=t.id, modules=t.modules, price_by_bracket=prices, launch_month=launch))

tier_ratios: dict = {}
with st.sidebar.expander("Rebalance ratios"):
    for t in TIER_IDS:
        tier_ratios[t] = st.number_input(f"{t} share", 0.0, 1.0, _DEF_SIM.tier_ratios.get(t, 0.0), 0.01,
                                         format="%.4f", key=f"tr_{t}")

sim_config = SimulationConfig(
    include_onboarding=include_onboarding,
    time_base=time_base,
    target_revenue=target_revenue,
    tier_ratios=tier_ratios,
)

# Rebalancing is explicit: editing the distribution never overwrites a manual split.
if st.sidebar.button("Rebalance allocation", use_container_width=True):
    st.session_state["allocation"] = [
        a.model_dump() for a in rebalance_allocation(distribution, sim_config.tier_ratios)
    ]

# ---------------------------------------------------------------------------
# Allocation editor
# ---------------------------------------------------------------------------
st.title("Frandy 2026 KPI Simulator")

alloc_df = allocation_frame([TierAllocation(**a) for a in st.session_state["allocation"]])
edited = st.data_editor(alloc_df, disabled=["tier"], hide_index=True, use_container_width=True)
allocation = allocation_from_frame(edited)

check = check_allocation(distribution, allocation)
for warning in check.warnings:
    st.warning(warning)

scenario = Scenario(
    brand_distribution=distribution,
    tiers=tiers,
    onboarding_costs=onboarding,
    allocation=allocation,
    simulation=sim_config,
)
result = run_scenario(scenario)

simulator_tab, options_tab = st.tabs(["Simulator", "Options"])

# ---------------------------------------------------------------------------
# Simulator tab
# ---------------------------------------------------------------------------
with simulator_tab:
    rate = result.total_revenue / target_revenue * 100 if target_revenue else 0.0
    m1, m2, m3, m4, m5 = st.columns(5)
    m1.metric("Total revenue", format_currency(result.total_revenue), f"{rate:.1f}% of target")
    m2.metric("Subscription", format_currency(result.subscription_revenue))
    m3.metric("Onboarding", format_currency(result.onboarding_revenue))
    m4.metric("Allocated brands", format_number(check.allocated_total))
    m5.metric("Stores in distribution", format_number(sum(d.store_count for d in distribution)))

    if isinstance(result, SimulationResult):
        ledger = pd.DataFrame([e.model_dump() for e in result.monthly_ledger])
        x = ledger["month"]
    else:
        ledger = pd.DataFrame([e.model_dump() for e in result.quarterly_ledger])
        x = ledger["quarter"]

    fig = go.Figure()
    fig.add_bar(x=x, y=ledger["subscription_revenue"], name="Subscription")
    fig.add_bar(x=x, y=ledger["onboarding_revenue"], name="Onboarding")
    fig.add_scatter(x=x, y=ledger["cumulative_brands"], name="Cumulative brands", yaxis="y2", mode="lines+markers")
    fig.update_layout(
        barmode="stack",
        yaxis=dict(title="KRW"),
        yaxis2=dict(title="Brands", overlaying="y", side="right"),
        margin=dict(l=10, r=10, t=30, b=10),
        legend=dict(orientation="h"),
    )
    st.plotly_chart(fig, use_container_width=True)
    st.dataframe(ledger, use_container_width=True, hide_index=True)

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("By tier")
        st.dataframe(pd.DataFrame([r.model_dump() for r in result.tier_breakdown]),
                     use_container_width=True, hide_index=True)
    with c2:
        st.subheader("By bracket")
        st.dataframe(pd.DataFrame([r.model_dump() for r in result.bracket_breakdown]),
                     use_container_width=True, hide_index=True)

    st.subheader("Monthly price per store (KRW)")
    avg_stores = {d.bracket: d.avg_stores_per_brand for d in distribution}
    st.dataframe(
        pd.DataFrame([
            {"tier": t.id, **{b: t.price_per_store(b, avg_stores.get(b, 0)) for b in BRACKETS}}
            for t in tiers
        ]),
        use_container_width=True, hide_index=True,
    )

# ---------------------------------------------------------------------------
# Options tab
# ---------------------------------------------------------------------------
with options_tab:
    outcomes = compare_options(scenario)
    rows = [
        {
            "option": o.option.name,
            "total revenue": format_currency(o.result.total_revenue),
            "subscription": format_currency(o.result.subscription_revenue),
            "onboarding": format_currency(o.result.onboarding_revenue),
            "brands": o.total_brands,
            "achievement %": round(o.achievement_rate_pct, 1),
            "recommended": "✅" if o.is_recommended else "",
        }
        for o in outcomes
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)
    for o in outcomes:
        st.caption(f"{o.option.name}: {o.option.description}")
