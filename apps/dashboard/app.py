from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from plasmafuel.config import EngineSettings
from plasmafuel.feedstock.composition import REFERENCE_MIX, normalize
from plasmafuel.optimizer.process import PARAMETER_DOMAINS, ProcessParameters, optimize
from plasmafuel.planning.projections import projections_to_frame
from plasmafuel.reactor.decomposition import simulate_decomposition
from plasmafuel.twin.dashboard import run_dashboard, run_dashboard_cycle

st.set_page_config(page_title="Plasma Fuel Console", layout="wide")

st.markdown(
    """
<style>
.stApp {
    background-color: #0b1220;
    color: #e5edf7;
    font-family: "JetBrains Mono", "SFMono-Regular", monospace;
}
[data-testid="stSidebar"] {
    background-color: #0e1627;
    border-right: 1px solid #1f2a3f;
}
[data-testid="stMetric"] {
    background-color: #111b2f;
    border: 1px solid #2a3b58;
    border-radius: 8px;
    padding: 10px 12px;
}
</style>
""",
    unsafe_allow_html=True,
)

PLOT_TEMPLATE = "plotly_dark"
ACCENT_BLUE = "#4c8dff"
ACCENT_GREEN = "#33d17a"
ACCENT_ORANGE = "#f6a04d"
ACCENT_PURPLE = "#a371f7"


@st.cache_data(show_spinner=False)
def _dashboard_history(cycles: int, crew_size: int, seed: int) -> pd.DataFrame:
    return run_dashboard(cycles=cycles, crew_size=float(crew_size), seed=seed)


def _parameter_slider(label: str, key: str, default: float, step: float) -> float:
    low, high = PARAMETER_DOMAINS[key]
    return float(
        st.slider(label, min_value=float(low), max_value=float(high), value=default, step=step)
    )


with st.sidebar:
    st.header("Waste Mix (%)")
    raw_mix = {
        name: st.slider(name.replace("_", " ").title(), 0.0, 100.0, value, 1.0)
        for name, value in REFERENCE_MIX.items()
    }
    total_mass_kg = st.number_input("Batch mass (kg)", min_value=0.0, value=100.0, step=10.0)

    st.header("Process Parameters")
    defaults = ProcessParameters()
    parameters = ProcessParameters(
        temperature_c=_parameter_slider(
            "Plasma temperature (degC)", "temperature_c", defaults.temperature_c, 10.0
        ),
        flow_rate_pct=_parameter_slider(
            "Flow rate (%)", "flow_rate_pct", defaults.flow_rate_pct, 1.0
        ),
        catalyst_efficiency_pct=_parameter_slider(
            "Catalyst efficiency (%)",
            "catalyst_efficiency_pct",
            defaults.catalyst_efficiency_pct,
            1.0,
        ),
        energy_input_kw=_parameter_slider(
            "Energy input (kW)", "energy_input_kw", defaults.energy_input_kw, 5.0
        ),
        pressure_atm=_parameter_slider(
            "Pressure (atm)", "pressure_atm", defaults.pressure_atm, 0.1
        ),
    )

    st.header("Mission")
    crew_size = st.slider("Crew size", min_value=1, max_value=12, value=6, step=1)
    cycles = st.slider("Polling cycles", min_value=10, max_value=200, value=60, step=10)
    seed = st.number_input("Drift seed", min_value=0, value=7, step=1)

settings = EngineSettings()
composition = normalize(raw_mix)
batch = simulate_decomposition(composition, float(total_mass_kg))
scored = optimize(parameters, settings=settings)
snapshot = run_dashboard_cycle(
    0.0,
    crew_size=float(crew_size),
    parameters=parameters,
    rng=np.random.default_rng(int(seed)),
    settings=settings,
)
history = _dashboard_history(int(cycles), int(crew_size), int(seed))

st.title("Plasma Waste-to-Fuel Console")
st.caption("Batch decomposition, live process scoring and mission planning")

if composition.exceeds_full_scale:
    st.warning(f"Waste mix totals {composition.total:.0f}%, above a full-scale batch.")
for alert in snapshot.alerts:
    st.error(alert.message)

tab_batch, tab_process, tab_planning = st.tabs(["Batch", "Process", "Planning"])

with tab_batch:
    kpi_cols = st.columns(4)
    kpi_cols[0].metric("Energy Needs (kWh)", f"{batch.energy_needs_kwh:.1f}")
    kpi_cols[1].metric("Methane (kg)", f"{batch.methane_output_kg:.2f}")
    kpi_cols[2].metric("Hydrogen (kg)", f"{batch.hydrogen_output_kg:.2f}")
    kpi_cols[3].metric("Sustainability", f"{batch.sustainability_score:.0f}")

    products_fig = go.Figure(
        data=go.Bar(
            x=["Methane", "Carbon", "Hydrogen"],
            y=[batch.methane_output_kg, batch.carbon_production_kg, batch.hydrogen_output_kg],
            marker_color=[ACCENT_GREEN, ACCENT_ORANGE, ACCENT_BLUE],
        )
    )
    products_fig.update_layout(
        template=PLOT_TEMPLATE,
        title="Batch Product Split",
        yaxis_title="kg",
    )
    st.plotly_chart(products_fig, width="stretch")

with tab_process:
    kpi_cols = st.columns(4)
    kpi_cols[0].metric("Methane Yield", f"{scored.methane_yield:.1f}")
    kpi_cols[1].metric("Power (kW)", f"{scored.power_consumption_kw:.1f}")
    kpi_cols[2].metric("Efficiency (%)", f"{scored.efficiency_pct:.1f}")
    kpi_cols[3].metric("Prediction", scored.prediction.value)
    st.info(scored.prediction_message)

    runtime_fig = go.Figure()
    runtime_fig.add_trace(
        go.Scatter(
            x=history["cycle"],
            y=history["system_efficiency_pct"],
            mode="lines",
            name="System efficiency",
            line=dict(color=ACCENT_GREEN, width=2.2),
        )
    )
    runtime_fig.add_trace(
        go.Scatter(
            x=history["cycle"],
            y=history["power_used_kwh"],
            mode="lines",
            name="Power used",
            line=dict(color=ACCENT_PURPLE, width=2.0, dash="dot"),
            yaxis="y2",
        )
    )
    runtime_fig.update_layout(
        template=PLOT_TEMPLATE,
        title="Polling History",
        xaxis_title="Cycle",
        yaxis=dict(title="Efficiency (%)"),
        yaxis2=dict(title="Power (kWh)", overlaying="y", side="right"),
    )
    st.plotly_chart(runtime_fig, width="stretch")

with tab_planning:
    metric_cols = st.columns(3)
    metric_cols[0].metric("Waste Today (kg)", f"{snapshot.metrics.waste_processed_kg:.1f}")
    metric_cols[1].metric("CO2 Offset (kg)", f"{snapshot.metrics.co2_offset_kg:.1f}")
    metric_cols[2].metric("Uptime (%)", f"{snapshot.metrics.uptime_pct:.1f}")

    projection_df = projections_to_frame(snapshot.projections)
    projection_fig = go.Figure()
    projection_fig.add_trace(
        go.Bar(x=projection_df["label"], y=projection_df["waste_tonnes"], name="Waste (t)")
    )
    projection_fig.add_trace(
        go.Bar(x=projection_df["label"], y=projection_df["methane_tonnes"], name="Methane (t)")
    )
    projection_fig.update_layout(
        template=PLOT_TEMPLATE,
        title=f"Annual Projections for a Crew of {crew_size}",
        barmode="group",
    )
    st.plotly_chart(projection_fig, width="stretch")

    st.subheader("Maintenance")
    st.dataframe(
        pd.DataFrame([task.to_dict() for task in snapshot.maintenance])[
            ["task", "time_remaining", "priority", "duration", "triggered"]
        ],
        hide_index=True,
    )
