import os, sys
import streamlit as st
import plotly.graph_objects as go
from dotenv import load_dotenv

# Ensure 'app' directory is on sys.path so 'services' imports resolve
CURRENT_DIR = os.path.dirname(__file__)
APP_DIR = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
PROJECT_ROOT = os.path.abspath(os.path.join(APP_DIR, '..'))
for p in [APP_DIR, PROJECT_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

load_dotenv()

from services.catalog_service import catalog_service
from services.config_service import merged_runtime_config
from src.range_estimation.range_estimator import EstimatorSession
from src.range_estimation.long_distance import calculate_long_distance_metrics, star_glyphs
from src.range_estimation.charging_metrics import charging_summary
from config.range_model_constants import RANGE_MODEL_CONSTANTS


st.set_page_config(page_title="Range Estimator", page_icon="🔋", layout="wide")

config = merged_runtime_config()
est_cfg = config["estimator"]
bounds = est_cfg["bounds"]
baseline = est_cfg["baseline"]

st.markdown("""
<div style="text-align: center; padding: 1.5rem; background: linear-gradient(135deg, rgba(10,18,31,0.9), rgba(25,36,56,0.9)); border-radius: 20px; border: 2px solid rgba(0, 255, 166, 0.3); margin-bottom: 1.5rem;">
    <h1>🔋 Real-World Range Estimator</h1>
    <p style="color: #a0aec0;">Estimate how far you can drive in different conditions</p>
</div>
""", unsafe_allow_html=True)

options = catalog_service.vehicle_options()
vehicle_ids = list(options)
default_id = config["catalog"]["default_vehicle_id"]
vehicle_id = st.selectbox(
    "Vehicle",
    vehicle_ids,
    index=vehicle_ids.index(default_id) if default_id in vehicle_ids else 0,
    format_func=lambda vid: options[vid],
)
vehicle = catalog_service.get_vehicle(vehicle_id)


def _reset_widgets(session: EstimatorSession):
    inputs = session.inputs
    st.session_state["temperature"] = float(inputs.temperature_c)
    st.session_state["ac_on"] = inputs.ac_on
    st.session_state["additional_weight"] = int(inputs.additional_weight_kg)
    st.session_state["average_speed"] = int(inputs.average_speed_kmh)
    _sync_mix_widgets(session)


def _sync_mix_widgets(session: EstimatorSession):
    mix = session.inputs.driving_mix
    st.session_state["mix_dividers"] = session.mix_selector.dividers
    st.session_state["mix_city"] = mix.city_pct
    st.session_state["mix_state"] = mix.state_pct
    st.session_state["mix_national"] = mix.national_pct


# One session per open estimator view, reset when the vehicle changes
session = st.session_state.get("estimator_session")
if session is None:
    session = EstimatorSession(vehicle.range_profile())
    st.session_state["estimator_session"] = session
    st.session_state["estimator_vehicle_id"] = vehicle_id
    _reset_widgets(session)
elif st.session_state.get("estimator_vehicle_id") != vehicle_id:
    session.select_vehicle(vehicle.range_profile())
    st.session_state["estimator_vehicle_id"] = vehicle_id
    _reset_widgets(session)

# Mix widgets of the hidden mode are dropped by Streamlit between runs
_sync_mix_widgets(session)


def _on_dividers():
    new_d0, new_d1 = st.session_state["mix_dividers"]
    if (new_d0, new_d1) != session.mix_selector.dividers:
        session.set_divider_positions(new_d0, new_d1)
    _sync_mix_widgets(session)


def _on_segment(segment: str):
    session.adjust_mix_proportionally(segment, st.session_state[f"mix_{segment}"])
    _sync_mix_widgets(session)


result = session.result
col_result, col_inputs = st.columns([1, 2])

with col_result:
    st.subheader("Estimated Range")
    if result.unavailable:
        if not vehicle.real_world_range_km:
            st.info("Range data not available for this vehicle")
        else:
            st.info("Calculating... (curb weight not recorded for this vehicle)")
    else:
        delta = result.estimated_range_km - vehicle.real_world_range_km
        st.metric("Estimated Range", f"{result.estimated_range_km} km", delta=f"{delta:+.0f} km")
    if vehicle.real_world_range_km:
        st.caption(f"Based on real-world range of {vehicle.real_world_range_km:.0f} km")
    if st.button("Reset to reference conditions"):
        session.reset()
        _reset_widgets(session)
        st.rerun()

with col_inputs:
    c1, c2 = st.columns(2)
    with c1:
        st.slider(
            "Temperature (°C)",
            min_value=float(bounds["temperature_c"][0]),
            max_value=float(bounds["temperature_c"][1]),
            step=float(est_cfg["temperature_step"]),
            key="temperature",
            on_change=lambda: session.set_temperature(st.session_state["temperature"]),
        )
        st.toggle(
            "Climate control (AC) on",
            key="ac_on",
            on_change=lambda: session.set_ac_on(st.session_state["ac_on"]),
        )
    with c2:
        st.slider(
            "Additional weight (kg)",
            min_value=int(bounds["additional_weight_kg"][0]),
            max_value=int(bounds["additional_weight_kg"][1]),
            step=int(est_cfg["additional_weight_step"]),
            key="additional_weight",
            on_change=lambda: session.set_additional_weight(st.session_state["additional_weight"]),
        )
        st.slider(
            "Average speed (km/h)",
            min_value=int(bounds["average_speed_kmh"][0]),
            max_value=int(bounds["average_speed_kmh"][1]),
            step=int(est_cfg["average_speed_step"]),
            key="average_speed",
            on_change=lambda: session.set_average_speed(st.session_state["average_speed"]),
        )

    st.markdown("**Driving mix**")
    mix_mode = st.radio(
        "Adjust with",
        ["dividers", "sliders"],
        index=0 if est_cfg["mix_mode"] == "dividers" else 1,
        horizontal=True,
        format_func=lambda m: "Dividers" if m == "dividers" else "Per-road sliders",
    )
    if mix_mode == "dividers":
        st.slider("City | State highway | National highway", 0, 100, key="mix_dividers", on_change=_on_dividers)
    else:
        m1, m2, m3 = st.columns(3)
        with m1:
            st.slider("City %", 0, 100, key="mix_city", on_change=_on_segment, args=("city",))
        with m2:
            st.slider("State highway %", 0, 100, key="mix_state", on_change=_on_segment, args=("state",))
        with m3:
            st.slider("National highway %", 0, 100, key="mix_national", on_change=_on_segment, args=("national",))

    mix = session.inputs.driving_mix
    fig = go.Figure()
    for label, value, color in [("City", mix.city_pct, "#86efac"),
                                ("State", mix.state_pct, "#93c5fd"),
                                ("National", mix.national_pct, "#fcd34d")]:
        fig.add_trace(go.Bar(y=["Mix"], x=[value], name=f"{label}: {value}%",
                             orientation="h", marker_color=color))
    fig.update_layout(barmode="stack", height=120, margin=dict(l=0, r=0, t=0, b=0),
                      xaxis=dict(range=[0, 100]), yaxis=dict(visible=False))
    st.plotly_chart(fig, use_container_width=True)

if est_cfg["show_factor_breakdown"] and result.factors is not None:
    with st.expander("🔍 Factor breakdown", expanded=False):
        f = result.factors
        st.write(f"Temperature efficiency: **{f.temperature_efficiency:.3f}**")
        st.write(f"HVAC energy share: **{f.hvac_energy:.3f}** (reference {RANGE_MODEL_CONSTANTS['hvac_baseline_share']:.3f})")
        st.write(f"Driving mix factor: **{f.mix_factor:.3f}**")
        st.write(f"Weight factor: **{f.weight_factor:.3f}**")
        st.write(f"Speed factor: **{f.speed_factor:.3f}**")
        st.write(f"Relative total energy: **{f.relative_total_energy:.3f}**")
        st.caption(
            f"Reference conditions: {baseline['temperature_c']:.0f}°C, AC on, "
            f"{baseline['city_pct']}/{baseline['state_pct']}/{baseline['national_pct']} mix, "
            f"+{baseline['additional_weight_kg']:.0f} kg, {baseline['average_speed_kmh']:.0f} km/h"
        )

st.subheader("🛣️ Long-Distance Rating")
metrics = calculate_long_distance_metrics(vehicle.range_profile())
if metrics is None:
    st.info("Insufficient data for a long-distance rating")
else:
    l1, l2, l3, l4 = st.columns(4)
    l1.metric("Leg 1", f"{metrics.leg1_distance_km} km", delta=metrics.leg1_duration_str, delta_color="off")
    l2.metric("Leg 2", f"{metrics.leg2_distance_km} km" if metrics.can_fast_charge else "N/A",
              delta=metrics.leg2_duration_str, delta_color="off")
    l3.metric("One-Stop Range", f"{metrics.one_stop_range_km} km", delta=metrics.total_duration_str, delta_color="off")
    l4.markdown(f"<div class='stars' style='font-size:1.6rem;color:#ffc107'>{star_glyphs(metrics.star_rating)}</div>"
                f"<small>{metrics.star_rating:.1f} / 5</small>", unsafe_allow_html=True)
    if not metrics.can_fast_charge:
        st.caption("No DC fast charging recorded: the journey ends after leg 1.")

with st.expander("🔌 Charging", expanded=False):
    for label, value in charging_summary(vehicle).items():
        st.write(f"**{label}:** {value}")
