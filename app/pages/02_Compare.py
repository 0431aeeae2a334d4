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
from src.comparison.comparison_tray import ComparisonTray, comparison_frame
from src.range_estimation.long_distance import calculate_long_distance_metrics


st.set_page_config(page_title="Compare", page_icon="⚖️", layout="wide")

config = merged_runtime_config()
max_vehicles = config["comparison"]["max_vehicles"]

st.markdown(f"""
<div style="text-align: center; padding: 1.5rem; background: linear-gradient(135deg, rgba(10,18,31,0.9), rgba(25,36,56,0.9)); border-radius: 20px; border: 2px solid rgba(0, 255, 166, 0.3); margin-bottom: 1.5rem;">
    <h1>⚖️ Compare Vehicles</h1>
    <p style="color: #a0aec0;">Put up to {max_vehicles} vehicles side by side</p>
</div>
""", unsafe_allow_html=True)

tray = st.session_state.get("comparison_tray")
if tray is None or tray.max_vehicles != max_vehicles:
    tray = ComparisonTray(max_vehicles=max_vehicles)
    st.session_state["comparison_tray"] = tray

options = catalog_service.vehicle_options()

with st.sidebar:
    st.header("Pick vehicles")
    for vehicle_id, name in options.items():
        selected = tray.is_selected(vehicle_id)
        disabled = tray.is_full and not selected
        if st.checkbox(name, value=selected, key=f"cmp_{vehicle_id}", disabled=disabled) != selected:
            tray.toggle(catalog_service.get_vehicle(vehicle_id))
            st.rerun()
    if tray.is_comparing and st.button("Clear comparison", use_container_width=True):
        tray.clear()
        for vehicle_id in options:
            st.session_state.pop(f"cmp_{vehicle_id}", None)
        st.rerun()

if not tray.is_comparing:
    st.info("Select vehicles in the sidebar to compare them.")
    st.stop()

st.dataframe(comparison_frame(tray.vehicles), use_container_width=True)

fig = go.Figure()
names = [v.display_name for v in tray.vehicles]
real_ranges = [v.real_world_range_km or 0 for v in tray.vehicles]
one_stop = []
for v in tray.vehicles:
    metrics = calculate_long_distance_metrics(v.range_profile())
    one_stop.append(metrics.one_stop_range_km if metrics else 0)
fig.add_trace(go.Bar(x=names, y=real_ranges, name="Real-world range (km)", marker_color="#00d4ff"))
fig.add_trace(go.Bar(x=names, y=one_stop, name="One-stop range (km)", marker_color="#00ffa6"))
fig.update_layout(barmode="group", height=380, margin=dict(l=0, r=0, t=30, b=0))
st.plotly_chart(fig, use_container_width=True)
