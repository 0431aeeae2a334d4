import os, sys
import streamlit as st
from dotenv import load_dotenv

# Add project root to path for imports
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
for p in [CURRENT_DIR, PROJECT_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

load_dotenv()

from services.catalog_service import catalog_service
from services.config_service import load_overrides
from src.utils.logger import setup_logger


st.set_page_config(
    page_title="EV Range Studio",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded"
)

ui = load_overrides()
setup_logger(ui.logging.mode)

css = """
<style>
.hero {
    border-radius: 20px;
    padding: 2rem 2.5rem;
    background: linear-gradient(135deg, rgba(10,18,31,0.9), rgba(25,36,56,0.9));
    color: #e6f1ff;
    border: 2px solid rgba(0, 255, 166, 0.3);
    margin-bottom: 1.5rem;
}
.hero h1 { margin-bottom: 0.5rem; font-size: 2.3rem; font-weight: 700; }
.hero small { opacity: 0.9; font-size: 1.05rem; display: block; }
.stars { color: #ffc107; font-size: 1.2rem; letter-spacing: 2px; }
</style>
"""
st.markdown(css, unsafe_allow_html=True)


@st.cache_data(ttl=600)
def get_overview():
    return catalog_service.overview_frame()


st.markdown(f"""
<div class="hero">
    <h1>⚡ EV Range Studio</h1>
    <small>Electric vehicles on sale in {ui.catalog.market} • Real-world range • One-stop journey rating</small>
</div>
""", unsafe_allow_html=True)

overview = get_overview()

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Vehicles", len(overview))
with col2:
    rated = overview["Stars"].dropna()
    st.metric("Average Rating", f"{rated.mean():.1f} ★" if not rated.empty else "N/A")
with col3:
    best = overview["One-Stop Range (km)"].dropna()
    st.metric("Best One-Stop Range", f"{best.max():.0f} km" if not best.empty else "N/A")

st.subheader("🚗 Catalog")
sort_by = st.selectbox(
    "Sort by",
    ["One-Stop Range (km)", "Real-World Range (km)", "Price (lakh)", "Fast Charge 10-80% (min)"],
    index=0,
)
ascending = sort_by in ("Price (lakh)", "Fast Charge 10-80% (min)")
st.dataframe(
    overview.drop(columns=["Stars"]).sort_values(sort_by, ascending=ascending, na_position="last"),
    use_container_width=True,
)

with st.expander("ℹ️ How the long-distance rating works", expanded=False):
    st.markdown("""
    - **Leg 1** drives from 100% down to 10% charge (90% of the real-world range).
    - **Charging stop**: one 15 minute fast charge, 10% to 80%.
    - **Leg 2** drives the recharged window back down to 10%; faster charging means a longer leg.
    - The **one-stop range** is leg 1 + leg 2. Under 200 km earns no stars, every further
      125 km earns one star, 700 km and above earns the full five.
    """)

st.markdown("---")
st.caption("Use the Range Estimator page to adjust conditions, and Compare to put up to three vehicles side by side.")
