import logging
from datetime import datetime, timezone

import streamlit as st

from components import (
    apply_combination_callback,
    load_bike_catalog,
    physics_explorer,
    progressive_chart,
    reset_form_callback,
    setup_results_block,
    style_info_block,
    travel_range_warning,
    update_travel_from_bike,
)
from constants import RIDER_WEIGHT_LIMITS, TRAVEL_LIMITS_MM
from errors import InvalidInput, SuspensionError
from export import build_export_record, export_filename, to_json_bytes, to_pdf_bytes
from logic import RiderInput, TravelSpec, recommend, system_mass_kg
from presets import BIKE_PRESETS, PRESET_COMBINATIONS, RidingStyle, get_bike_preset, get_style_profile, resolve_style
from units import to_inches

# ==========================================================
# 1. CONFIGURATION
# ==========================================================
st.set_page_config(page_title="MTB Suspension Setup Calculator", page_icon="⚙️", layout="centered")
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("suspension_calculator")

FIELD_LABELS = {
    "weight": "Rider Weight",
    "weight_unit": "Weight Unit",
    "fork_travel_mm": "Fork Travel",
    "shock_travel_mm": "Shock Travel",
}

if "style_select" not in st.session_state:
    st.session_state.style_select = RidingStyle.TRAIL.value
if "fork_travel_input" not in st.session_state:
    st.session_state.fork_travel_input = 140.0
if "shock_travel_input" not in st.session_state:
    st.session_state.shock_travel_input = 130.0
if "hardtail_toggle" not in st.session_state:
    st.session_state.hardtail_toggle = False

# ==========================================================
# 2. UI MAIN
# ==========================================================
col_title, col_reset = st.columns([0.8, 0.2])
with col_title: st.title("MTB Suspension Setup Calculator")
with col_reset:
    if st.button("Reset", on_click=reset_form_callback, type="secondary", use_container_width=True): st.rerun()

with st.expander("Settings & Units"):
    unit_mass = st.radio("Mass Units", ["Global (kg)", "North America (lbs)"], horizontal=True)
weight_unit = "lbs" if unit_mass == "North America (lbs)" else "kg"

tab_setup, tab_physics, tab_catalog = st.tabs(["Setup Recommendation", "Physics Explorer", "Bike Presets"])

with tab_setup:
    # --- RIDER PROFILE ---
    st.header("1. Rider Profile")
    col_r1, col_r2 = st.columns(2)
    with col_r1:
        w_min, w_max = RIDER_WEIGHT_LIMITS[weight_unit]
        default_weight = 180.0 if weight_unit == "lbs" else 82.0
        rider_weight = st.number_input(f"Rider Weight ({weight_unit})", w_min, w_max, default_weight, 0.5)
    with col_r2:
        style = st.selectbox(
            "Riding Style",
            [s.value for s in RidingStyle],
            key="style_select",
            format_func=lambda s: get_style_profile(s).display_name,
        )
    style_info_block(resolve_style(style))

    # --- BIKE ---
    st.header("2. Bike & Travel")
    st.selectbox(
        "Quick Preset (Bike + Style)",
        list(PRESET_COMBINATIONS.keys()),
        index=None,
        placeholder="Optional...",
        key="combination_select",
        format_func=lambda c: PRESET_COMBINATIONS[c].display_name,
        on_change=apply_combination_callback,
    )
    bike_id = st.selectbox(
        "Bike Model",
        list(BIKE_PRESETS.keys()),
        index=None,
        placeholder="Custom bike",
        key="bike_selector",
        format_func=lambda b: BIKE_PRESETS[b].display_name,
        on_change=update_travel_from_bike,
    )
    hardtail = st.toggle("Hardtail (no rear shock)", key="hardtail_toggle")

    t_min, t_max = TRAVEL_LIMITS_MM
    col_t1, col_t2 = st.columns(2)
    with col_t1:
        fork_mm = st.number_input("Fork Travel (mm)", t_min, t_max, step=5.0, key="fork_travel_input")
        st.caption(f"{to_inches(fork_mm):.2f} in")
    with col_t2:
        shock_mm = None
        if not hardtail:
            shock_mm = st.number_input("Shock Travel (mm)", t_min, t_max, step=5.0, key="shock_travel_input")
            st.caption(f"{to_inches(shock_mm):.2f} in")

    travel_range_warning(get_bike_preset(bike_id), fork_mm, shock_mm)

    # --- RESULTS ---
    st.divider(); st.header("Results")
    rider = RiderInput(weight=rider_weight, weight_unit=weight_unit)
    # Travel comes from the inputs; the bike selector only prefills them.
    travel = TravelSpec(fork_travel_mm=fork_mm, shock_travel_mm=shock_mm)
    setup = None
    try:
        setup = recommend(rider, travel, style)
    except InvalidInput as exc:
        st.error("Please check: " + ", ".join(FIELD_LABELS.get(f, f) for f in exc.fields))
    except SuspensionError as exc:
        logger.exception("Recommendation failed")
        st.error(str(exc))

    if setup is not None:
        setup_results_block(setup)
        progressive_chart(setup.fork.spring_rate.value, "Fork, Nm/mm")

        now = datetime.now(timezone.utc)
        record = build_export_record(rider, travel, style, setup, bike_preset_id=bike_id, timestamp=now)
        col_e1, col_e2 = st.columns(2)
        col_e1.download_button("Export Results (JSON)", data=to_json_bytes(record), file_name=export_filename(now, "json"), mime="application/json", use_container_width=True)
        col_e2.download_button("Export Results (PDF)", data=to_pdf_bytes(record), file_name=export_filename(now, "pdf"), mime="application/pdf", use_container_width=True)

with tab_physics:
    st.header("Spring / Mass / Damper")
    st.caption("For known spring rates, suspended mass and damping ratio. The mass starts at rider plus bike.")
    physics_explorer(system_mass_kg(rider, bike_id))

with tab_catalog:
    st.header("Bike Presets")
    st.dataframe(load_bike_catalog(), hide_index=True)
