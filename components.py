# components.py
import streamlit as st

from errors import SuspensionError
from export import setup_frame
from physics import PhysicalState, parallel_spring_rate, progressive_rate_curve, series_spring_rate
from presets import bike_presets_frame, get_bike_preset, get_preset_combination


def reset_form_callback():
    """Clears all session state variables."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]


@st.cache_data
def load_bike_catalog():
    """Preset catalog as a DataFrame for the reference table."""
    return bike_presets_frame()


def update_travel_from_bike():
    """Prefills the travel inputs when a catalog bike is selected."""
    preset = get_bike_preset(st.session_state.get("bike_selector"))
    if preset is None:
        return
    st.session_state.fork_travel_input = preset.fork_travel_mm
    st.session_state.hardtail_toggle = preset.is_hardtail
    if not preset.is_hardtail:
        st.session_state.shock_travel_input = preset.shock_travel_mm


def apply_combination_callback():
    """Selects both the bike and the riding style from a named combination."""
    combo = get_preset_combination(st.session_state.get("combination_select"))
    if combo is None:
        return
    st.session_state.bike_selector = combo.bike.id
    st.session_state.style_select = combo.style.id
    update_travel_from_bike()


def style_info_block(profile):
    """Renders a static summary of the selected riding style."""
    st.markdown(f"""
    **{profile.display_name}:** {profile.description}
    * Multipliers: spring ${profile.spring_rate_multiplier:.2f}$, compression ${profile.compression_multiplier:.2f}$, rebound ${profile.rebound_multiplier:.2f}$.
    * Style sag targets: front ${profile.target_sag_front:.0f}\\%$, rear ${profile.target_sag_rear:.0f}\\%$.
    * Handlebar height: ${profile.bar_adjustment_mm:+.0f}$ mm.
    """)
    if profile.recommendations:
        with st.expander("Setup Tips"):
            st.markdown("\n".join(f"* {tip}" for tip in profile.recommendations))


def travel_range_warning(preset, fork_mm, shock_mm):
    """Warns when the entered travel is outside what the selected frame is built for."""
    if preset is None:
        return
    for component in preset.travel_out_of_range(fork_mm, shock_mm):
        low, high = getattr(preset, f"{component}_travel_range")
        st.warning(f"{component.title()} travel is outside the {low:g}-{high:g} mm range of the {preset.display_name}.")


def setup_results_block(setup):
    """Headline metrics plus the full fork/shock table."""
    col_f, col_s = st.columns(2)
    col_f.metric("Fork Spring Rate", f"{setup.fork.spring_rate.value:.1f} {setup.fork.spring_rate.unit}")
    if setup.shock is not None:
        col_s.metric("Shock Spring Rate", f"{setup.shock.spring_rate.value:.1f} {setup.shock.spring_rate.unit}")
    else:
        col_s.metric("Shock Spring Rate", "Hardtail")
    st.table(setup_frame(setup))
    st.info(setup.notes)


def progressive_chart(base_rate, label):
    st.subheader(f"Progressive Spring Curve ({label})")
    curve = progressive_rate_curve(base_rate)
    st.line_chart(curve, x="Compression (%)", y="Rate")


def physics_explorer(default_mass_kg=80.0):
    """Spring/mass/damper calculator for known quantities.

    The mass input starts at ``default_mass_kg``, normally rider plus bike.
    """
    default_mass_kg = round(min(max(float(default_mass_kg), 1.0), 400.0), 1)
    col_p1, col_p2 = st.columns(2)
    with col_p1:
        mode = st.radio("Spring Input", ["Natural Frequency", "Spring Rate"], horizontal=True)
        mass_kg = st.number_input("Suspended Mass (kg)", 1.0, 400.0, default_mass_kg, 0.5)
        if mode == "Natural Frequency":
            freq = st.number_input("Natural Frequency (Hz)", 0.1, 10.0, 2.0, 0.1)
        else:
            rate = st.number_input("Spring Rate (N/m)", 100.0, 500000.0, 12632.5, 100.0)
    with col_p2:
        ratio = st.number_input("Damping Ratio", 0.0, 5.0, 0.3, 0.05)
        k2 = st.number_input("Second Spring Rate (N/m, optional)", 0.0, 500000.0, 0.0, 100.0)

    try:
        if mode == "Natural Frequency":
            state = PhysicalState.from_frequency(freq, mass_kg, ratio)
        else:
            state = PhysicalState(rate, mass_kg, ratio)
    except SuspensionError as exc:
        st.error(str(exc))
        return

    res_c1, res_c2, res_c3 = st.columns(3)
    res_c1.metric("Spring Rate", f"{state.spring_rate_n_per_m:.1f} N/m")
    res_c2.metric("Natural Frequency", f"{state.natural_frequency_hz:.2f} Hz")
    res_c3.metric("Period", f"{state.period_s:.3f} s")
    res_c1.metric("Critical Damping", f"{state.critical_damping:.1f} N·s/m")
    res_c2.metric("Damping Coefficient", f"{state.damping_coefficient:.1f} N·s/m")
    res_c3.metric("Response", state.damping_class.value.title())
    st.caption(f"Static deflection under its own weight: {state.static_deflection_m() * 1000:.1f} mm")

    if k2 > 0:
        st.markdown(
            f"**Combined rate:** series {series_spring_rate(state.spring_rate_n_per_m, k2):.1f} N/m | "
            f"parallel {parallel_spring_rate(state.spring_rate_n_per_m, k2):.1f} N/m"
        )
