from streamlit.testing.v1 import AppTest


def run_app():
    return AppTest.from_file("../app.py", default_timeout=30).run()


def _metric(at, label):
    return next(m for m in at.metric if m.label == label)


def test_default_page_renders():
    at = run_app()
    assert not at.exception
    assert not at.error
    # 82 kg rider on the default 140/130 mm travel
    assert _metric(at, "Fork Spring Rate").value == "2.6 Nm/mm"
    assert _metric(at, "Natural Frequency").value == "2.00 Hz"


def test_hardtail_preset_drops_the_shock():
    at = run_app()
    at.selectbox(key="bike_selector").select("hardtail").run()
    assert not at.exception
    assert at.session_state["fork_travel_input"] == 100.0
    assert _metric(at, "Shock Spring Rate").value == "Hardtail"


def test_hardtail_toggle_overrides_full_suspension_preset():
    at = run_app()
    at.selectbox(key="bike_selector").select("trailMTB").run()
    assert _metric(at, "Shock Spring Rate").value == "3.4 Nm/mm"
    at.toggle(key="hardtail_toggle").set_value(True).run()
    assert not at.exception
    assert _metric(at, "Shock Spring Rate").value == "Hardtail"


def test_travel_outside_preset_range_warns():
    at = run_app()
    at.selectbox(key="bike_selector").select("trailMTB").run()
    assert not at.warning
    at.number_input(key="fork_travel_input").set_value(200.0).run()
    assert any("Fork travel is outside the 120-160 mm range" in w.value for w in at.warning)


def test_physics_mass_starts_at_rider_plus_bike():
    at = run_app()
    mass = next(n for n in at.number_input if n.label == "Suspended Mass (kg)")
    assert mass.value == 82.0
    at.selectbox(key="bike_selector").select("hardtail").run()
    mass = next(n for n in at.number_input if n.label == "Suspended Mass (kg)")
    assert mass.value == 94.5
