import json
from datetime import datetime, timezone

import pytest

from export import (
    build_export_record,
    export_filename,
    format_component,
    setup_frame,
    to_json_bytes,
    to_pdf_bytes,
)
from logic import RiderInput, TravelSpec, recommend, resolve_travel

STAMP = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def trail_record():
    rider, travel = RiderInput(180, "lbs"), TravelSpec(140, 130)
    setup = recommend(rider, travel, "trail", "trailMTB")
    return build_export_record(rider, travel, "trail", setup, bike_preset_id="trailMTB", timestamp=STAMP)


@pytest.fixture
def hardtail_record():
    rider = RiderInput(70, "kg")
    travel = TravelSpec(*resolve_travel(TravelSpec(), "hardtail"))
    setup = recommend(rider, travel, "xc")
    return build_export_record(rider, travel, "xc", setup, bike_preset_id="hardtail", timestamp=STAMP)


class TestExportRecord:

    def test_echoed_inputs(self, trail_record):
        assert trail_record["date"] == "2025-01-01T00:00:00+00:00"
        assert trail_record["rider_weight"] == "180 lbs"
        assert trail_record["bike_model"] == "Trail Mountain Bike"
        assert trail_record["riding_style"] == "trail"
        assert trail_record["fork_travel"] == "140mm"
        assert trail_record["shock_travel"] == "130mm"

    def test_display_strings(self, trail_record):
        fork = trail_record["results"]["fork"]
        assert fork == {
            "spring_rate": "2.6 Nm/mm",
            "compression": "18 clicks",
            "rebound": "22 clicks",
            "sag": "25%",
        }
        assert trail_record["results"]["shock"]["sag"] == "30%"

    def test_custom_bike(self):
        rider, travel = RiderInput(180), TravelSpec(140, 130)
        setup = recommend(rider, travel, "trail")
        record = build_export_record(rider, travel, "trail", setup, timestamp=STAMP)
        assert record["bike_model"] == "Custom"

    def test_hardtail(self, hardtail_record):
        assert hardtail_record["fork_travel"] == "100mm"
        assert hardtail_record["shock_travel"] == "n/a"
        assert hardtail_record["results"]["shock"] is None

    def test_travel_is_echoed_as_given(self):
        rider, travel = RiderInput(180), TravelSpec(150, None)
        setup = recommend(rider, travel, "trail")
        record = build_export_record(rider, travel, "trail", setup, bike_preset_id="trailMTB", timestamp=STAMP)
        assert record["bike_model"] == "Trail Mountain Bike"
        assert record["fork_travel"] == "150mm"
        assert record["shock_travel"] == "n/a"
        assert record["results"]["shock"] is None

    def test_format_component_none(self):
        assert format_component(None) is None


class TestSerialisation:

    def test_json(self, trail_record):
        assert json.loads(to_json_bytes(trail_record)) == trail_record

    def test_filename(self):
        assert export_filename(STAMP, "json") == "suspension-setup-1735689600000.json"

    def test_pdf(self, trail_record, hardtail_record):
        for record in (trail_record, hardtail_record):
            pdf = to_pdf_bytes(record)
            assert isinstance(pdf, bytes)
            assert pdf.startswith(b"%PDF")


class TestSetupFrame:

    def test_rows(self):
        df = setup_frame(recommend(RiderInput(180), TravelSpec(140, 130), "trail"))
        assert list(df.columns) == ["Setting", "Fork", "Shock"]
        assert list(df["Setting"]) == ["Spring Rate", "Compression", "Rebound", "Sag"]
        assert df.loc[1, "Fork"] == "18 clicks"

    def test_hardtail_rows(self):
        df = setup_frame(recommend(RiderInput(150), TravelSpec(), "xc", "hardtail"))
        assert set(df["Shock"]) == {"-"}
