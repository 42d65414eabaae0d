# export.py
"""Turns a recommendation into display strings, JSON and a PDF report.

The engine only hands out numbers; unit-suffixed strings are produced here.
"""
import json
from datetime import datetime, timezone

import pandas as pd
from fpdf import FPDF

from presets import get_bike_preset, normalize_style_id

DISCLAIMER = (
    "Engineering Disclaimer: These values are a starting point. Actual requirements may deviate "
    "due to damper valving, friction, and dynamic riding loads. Physical verification via sag "
    "measurement is mandatory."
)


def format_component(setting):
    if setting is None:
        return None
    return {
        "spring_rate": f"{setting.spring_rate.value:.1f} {setting.spring_rate.unit}",
        "compression": f"{setting.compression_clicks} clicks",
        "rebound": f"{setting.rebound_clicks} clicks",
        "sag": f"{setting.sag_percent:g}%",
    }


def _travel_label(mm):
    return f"{mm:g}mm" if mm is not None else "n/a"


def build_export_record(rider, travel, style, setup, bike_preset_id=None, timestamp=None):
    """Echoed inputs plus the setup as display strings, ready for ``to_json_bytes``.

    ``travel`` is the travel the setup was computed from; ``bike_preset_id``
    only names the model.
    """
    timestamp = timestamp or datetime.now(timezone.utc)
    fork_mm, shock_mm = travel.fork_travel_mm, travel.shock_travel_mm
    preset = get_bike_preset(bike_preset_id)
    style_id = normalize_style_id(style)
    return {
        "date": timestamp.isoformat(),
        "rider_weight": f"{rider.weight:g} {rider.weight_unit}",
        "bike_model": preset.display_name if preset is not None else "Custom",
        "riding_style": style_id if style_id is not None else str(style),
        "fork_travel": _travel_label(fork_mm),
        "shock_travel": _travel_label(shock_mm),
        "results": {
            "fork": format_component(setup.fork),
            "shock": format_component(setup.shock),
        },
        "notes": setup.notes,
    }


def to_json_bytes(record):
    return json.dumps(record, ensure_ascii=False, indent=2).encode("utf-8")


def export_filename(timestamp, ext):
    return f"suspension-setup-{int(timestamp.timestamp() * 1000)}.{ext}"


def setup_frame(setup):
    """Fork/shock side-by-side table for ``st.table``."""
    fork = format_component(setup.fork)
    shock = format_component(setup.shock) or {}
    rows = [
        {"Setting": label, "Fork": fork[key], "Shock": shock.get(key, "-")}
        for key, label in (
            ("spring_rate", "Spring Rate"),
            ("compression", "Compression"),
            ("rebound", "Rebound"),
            ("sag", "Sag"),
        )
    ]
    return pd.DataFrame(rows)


def _line(pdf, text, height=8):
    pdf.cell(0, height, text, new_x="LMARGIN", new_y="NEXT")


def to_pdf_bytes(record):
    """Constructs a binary PDF report for download."""
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, "MTB Suspension Setup Report", new_x="LMARGIN", new_y="NEXT", align="C")
    pdf.ln(10)

    # Section 1: Inputs
    pdf.set_font("Helvetica", "B", 12)
    _line(pdf, "1. Rider & Bike", 10)
    pdf.set_font("Helvetica", size=10)
    _line(pdf, f"Date: {record['date']}")
    _line(pdf, f"Rider Weight: {record['rider_weight']}")
    _line(pdf, f"Bike: {record['bike_model']}")
    _line(pdf, f"Riding Style: {record['riding_style']}")
    _line(pdf, f"Fork Travel: {record['fork_travel']} | Shock Travel: {record['shock_travel']}")

    # Section 2: Settings
    for number, (title, key) in enumerate((("Fork", "fork"), ("Shock", "shock")), start=2):
        pdf.ln(5)
        pdf.set_font("Helvetica", "B", 12)
        _line(pdf, f"{number}. {title} Setup", 10)
        pdf.set_font("Helvetica", size=10)
        values = record["results"][key]
        if values is None:
            _line(pdf, "Not fitted (hardtail)")
            continue
        _line(pdf, f"Spring Rate: {values['spring_rate']}")
        _line(pdf, f"Compression: {values['compression']} | Rebound: {values['rebound']}")
        _line(pdf, f"Sag: {values['sag']}")

    pdf.ln(5)
    pdf.set_font("Helvetica", "B", 12)
    _line(pdf, "4. Notes", 10)
    pdf.set_font("Helvetica", size=10)
    pdf.multi_cell(0, 5, record["notes"])

    pdf.ln(10)
    pdf.set_font("Helvetica", "I", 9)
    pdf.multi_cell(0, 5, DISCLAIMER)

    return bytes(pdf.output())
