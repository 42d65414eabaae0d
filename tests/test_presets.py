"""
Tests for the bike preset and riding style catalog.
"""

import dataclasses

import pytest

from presets import (
    BIKE_PRESETS,
    STYLE_PROFILES,
    RidingStyle,
    bike_presets_frame,
    get_bike_preset,
    get_combination,
    get_preset_combination,
    get_style_profile,
    list_bike_presets,
    list_preset_combinations,
    list_style_profiles,
    resolve_style,
)


class TestStyleProfiles:

    @pytest.mark.parametrize("style, compression, rebound, spring, sag_front, sag_rear", [
        ("xc", 1.2, 1.1, 1.15, 20, 22),
        ("trail", 1.0, 1.0, 1.0, 25, 28),
        ("enduro", 0.9, 0.95, 0.95, 28, 30),
        ("dh", 0.8, 0.85, 0.85, 30, 33),
    ])
    def test_profile_table(self, style, compression, rebound, spring, sag_front, sag_rear):
        profile = get_style_profile(style)
        assert profile.compression_multiplier == compression
        assert profile.rebound_multiplier == rebound
        assert profile.spring_rate_multiplier == spring
        assert profile.target_sag_front == sag_front
        assert profile.target_sag_rear == sag_rear

    def test_every_enum_member_has_a_profile(self):
        for style in RidingStyle:
            assert get_style_profile(style).id == style.value
        assert len(list_style_profiles()) == len(RidingStyle)

    def test_downhill_alias(self):
        assert get_style_profile("downhill") is get_style_profile("dh")

    @pytest.mark.parametrize("missing", ["freeride", "", None, 3])
    def test_unknown_style_is_none(self, missing):
        assert get_style_profile(missing) is None

    def test_resolve_style_falls_back_to_trail(self):
        assert resolve_style("freeride").id == "trail"
        assert resolve_style("xc").id == "xc"

    def test_recommendations(self):
        for profile in list_style_profiles():
            assert len(profile.recommendations) == 4
        assert get_style_profile("downhill").recommendations[-1] == "Consider coil suspension for consistent feel at speed"

    @pytest.mark.parametrize("style, bar", [("xc", -10), ("trail", 0), ("dh", -15), ("casual", 5)])
    def test_bar_adjustment(self, style, bar):
        assert get_style_profile(style).bar_adjustment_mm == bar


class TestBikePresets:

    def test_lookup(self):
        bike = get_bike_preset("trailMTB")
        assert bike.fork_travel_mm == 140
        assert bike.shock_travel_mm == 130
        assert bike.is_hardtail is False

    def test_hardtail_has_no_shock(self):
        bike = get_bike_preset("hardtail")
        assert bike.shock_travel_mm is None
        assert bike.is_hardtail

    @pytest.mark.parametrize("missing", ["nope", "", None, ["trailMTB"]])
    def test_unknown_bike_is_none(self, missing):
        assert get_bike_preset(missing) is None

    def test_listing(self):
        ids = [b.id for b in list_bike_presets()]
        assert ids == list(BIKE_PRESETS.keys())
        assert len(ids) == 7

    def test_frame(self):
        df = bike_presets_frame()
        assert len(df) == 7
        assert {"Id", "Model", "Fork_Travel_mm", "Shock_Travel_mm"} <= set(df.columns)
        assert list(df["Model"]) == sorted(df["Model"])

    def test_every_preset_has_a_purpose(self):
        assert get_bike_preset("eMTB").purpose == "Trail riding with motor assistance"
        assert all(b.purpose for b in list_bike_presets())


class TestTravelRanges:

    def test_ranges(self):
        assert get_bike_preset("trailMTB").fork_travel_range == (120.0, 160.0)
        assert get_bike_preset("trailMTB").shock_travel_range == (110.0, 150.0)
        assert get_bike_preset("hardtail").shock_travel_range is None

    def test_preset_travel_sits_inside_its_range(self):
        for bike in list_bike_presets():
            assert bike.travel_out_of_range(bike.fork_travel_mm, bike.shock_travel_mm) == ()

    def test_bounds_are_inclusive(self):
        assert get_bike_preset("enduroMTB").travel_out_of_range(150, 170) == ()

    @pytest.mark.parametrize("fork, shock, expected", [
        (200, 130, ("fork",)),
        (140, 100, ("shock",)),
        (100, 180, ("fork", "shock")),
        (140, None, ()),
    ])
    def test_out_of_range(self, fork, shock, expected):
        assert get_bike_preset("trailMTB").travel_out_of_range(fork, shock) == expected

    def test_hardtail_ignores_shock(self):
        assert get_bike_preset("hardtail").travel_out_of_range(120, 130) == ()


class TestCombinations:

    def test_get_combination(self):
        combo = get_combination("trailMTB", RidingStyle.ENDURO)
        assert combo.bike.id == "trailMTB"
        assert combo.style.id == "enduro"

    @pytest.mark.parametrize("bike, style", [("nope", "trail"), ("trailMTB", "nope")])
    def test_missing_half_is_none(self, bike, style):
        assert get_combination(bike, style) is None

    def test_named_combination(self):
        combo = get_preset_combination("downhill-mtb-downhill")
        assert combo.bike.id == "downhillMTB"
        assert combo.style.id == "dh"

    def test_every_named_combination_resolves(self):
        for entry in list_preset_combinations():
            assert get_preset_combination(entry.id) is not None

    def test_unknown_named_combination(self):
        assert get_preset_combination("nope") is None


class TestImmutability:

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            STYLE_PROFILES["xc"] = STYLE_PROFILES["trail"]
        with pytest.raises(TypeError):
            BIKE_PRESETS["custom"] = BIKE_PRESETS["hardtail"]

    def test_entries_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_style_profile("xc").compression_multiplier = 2.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_bike_preset("eMTB").fork_travel_mm = 10
