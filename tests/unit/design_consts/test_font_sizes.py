"""Tests for design_consts.font_sizes - modular type scales and presets."""

from __future__ import annotations

import pytest

from design_consts.font_sizes import (
    COMPONENT_PRESETS,
    DEFAULT_FONT_SIZES,
    DEVICE_PRESETS,
    LEVELS,
    PRESETS,
    FontSizes,
    ScaleFactor,
    all_preset_names,
    get_preset,
)
from design_consts.responsive import ConfigurationError

pytestmark = pytest.mark.unit


class TestScaleFactor:
    def test_values(self):
        assert ScaleFactor.SMALL == pytest.approx(1.1278422438)
        assert ScaleFactor.NORMAL == pytest.approx(1.1739902127)
        assert ScaleFactor.LARGE == pytest.approx(1.2720281269)
        assert ScaleFactor.EXTRA_LARGE == pytest.approx(1.6180555556)

    def test_factors_increase(self):
        values = [f.value for f in ScaleFactor]
        assert values == sorted(values)


class TestFontSizes:
    def test_defaults(self):
        assert DEFAULT_FONT_SIZES.body_small == 14.0
        assert DEFAULT_FONT_SIZES.scale_factor == ScaleFactor.LARGE.value

    def test_levels_in_order(self):
        assert tuple(DEFAULT_FONT_SIZES.levels()) == LEVELS
        assert LEVELS[0] == "body_small"
        assert LEVELS[-1] == "display"

    def test_each_level_multiplies_by_factor(self):
        sizes = FontSizes(body_small=16, scale_factor=ScaleFactor.NORMAL.value)
        values = list(sizes.levels().values())
        for lower, upper in zip(values, values[1:]):
            assert upper == pytest.approx(lower * ScaleFactor.NORMAL.value)

    def test_level_properties(self):
        sizes = FontSizes(body_small=10, scale_factor=2.0)
        assert sizes.body == 20
        assert sizes.body_large == 40
        assert sizes.paragraph_title == 80
        assert sizes.subheader == 160
        assert sizes.header == 320
        assert sizes.h3 == 640
        assert sizes.h2 == 1280
        assert sizes.h1 == 2560
        assert sizes.display == 5120

    def test_default_body(self):
        assert DEFAULT_FONT_SIZES.body == pytest.approx(14 * 1.2720281269)

    def test_get_unknown_level_raises(self):
        with pytest.raises(KeyError):
            DEFAULT_FONT_SIZES.get("h7")

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_FONT_SIZES.body_small = 20

    def test_equal_scales_compare_equal(self):
        assert FontSizes(14, ScaleFactor.LARGE.value) == DEFAULT_FONT_SIZES


class TestResponsiveLevel:
    def test_interpolates_between_scales(self):
        mobile = FontSizes(body_small=10, scale_factor=2.0)
        desktop = FontSizes(body_small=20, scale_factor=2.0)

        # body: 20 -> 40, midpoint of 360..1440 is 900
        assert mobile.responsive("body", desktop, 900) == pytest.approx(30.0)

    def test_clamps_to_each_scale(self):
        mobile = DEVICE_PRESETS["mobile_compact"]
        desktop = DEVICE_PRESETS["desktop"]

        assert mobile.responsive("h1", desktop, 200) == mobile.h1
        assert mobile.responsive("h1", desktop, 2000) == desktop.h1

    def test_custom_screen_range(self):
        small = FontSizes(body_small=12, scale_factor=1.0)
        big = FontSizes(body_small=20, scale_factor=1.0)
        assert small.responsive("body_small", big, 500, 400, 600) == pytest.approx(16.0)

    def test_invalid_range_raises(self):
        with pytest.raises(ConfigurationError):
            DEFAULT_FONT_SIZES.responsive("h1", DEFAULT_FONT_SIZES, 800, 500, 500)


class TestPresets:
    def test_base_size_grid(self):
        assert len(PRESETS) == 20
        assert PRESETS["small"] == FontSizes(12, ScaleFactor.SMALL.value)
        assert PRESETS["normal_large_scale"] == FontSizes(14, ScaleFactor.LARGE.value)
        assert PRESETS["huge_extra_large_scale"] == FontSizes(20, ScaleFactor.EXTRA_LARGE.value)

    @pytest.mark.parametrize(
        "base,body_small",
        [("small", 12), ("normal", 14), ("large", 16), ("extra_large", 18), ("huge", 20)],
    )
    def test_every_base_has_four_factors(self, base, body_small):
        names = [base, f"{base}_normal_scale", f"{base}_large_scale", f"{base}_extra_large_scale"]
        assert [PRESETS[n].body_small for n in names] == [body_small] * 4
        assert [PRESETS[n].scale_factor for n in names] == [f.value for f in ScaleFactor]

    def test_device_presets(self):
        assert set(DEVICE_PRESETS) == {
            "mobile",
            "mobile_compact",
            "mobile_comfortable",
            "tablet",
            "tablet_reading",
            "desktop",
            "desktop_reading",
            "desktop_marketing",
            "desktop_compact",
        }
        assert DEVICE_PRESETS["desktop_marketing"].scale_factor == ScaleFactor.EXTRA_LARGE.value
        assert DEVICE_PRESETS["desktop_compact"].body_small == 14

    def test_component_aliases_share_scale(self):
        assert COMPONENT_PRESETS["button_label_large"] is COMPONENT_PRESETS["button_large"]
        assert COMPONENT_PRESETS["caption_large"] is COMPONENT_PRESETS["caption_emphasis"]

    def test_get_preset_searches_all_registries(self):
        assert get_preset("normal") is PRESETS["normal"]
        assert get_preset("tablet_reading") is DEVICE_PRESETS["tablet_reading"]
        assert get_preset("dialog_title") is COMPONENT_PRESETS["dialog_title"]

    def test_get_preset_unknown_raises(self):
        with pytest.raises(KeyError):
            get_preset("gigantic")

    def test_all_preset_names(self):
        names = all_preset_names()
        assert "normal" in names
        assert "desktop" in names
        assert "tooltip" in names
        assert len(names) == len(PRESETS) + len(DEVICE_PRESETS) + len(COMPONENT_PRESETS)
