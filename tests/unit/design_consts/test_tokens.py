"""Tests for the size, spacing and radius token tables."""

from __future__ import annotations

import pytest

from design_consts.radius import CornerRadii, Radius, border_radius
from design_consts.sizes import (
    SIZES,
    AspectRatio,
    AvatarSize,
    Breakpoint,
    Elevation,
    IconSize,
    Opacity,
    Size,
    get_size,
)
from design_consts.spacing import (
    EdgeInsets,
    Spacing,
    gap,
    horizontal,
    padding,
    vertical,
)

pytestmark = pytest.mark.unit


# -------------------------
# Sizes
# -------------------------

class TestSize:
    def test_scale_values(self):
        assert [s.value for s in Size] == [
            0, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 24, 28, 32, 40, 48, 56, 64, 80, 96,
        ]

    def test_members_are_floats(self):
        assert Size.MD == 12.0
        assert int(Size.XXL) == 24
        assert Size.LG + Size.XS == 20.0

    def test_sizes_lookup_table(self):
        assert SIZES["md"] == 12.0
        assert SIZES["colossal"] == 96.0
        assert len(SIZES) == len(Size)

    def test_get_size_is_case_insensitive(self):
        assert get_size("lg") == 16.0
        assert get_size("XXL") == 24.0

    def test_get_size_default(self):
        assert get_size("nope") == 12.0
        assert get_size("nope", default=7) == 7.0


class TestGroupedTables:
    def test_icon_sizes(self):
        assert IconSize.XS == 12 and IconSize.HUGE == 48

    def test_avatar_sizes(self):
        assert AvatarSize.XS == 24 and AvatarSize.MASSIVE == 128

    def test_breakpoints(self):
        assert (Breakpoint.MOBILE, Breakpoint.TABLET, Breakpoint.DESKTOP, Breakpoint.CONTENT) == (
            600, 900, 1200, 1536,
        )

    def test_elevation(self):
        assert Elevation.MD == 4 and Elevation.MASSIVE == 24

    def test_opacity_in_unit_range(self):
        assert all(0.0 <= o.value <= 1.0 for o in Opacity)
        assert Opacity.DISABLED == pytest.approx(0.38)

    def test_aspect_ratios(self):
        assert AspectRatio.WIDE == pytest.approx(16 / 9)
        assert AspectRatio.CINEMATIC == pytest.approx(21 / 9)


# -------------------------
# Spacing
# -------------------------

class TestSpacing:
    def test_mirrors_size_scale(self):
        for member in Spacing:
            assert member.value == Size[member.name].value

    def test_stops_at_ultra(self):
        assert list(Spacing)[-1] is Spacing.ULTRA
        assert "EXTREME" not in Spacing.__members__


class TestEdgeInsets:
    def test_all(self):
        assert EdgeInsets.all("md") == EdgeInsets(12, 12, 12, 12)

    def test_symmetric(self):
        insets = EdgeInsets.symmetric(horizontal="lg", vertical=Spacing.XS)
        assert insets == EdgeInsets(16, 4, 16, 4)
        assert insets.horizontal == 32
        assert insets.vertical == 8

    def test_only(self):
        assert EdgeInsets.only(top=3, left="sm") == EdgeInsets(6, 3, 0, 0)

    def test_unknown_name_raises(self):
        with pytest.raises(KeyError):
            EdgeInsets.all("enormous")

    def test_as_margins_rounds(self):
        assert EdgeInsets(1.4, 2.6, 3.0, 0.0).as_margins() == (1, 3, 3, 0)

    def test_to_qss_order(self):
        assert EdgeInsets(1, 2, 3, 4).to_qss() == "2px 3px 4px 1px"

    def test_to_qss_keeps_fractions(self):
        assert EdgeInsets.all(1.5).to_qss() == "1.5px 1.5px 1.5px 1.5px"


class TestSpacingHelpers:
    def test_padding(self):
        assert padding() == EdgeInsets.all(12)
        assert padding("xl") == EdgeInsets.all(20)

    def test_horizontal(self):
        assert horizontal("lg") == EdgeInsets(16, 0, 16, 0)

    def test_vertical(self):
        assert vertical("lg") == EdgeInsets(0, 16, 0, 16)

    def test_gap(self):
        assert gap() == 12
        assert gap("smd") == 8
        assert gap(Spacing.XXL) == 24
        assert gap(7.6) == 8
        assert isinstance(gap("md"), int)


# -------------------------
# Radius
# -------------------------

class TestRadius:
    def test_circular_token(self):
        assert Radius.CIRCULAR == 999

    def test_mirrors_size_scale(self):
        for member in Radius:
            if member is not Radius.CIRCULAR:
                assert member.value == Size[member.name].value


class TestCornerRadii:
    def test_circular_is_uniform(self):
        radii = CornerRadii.circular("md")
        assert radii.is_uniform
        assert radii.to_qss() == "border-radius: 12px;"

    def test_only_top(self):
        radii = CornerRadii.only_top(Radius.XL)
        assert radii == CornerRadii(20, 20, 0, 0)
        assert not radii.is_uniform

    def test_only_bottom(self):
        assert CornerRadii.only_bottom(8) == CornerRadii(0, 0, 8, 8)

    def test_only_left(self):
        assert CornerRadii.only_left(8) == CornerRadii(8, 0, 0, 8)

    def test_only_right(self):
        assert CornerRadii.only_right(8) == CornerRadii(0, 8, 8, 0)

    def test_partial_qss(self):
        qss = CornerRadii.only_top(6).to_qss()
        assert "border-top-left-radius: 6px;" in qss
        assert "border-top-right-radius: 6px;" in qss
        assert "border-bottom-right-radius: 0px;" in qss
        assert "border-bottom-left-radius: 0px;" in qss

    def test_border_radius_helper(self):
        assert border_radius() == CornerRadii.circular(12)
        assert border_radius("circular").to_qss() == "border-radius: 999px;"
