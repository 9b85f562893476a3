"""
Typography System - Modular font-size scales and presets.

A scale starts at ``body_small`` and multiplies by a constant factor for
each step up the hierarchy, so a single base size and ratio define every
text level from captions to display text.

Usage:
    from design_consts.font_sizes import FontSizes, ScaleFactor, get_preset

    sizes = FontSizes(body_small=16, scale_factor=ScaleFactor.NORMAL)
    title.setFont(QFont(family, round(sizes.h2)))

    dialog = get_preset("dialog_title")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from design_consts.responsive import (
    DEFAULT_LARGEST_SCREEN_SIZE,
    DEFAULT_SMALLEST_SCREEN_SIZE,
    compute_font_size,
)


class ScaleFactor(float, Enum):
    """
    Ratios between consecutive text levels.

    Guidelines:
        SMALL (~1.128): Dense UIs, dashboards
        NORMAL (~1.174): Balanced hierarchy
        LARGE (~1.272): Default; clear hierarchy
        EXTRA_LARGE (golden ratio): Marketing, landing pages
    """

    SMALL = 1.1278422438
    NORMAL = 1.1739902127
    LARGE = 1.2720281269
    EXTRA_LARGE = 1.6180555556


# Levels from smallest to largest
LEVELS: Final[tuple[str, ...]] = (
    "body_small",
    "body",
    "body_large",
    "paragraph_title",
    "subheader",
    "header",
    "h3",
    "h2",
    "h1",
    "display",
)


@dataclass(frozen=True, slots=True)
class FontSizes:
    """
    Complete font-size hierarchy derived from a base size and ratio.

    Each level is the previous level multiplied by ``scale_factor``.
    """

    body_small: float = 14.0
    scale_factor: float = ScaleFactor.LARGE.value

    def levels(self) -> dict[str, float]:
        """
        All levels in ascending order.

        Returns:
            Dictionary of level name -> size in pixels
        """
        sizes: dict[str, float] = {}
        size = float(self.body_small)
        for name in LEVELS:
            sizes[name] = size
            size = size * self.scale_factor
        return sizes

    def get(self, level: str) -> float:
        """
        Size of a single level.

        Raises:
            KeyError: If the level name is unknown
        """
        return self.levels()[level]

    @property
    def body(self) -> float:
        return self.get("body")

    @property
    def body_large(self) -> float:
        return self.get("body_large")

    @property
    def paragraph_title(self) -> float:
        return self.get("paragraph_title")

    @property
    def subheader(self) -> float:
        return self.get("subheader")

    @property
    def header(self) -> float:
        return self.get("header")

    @property
    def h3(self) -> float:
        return self.get("h3")

    @property
    def h2(self) -> float:
        return self.get("h2")

    @property
    def h1(self) -> float:
        return self.get("h1")

    @property
    def display(self) -> float:
        return self.get("display")

    def responsive(
        self,
        level: str,
        other: FontSizes,
        current_width: float,
        smallest_screen_size: float = DEFAULT_SMALLEST_SCREEN_SIZE,
        largest_screen_size: float = DEFAULT_LARGEST_SCREEN_SIZE,
    ) -> float:
        """
        Interpolate one level between this scale (small screens) and
        ``other`` (large screens).

        Example:
            mobile = DEVICE_PRESETS["mobile_compact"]
            desktop = DEVICE_PRESETS["desktop"]
            size = mobile.responsive("h1", desktop, window.width())
        """
        return compute_font_size(
            current_width,
            self.get(level),
            other.get(level),
            smallest_screen_size,
            largest_screen_size,
        )


DEFAULT_FONT_SIZES: Final[FontSizes] = FontSizes()


def _scale(body_small: float, factor: ScaleFactor) -> FontSizes:
    return FontSizes(body_small=body_small, scale_factor=factor.value)


# Base size x scale factor combinations
PRESETS: Final[dict[str, FontSizes]] = {
    "small": _scale(12, ScaleFactor.SMALL),
    "small_normal_scale": _scale(12, ScaleFactor.NORMAL),
    "small_large_scale": _scale(12, ScaleFactor.LARGE),
    "small_extra_large_scale": _scale(12, ScaleFactor.EXTRA_LARGE),
    "normal": _scale(14, ScaleFactor.SMALL),
    "normal_normal_scale": _scale(14, ScaleFactor.NORMAL),
    "normal_large_scale": _scale(14, ScaleFactor.LARGE),
    "normal_extra_large_scale": _scale(14, ScaleFactor.EXTRA_LARGE),
    "large": _scale(16, ScaleFactor.SMALL),
    "large_normal_scale": _scale(16, ScaleFactor.NORMAL),
    "large_large_scale": _scale(16, ScaleFactor.LARGE),
    "large_extra_large_scale": _scale(16, ScaleFactor.EXTRA_LARGE),
    "extra_large": _scale(18, ScaleFactor.SMALL),
    "extra_large_normal_scale": _scale(18, ScaleFactor.NORMAL),
    "extra_large_large_scale": _scale(18, ScaleFactor.LARGE),
    "extra_large_extra_large_scale": _scale(18, ScaleFactor.EXTRA_LARGE),
    "huge": _scale(20, ScaleFactor.SMALL),
    "huge_normal_scale": _scale(20, ScaleFactor.NORMAL),
    "huge_large_scale": _scale(20, ScaleFactor.LARGE),
    "huge_extra_large_scale": _scale(20, ScaleFactor.EXTRA_LARGE),
}

# Scales tuned per device class and reading context
DEVICE_PRESETS: Final[dict[str, FontSizes]] = {
    "mobile": _scale(16, ScaleFactor.LARGE),
    "mobile_compact": _scale(14, ScaleFactor.LARGE),
    "mobile_comfortable": _scale(18, ScaleFactor.LARGE),
    "tablet": _scale(16, ScaleFactor.LARGE),
    "tablet_reading": _scale(18, ScaleFactor.LARGE),
    "desktop": _scale(16, ScaleFactor.LARGE),
    "desktop_reading": _scale(18, ScaleFactor.LARGE),
    "desktop_marketing": _scale(16, ScaleFactor.EXTRA_LARGE),
    "desktop_compact": _scale(14, ScaleFactor.NORMAL),
}

# Component-level scales (use .body_small for the component's base text)
COMPONENT_PRESETS: Final[dict[str, FontSizes]] = {
    "button_mobile": _scale(16, ScaleFactor.SMALL),
    "button_tablet": _scale(17, ScaleFactor.SMALL),
    "button_desktop": _scale(16, ScaleFactor.SMALL),
    "button_small": _scale(14, ScaleFactor.SMALL),
    "button_large": _scale(18, ScaleFactor.SMALL),
    "caption_mobile": _scale(12, ScaleFactor.SMALL),
    "caption_tablet": _scale(14, ScaleFactor.SMALL),
    "caption_desktop": _scale(15, ScaleFactor.SMALL),
    "caption_emphasis": _scale(14, ScaleFactor.NORMAL),
    "form_label_mobile": _scale(16, ScaleFactor.SMALL),
    "form_label_tablet": _scale(17, ScaleFactor.SMALL),
    "form_label_desktop": _scale(16, ScaleFactor.SMALL),
    "form_hint": _scale(14, ScaleFactor.SMALL),
    "overline_standard": _scale(12, ScaleFactor.SMALL),
    "overline_large": _scale(14, ScaleFactor.SMALL),
    "overline_small": _scale(10, ScaleFactor.SMALL),
    "navigation_menu": _scale(15, ScaleFactor.SMALL),
    "tab_label": _scale(14, ScaleFactor.NORMAL),
    "notification": _scale(14, ScaleFactor.NORMAL),
    "badge": _scale(12, ScaleFactor.NORMAL),
    "list_item_title": _scale(16, ScaleFactor.NORMAL),
    "list_item_subtitle": _scale(14, ScaleFactor.SMALL),
    "dialog_title": _scale(20, ScaleFactor.NORMAL),
    "tooltip": _scale(12, ScaleFactor.SMALL),
}

# Semantic aliases
COMPONENT_PRESETS.update({
    "button_label_small": COMPONENT_PRESETS["button_small"],
    "button_label_standard": COMPONENT_PRESETS["button_desktop"],
    "button_label_large": COMPONENT_PRESETS["button_large"],
    "caption_tiny": COMPONENT_PRESETS["caption_mobile"],
    "caption_standard": COMPONENT_PRESETS["caption_mobile"],
    "caption_large": COMPONENT_PRESETS["caption_emphasis"],
    "form_label_small": COMPONENT_PRESETS["form_label_mobile"],
    "form_label_standard": COMPONENT_PRESETS["form_label_desktop"],
    "form_label_large": COMPONENT_PRESETS["form_label_tablet"],
})


def get_preset(name: str) -> FontSizes:
    """
    Find a preset by name across all registries.

    Raises:
        KeyError: If no registry contains the name
    """
    for registry in (PRESETS, DEVICE_PRESETS, COMPONENT_PRESETS):
        if name in registry:
            return registry[name]
    raise KeyError(name)


def all_preset_names() -> list[str]:
    """Every preset name, in registry order."""
    return [*PRESETS, *DEVICE_PRESETS, *COMPONENT_PRESETS]
