"""
Spacing Utilities - Spacing scale and edge insets.

Provides the spacing tokens plus a small insets type that converts to
Qt content margins or QSS padding strings.

Usage:
    from design_consts.spacing import Spacing, padding, horizontal

    layout.setContentsMargins(*padding("lg").as_margins())
    layout.setSpacing(int(Spacing.SM))

    frame.setStyleSheet(f"padding: {horizontal('xl').to_qss()};")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from design_consts.sizes import Size


class Spacing(float, Enum):
    """
    Spacing scale, taken from the base size scale.

    Guidelines:
        XXS/XS: Between tightly related elements (icon + label)
        SM/SMD: Between elements in a group (form fields)
        MD/MDL: Between sections within a component
        LG/XL: Between components in a container
        XXL and up: Page margins, hero areas
    """

    NONE = Size.NONE.value
    XXS = Size.XXS.value
    XS = Size.XS.value
    SM = Size.SM.value
    SMD = Size.SMD.value
    MDS = Size.MDS.value
    MD = Size.MD.value
    MDL = Size.MDL.value
    LG = Size.LG.value
    LGX = Size.LGX.value
    XL = Size.XL.value
    XXL = Size.XXL.value
    XXXL = Size.XXXL.value
    HUGE = Size.HUGE.value
    MASSIVE = Size.MASSIVE.value
    GIANT = Size.GIANT.value
    MEGA = Size.MEGA.value
    ULTRA = Size.ULTRA.value


SpacingValue = Union[str, Spacing, float, int]


def _get_spacing_value(size: SpacingValue) -> float:
    """Resolve a spacing name, token or raw number to pixels."""
    if isinstance(size, str):
        return Spacing[size.upper()].value
    return float(size)


@dataclass(frozen=True, slots=True)
class EdgeInsets:
    """Offsets for each side of a box (left, top, right, bottom)."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def all(cls, value: SpacingValue) -> EdgeInsets:
        v = _get_spacing_value(value)
        return cls(v, v, v, v)

    @classmethod
    def symmetric(
        cls,
        horizontal: SpacingValue = 0.0,
        vertical: SpacingValue = 0.0,
    ) -> EdgeInsets:
        h = _get_spacing_value(horizontal)
        v = _get_spacing_value(vertical)
        return cls(h, v, h, v)

    @classmethod
    def only(
        cls,
        left: SpacingValue = 0.0,
        top: SpacingValue = 0.0,
        right: SpacingValue = 0.0,
        bottom: SpacingValue = 0.0,
    ) -> EdgeInsets:
        return cls(
            _get_spacing_value(left),
            _get_spacing_value(top),
            _get_spacing_value(right),
            _get_spacing_value(bottom),
        )

    @property
    def horizontal(self) -> float:
        """Total horizontal inset (left + right)."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Total vertical inset (top + bottom)."""
        return self.top + self.bottom

    def as_margins(self) -> tuple[int, int, int, int]:
        """
        Integer margins for QLayout.setContentsMargins.

        Returns:
            Tuple of (left, top, right, bottom)
        """
        return (round(self.left), round(self.top), round(self.right), round(self.bottom))

    def to_qss(self) -> str:
        """CSS shorthand in top/right/bottom/left order, e.g. '8px 16px 8px 16px'."""
        return " ".join(
            f"{_format_px(v)}px" for v in (self.top, self.right, self.bottom, self.left)
        )


def _format_px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def padding(size: SpacingValue = "md") -> EdgeInsets:
    """
    Uniform insets on every side.

    Example:
        layout.setContentsMargins(*padding("lg").as_margins())
    """
    return EdgeInsets.all(size)


def horizontal(size: SpacingValue = "md") -> EdgeInsets:
    """Insets on the left and right only."""
    return EdgeInsets.symmetric(horizontal=size)


def vertical(size: SpacingValue = "md") -> EdgeInsets:
    """Insets on the top and bottom only."""
    return EdgeInsets.symmetric(vertical=size)


def gap(size: SpacingValue = "md") -> int:
    """
    Gap between layout items, for QLayout.setSpacing.

    Returns:
        Spacing in whole pixels
    """
    return round(_get_spacing_value(size))
