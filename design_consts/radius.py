"""
Border radius scale and per-corner radii.

Usage:
    from design_consts.radius import Radius, CornerRadii, border_radius

    card.setStyleSheet(f"QFrame {{ {border_radius('md').to_qss()} }}")
    sheet.setStyleSheet(CornerRadii.only_top(Radius.XL).to_qss())
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from design_consts.sizes import Size


class Radius(float, Enum):
    """
    Corner rounding scale.

    Guidelines:
        NONE: Sharp corners (data tables)
        XXS..SM (2-6px): Inputs, badges, small buttons
        SMD..MDL (8-14px): Buttons, cards
        LG..XXXL (16-28px): Dialogs, sheets
        HUGE..GIANT (32-48px): Prominent hero surfaces
        CIRCULAR (999px): Pills, avatars
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
    CIRCULAR = 999.0


RadiusValue = Union[str, Radius, float, int]


def _get_radius_value(size: RadiusValue) -> float:
    if isinstance(size, str):
        return Radius[size.upper()].value
    return float(size)


@dataclass(frozen=True, slots=True)
class CornerRadii:
    """Radius for each corner of a box."""

    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0

    @classmethod
    def circular(cls, radius: RadiusValue) -> CornerRadii:
        r = _get_radius_value(radius)
        return cls(r, r, r, r)

    @classmethod
    def only_top(cls, radius: RadiusValue) -> CornerRadii:
        r = _get_radius_value(radius)
        return cls(top_left=r, top_right=r)

    @classmethod
    def only_bottom(cls, radius: RadiusValue) -> CornerRadii:
        r = _get_radius_value(radius)
        return cls(bottom_right=r, bottom_left=r)

    @classmethod
    def only_left(cls, radius: RadiusValue) -> CornerRadii:
        r = _get_radius_value(radius)
        return cls(top_left=r, bottom_left=r)

    @classmethod
    def only_right(cls, radius: RadiusValue) -> CornerRadii:
        r = _get_radius_value(radius)
        return cls(top_right=r, bottom_right=r)

    @property
    def is_uniform(self) -> bool:
        return self.top_left == self.top_right == self.bottom_right == self.bottom_left

    def to_qss(self) -> str:
        """
        QSS declarations for these radii.

        Uniform radii collapse to a single ``border-radius`` declaration.
        """
        if self.is_uniform:
            return f"border-radius: {_format_px(self.top_left)}px;"
        return " ".join([
            f"border-top-left-radius: {_format_px(self.top_left)}px;",
            f"border-top-right-radius: {_format_px(self.top_right)}px;",
            f"border-bottom-right-radius: {_format_px(self.bottom_right)}px;",
            f"border-bottom-left-radius: {_format_px(self.bottom_left)}px;",
        ])


def _format_px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def border_radius(size: RadiusValue = "md") -> CornerRadii:
    """Same radius on all four corners."""
    return CornerRadii.circular(size)
