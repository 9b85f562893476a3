"""
Sizes screen - Renders the base scale, icon sizes and avatar sizes as
squares and circles.
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from design_consts.radius import Radius
from design_consts.sizes import AspectRatio, AvatarSize, Breakpoint, IconSize, Size
from design_consts.spacing import gap
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.styles import COLORS
from showcase_qt.widgets import DemoCard, InfoChip


def _size_swatch(name: str, value: float, color: str, rounded: bool = False) -> QWidget:
    """A square of ``value`` pixels with its caption underneath."""
    cell = QWidget()
    layout = QVBoxLayout(cell)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(gap("xs"))
    layout.setAlignment(Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignHCenter)

    box = QFrame()
    edge = max(1, round(value))
    box.setFixedSize(edge, edge)
    radius = int(Radius.CIRCULAR) if rounded else int(Radius.XXS)
    box.setStyleSheet(f"background-color: {color}; border-radius: {min(radius, edge // 2)}px;")
    layout.addWidget(box, alignment=Qt.AlignmentFlag.AlignHCenter)

    caption = QLabel(f"{name}\n{value:g}")
    caption.setObjectName("mutedText")
    caption.setAlignment(Qt.AlignmentFlag.AlignHCenter)
    layout.addWidget(caption)
    return cell


class SizesScreen(BaseScreen):
    """Base size ladder and grouped dimension tables."""

    KEY = "sizes"
    TITLE = "Sizes"
    SUBTITLE = "A single ladder of dimensions from 0 to 96px."

    def _create_content(self) -> None:
        self.add_card(self._swatch_card(
            "Base scale", "Size.NONE .. Size.COLOSSAL", Size, COLORS["primary"],
        ))
        self.add_card(self._swatch_card(
            "Icon sizes", "IconSize.XS .. IconSize.HUGE", IconSize, COLORS["info"],
        ))
        self.add_card(self._swatch_card(
            "Avatar sizes", "AvatarSize.XS .. AvatarSize.MASSIVE", AvatarSize,
            COLORS["secondary"], rounded=True,
        ))

        layout_card = DemoCard("Layout", "Breakpoints and aspect ratios")
        host = QWidget()
        row = QHBoxLayout(host)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(gap("sm"))
        for breakpoint in Breakpoint:
            row.addWidget(InfoChip(breakpoint.name, f"{breakpoint.value:g}px", COLORS["warning"]))
        for ratio in AspectRatio:
            row.addWidget(InfoChip(ratio.name, f"{ratio.value:.3f}", COLORS["success"]))
        row.addStretch(1)
        layout_card.set_content(host)
        self.add_card(layout_card)

    def _swatch_card(
        self,
        title: str,
        description: str,
        table: Type[Enum],
        color: str,
        rounded: bool = False,
    ) -> DemoCard:
        card = DemoCard(title, description)
        host = QWidget()
        row = QHBoxLayout(host)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(gap("md"))
        row.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignBottom)
        for member in table:
            row.addWidget(_size_swatch(member.name, member.value, color, rounded))
        card.set_content(host)
        return card
