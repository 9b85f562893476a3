"""
Radius screen - Rounded boxes for each radius token and partial-corner
examples.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

from design_consts.radius import CornerRadii, Radius, border_radius
from design_consts.sizes import Size
from design_consts.spacing import gap
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.styles import COLORS
from showcase_qt.widgets import DemoCard

BOX_EDGE = int(Size.ULTRA)


def _rounded_box(caption: str, radii: CornerRadii, color: str) -> QWidget:
    cell = QWidget()
    layout = QVBoxLayout(cell)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(gap("xs"))

    box = QFrame()
    box.setFixedSize(BOX_EDGE, BOX_EDGE)
    box.setStyleSheet(f"QFrame {{ background-color: {color}; {radii.to_qss()} }}")
    layout.addWidget(box, alignment=Qt.AlignmentFlag.AlignHCenter)

    label = QLabel(caption)
    label.setObjectName("mutedText")
    label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
    layout.addWidget(label)
    return cell


class RadiusScreen(BaseScreen):
    """Corner rounding tokens."""

    KEY = "radius"
    TITLE = "Radius"
    SUBTITLE = "Corner rounding from sharp to fully circular."

    COLUMNS = 6

    def _create_content(self) -> None:
        scale = DemoCard("Radius scale", "border_radius(size)")
        host = QWidget()
        grid = QGridLayout(host)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(gap("lg"))
        for index, token in enumerate(Radius):
            # Qt clamps large radii badly; half the edge is already a circle
            radii = border_radius(min(token.value, BOX_EDGE / 2))
            grid.addWidget(
                _rounded_box(f"{token.name}\n{token.value:g}", radii, COLORS["primary"]),
                index // self.COLUMNS,
                index % self.COLUMNS,
            )
        scale.set_content(host)
        self.add_card(scale)

        partial = DemoCard("Partial corners", "only_top, only_bottom, only_left, only_right")
        partial_host = QWidget()
        partial_grid = QGridLayout(partial_host)
        partial_grid.setContentsMargins(0, 0, 0, 0)
        partial_grid.setSpacing(gap("lg"))
        examples = (
            ("only_top(XL)", CornerRadii.only_top(Radius.XL)),
            ("only_bottom(XL)", CornerRadii.only_bottom(Radius.XL)),
            ("only_left(XL)", CornerRadii.only_left(Radius.XL)),
            ("only_right(XL)", CornerRadii.only_right(Radius.XL)),
        )
        for index, (caption, radii) in enumerate(examples):
            partial_grid.addWidget(_rounded_box(caption, radii, COLORS["secondary"]), 0, index)
        partial.set_content(partial_host)
        partial.set_code("sheet.setStyleSheet(CornerRadii.only_top(Radius.XL).to_qss())")
        self.add_card(partial)
