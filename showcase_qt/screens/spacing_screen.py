"""
Spacing screen - Spacing bars plus padding and gap examples.
"""

from __future__ import annotations

from PyQt6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QWidget

from design_consts.spacing import Spacing, gap, horizontal, padding, vertical
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.styles import COLORS
from showcase_qt.widgets import DemoCard


class SpacingScreen(BaseScreen):
    """Visualises every spacing token as a bar of that length."""

    KEY = "spacing"
    TITLE = "Spacing"
    SUBTITLE = "Padding, margins and gaps from the shared size ladder."

    def _create_content(self) -> None:
        scale = DemoCard("Spacing scale", "Bar length equals the token value")
        host = QWidget()
        grid = QGridLayout(host)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setVerticalSpacing(gap("xs"))
        self.bars: dict[str, QFrame] = {}
        for row, token in enumerate(Spacing):
            name = QLabel(token.name)
            value = QLabel(f"{token.value:g}px")
            value.setObjectName("mutedText")
            bar = QFrame()
            bar.setFixedSize(max(1, round(token.value)), round(Spacing.SMD))
            bar.setStyleSheet(f"background-color: {COLORS['primary']};")
            self.bars[token.name] = bar
            grid.addWidget(name, row, 0)
            grid.addWidget(value, row, 1)
            grid.addWidget(bar, row, 2)
        grid.setColumnStretch(3, 1)
        scale.set_content(host)
        self.add_card(scale)

        insets = DemoCard("Edge insets", "padding(), horizontal() and vertical()")
        insets_host = QWidget()
        row = QHBoxLayout(insets_host)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(gap("lg"))
        for label, edge in (
            ("padding('lg')", padding("lg")),
            ("horizontal('xl')", horizontal("xl")),
            ("vertical('md')", vertical("md")),
        ):
            box = QLabel(label)
            box.setStyleSheet(
                f"background-color: {COLORS['background_dark']};"
                f"border: 1px dashed {COLORS['secondary']};"
                f"padding: {edge.to_qss()};"
            )
            row.addWidget(box)
        row.addStretch(1)
        insets.set_content(insets_host)
        insets.set_code("layout.setContentsMargins(*padding('lg').as_margins())")
        self.add_card(insets)
