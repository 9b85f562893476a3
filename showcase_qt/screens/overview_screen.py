"""
Overview screen - Summary of every token table and a live readout of
the responsive font interpolation.
"""

from __future__ import annotations

from PyQt6.QtWidgets import QGridLayout, QLabel, QWidget

from design_consts.durations import Duration
from design_consts.font_sizes import DEFAULT_FONT_SIZES, all_preset_names
from design_consts.radius import Radius
from design_consts.responsive import compute_font_size, get_device_type
from design_consts.sizes import Size
from design_consts.spacing import Spacing, gap
from showcase_qt.responsive import ResponsiveLabel
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.styles import COLORS
from showcase_qt.widgets import DemoCard, InfoChip


class OverviewScreen(BaseScreen):
    """Landing screen."""

    KEY = "overview"
    TITLE = "Design Consts"
    SUBTITLE = "Constants for consistent spacing, radius, sizing, typography and motion."

    def _create_content(self) -> None:
        tables = DemoCard("Token tables", "Every value comes from one shared size ladder.")
        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(gap("sm"))
        chips = [
            InfoChip("Sizes", str(len(Size)), COLORS["primary"]),
            InfoChip("Spacing", str(len(Spacing)), COLORS["secondary"]),
            InfoChip("Radius", str(len(Radius)), COLORS["success"]),
            InfoChip("Durations", str(len(Duration)), COLORS["warning"]),
            InfoChip("Font presets", str(len(all_preset_names())), COLORS["info"]),
        ]
        for index, chip in enumerate(chips):
            grid.addWidget(chip, index // 3, index % 3)
        self.table_chips = chips
        tables.set_content(grid_host)
        self.add_card(tables)

        responsive = DemoCard(
            "Responsive text",
            "Body text scales from 14px at 360px wide to 32px at 1440px wide.",
        )
        host = QWidget()
        column = QGridLayout(host)
        column.setContentsMargins(0, 0, 0, 0)
        self.sample_label = ResponsiveLabel("The quick brown fox", smallest=14, largest=32)
        self.readout_label = QLabel()
        self.readout_label.setObjectName("mutedText")
        column.addWidget(self.sample_label, 0, 0)
        column.addWidget(self.readout_label, 1, 0)
        responsive.set_content(host)
        responsive.set_code("compute_font_size(window.width(), smallest=14, largest=32)")
        self.add_card(responsive)

        scale = DemoCard("Default type scale", "body_small 14px x 1.272 per level")
        scale_host = QWidget()
        scale_grid = QGridLayout(scale_host)
        scale_grid.setContentsMargins(0, 0, 0, 0)
        for row, (name, size) in enumerate(DEFAULT_FONT_SIZES.levels().items()):
            scale_grid.addWidget(QLabel(name), row, 0)
            scale_grid.addWidget(QLabel(f"{size:.1f}px"), row, 1)
        scale.set_content(scale_host)
        self.add_card(scale)

    def relayout(self, width: float) -> None:
        super().relayout(width)
        size = compute_font_size(width, 14, 32, *self.screen_range)
        self.readout_label.setText(
            f"Window {int(width)}px ({get_device_type(width).value}) -> {size:.2f}px"
        )
