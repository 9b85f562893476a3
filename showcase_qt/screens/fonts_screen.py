"""
Fonts screen - Interactive preview of the modular type scale.

Pick a base size and a scale factor to preview every level; the chosen
combination is stored as the config's font preset.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from design_consts.font_sizes import (
    DEVICE_PRESETS,
    LEVELS,
    PRESETS,
    FontSizes,
    ScaleFactor,
)
from design_consts.spacing import gap
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.widgets import DemoCard

BASE_SIZE_NAMES = {
    12: "small",
    14: "normal",
    16: "large",
    18: "extra_large",
    20: "huge",
}

SCALE_SUFFIXES = {
    ScaleFactor.SMALL: "",
    ScaleFactor.NORMAL: "_normal_scale",
    ScaleFactor.LARGE: "_large_scale",
    ScaleFactor.EXTRA_LARGE: "_extra_large_scale",
}


def preset_name(base_size: int, factor: ScaleFactor) -> str:
    """Registry name for a base size / factor combination, e.g. 'normal_large_scale'."""
    return BASE_SIZE_NAMES[base_size] + SCALE_SUFFIXES[factor]


class FontsScreen(BaseScreen):
    """Type scale explorer."""

    KEY = "fonts"
    TITLE = "Font sizes"
    SUBTITLE = "Hierarchical type scales with configurable ratios."

    def _create_content(self) -> None:
        self._base_size, self._factor = self._initial_selection()

        picker = DemoCard("Scale", "Base text size (body_small) and ratio between levels")
        picker_host = QWidget()
        picker_grid = QGridLayout(picker_host)
        picker_grid.setContentsMargins(0, 0, 0, 0)
        picker_grid.setSpacing(gap("sm"))

        self.base_buttons = QButtonGroup(self)
        for column, size in enumerate(BASE_SIZE_NAMES):
            button = QPushButton(f"{size}px")
            button.setCheckable(True)
            button.setChecked(size == self._base_size)
            self.base_buttons.addButton(button, size)
            picker_grid.addWidget(button, 0, column)
        self.base_buttons.idClicked.connect(self._on_base_size_selected)

        self.scale_buttons = QButtonGroup(self)
        self._factor_by_id: dict[int, ScaleFactor] = {}
        for column, factor in enumerate(ScaleFactor):
            button = QPushButton(f"{factor.name.replace('_', ' ').title()} ({factor.value:.3f})")
            button.setCheckable(True)
            button.setChecked(factor is self._factor)
            self.scale_buttons.addButton(button, column)
            self._factor_by_id[column] = factor
            picker_grid.addWidget(button, 1, column)
        self.scale_buttons.idClicked.connect(self._on_scale_selected)

        picker.set_content(picker_host)
        self.add_card(picker)

        preview = DemoCard("Preview", "Every level of the selected scale")
        preview_host = QWidget()
        self._preview_grid = QGridLayout(preview_host)
        self._preview_grid.setContentsMargins(0, 0, 0, 0)
        self.preview_labels: dict[str, QLabel] = {}
        self.value_labels: dict[str, QLabel] = {}
        for row, level in enumerate(reversed(LEVELS)):
            sample = QLabel(level.replace("_", " ").title())
            value = QLabel()
            value.setObjectName("mutedText")
            self.preview_labels[level] = sample
            self.value_labels[level] = value
            self._preview_grid.addWidget(sample, row, 0)
            self._preview_grid.addWidget(value, row, 1)
        preview.set_content(preview_host)
        self.add_card(preview)

        responsive = DemoCard(
            "Responsive heading",
            "h1 interpolated from the mobile_compact preset to the desktop preset",
        )
        self.responsive_label = QLabel("Responsive heading")
        responsive.set_content(self.responsive_label)
        responsive.set_code('mobile.responsive("h1", desktop, window.width())')
        self.add_card(responsive)

        self._refresh_preview()

    def _initial_selection(self) -> tuple[int, ScaleFactor]:
        name = self.config.font_preset if self.config is not None else None
        for size in BASE_SIZE_NAMES:
            for factor in ScaleFactor:
                if preset_name(size, factor) == name:
                    return size, factor
        return 14, ScaleFactor.LARGE

    @property
    def font_sizes(self) -> FontSizes:
        """Scale for the current selection."""
        return PRESETS[preset_name(self._base_size, self._factor)]

    def select(self, base_size: int, factor: ScaleFactor) -> None:
        """Select a base size and factor, as if picked in the UI."""
        self._base_size = base_size
        self._factor = factor
        self.base_buttons.button(base_size).setChecked(True)
        for button_id, candidate in self._factor_by_id.items():
            if candidate is factor:
                self.scale_buttons.button(button_id).setChecked(True)
        self._refresh_preview()

        name = preset_name(base_size, factor)
        if self.config is not None:
            self.config.font_preset = name
        self.set_status(f"Font preset: {name}")

    def _on_base_size_selected(self, size: int) -> None:
        self.select(size, self._factor)

    def _on_scale_selected(self, button_id: int) -> None:
        self.select(self._base_size, self._factor_by_id[button_id])

    def _refresh_preview(self) -> None:
        for level, size in self.font_sizes.levels().items():
            label = self.preview_labels[level]
            font = label.font()
            font.setPixelSize(max(1, round(size)))
            label.setFont(font)
            self.value_labels[level].setText(f"{size:.1f}px")

    def relayout(self, width: float) -> None:
        super().relayout(width)
        size = DEVICE_PRESETS["mobile_compact"].responsive(
            "h1", DEVICE_PRESETS["desktop"], width, *self.screen_range,
        )
        font = self.responsive_label.font()
        font.setPixelSize(max(1, round(size)))
        font.setWeight(QFont.Weight.Bold)
        self.responsive_label.setFont(font)
        self.responsive_label.setToolTip(f"{size:.1f}px at {int(width)}px")

    def current_preset_name(self) -> Optional[str]:
        return preset_name(self._base_size, self._factor)
