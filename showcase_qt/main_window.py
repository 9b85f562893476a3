"""
Main window for the design-consts showcase.

Header with responsive title text, a navigation bar and a stack of
screens. Window width drives every responsive font and page padding.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtGui import QFont, QResizeEvent, QCloseEvent
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from design_consts.config import Config
from design_consts.font_sizes import DEFAULT_FONT_SIZES
from design_consts.responsive import get_device_type
from design_consts.spacing import EdgeInsets, gap
from showcase_qt.responsive import ResponsiveLabel, apply_responsive_fonts
from showcase_qt.screens import SCREEN_CLASSES, ScreenController, ScreenType
from showcase_qt.styles import COLORS, get_app_stylesheet
from showcase_qt.widgets.navigation_bar import NavigationBar

logger = logging.getLogger(__name__)


class ShowcaseWindow(QMainWindow):
    """Top-level showcase window."""

    def __init__(self, config: Optional[Config] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.config = config if config is not None else Config()

        self.setWindowTitle("Design Consts - Showcase")
        self.setStyleSheet(get_app_stylesheet())

        self._create_ui()

        width, height = self.config.window_size
        self.resize(width, height)

        self.controller.switch_to(ScreenType.from_key(self.config.last_screen))
        self.navigation.set_active_screen(self.controller.current_screen)
        self.controller.screen_changed.connect(self._on_screen_changed)

        self.refresh_layout()
        logger.info("Showcase window created")

    def _create_ui(self) -> None:
        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        header = QFrame()
        header.setStyleSheet(
            f"QFrame {{ background-color: {COLORS['background_dark']};"
            f" border-bottom: 1px solid {COLORS['border_muted']}; }}"
        )
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(
            *EdgeInsets.symmetric(horizontal="xl", vertical="md").as_margins()
        )
        header_layout.setSpacing(gap("md"))

        titles = QVBoxLayout()
        titles.setSpacing(0)
        self.title_label = ResponsiveLabel(
            "Consts",
            smallest=DEFAULT_FONT_SIZES.body,
            largest=DEFAULT_FONT_SIZES.body_large,
            weight=QFont.Weight.Bold,
        )
        self.subtitle_label = ResponsiveLabel(
            "Design System Demo",
            smallest=DEFAULT_FONT_SIZES.body_small,
            largest=DEFAULT_FONT_SIZES.body,
        )
        self.subtitle_label.setObjectName("mutedText")
        titles.addWidget(self.title_label)
        titles.addWidget(self.subtitle_label)
        header_layout.addLayout(titles)
        header_layout.addStretch(1)
        root.addWidget(header)

        self.navigation = NavigationBar()
        self.navigation.screen_selected.connect(self.show_screen)
        root.addWidget(self.navigation)

        self.stack = QStackedWidget()
        self.controller = ScreenController(self.stack, self)
        for screen_type, screen_class in SCREEN_CLASSES.items():
            screen = screen_class(self.config, on_status=self.statusBar().showMessage)
            self.controller.register_screen(screen_type, screen)
        root.addWidget(self.stack, 1)

        self.setCentralWidget(central)

    def show_screen(self, value: int) -> bool:
        """Switch to the screen with ScreenType value ``value``."""
        screen_type = ScreenType(value)
        switched = self.controller.switch_to(screen_type)
        if switched:
            self.navigation.set_active_screen(screen_type)
        return switched

    def _on_screen_changed(self, value: int) -> None:
        screen_type = ScreenType(value)
        self.config.last_screen = screen_type.key
        self.statusBar().showMessage(screen_type.label)

    def refresh_layout(self, width: Optional[float] = None) -> None:
        """
        Re-apply responsive fonts, padding and navigation for ``width``
        (window width by default).

        Text interpolates over the config's screen range and is multiplied
        by its font scale.
        """
        if width is None:
            width = self.width()
        updated = apply_responsive_fonts(
            self,
            width,
            screen_range=self.config.screen_range,
            font_scale=self.config.font_scale,
        )
        self.navigation.update_for_width(width)
        for screen in self.controller.screens():
            screen.relayout(width)
        logger.debug(
            "Relayout at %spx (%s), %s responsive labels",
            width, get_device_type(width).value, updated,
        )

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.refresh_layout(event.size().width())

    def closeEvent(self, event: QCloseEvent) -> None:
        self.config.window_size = (self.width(), self.height())
        super().closeEvent(event)
