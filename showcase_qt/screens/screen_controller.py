"""
Screen controller for managing screen transitions.

Handles switching between the showcase screens and coordinating
lifecycle callbacks.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QStackedWidget, QWidget

if TYPE_CHECKING:
    from showcase_qt.screens.base_screen import BaseScreen


class ScreenType(IntEnum):
    """Showcase screens in navigation order."""

    OVERVIEW = 0
    SPACING = 1
    RADIUS = 2
    SIZES = 3
    FONTS = 4
    ANIMATIONS = 5

    @property
    def key(self) -> str:
        """Config key, e.g. 'fonts'."""
        return self.name.lower()

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_key(cls, key: str) -> "ScreenType":
        """Screen for a config key; unknown keys map to OVERVIEW."""
        try:
            return cls[key.upper()]
        except KeyError:
            return cls.OVERVIEW


class ScreenController(QObject):
    """
    Controller for managing screen transitions.

    Signals:
        screen_changed(ScreenType): Emitted when the active screen changes.

    Example:
        controller = ScreenController(stacked_widget)
        controller.register_screen(ScreenType.OVERVIEW, overview_screen)
        controller.switch_to(ScreenType.OVERVIEW)
    """

    screen_changed = pyqtSignal(int)  # ScreenType as int

    def __init__(
        self,
        stacked_widget: QStackedWidget,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._stacked_widget = stacked_widget
        self._screens: Dict[ScreenType, "BaseScreen"] = {}
        self._current_screen: Optional[ScreenType] = None

    def register_screen(self, screen_type: ScreenType, screen: "BaseScreen") -> None:
        """
        Register a screen at the stack index of its ScreenType.

        Args:
            screen_type: The type/index of the screen.
            screen: The screen widget.
        """
        self._screens[screen_type] = screen

        while self._stacked_widget.count() <= screen_type.value:
            self._stacked_widget.addWidget(QWidget())

        old_widget = self._stacked_widget.widget(screen_type.value)
        if old_widget:
            self._stacked_widget.removeWidget(old_widget)
            old_widget.deleteLater()

        self._stacked_widget.insertWidget(screen_type.value, screen)

    def switch_to(self, screen_type: ScreenType) -> bool:
        """
        Switch to the specified screen.

        Calls on_leave() on the current screen and on_enter() on the
        new screen.

        Returns:
            True if switch was successful, False otherwise.
        """
        if screen_type not in self._screens:
            return False

        if self._current_screen == screen_type:
            return True

        if self._current_screen is not None:
            current = self._screens.get(self._current_screen)
            if current:
                current.on_leave()

        new_screen = self._screens[screen_type]
        self._stacked_widget.setCurrentIndex(screen_type.value)
        self._current_screen = screen_type

        new_screen.on_enter()
        self.screen_changed.emit(screen_type.value)
        return True

    @property
    def current_screen(self) -> Optional[ScreenType]:
        return self._current_screen

    def get_screen(self, screen_type: ScreenType) -> Optional["BaseScreen"]:
        return self._screens.get(screen_type)

    def screens(self) -> list["BaseScreen"]:
        return [self._screens[t] for t in sorted(self._screens)]
