"""
Navigation bar widget for switching between showcase screens.

Wide windows get a row of pill buttons; below Breakpoint.MOBILE the row
collapses into a single button with a popup menu.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QMenu,
    QPushButton,
    QSizePolicy,
    QToolButton,
    QWidget,
)

from design_consts.radius import Radius
from design_consts.responsive import is_mobile
from design_consts.spacing import EdgeInsets, gap
from showcase_qt.screens.screen_controller import ScreenType
from showcase_qt.styles import COLORS


class NavigationBar(QWidget):
    """
    Row of pill buttons, one per ScreenType, or a menu button on narrow windows.

    Signals:
        screen_selected(int): Emitted with ScreenType value when a button
            or menu entry is clicked.
    """

    screen_selected = pyqtSignal(int)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._buttons: dict[ScreenType, QPushButton] = {}
        self._actions: dict[ScreenType, QAction] = {}
        self._button_group = QButtonGroup(self)
        self._button_group.setExclusive(True)
        self._compact = False

        self._create_ui()
        self._apply_styles()

    def _create_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(*EdgeInsets.symmetric(horizontal="smd", vertical="xs").as_margins())
        layout.setSpacing(gap("xs"))

        self.menu_button = QToolButton()
        self.menu_button.setText(ScreenType.OVERVIEW.label)
        self.menu_button.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        self.menu_button.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
        self.menu_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.menu = QMenu(self.menu_button)
        self.menu_button.setMenu(self.menu)
        self.menu_button.setVisible(False)
        layout.addWidget(self.menu_button)

        for screen_type in ScreenType:
            btn = QPushButton(screen_type.label)
            btn.setCheckable(True)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setSizePolicy(QSizePolicy.Policy.Minimum, QSizePolicy.Policy.Fixed)
            btn.clicked.connect(lambda checked, st=screen_type: self.screen_selected.emit(st.value))

            self._buttons[screen_type] = btn
            self._button_group.addButton(btn, screen_type.value)
            layout.addWidget(btn)

            action = self.menu.addAction(screen_type.label)
            action.setCheckable(True)
            action.triggered.connect(lambda checked, st=screen_type: self.screen_selected.emit(st.value))
            self._actions[screen_type] = action

        layout.addStretch(1)
        self.set_active_screen(ScreenType.OVERVIEW)

    def _apply_styles(self) -> None:
        pill = EdgeInsets.symmetric(horizontal="xl", vertical="sm")
        self.setStyleSheet(f"""
            NavigationBar QPushButton, NavigationBar QToolButton {{
                border: 1px solid {COLORS["border"]};
                border-radius: {int(Radius.LGX)}px;
                padding: {pill.to_qss()};
            }}
        """)

    @property
    def is_compact(self) -> bool:
        return self._compact

    def set_compact(self, compact: bool) -> None:
        """Show the menu button instead of the pill row."""
        self._compact = compact
        self.menu_button.setVisible(compact)
        for btn in self._buttons.values():
            btn.setVisible(not compact)

    def update_for_width(self, width: float) -> None:
        """Collapse to the menu button on mobile widths."""
        compact = is_mobile(width)
        if compact != self._compact:
            self.set_compact(compact)

    def set_active_screen(self, screen_type: ScreenType) -> None:
        if screen_type in self._buttons:
            self._buttons[screen_type].setChecked(True)
            for other, action in self._actions.items():
                action.setChecked(other is screen_type)
            self.menu_button.setText(screen_type.label)

    def button(self, screen_type: ScreenType) -> QPushButton:
        return self._buttons[screen_type]

    def action(self, screen_type: ScreenType) -> QAction:
        return self._actions[screen_type]
