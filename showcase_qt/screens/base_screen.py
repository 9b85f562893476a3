"""
Base screen class for showcase screens.

Every screen is a scrollable column: a section title followed by demo
cards. Subclasses fill the column in _create_content().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QScrollArea, QVBoxLayout, QWidget

from design_consts.responsive import (
    DEFAULT_LARGEST_SCREEN_SIZE,
    DEFAULT_SMALLEST_SCREEN_SIZE,
    get_padding,
    get_vertical_gap,
)
from design_consts.sizes import Breakpoint
from showcase_qt.widgets import DemoCard, SectionTitle

if TYPE_CHECKING:
    from design_consts.config import Config


class BaseScreen(QWidget):
    """
    Base class for showcase screens.

    Provides:
    - Status updates via callback
    - Config access
    - Responsive page padding (adjusted on relayout())
    - Lifecycle methods (on_enter, on_leave)

    Signals:
        status_message(str): Emitted when screen wants to update status bar.
    """

    status_message = pyqtSignal(str)

    # Overridden by subclasses
    KEY = "base"
    TITLE = ""
    SUBTITLE = ""

    def __init__(
        self,
        config: Optional["Config"] = None,
        on_status: Optional[Callable[[str], None]] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.config = config
        self._on_status = on_status
        self._cards: list[DemoCard] = []

        if on_status:
            self.status_message.connect(on_status)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        outer.addWidget(self._scroll)

        self._body = QWidget()
        self._body.setObjectName("screenRoot")
        self._body.setMaximumWidth(int(Breakpoint.DESKTOP))
        self._column = QVBoxLayout(self._body)
        self._column.setAlignment(Qt.AlignmentFlag.AlignTop)
        self._scroll.setWidget(self._body)

        self.section_title = SectionTitle(self.TITLE, self.SUBTITLE)
        self._column.addWidget(self.section_title)

        self._create_content()
        self._column.addStretch(1)

    def _create_content(self) -> None:
        """Add demo cards to the column."""

    def add_card(self, card: DemoCard) -> DemoCard:
        self._cards.append(card)
        self._column.addWidget(card)
        return card

    @property
    def cards(self) -> list[DemoCard]:
        return list(self._cards)

    @property
    def screen_range(self) -> tuple[float, float]:
        """Reference widths for responsive text, from the config when present."""
        if self.config is not None:
            return self.config.screen_range
        return (DEFAULT_SMALLEST_SCREEN_SIZE, DEFAULT_LARGEST_SCREEN_SIZE)

    def relayout(self, width: float) -> None:
        """Adjust page padding and section gaps for a window ``width`` wide."""
        self._column.setContentsMargins(*get_padding(width).as_margins())
        self._column.setSpacing(round(get_vertical_gap(width)))

    def set_status(self, message: str) -> None:
        """Update the status bar message."""
        self.status_message.emit(message)

    def on_enter(self) -> None:
        """Called when the screen becomes visible."""

    def on_leave(self) -> None:
        """Called when leaving this screen for another."""

    @property
    def screen_name(self) -> str:
        return self.TITLE or self.__class__.__name__
