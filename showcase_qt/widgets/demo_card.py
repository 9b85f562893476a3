"""
Demo Card - Titled panel that frames one token example.

Usage:
    card = DemoCard("Spacing", "Padding tokens from XS to XXL")
    card.set_content(swatch_widget)
    card.set_code("layout.setContentsMargins(*padding('lg').as_margins())")
"""

from typing import Optional

from PyQt6.QtGui import QFont, QFontDatabase
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from design_consts.font_sizes import DEFAULT_FONT_SIZES
from design_consts.spacing import gap, padding
from showcase_qt.responsive import ResponsiveLabel
from showcase_qt.styles import COLORS


class DemoCard(QFrame):
    """
    Card with a title, a muted description, a content area and an
    optional code snippet.
    """

    def __init__(
        self,
        title: str,
        description: str = "",
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setObjectName("demoCard")

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(*padding("xl").as_margins())
        self._layout.setSpacing(gap("md"))

        self.title_label = ResponsiveLabel(
            title,
            smallest=DEFAULT_FONT_SIZES.body,
            largest=DEFAULT_FONT_SIZES.body_large,
            weight=QFont.Weight.DemiBold,
        )
        self._layout.addWidget(self.title_label)

        self.description_label = QLabel(description)
        self.description_label.setObjectName("mutedText")
        self.description_label.setWordWrap(True)
        self.description_label.setVisible(bool(description))
        self._layout.addWidget(self.description_label)

        self._content: Optional[QWidget] = None
        self._code_label: Optional[QLabel] = None

    @property
    def content(self) -> Optional[QWidget]:
        return self._content

    def set_content(self, widget: QWidget) -> None:
        """Replace the card body with ``widget``."""
        if self._content is not None:
            self._layout.removeWidget(self._content)
            self._content.deleteLater()
        self._content = widget
        index = self._layout.count() if self._code_label is None else self._layout.count() - 1
        self._layout.insertWidget(index, widget)

    def set_code(self, code: str) -> None:
        """Show a monospace usage snippet under the content."""
        if self._code_label is None:
            self._code_label = QLabel()
            self._code_label.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
            self._code_label.setStyleSheet(
                f"background-color: {COLORS['background_dark']};"
                f"color: {COLORS['text_muted']};"
                f"padding: {padding('md').to_qss()};"
            )
            self._layout.addWidget(self._code_label)
        self._code_label.setText(code)

    @property
    def code(self) -> str:
        return self._code_label.text() if self._code_label else ""
