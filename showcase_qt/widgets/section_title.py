"""
Section title with a responsive headline and a muted subtitle.
"""

from typing import Optional

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from design_consts.font_sizes import DEFAULT_FONT_SIZES
from design_consts.spacing import gap
from showcase_qt.responsive import ResponsiveLabel


class SectionTitle(QWidget):
    """Headline that grows from h3 on narrow windows to h1 on wide ones."""

    def __init__(self, title: str, subtitle: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(gap("sm"))

        self.title_label = ResponsiveLabel(
            title,
            smallest=DEFAULT_FONT_SIZES.h3,
            largest=DEFAULT_FONT_SIZES.h1,
            weight=QFont.Weight.Bold,
        )
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(subtitle)
        self.subtitle_label.setObjectName("mutedText")
        self.subtitle_label.setWordWrap(True)
        self.subtitle_label.setVisible(bool(subtitle))
        layout.addWidget(self.subtitle_label)
