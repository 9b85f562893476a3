"""
Animations screen - Duration tokens in motion.

Each demo honours the reduced-motion preference from the config.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QAbstractAnimation, QPropertyAnimation
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from design_consts.durations import Duration, FeatureDuration
from design_consts.sizes import Size
from design_consts.spacing import gap
from showcase_qt.animations import AnimationMixin, create_property_animation
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.styles import COLORS
from showcase_qt.widgets import DemoCard

COLLAPSED_WIDTH = int(Size.COLOSSAL)
EXPANDED_WIDTH = int(Size.COLOSSAL) * 3


class FadingBox(QFrame, AnimationMixin):
    """Coloured box used by the fade demo."""


class AnimationsScreen(BaseScreen):
    """Expand and fade demos plus the duration tables."""

    KEY = "animations"
    TITLE = "Durations"
    SUBTITLE = "Standardised timings following motion design practice."

    def _create_content(self) -> None:
        self._expanded = False
        self._visible = True
        self._animation: Optional[QPropertyAnimation] = None

        expand = DemoCard("Expand", "Width transition using Duration.MD (300ms)")
        expand_host = QWidget()
        expand_layout = QVBoxLayout(expand_host)
        expand_layout.setContentsMargins(0, 0, 0, 0)
        expand_layout.setSpacing(gap("md"))
        self.expand_box = QFrame()
        self.expand_box.setFixedHeight(int(Size.GIANT))
        self.expand_box.setMaximumWidth(COLLAPSED_WIDTH)
        self.expand_box.setStyleSheet(f"background-color: {COLORS['primary']};")
        self.expand_button = QPushButton("Expand")
        self.expand_button.clicked.connect(self.toggle_expand)
        expand_layout.addWidget(self.expand_box)
        expand_layout.addWidget(self.expand_button)
        expand.set_content(expand_host)
        expand.set_code("create_property_animation(box, b'maximumWidth', 96, 288, Duration.MD)")
        self.add_card(expand)

        fade = DemoCard("Fade", "Opacity transition using Duration.XL (500ms)")
        fade_host = QWidget()
        fade_layout = QVBoxLayout(fade_host)
        fade_layout.setContentsMargins(0, 0, 0, 0)
        fade_layout.setSpacing(gap("md"))
        self.fade_box = FadingBox()
        self.fade_box.setFixedSize(int(Size.COLOSSAL), int(Size.GIANT))
        self.fade_box.setStyleSheet(f"background-color: {COLORS['secondary']};")
        self.fade_button = QPushButton("Hide")
        self.fade_button.clicked.connect(self.toggle_fade)
        fade_layout.addWidget(self.fade_box)
        fade_layout.addWidget(self.fade_button)
        fade.set_content(fade_host)
        self.add_card(fade)

        self.add_card(self._table_card("Duration scale", "From 50ms to 3s", Duration))
        self.add_card(self._table_card(
            "Feature durations", "Tuned for specific interactions", FeatureDuration,
        ))

    def _table_card(self, title: str, description: str, table) -> DemoCard:
        card = DemoCard(title, description)
        host = QWidget()
        grid = QGridLayout(host)
        grid.setContentsMargins(0, 0, 0, 0)
        for row, (name, member) in enumerate(table.__members__.items()):
            grid.addWidget(QLabel(name), row, 0)
            value = QLabel(f"{int(member)}ms")
            value.setObjectName("mutedText")
            grid.addWidget(value, row, 1)
        card.set_content(host)
        return card

    def _reduce_motion(self) -> bool:
        return bool(self.config.reduce_animations) if self.config is not None else False

    def toggle_expand(self) -> QPropertyAnimation:
        """Animate the box between its collapsed and expanded widths."""
        start = self.expand_box.maximumWidth()
        end = COLLAPSED_WIDTH if self._expanded else EXPANDED_WIDTH
        self._expanded = not self._expanded
        self.expand_button.setText("Collapse" if self._expanded else "Expand")

        if self._animation is not None and self._animation.state() == QAbstractAnimation.State.Running:
            self._animation.stop()

        self._animation = create_property_animation(
            self.expand_box, b"maximumWidth", start, end,
            Duration.MD, "standard", reduce_motion=self._reduce_motion(),
        )
        self._animation.start()
        return self._animation

    def toggle_fade(self) -> QPropertyAnimation:
        """Fade the box out or back in."""
        self._visible = not self._visible
        self.fade_button.setText("Hide" if self._visible else "Show")
        if self._visible:
            return self.fade_box.fade_in(Duration.XL, reduce_motion=self._reduce_motion())
        return self.fade_box.fade_out(Duration.XL, reduce_motion=self._reduce_motion())
