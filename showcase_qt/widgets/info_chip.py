"""
Info Chip - Small pill showing a token name and value.

Usage:
    chip = InfoChip("MD", "12px", color=COLORS["primary"])
"""

from typing import Optional

from PyQt6.QtWidgets import QLabel, QWidget

from design_consts.radius import Radius
from design_consts.spacing import EdgeInsets
from showcase_qt.styles import COLORS


class InfoChip(QLabel):
    """Rounded label rendered as ``NAME · value``."""

    def __init__(
        self,
        name: str,
        value: str,
        color: Optional[str] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(f"{name} · {value}", parent)
        self.name = name
        self.value = value

        accent = color or COLORS["primary"]
        insets = EdgeInsets.symmetric(horizontal="md", vertical="xs")
        self.setStyleSheet(
            f"color: {accent};"
            f"border: 1px solid {accent};"
            f"border-radius: {int(Radius.CIRCULAR)}px;"
            f"padding: {insets.to_qss()};"
        )
