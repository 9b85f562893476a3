"""
showcase_qt.styles - Dark palette and application stylesheet.

The palette is defined in HSL (hue in degrees) and converted to hex once
at import so the values read like the design file.
"""

from typing import Dict

from PyQt6.QtGui import QColor

from design_consts.radius import Radius
from design_consts.spacing import Spacing


def _hsl(hue: float, saturation: float, lightness: float) -> str:
    return QColor.fromHslF(hue / 360.0, saturation, lightness).name()


COLORS: Dict[str, str] = {
    "background_dark": _hsl(239, 0.61, 0.03),
    "background": _hsl(236, 0.41, 0.06),
    "background_light": _hsl(235, 0.26, 0.10),
    "text": _hsl(234, 1.0, 1.0),
    "text_muted": _hsl(234, 0.30, 0.74),
    "highlight": _hsl(235, 0.16, 0.43),
    "border": _hsl(235, 0.20, 0.32),
    "border_muted": _hsl(236, 0.27, 0.22),
    "primary": _hsl(195, 0.65, 0.65),
    "secondary": _hsl(16, 0.69, 0.70),
    "danger": _hsl(9, 0.53, 0.66),
    "warning": _hsl(51, 0.35, 0.50),
    "success": _hsl(149, 0.34, 0.54),
    "info": _hsl(217, 0.59, 0.67),
}


def get_app_stylesheet(c: Dict[str, str] = COLORS) -> str:
    """Generate the complete application stylesheet."""
    return f"""
QMainWindow {{
    background-color: {c["background_dark"]};
}}

QWidget {{
    color: {c["text"]};
    background-color: transparent;
}}

QWidget#screenRoot, QScrollArea, QScrollArea > QWidget > QWidget {{
    background-color: {c["background"]};
}}

QFrame#demoCard {{
    background-color: {c["background_light"]};
    border: 1px solid {c["border_muted"]};
    border-radius: {int(Radius.LG)}px;
}}

QLabel#mutedText {{
    color: {c["text_muted"]};
}}

QPushButton {{
    background-color: {c["background_light"]};
    border: 1px solid {c["border"]};
    border-radius: {int(Radius.SMD)}px;
    padding: {int(Spacing.SM)}px {int(Spacing.LG)}px;
}}

QPushButton:hover {{
    border-color: {c["highlight"]};
}}

QPushButton:checked {{
    background-color: {c["primary"]};
    color: {c["background_dark"]};
    border-color: {c["primary"]};
}}

QStatusBar {{
    background-color: {c["background_dark"]};
    color: {c["text_muted"]};
}}
"""
