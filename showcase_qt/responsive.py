"""
Qt adapter for responsive font sizing.

The core helpers in design_consts.responsive take a width; this module
supplies it from the widget's top-level window, which plays the role of
the viewport in a desktop app.

Usage:
    from showcase_qt.responsive import ResponsiveLabel, responsive_font_size

    title = ResponsiveLabel("Consts", smallest=18, largest=28)
    icon_px = responsive_font_size(self, smallest=20, largest=28)
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QWidget

from design_consts.responsive import (
    DEFAULT_LARGEST_SCREEN_SIZE,
    DEFAULT_SMALLEST_SCREEN_SIZE,
    DeviceType,
    FontScaleRequest,
    compute_font_size,
    get_device_type,
)

# Fallback range when a caller gives no sizes
DEFAULT_SMALLEST_FONT: float = 12.0
DEFAULT_LARGEST_FONT: float = 20.0


def viewport_width(widget: QWidget) -> int:
    """Width of the window that contains ``widget``."""
    window = widget.window()
    return (window or widget).width()


def responsive_font_size(
    widget: QWidget,
    smallest: float = DEFAULT_SMALLEST_FONT,
    largest: float = DEFAULT_LARGEST_FONT,
    smallest_screen_size: float = DEFAULT_SMALLEST_SCREEN_SIZE,
    largest_screen_size: float = DEFAULT_LARGEST_SCREEN_SIZE,
) -> float:
    """Interpolated font size for the window holding ``widget``."""
    return compute_font_size(
        viewport_width(widget),
        smallest,
        largest,
        smallest_screen_size,
        largest_screen_size,
    )


def device_type(widget: QWidget) -> DeviceType:
    """Device class of the window holding ``widget``."""
    return get_device_type(viewport_width(widget))


class ResponsiveLabel(QLabel):
    """
    Label whose pixel size follows the window width.

    The owning window calls update_for_width() on resize; the label
    never measures itself, so nested layouts do not feed back into
    the font size.
    """

    def __init__(
        self,
        text: str = "",
        smallest: float = DEFAULT_SMALLEST_FONT,
        largest: float = DEFAULT_LARGEST_FONT,
        parent: Optional[QWidget] = None,
        *,
        weight: QFont.Weight = QFont.Weight.Normal,
    ):
        super().__init__(text, parent)
        self._request = FontScaleRequest(smallest, largest)
        self._weight = weight
        self._current_size: float = smallest
        self._font_scale: float = 1.0

    @property
    def request(self) -> FontScaleRequest:
        return self._request

    @property
    def current_size(self) -> float:
        """Pixel size last applied to the label."""
        return self._current_size

    def set_range(
        self,
        smallest: float,
        largest: float,
        smallest_screen_size: float = DEFAULT_SMALLEST_SCREEN_SIZE,
        largest_screen_size: float = DEFAULT_LARGEST_SCREEN_SIZE,
    ) -> None:
        """Change the font range and re-apply it for the current window."""
        self._request = FontScaleRequest(smallest, largest, smallest_screen_size, largest_screen_size)
        self.update_for_width(viewport_width(self), font_scale=self._font_scale)

    def set_screen_range(self, smallest_screen_size: float, largest_screen_size: float) -> None:
        """Keep the font sizes but interpolate between different window widths."""
        self._request = replace(
            self._request,
            smallest_screen_size=smallest_screen_size,
            largest_screen_size=largest_screen_size,
        )

    def update_for_width(self, width: float, font_scale: float = 1.0) -> None:
        """
        Apply the font size for a window of ``width`` pixels.

        ``font_scale`` multiplies the interpolated size (accessibility
        font scaling).
        """
        self._font_scale = font_scale
        self._current_size = self._request.at(width) * font_scale
        font = self.font()
        font.setPixelSize(max(1, round(self._current_size)))
        font.setWeight(self._weight)
        self.setFont(font)


def apply_responsive_fonts(
    root: QWidget,
    width: Optional[float] = None,
    *,
    screen_range: Optional[tuple[float, float]] = None,
    font_scale: float = 1.0,
) -> int:
    """
    Update every ResponsiveLabel under ``root``.

    Args:
        root: Widget whose descendants are updated
        width: Width to use; defaults to the root's window width
        screen_range: (smallest, largest) reference widths replacing each
            label's own, e.g. Config.screen_range
        font_scale: Multiplier applied to every computed size

    Returns:
        Number of labels updated
    """
    if width is None:
        width = viewport_width(root)
    labels = root.findChildren(ResponsiveLabel)
    for label in labels:
        if screen_range is not None:
            label.set_screen_range(*screen_range)
        label.update_for_width(width, font_scale)
    return len(labels)
