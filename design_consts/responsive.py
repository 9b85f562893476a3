"""
Responsive Utilities - Font interpolation and breakpoint helpers.

Sizes text linearly with the viewport width and classifies widths into
device types. Nothing here knows about a GUI toolkit: callers pass the
current width explicitly.

Usage:
    from design_consts.responsive import compute_font_size, get_device_type

    size = compute_font_size(window.width(), smallest=14, largest=32)
    if get_device_type(window.width()) is DeviceType.MOBILE:
        layout.setSpacing(int(Spacing.MD))
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, TypeVar

from design_consts.sizes import Breakpoint
from design_consts.spacing import EdgeInsets, Spacing

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Reference widths for font interpolation
DEFAULT_SMALLEST_SCREEN_SIZE: Final[float] = 360.0
DEFAULT_LARGEST_SCREEN_SIZE: Final[float] = 1440.0


class ConfigurationError(ValueError):
    """Raised when a screen-size range cannot be interpolated over."""

    def __init__(self, smallest_screen_size: float, largest_screen_size: float):
        self.smallest_screen_size = smallest_screen_size
        self.largest_screen_size = largest_screen_size
        super().__init__(
            f"Invalid screen size range: {smallest_screen_size} -> {largest_screen_size}"
        )


def validate_screen_range(smallest_screen_size: float, largest_screen_size: float) -> None:
    """
    Check that a screen-size range is usable for interpolation.

    Raises:
        ConfigurationError: If either bound is not finite or both are equal.
    """
    if not (math.isfinite(smallest_screen_size) and math.isfinite(largest_screen_size)):
        logger.debug(
            "Rejected non-finite screen range %s -> %s",
            smallest_screen_size, largest_screen_size,
        )
        raise ConfigurationError(smallest_screen_size, largest_screen_size)
    if largest_screen_size == smallest_screen_size:
        logger.debug("Rejected empty screen range at %s", smallest_screen_size)
        raise ConfigurationError(smallest_screen_size, largest_screen_size)


def compute_font_size(
    current_width: float,
    smallest: float,
    largest: float,
    smallest_screen_size: float = DEFAULT_SMALLEST_SCREEN_SIZE,
    largest_screen_size: float = DEFAULT_LARGEST_SCREEN_SIZE,
) -> float:
    """
    Interpolate a font size for the current viewport width.

    The result is pinned to ``smallest`` at or below ``smallest_screen_size``
    and to ``largest`` at or above ``largest_screen_size``. In between it
    moves linearly. ``largest`` may be below ``smallest`` for text that
    shrinks as the window grows.

    Args:
        current_width: Viewport width in logical pixels
        smallest: Font size at the small end of the range
        largest: Font size at the large end of the range
        smallest_screen_size: Width where scaling starts (default 360)
        largest_screen_size: Width where scaling stops (default 1440)

    Returns:
        Font size in pixels

    Raises:
        ConfigurationError: If the screen range is empty or not finite

    Example:
        >>> compute_font_size(900, 14, 32)
        23.0
    """
    validate_screen_range(smallest_screen_size, largest_screen_size)

    if current_width <= smallest_screen_size:
        return smallest
    if current_width >= largest_screen_size:
        return largest

    t = (current_width - smallest_screen_size) / (largest_screen_size - smallest_screen_size)
    return smallest + t * (largest - smallest)


@dataclass(frozen=True, slots=True)
class FontScaleRequest:
    """
    A font-size range bound to a pair of reference widths.

    Lets a caller define the range once (e.g. per text style) and
    evaluate it for whatever width the host reports.
    """

    smallest: float
    largest: float
    smallest_screen_size: float = DEFAULT_SMALLEST_SCREEN_SIZE
    largest_screen_size: float = DEFAULT_LARGEST_SCREEN_SIZE

    def at(self, current_width: float) -> float:
        """Font size for the given width."""
        return compute_font_size(
            current_width,
            self.smallest,
            self.largest,
            self.smallest_screen_size,
            self.largest_screen_size,
        )


class DeviceType(Enum):
    """Device class derived from the viewport width."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


def get_device_type(width: float) -> DeviceType:
    """
    Classify a viewport width.

    Widths below Breakpoint.MOBILE are mobile, below Breakpoint.TABLET
    are tablet, everything else is desktop.
    """
    if width < Breakpoint.MOBILE:
        return DeviceType.MOBILE
    if width < Breakpoint.TABLET:
        return DeviceType.TABLET
    return DeviceType.DESKTOP


def is_mobile(width: float) -> bool:
    return get_device_type(width) is DeviceType.MOBILE


def is_tablet(width: float) -> bool:
    return get_device_type(width) is DeviceType.TABLET


def is_desktop(width: float) -> bool:
    return get_device_type(width) is DeviceType.DESKTOP


def responsive_value(
    width: float,
    mobile: T,
    tablet: Optional[T] = None,
    desktop: Optional[T] = None,
) -> T:
    """
    Pick a value for the device class of ``width``.

    Missing values fall back to the next smaller device:
    desktop -> tablet -> mobile.

    Example:
        columns = responsive_value(width, mobile=1, desktop=4)
    """
    device = get_device_type(width)
    if device is DeviceType.DESKTOP:
        if desktop is not None:
            return desktop
        return tablet if tablet is not None else mobile
    if device is DeviceType.TABLET:
        return tablet if tablet is not None else mobile
    return mobile


def get_columns(width: float, mobile: int = 1, tablet: int = 2, desktop: int = 3) -> int:
    """Grid column count for the device class."""
    return responsive_value(width, mobile, tablet, desktop)


def get_padding(width: float) -> EdgeInsets:
    """Page padding: LG on mobile, XL on tablet, XXL on desktop."""
    size = responsive_value(width, Spacing.LG, Spacing.XL, Spacing.XXL)
    return EdgeInsets.all(size)


def get_vertical_gap(width: float) -> float:
    """Vertical gap between stacked sections."""
    return float(responsive_value(width, Spacing.MD, Spacing.LG, Spacing.XL))
