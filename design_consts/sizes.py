"""
Design Tokens - Core size scale and grouped dimension tables.

The base scale is shared by spacing and radius so every dimension in the
system comes from the same ladder of values.

Usage:
    from design_consts import Size, IconSize, Breakpoint

    icon.setFixedSize(int(IconSize.LG), int(IconSize.LG))
    if width < Breakpoint.TABLET:
        ...
"""

from enum import Enum
from typing import Final, Union


class Size(float, Enum):
    """
    Base size scale (logical pixels).

    Guidelines:
        NONE..XS (0-4px): Hairlines, tight icon/label pairs
        SM..MDL (6-14px): Inner padding, gaps inside components
        LG..XXXL (16-28px): Component padding, gaps between components
        HUGE..GIANT (32-48px): Section spacing
        MEGA..COLOSSAL (56-96px): Hero areas, splash screens
    """

    NONE = 0.0
    XXS = 2.0
    XS = 4.0
    SM = 6.0
    SMD = 8.0
    MDS = 10.0
    MD = 12.0
    MDL = 14.0
    LG = 16.0
    LGX = 18.0
    XL = 20.0
    XXL = 24.0
    XXXL = 28.0
    HUGE = 32.0
    MASSIVE = 40.0
    GIANT = 48.0
    MEGA = 56.0
    ULTRA = 64.0
    EXTREME = 80.0
    COLOSSAL = 96.0


class IconSize(float, Enum):
    """Icon edge lengths."""

    XS = 12.0
    SM = 16.0
    MD = 20.0
    LG = 24.0
    XL = 32.0
    XXL = 40.0
    HUGE = 48.0


class AvatarSize(float, Enum):
    """Avatar diameters."""

    XS = 24.0
    SM = 32.0
    MD = 40.0
    LG = 48.0
    XL = 64.0
    XXL = 80.0
    HUGE = 96.0
    MASSIVE = 128.0


class Breakpoint(float, Enum):
    """
    Maximum widths for each layout class.

    Guidelines:
        MOBILE (600px): Phones, very narrow windows
        TABLET (900px): Tablets, narrow desktop windows
        DESKTOP (1200px): Standard desktop
        CONTENT (1536px): Maximum width for centered content
    """

    MOBILE = 600.0
    TABLET = 900.0
    DESKTOP = 1200.0
    CONTENT = 1536.0


class Elevation(float, Enum):
    """Shadow elevation levels."""

    NONE = 0.0
    XS = 1.0
    SM = 2.0
    MD = 4.0
    LG = 6.0
    XL = 8.0
    XXL = 12.0
    HUGE = 16.0
    MASSIVE = 24.0


class Opacity(float, Enum):
    """
    Opacity levels for overlays and state layers.

    HOVER, DISABLED, MEDIUM and HIGH follow the Material emphasis levels.
    """

    NONE = 0.0
    HOVER = 0.12
    DISABLED = 0.38
    MEDIUM = 0.54
    MEDIUM_HIGH = 0.70
    HIGH = 0.87
    FULL = 1.0


class AspectRatio(float, Enum):
    """Width / height ratios for media frames."""

    SQUARE = 1.0
    STANDARD = 4 / 3
    PHOTO = 3 / 2
    WIDE = 16 / 9
    CINEMATIC = 21 / 9


# Name -> value lookup for the base scale
SIZES: Final[dict[str, float]] = {member.name.lower(): member.value for member in Size}


def get_size(name: str, default: Union[Size, float] = Size.MD) -> float:
    """
    Look up a base size by name (case-insensitive).

    Args:
        name: Size name, e.g. "md" or "XXL"
        default: Value returned for unknown names

    Returns:
        Size in pixels

    Example:
        >>> get_size("lg")
        16.0
    """
    return SIZES.get(name.lower(), float(default))
