"""
Design Consts - Centralized design tokens and responsive helpers.

This package provides the constants behind a consistent UI: one size
ladder shared by spacing and radius, animation timings, modular font
scales, and a width-driven font interpolation helper.

Modules:
    sizes: Base size scale plus icon, avatar, breakpoint and effect tables
    spacing: Spacing scale and edge insets
    radius: Border radius scale and per-corner radii
    durations: Animation and delay timings
    font_sizes: Modular font-size scales and presets
    responsive: Font interpolation and device classification
"""

from design_consts.sizes import (
    Size,
    IconSize,
    AvatarSize,
    Breakpoint,
    Elevation,
    Opacity,
    AspectRatio,
    get_size,
)
from design_consts.spacing import (
    Spacing,
    EdgeInsets,
    padding,
    horizontal,
    vertical,
    gap,
)
from design_consts.radius import (
    Radius,
    CornerRadii,
    border_radius,
)
from design_consts.durations import (
    Duration,
    FeatureDuration,
    get_animation_duration,
    should_reduce_motion,
)
from design_consts.responsive import (
    ConfigurationError,
    FontScaleRequest,
    DeviceType,
    compute_font_size,
    get_device_type,
    responsive_value,
)
from design_consts.font_sizes import (
    FontSizes,
    ScaleFactor,
    DEFAULT_FONT_SIZES,
    get_preset,
)

__all__ = [
    # Sizes
    "Size",
    "IconSize",
    "AvatarSize",
    "Breakpoint",
    "Elevation",
    "Opacity",
    "AspectRatio",
    "get_size",
    # Spacing
    "Spacing",
    "EdgeInsets",
    "padding",
    "horizontal",
    "vertical",
    "gap",
    # Radius
    "Radius",
    "CornerRadii",
    "border_radius",
    # Durations
    "Duration",
    "FeatureDuration",
    "get_animation_duration",
    "should_reduce_motion",
    # Responsive
    "ConfigurationError",
    "FontScaleRequest",
    "DeviceType",
    "compute_font_size",
    "get_device_type",
    "responsive_value",
    # Typography
    "FontSizes",
    "ScaleFactor",
    "DEFAULT_FONT_SIZES",
    "get_preset",
]

__version__ = "1.0.0"
