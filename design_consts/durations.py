"""
Durations - Animation, transition and delay timings.

All values are milliseconds so they can be handed straight to
QPropertyAnimation.setDuration or QTimer.start.

Timing philosophy:
    50-150ms: Immediate feedback, never blocks the UI
    200-400ms: Standard transitions
    500-800ms: Important state changes
    1000-3000ms: Loading, notifications, special effects

Usage:
    from design_consts.durations import Duration, FeatureDuration

    animation.setDuration(get_animation_duration(Duration.MD))
    self._debounce.start(FeatureDuration.SEARCH_DEBOUNCE)
"""

from __future__ import annotations

from datetime import timedelta
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from design_consts.config import Config


class Duration(IntEnum):
    """
    Base duration scale (milliseconds).

    Guidelines:
        XXS (50ms): Micro feedback (button press)
        XS (100ms): Hover states
        SM (150ms): Page transitions
        SMD..MDS (200-250ms): Ripples, small reveals
        MD (300ms): Default for most transitions
        MDL..XL (350-500ms): Expanding content, tooltips
        XXL..HUGE (600-1000ms): Emphasized motion
        MASSIVE..MEGA (1500-3000ms): Shimmer loops, notifications
    """

    XXS = 50
    XS = 100
    SM = 150
    SMD = 200
    MDS = 250
    MD = 300
    MDL = 350
    LG = 400
    XL = 500
    XXL = 600
    XXXL = 800
    HUGE = 1000
    MASSIVE = 1500
    GIANT = 2000
    MEGA = 3000


class FeatureDuration(IntEnum):
    """
    Durations for specific interaction patterns.

    QUICK_DEBOUNCE/RIPPLE_EFFECT and SHIMMER_ANIMATION/API_SIMULATED_DELAY
    share a value, so the second name of each pair is an enum alias.
    """

    SEARCH_DEBOUNCE = Duration.MD
    FILTER_DEBOUNCE = Duration.LG
    QUICK_DEBOUNCE = Duration.SMD
    TOOLTIP_DELAY = Duration.XL
    SNACKBAR = Duration.GIANT
    PAGE_TRANSITION = Duration.SM
    HOVER_EFFECT = Duration.XS
    RIPPLE_EFFECT = Duration.SMD
    SHIMMER_ANIMATION = Duration.MASSIVE
    API_SIMULATED_DELAY = Duration.MASSIVE


def to_timedelta(duration: int) -> timedelta:
    """Convert a millisecond token to a timedelta."""
    return timedelta(milliseconds=int(duration))


def should_reduce_motion(config: Optional["Config"] = None) -> bool:
    """
    Check if reduced motion is preferred.

    Args:
        config: Config to read; a default Config is loaded when omitted

    Returns:
        True if animations should be minimized/disabled
    """
    if config is None:
        from design_consts.config import Config
        config = Config()
    return bool(config.reduce_animations)


def get_animation_duration(
    duration: int = Duration.MD,
    reduce_motion: Optional[bool] = None,
) -> int:
    """
    Get animation duration with reduced motion support.

    Args:
        duration: Requested duration in ms
        reduce_motion: Override reduced motion preference (optional)

    Returns:
        Duration in milliseconds (0 if reduced motion enabled)
    """
    if reduce_motion is None:
        reduce_motion = should_reduce_motion()

    if reduce_motion:
        return 0

    return int(duration)
