"""
Animation System - Qt animations driven by duration tokens.

Usage:
    from showcase_qt.animations import create_property_animation

    animation = create_property_animation(
        widget, b"maximumWidth", 120, 320, duration=Duration.MD,
    )
    animation.start()

Reduced motion is honoured everywhere: durations collapse to 0 and the
animation jumps straight to its end value.
"""

from typing import Optional

from PyQt6.QtCore import (
    QEasingCurve,
    QParallelAnimationGroup,
    QPropertyAnimation,
    QSequentialAnimationGroup,
)
from PyQt6.QtWidgets import QGraphicsOpacityEffect

from design_consts.durations import Duration, get_animation_duration

EASING_CURVES = {
    "standard": QEasingCurve.Type.InOutQuad,
    "decelerate": QEasingCurve.Type.OutCubic,
    "accelerate": QEasingCurve.Type.InCubic,
    "emphasized": QEasingCurve.Type.InOutCubic,
    "linear": QEasingCurve.Type.Linear,
}


def get_easing_curve(type_name: str = "standard") -> QEasingCurve:
    """
    Get a named easing curve.

    Args:
        type_name: Curve type
            - "standard": Ease in and out, default for state changes
            - "decelerate": For entering elements
            - "accelerate": For exiting elements
            - "emphasized": For important transitions
            - "linear": Constant speed (progress indicators)

    Returns:
        QEasingCurve (standard for unknown names)
    """
    return QEasingCurve(EASING_CURVES.get(type_name, QEasingCurve.Type.InOutQuad))


def create_property_animation(
    target,
    property_name: bytes,
    start_value,
    end_value,
    duration: int = Duration.MD,
    curve: str = "standard",
    *,
    reduce_motion: Optional[bool] = None,
) -> QPropertyAnimation:
    """
    Create a configured QPropertyAnimation.

    Args:
        target: Target QObject
        property_name: Property to animate (e.g., b"geometry", b"opacity")
        start_value: Starting value
        end_value: Ending value
        duration: Duration token in ms
        curve: Easing curve name
        reduce_motion: Override reduced motion preference

    Returns:
        Configured QPropertyAnimation
    """
    animation = QPropertyAnimation(target, property_name)
    ms = get_animation_duration(duration, reduce_motion=reduce_motion)

    animation.setDuration(ms)
    animation.setStartValue(start_value)
    animation.setEndValue(end_value)

    if ms > 0:
        animation.setEasingCurve(get_easing_curve(curve))

    return animation


def create_sequential_group(*animations) -> QSequentialAnimationGroup:
    """Run animations one after another."""
    group = QSequentialAnimationGroup()
    for anim in animations:
        group.addAnimation(anim)
    return group


def create_parallel_group(*animations) -> QParallelAnimationGroup:
    """Run animations simultaneously."""
    group = QParallelAnimationGroup()
    for anim in animations:
        group.addAnimation(anim)
    return group


class AnimationMixin:
    """
    Mixin class providing fade animations.

        class MyWidget(QWidget, AnimationMixin):
            def show_with_animation(self):
                self.fade_in()
    """

    def _opacity_effect(self) -> QGraphicsOpacityEffect:
        effect = self.graphicsEffect()  # type: ignore[attr-defined]
        if not isinstance(effect, QGraphicsOpacityEffect):
            effect = QGraphicsOpacityEffect(self)  # type: ignore[arg-type]
            self.setGraphicsEffect(effect)  # type: ignore[attr-defined]
        return effect

    def fade_to(
        self,
        opacity: float,
        duration: int = Duration.XL,
        *,
        reduce_motion: Optional[bool] = None,
    ) -> QPropertyAnimation:
        """Animate the widget's opacity to ``opacity``."""
        effect = self._opacity_effect()
        anim = create_property_animation(
            effect, b"opacity", effect.opacity(), opacity,
            duration, "standard", reduce_motion=reduce_motion,
        )
        anim.start()

        # Keep a reference so the animation is not garbage collected
        self._fade_animation = anim
        return anim

    def fade_in(self, duration: int = Duration.XL, *, reduce_motion: Optional[bool] = None):
        return self.fade_to(1.0, duration, reduce_motion=reduce_motion)

    def fade_out(self, duration: int = Duration.XL, *, reduce_motion: Optional[bool] = None):
        return self.fade_to(0.0, duration, reduce_motion=reduce_motion)
