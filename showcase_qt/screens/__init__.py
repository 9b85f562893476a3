"""Showcase screens, one per token family."""

from showcase_qt.screens.animations_screen import AnimationsScreen
from showcase_qt.screens.base_screen import BaseScreen
from showcase_qt.screens.fonts_screen import FontsScreen
from showcase_qt.screens.overview_screen import OverviewScreen
from showcase_qt.screens.radius_screen import RadiusScreen
from showcase_qt.screens.screen_controller import ScreenController, ScreenType
from showcase_qt.screens.sizes_screen import SizesScreen
from showcase_qt.screens.spacing_screen import SpacingScreen

SCREEN_CLASSES = {
    ScreenType.OVERVIEW: OverviewScreen,
    ScreenType.SPACING: SpacingScreen,
    ScreenType.RADIUS: RadiusScreen,
    ScreenType.SIZES: SizesScreen,
    ScreenType.FONTS: FontsScreen,
    ScreenType.ANIMATIONS: AnimationsScreen,
}

__all__ = [
    "AnimationsScreen",
    "BaseScreen",
    "FontsScreen",
    "OverviewScreen",
    "RadiusScreen",
    "ScreenController",
    "ScreenType",
    "SizesScreen",
    "SpacingScreen",
    "SCREEN_CLASSES",
]
