"""Tests for showcase_qt.main_window.ShowcaseWindow."""

import pytest

from design_consts.font_sizes import DEFAULT_FONT_SIZES
from design_consts.responsive import compute_font_size
from showcase_qt.main_window import ShowcaseWindow
from showcase_qt.responsive import ResponsiveLabel
from showcase_qt.screens import SCREEN_CLASSES, ScreenType


@pytest.fixture
def window(qtbot, temp_config):
    win = ShowcaseWindow(temp_config)
    qtbot.addWidget(win)
    return win


class TestShowcaseWindowInit:
    def test_builds_every_screen(self, window):
        assert window.stack.count() == len(ScreenType)
        assert [type(s) for s in window.controller.screens()] == list(SCREEN_CLASSES.values())

    def test_starts_on_overview(self, window):
        assert window.controller.current_screen is ScreenType.OVERVIEW
        assert window.navigation.button(ScreenType.OVERVIEW).isChecked()

    def test_uses_config_window_size(self, window):
        assert (window.width(), window.height()) == (1200, 800)

    def test_header_text(self, window):
        assert window.title_label.text() == "Consts"
        assert window.subtitle_label.text() == "Design System Demo"

    def test_restores_last_screen(self, qtbot, temp_config):
        temp_config.last_screen = "radius"

        win = ShowcaseWindow(temp_config)
        qtbot.addWidget(win)

        assert win.controller.current_screen is ScreenType.RADIUS
        assert win.navigation.button(ScreenType.RADIUS).isChecked()


class TestNavigation:
    def test_show_screen_persists_choice(self, window, temp_config):
        assert window.show_screen(ScreenType.FONTS.value)

        assert window.stack.currentIndex() == ScreenType.FONTS.value
        assert temp_config.last_screen == "fonts"
        assert window.statusBar().currentMessage() == "Fonts"

    def test_navigation_click_switches(self, window):
        window.navigation.button(ScreenType.SIZES).click()

        assert window.controller.current_screen is ScreenType.SIZES

    def test_screen_status_reaches_status_bar(self, window):
        fonts = window.controller.get_screen(ScreenType.FONTS)

        fonts.select(16, fonts._factor)

        assert window.statusBar().currentMessage().startswith("Font preset: large")


class TestResponsiveLayout:
    @pytest.mark.parametrize("width", [400, 900, 1600])
    def test_refresh_layout_resizes_header(self, window, width):
        window.refresh_layout(width)

        expected = compute_font_size(width, DEFAULT_FONT_SIZES.body, DEFAULT_FONT_SIZES.body_large)
        assert window.title_label.current_size == pytest.approx(expected)

    def test_refresh_layout_reaches_every_label(self, window):
        window.refresh_layout(300)

        labels = window.findChildren(ResponsiveLabel)
        assert labels
        assert all(label.current_size == label.request.smallest for label in labels)

    def test_resize_event_updates_fonts(self, qtbot, window):
        window.show()
        window.resize(1000, 600)

        def fonts_follow_width():
            expected = compute_font_size(
                window.width(), DEFAULT_FONT_SIZES.body, DEFAULT_FONT_SIZES.body_large,
            )
            return window.title_label.current_size == pytest.approx(expected)

        qtbot.waitUntil(fonts_follow_width, timeout=2000)

    def test_refresh_layout_updates_screen_readout(self, window):
        window.refresh_layout(900)

        overview = window.controller.get_screen(ScreenType.OVERVIEW)
        assert "900px (desktop)" in overview.readout_label.text()


class TestClose:
    def test_close_saves_window_size(self, window, temp_config):
        window.show()
        window.resize(1000, 700)

        window.close()

        assert temp_config.window_size == (window.width(), window.height())


class TestConfiguredTypography:
    def test_screen_range_from_config_drives_header(self, qtbot, temp_config):
        temp_config.screen_range = (320, 1920)
        win = ShowcaseWindow(temp_config)
        qtbot.addWidget(win)

        win.refresh_layout(900)

        body, body_large = DEFAULT_FONT_SIZES.body, DEFAULT_FONT_SIZES.body_large
        expected = compute_font_size(900, body, body_large, 320, 1920)
        assert expected != compute_font_size(900, body, body_large)
        assert win.title_label.current_size == pytest.approx(expected)
        assert win.title_label.request.smallest_screen_size == 320

    def test_screen_range_reaches_overview_readout(self, qtbot, temp_config):
        temp_config.screen_range = (320, 1920)
        win = ShowcaseWindow(temp_config)
        qtbot.addWidget(win)

        win.refresh_layout(1120)

        overview = win.controller.get_screen(ScreenType.OVERVIEW)
        assert overview.readout_label.text().endswith("-> 23.00px")

    def test_font_scale_from_config_multiplies_sizes(self, qtbot, temp_config):
        temp_config.font_scale = 1.5
        win = ShowcaseWindow(temp_config)
        qtbot.addWidget(win)

        win.refresh_layout(200)

        assert win.title_label.current_size == pytest.approx(DEFAULT_FONT_SIZES.body * 1.5)
        assert win.title_label.font().pixelSize() == round(DEFAULT_FONT_SIZES.body * 1.5)


class TestAdaptiveNavigation:
    def test_narrow_window_collapses_navigation(self, window):
        window.refresh_layout(480)

        assert window.navigation.is_compact
        assert not window.navigation.menu_button.isHidden()
        assert window.navigation.button(ScreenType.FONTS).isHidden()

    def test_wide_window_restores_pills(self, window):
        window.refresh_layout(480)
        window.refresh_layout(1200)

        assert not window.navigation.is_compact
        assert window.navigation.menu_button.isHidden()

    def test_menu_entry_switches_screen(self, window, temp_config):
        window.refresh_layout(480)

        window.navigation.action(ScreenType.RADIUS).trigger()

        assert window.controller.current_screen is ScreenType.RADIUS
        assert window.navigation.menu_button.text() == "Radius"
        assert temp_config.last_screen == "radius"
