"""Tests for the showcase screens, navigation and screen controller."""

import pytest
from PyQt6.QtWidgets import QStackedWidget

from design_consts.font_sizes import DEVICE_PRESETS, PRESETS, ScaleFactor
from design_consts.responsive import compute_font_size
from design_consts.spacing import Spacing
from showcase_qt.screens import (
    SCREEN_CLASSES,
    AnimationsScreen,
    BaseScreen,
    FontsScreen,
    OverviewScreen,
    ScreenController,
    ScreenType,
    SpacingScreen,
)
from showcase_qt.screens.animations_screen import COLLAPSED_WIDTH, EXPANDED_WIDTH
from showcase_qt.screens.fonts_screen import preset_name
from showcase_qt.widgets.navigation_bar import NavigationBar


# =============================================================================
# ScreenType / ScreenController
# =============================================================================


class TestScreenType:
    def test_order(self):
        assert [t.label for t in ScreenType] == [
            "Overview", "Spacing", "Radius", "Sizes", "Fonts", "Animations",
        ]

    def test_key_round_trip(self):
        for screen_type in ScreenType:
            assert ScreenType.from_key(screen_type.key) is screen_type

    def test_unknown_key_is_overview(self):
        assert ScreenType.from_key("settings") is ScreenType.OVERVIEW


class TestScreenController:
    @pytest.fixture
    def controller(self, qtbot, temp_config):
        stack = QStackedWidget()
        qtbot.addWidget(stack)
        controller = ScreenController(stack)
        controller.stack = stack
        for screen_type, screen_class in SCREEN_CLASSES.items():
            controller.register_screen(screen_type, screen_class(temp_config))
        return controller

    def test_registers_at_type_index(self, controller):
        assert controller.stack.count() == len(ScreenType)
        for screen_type in ScreenType:
            assert controller.stack.widget(screen_type.value) is controller.get_screen(screen_type)

    def test_switch_to_emits(self, qtbot, controller):
        with qtbot.waitSignal(controller.screen_changed, timeout=1000) as blocker:
            assert controller.switch_to(ScreenType.FONTS)

        assert blocker.args == [ScreenType.FONTS.value]
        assert controller.current_screen is ScreenType.FONTS
        assert controller.stack.currentIndex() == ScreenType.FONTS.value

    def test_switch_to_unregistered_fails(self, qtbot):
        stack = QStackedWidget()
        qtbot.addWidget(stack)
        controller = ScreenController(stack)

        assert controller.switch_to(ScreenType.RADIUS) is False
        assert controller.current_screen is None

    def test_lifecycle_callbacks(self, controller):
        calls = []
        overview = controller.get_screen(ScreenType.OVERVIEW)
        spacing = controller.get_screen(ScreenType.SPACING)
        overview.on_leave = lambda: calls.append("leave overview")
        spacing.on_enter = lambda: calls.append("enter spacing")

        controller.switch_to(ScreenType.OVERVIEW)
        controller.switch_to(ScreenType.SPACING)

        assert calls == ["leave overview", "enter spacing"]

    def test_screens_in_order(self, controller):
        assert [type(s) for s in controller.screens()] == list(SCREEN_CLASSES.values())


class TestNavigationBar:
    @pytest.fixture
    def nav(self, qtbot):
        nav = NavigationBar()
        qtbot.addWidget(nav)
        return nav

    def test_button_per_screen(self, nav):
        for screen_type in ScreenType:
            assert nav.button(screen_type).text() == screen_type.label

    def test_overview_checked_by_default(self, nav):
        assert nav.button(ScreenType.OVERVIEW).isChecked()

    def test_click_emits_screen(self, qtbot, nav):
        with qtbot.waitSignal(nav.screen_selected, timeout=1000) as blocker:
            nav.button(ScreenType.RADIUS).click()

        assert blocker.args == [ScreenType.RADIUS.value]

    def test_set_active_screen(self, nav):
        nav.set_active_screen(ScreenType.SIZES)

        assert nav.button(ScreenType.SIZES).isChecked()
        assert not nav.button(ScreenType.OVERVIEW).isChecked()

    def test_compact_mode(self, nav):
        nav.update_for_width(400)

        assert nav.is_compact
        assert not nav.menu_button.isHidden()
        assert all(nav.button(t).isHidden() for t in ScreenType)

    def test_menu_action_emits_screen(self, qtbot, nav):
        nav.update_for_width(400)

        with qtbot.waitSignal(nav.screen_selected, timeout=1000) as blocker:
            nav.action(ScreenType.SIZES).trigger()

        assert blocker.args == [ScreenType.SIZES.value]

    def test_active_screen_checks_menu_entry(self, nav):
        nav.set_active_screen(ScreenType.ANIMATIONS)

        assert nav.action(ScreenType.ANIMATIONS).isChecked()
        assert not nav.action(ScreenType.OVERVIEW).isChecked()
        assert nav.menu_button.text() == "Animations"


# =============================================================================
# Screens
# =============================================================================


class TestBaseScreen:
    @pytest.mark.parametrize("screen_class", list(SCREEN_CLASSES.values()))
    def test_every_screen_builds(self, qtbot, temp_config, screen_class):
        screen = screen_class(temp_config)
        qtbot.addWidget(screen)

        assert isinstance(screen, BaseScreen)
        assert screen.cards
        assert screen.section_title.title_label.text() == screen.TITLE
        assert screen.screen_name == screen.TITLE

    def test_keys_match_screen_types(self):
        for screen_type, screen_class in SCREEN_CLASSES.items():
            assert screen_class.KEY == screen_type.key

    def test_status_callback(self, qtbot, temp_config):
        messages = []
        screen = OverviewScreen(temp_config, on_status=messages.append)
        qtbot.addWidget(screen)

        screen.set_status("hello")

        assert messages == ["hello"]

    @pytest.mark.parametrize(
        "width,margin,spacing",
        [(400, 16, 12), (700, 20, 16), (1300, 24, 20)],
    )
    def test_relayout_padding(self, qtbot, temp_config, width, margin, spacing):
        screen = SpacingScreen(temp_config)
        qtbot.addWidget(screen)

        screen.relayout(width)

        margins = screen._column.contentsMargins()
        assert (margins.left(), margins.top()) == (margin, margin)
        assert screen._column.spacing() == spacing


class TestOverviewScreen:
    def test_chips(self, qtbot, temp_config):
        screen = OverviewScreen(temp_config)
        qtbot.addWidget(screen)

        names = [chip.name for chip in screen.table_chips]
        assert names == ["Sizes", "Spacing", "Radius", "Durations", "Font presets"]

    def test_readout(self, qtbot, temp_config):
        screen = OverviewScreen(temp_config)
        qtbot.addWidget(screen)

        screen.relayout(900)

        assert screen.readout_label.text() == "Window 900px (desktop) -> 23.00px"


class TestSpacingScreen:
    def test_bar_per_token(self, qtbot, temp_config):
        screen = SpacingScreen(temp_config)
        qtbot.addWidget(screen)

        assert set(screen.bars) == {token.name for token in Spacing}
        assert screen.bars["XXL"].width() == 24


class TestFontsScreen:
    @pytest.fixture
    def screen(self, qtbot, temp_config):
        screen = FontsScreen(temp_config)
        qtbot.addWidget(screen)
        return screen

    def test_preset_name(self):
        assert preset_name(12, ScaleFactor.SMALL) == "small"
        assert preset_name(18, ScaleFactor.EXTRA_LARGE) == "extra_large_extra_large_scale"

    def test_every_combination_is_a_preset(self):
        for size in (12, 14, 16, 18, 20):
            for factor in ScaleFactor:
                assert preset_name(size, factor) in PRESETS

    def test_initial_selection_from_config(self, screen):
        # default preset "normal" is 14px with the small factor
        assert screen.current_preset_name() == "normal"
        assert screen.base_buttons.checkedId() == 14

    def test_select_updates_preview_and_config(self, qtbot, screen, temp_config):
        with qtbot.waitSignal(screen.status_message, timeout=1000) as blocker:
            screen.select(20, ScaleFactor.NORMAL)

        assert blocker.args == ["Font preset: huge_normal_scale"]
        assert temp_config.font_preset == "huge_normal_scale"
        assert screen.font_sizes is PRESETS["huge_normal_scale"]
        assert screen.preview_labels["body_small"].font().pixelSize() == 20
        assert screen.value_labels["body"].text() == f"{20 * ScaleFactor.NORMAL.value:.1f}px"

    def test_clicking_base_button(self, screen, temp_config):
        screen.base_buttons.button(16).click()

        assert screen.current_preset_name().startswith("large")
        assert temp_config.font_preset == screen.current_preset_name()

    def test_restores_saved_preset(self, qtbot, temp_config):
        temp_config.font_preset = "small_large_scale"

        screen = FontsScreen(temp_config)
        qtbot.addWidget(screen)

        assert screen.current_preset_name() == "small_large_scale"

    def test_relayout_interpolates_heading(self, screen):
        screen.relayout(900)

        mobile = DEVICE_PRESETS["mobile_compact"]
        desktop = DEVICE_PRESETS["desktop"]
        expected = compute_font_size(900, mobile.h1, desktop.h1)
        assert screen.responsive_label.font().pixelSize() == round(expected)


class TestAnimationsScreen:
    def test_expand_uses_medium_duration(self, qtbot, temp_config):
        screen = AnimationsScreen(temp_config)
        qtbot.addWidget(screen)

        anim = screen.toggle_expand()

        assert anim.duration() == 300
        assert anim.startValue() == COLLAPSED_WIDTH
        assert anim.endValue() == EXPANDED_WIDTH
        assert screen.expand_button.text() == "Collapse"

    def test_reduced_motion_jumps_to_end(self, qtbot, temp_config):
        temp_config.reduce_animations = True
        screen = AnimationsScreen(temp_config)
        qtbot.addWidget(screen)

        anim = screen.toggle_expand()

        assert anim.duration() == 0
        qtbot.waitUntil(lambda: screen.expand_box.maximumWidth() == EXPANDED_WIDTH, timeout=1000)

    def test_fade_toggle(self, qtbot, temp_config):
        screen = AnimationsScreen(temp_config)
        qtbot.addWidget(screen)

        anim = screen.toggle_fade()

        assert anim.duration() == 500
        assert anim.endValue() == 0.0
        assert screen.fade_button.text() == "Show"

        anim = screen.toggle_fade()

        assert anim.endValue() == 1.0
        assert screen.fade_button.text() == "Hide"
