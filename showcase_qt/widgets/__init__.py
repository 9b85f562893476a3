"""Reusable widgets for the showcase screens."""

from showcase_qt.widgets.demo_card import DemoCard
from showcase_qt.widgets.info_chip import InfoChip
from showcase_qt.widgets.section_title import SectionTitle

__all__ = ["DemoCard", "InfoChip", "SectionTitle"]
