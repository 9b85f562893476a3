"""
Configuration management for design-consts.
Handles showcase preferences, responsive breakpoints and persistence.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from design_consts.font_sizes import all_preset_names
from design_consts.responsive import (
    DEFAULT_LARGEST_SCREEN_SIZE,
    DEFAULT_SMALLEST_SCREEN_SIZE,
    ConfigurationError,
    validate_screen_range,
)

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """
    Get the application config directory.

    Returns:
        Path to the config directory (~/.design_consts/)
    """
    config_dir = Path.home() / ".design_consts"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


class Config:
    """
    Application configuration with JSON persistence.

    Key ideas:
    - Settings are grouped in sections ("ui", "responsive", ...).
    - Every setter persists immediately.
    - The backing store is a JSON file on disk (user config file).
    """

    # NOTE: This structure is treated as immutable. Always use
    # _default_config_deepcopy() when you need a fresh copy of defaults.
    DEFAULT_CONFIG: Dict[str, Any] = {
        "ui": {
            "window_width": 1200,
            "window_height": 800,
            "last_screen": "overview",
        },
        "responsive": {
            # Widths between which responsive fonts interpolate
            "smallest_screen_size": DEFAULT_SMALLEST_SCREEN_SIZE,
            "largest_screen_size": DEFAULT_LARGEST_SCREEN_SIZE,
        },
        "typography": {
            "font_preset": "normal",
        },
        "accessibility": {
            "font_scale": 1.0,  # Font scaling factor (0.8 to 1.5)
            "reduce_animations": False,  # Reduce motion for accessibility
        },
    }

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Optional path to config JSON file. When omitted,
                         the default path under ~/.design_consts/config.json
                         is used.
        """
        self.config_file: Path = self._resolve_config_path(config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        self.data: Dict[str, Any] = self._load()
        logger.info(f"Config loaded from {self.config_file}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_config_path(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return config_file
        return get_config_dir() / "config.json"

    def _load(self) -> Dict[str, Any]:
        """Load configuration from JSON file, merging with defaults."""
        if self.config_file.exists():
            try:
                with self.config_file.open("r", encoding="utf-8") as f:
                    raw = json.load(f)

                merged = self._merge_with_defaults(raw)
                logger.info("Configuration loaded successfully")
                return merged
            except (OSError, ValueError) as exc:
                logger.error(f"Failed to load config: {exc}. Using defaults.")
                return self._default_config_deepcopy()
        else:
            logger.info("No config file found, using defaults")
            return self._default_config_deepcopy()

    @classmethod
    def _default_config_deepcopy(cls) -> Dict[str, Any]:
        """Return a deep copy of DEFAULT_CONFIG."""
        return copy.deepcopy(cls.DEFAULT_CONFIG)

    def _merge_with_defaults(self, user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge user config with defaults to handle new keys.

        Nested section dictionaries are merged so new keys under e.g. "ui"
        appear without discarding user-provided values.
        """
        merged = self._default_config_deepcopy()

        for key, value in user_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key].update(value)
            else:
                merged[key] = value

        return merged

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Persist the current configuration to the config file."""
        try:
            with self.config_file.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            logger.info("Configuration saved")
        except OSError as exc:
            logger.error(f"Failed to save config: {exc}")

    def reset_to_defaults(self) -> None:
        """Discard all user settings and persist the defaults."""
        self.data = self._default_config_deepcopy()
        self.save()

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------

    @property
    def window_size(self) -> tuple[int, int]:
        """Get window size as (width, height)."""
        return (
            self.data["ui"].get("window_width", 1200),
            self.data["ui"].get("window_height", 800),
        )

    @window_size.setter
    def window_size(self, value: tuple[int, int]) -> None:
        """Set window size and persist."""
        width, height = value
        self.data["ui"]["window_width"] = int(width)
        self.data["ui"]["window_height"] = int(height)
        self.save()

    @property
    def last_screen(self) -> str:
        """Key of the showcase screen that was open last."""
        return self.data["ui"].get("last_screen", "overview")

    @last_screen.setter
    def last_screen(self, value: str) -> None:
        self.data["ui"]["last_screen"] = str(value)
        self.save()

    # ------------------------------------------------------------------
    # Responsive breakpoints
    # ------------------------------------------------------------------

    @property
    def screen_range(self) -> tuple[float, float]:
        """Get (smallest_screen_size, largest_screen_size) for font interpolation."""
        section = self.data.get("responsive", {})
        return (
            float(section.get("smallest_screen_size", DEFAULT_SMALLEST_SCREEN_SIZE)),
            float(section.get("largest_screen_size", DEFAULT_LARGEST_SCREEN_SIZE)),
        )

    @screen_range.setter
    def screen_range(self, value: tuple[float, float]) -> None:
        """
        Set the interpolation range and persist.

        Raises:
            ConfigurationError: If the range is empty, inverted or not finite
        """
        smallest, largest = float(value[0]), float(value[1])
        validate_screen_range(smallest, largest)
        if largest < smallest:
            raise ConfigurationError(smallest, largest)
        section = self.data.setdefault("responsive", {})
        section["smallest_screen_size"] = smallest
        section["largest_screen_size"] = largest
        self.save()

    # ------------------------------------------------------------------
    # Typography
    # ------------------------------------------------------------------

    @property
    def font_preset(self) -> str:
        """Name of the font-size preset used by the showcase."""
        name = self.data.get("typography", {}).get("font_preset", "normal")
        if name not in all_preset_names():
            logger.warning(f"Unknown font preset '{name}', using 'normal'")
            return "normal"
        return name

    @font_preset.setter
    def font_preset(self, value: str) -> None:
        """Set the font preset; unknown names fall back to 'normal'."""
        if value not in all_preset_names():
            value = "normal"
        self.data.setdefault("typography", {})["font_preset"] = value
        self.save()

    # ------------------------------------------------------------------
    # Accessibility
    # ------------------------------------------------------------------

    @property
    def font_scale(self) -> float:
        """Font scaling factor (0.8 to 1.5)."""
        return self.data.get("accessibility", {}).get("font_scale", 1.0)

    @font_scale.setter
    def font_scale(self, value: float) -> None:
        """Set font scale with guardrails (0.8 to 1.5)."""
        self.data.setdefault("accessibility", {})["font_scale"] = max(0.8, min(1.5, float(value)))
        self.save()

    @property
    def reduce_animations(self) -> bool:
        """Whether to reduce animations for accessibility."""
        return self.data.get("accessibility", {}).get("reduce_animations", False)

    @reduce_animations.setter
    def reduce_animations(self, value: bool) -> None:
        """Set reduce animations preference."""
        self.data.setdefault("accessibility", {})["reduce_animations"] = bool(value)
        self.save()
