"""Configuration model for ThemePrefs."""

import math
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

# Storage location
APP_DIR_NAME = "themeprefs"
SETTINGS_FILE_NAME = "settings.json"
CONFIG_DIR_ENV = "THEMEPREFS_CONFIG_DIR"
SCALE_ENV = "THEMEPREFS_SCALE"

# Permissions for the settings directory and file
DIR_MODE = 0o700
FILE_MODE = 0o644

DEFAULT_SCALE = 1.0

# Platforms that can report the desktop theme
SYSTEM_THEME_PLATFORMS = ("darwin", "win32")
SYSTEM_THEME_LABEL = "system default"


def hex2rgb(h: str):
    h = h.strip().lstrip("#")
    if len(h) == 3:
        h = "".join([c*2 for c in h])
    return tuple(int(h[i:i+2], 16) for i in (0, 2, 4))


def rgb2hex(rgb) -> str:
    return "#%02x%02x%02x" % tuple(rgb[:3])


def blend(a, b, t: float):
    return tuple(int(a[i]*(1-t) + b[i]*t) for i in range(3))


class ThemeChoice(Enum):
    """Theme names as stored in the settings file."""
    DARK = "dark"
    LIGHT = "light"
    SYSTEM = ""  # follow the desktop theme where supported

    @property
    def label(self) -> str:
        if self is ThemeChoice.SYSTEM:
            return SYSTEM_THEME_LABEL
        return self.value

    @classmethod
    def parse(cls, name) -> "ThemeChoice":
        """Resolve a theme name or display label; raises ValueError if unknown."""
        if isinstance(name, cls):
            return name
        if name == SYSTEM_THEME_LABEL:
            return cls.SYSTEM
        return cls(name)


class AccentColor(Enum):
    """Names of the fixed accent palette, in display order."""
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    GREY = "grey"

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return PALETTE_RGBA[self]

    @property
    def hex(self) -> str:
        return rgb2hex(self.rgba)

    @classmethod
    def parse(cls, name) -> "AccentColor":
        if isinstance(name, cls):
            return name
        return cls(name)


PALETTE_RGBA = {
    AccentColor.BLUE: (0x21, 0x96, 0xf3, 0xff),
    AccentColor.GREEN: (0x8b, 0xc3, 0x4a, 0xff),
    AccentColor.YELLOW: (0xff, 0xeb, 0x3b, 0xff),
    AccentColor.ORANGE: (0xff, 0x98, 0x00, 0xff),
    AccentColor.RED: (0xf4, 0x43, 0x36, 0xff),
    AccentColor.GREY: (0x9e, 0x9e, 0x9e, 0xff),
}

# Display order of the swatch grid
PALETTE: List[AccentColor] = list(AccentColor)
DEFAULT_ACCENT = PALETTE[0]

# (label, factor) pairs offered by the scale group
SCALE_PRESETS: List[Tuple[str, float]] = [
    ("Tiny", 0.5),
    ("Small", 0.8),
    ("Normal", 1.0),
    ("Large", 1.3),
    ("Larger", 1.8),
]


def supports_system_theme(platform: Optional[str] = None) -> bool:
    platform = sys.platform if platform is None else platform
    return platform in SYSTEM_THEME_PLATFORMS


def theme_labels(platform: Optional[str] = None) -> List[str]:
    """Labels for the theme selector on the given platform."""
    labels = [ThemeChoice.DARK.label, ThemeChoice.LIGHT.label]
    if supports_system_theme(platform):
        labels.append(SYSTEM_THEME_LABEL)
    return labels


def display_label(theme: ThemeChoice, platform: Optional[str] = None) -> str:
    """Label the theme selector should show; empty means nothing selected."""
    if theme is ThemeChoice.SYSTEM and not supports_system_theme(platform):
        return ""
    return theme.label


def user_config_dir(platform: Optional[str] = None) -> str:
    platform = sys.platform if platform is None else platform
    home = os.path.expanduser("~")
    if platform == "win32":
        return os.environ.get("APPDATA") or os.path.join(home, "AppData", "Roaming")
    if platform == "darwin":
        return os.path.join(home, "Library", "Application Support")
    return os.environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")


def storage_path() -> str:
    """Location of the settings file for this user."""
    root = os.environ.get(CONFIG_DIR_ENV)
    if not root:
        root = os.path.join(user_config_dir(), APP_DIR_NAME)
    return os.path.join(root, SETTINGS_FILE_NAME)


def default_scale() -> float:
    """Scale used when the settings hold no explicit value."""
    raw = os.environ.get(SCALE_ENV, "")
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_SCALE
    return value if math.isfinite(value) and value > 0 else DEFAULT_SCALE


@dataclass
class SettingsRecord:
    theme: ThemeChoice = ThemeChoice.SYSTEM
    primary_color: Optional[AccentColor] = None  # None until the user picks one
    scale: float = 0.0                           # 0 = platform default

    def to_json(self) -> dict:
        return {
            "themeName": self.theme.value,
            "primaryColor": self.primary_color.value if self.primary_color else "",
            "scale": self.scale,
        }

    @staticmethod
    def from_json(d: dict) -> "SettingsRecord":
        """Build a record from decoded JSON; raises ValueError on bad values."""
        rec = SettingsRecord()
        theme = d.get("themeName", rec.theme.value)
        if not isinstance(theme, str):
            raise ValueError(f"themeName must be a string, got {theme!r}")
        rec.theme = ThemeChoice(theme)
        color = d.get("primaryColor", "")
        if not isinstance(color, str):
            raise ValueError(f"primaryColor must be a string, got {color!r}")
        rec.primary_color = AccentColor(color) if color else None
        scale = d.get("scale", rec.scale)
        if scale is None:
            scale = 0.0
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            raise ValueError(f"scale must be a number, got {scale!r}")
        try:
            scale = float(scale)
        except OverflowError as e:
            raise ValueError(f"scale is out of range: {e}") from e
        if not math.isfinite(scale) or scale < 0:
            raise ValueError(f"scale must be a finite, non-negative number, got {scale!r}")
        rec.scale = scale
        return rec
