"""ThemePrefs - appearance settings: theme, accent colour and UI scale."""

__version__ = "0.1.0"

from .config import (
    SettingsRecord, ThemeChoice, AccentColor, PALETTE, SCALE_PRESETS,
    storage_path, theme_labels
)
from .storage import (
    SettingsError, SettingsIOError, SettingsDecodeError, load_settings, save_settings
)
from .preview import PreviewVariant, PreviewBinding, for_theme
from .store import SettingsStore, SelectionObserverSet, PaletteEntry
from .utils import setup_logging, get_logger

__all__ = [
    "SettingsRecord", "ThemeChoice", "AccentColor", "PALETTE", "SCALE_PRESETS",
    "storage_path", "theme_labels", "SettingsError", "SettingsIOError",
    "SettingsDecodeError", "load_settings", "save_settings", "PreviewVariant",
    "PreviewBinding", "for_theme", "SettingsStore", "SelectionObserverSet",
    "PaletteEntry", "setup_logging", "get_logger"
]
