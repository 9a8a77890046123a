"""In-memory settings state and the observers that depend on it."""

import copy
import math
import logging
from typing import Callable, List, Optional

from .config import (
    SettingsRecord, ThemeChoice, AccentColor, DEFAULT_ACCENT,
    storage_path as default_storage_path, default_scale
)
from .preview import PreviewBinding
from .storage import SettingsError, load_settings, save_settings
from .utils import log_exception, log_runtime_event

logger = logging.getLogger(__name__)


class PaletteEntry:
    """View state of one accent swatch.

    The entry owns no selection state of its own: ``refresh`` compares its
    colour with the store's current accent. The store reference is only read.
    """

    def __init__(self, color: AccentColor, store: "SettingsStore"):
        self.color = color
        self.store = store
        self.selected = False

    @property
    def name(self) -> str:
        return self.color.value

    @property
    def rgba(self):
        return self.color.rgba

    def is_selected(self) -> bool:
        return self.selected

    def refresh(self):
        self.selected = self.color is self.store.current_accent_color()
        self.redraw()

    def redraw(self):
        """Hook for widgets; called after every refresh."""


class SelectionObserverSet:
    """Palette entries refreshed whenever the accent colour changes."""

    def __init__(self):
        self._entries: List[PaletteEntry] = []

    def register(self, entry: PaletteEntry):
        self._entries.append(entry)

    def broadcast_refresh(self):
        for entry in self._entries:
            entry.refresh()

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)


class SettingsStore:
    """Owner of the appearance settings for one settings screen.

    The record is loaded on construction. Mutations only change memory;
    ``apply`` writes the record and asks the host to re-scale the window.
    """

    def __init__(self, storage_path: Callable[[], str] = default_storage_path,
                 apply_scale: Optional[Callable[[float], None]] = None):
        self.storage_path = storage_path
        self.apply_scale = apply_scale
        self.record = SettingsRecord()
        self.selection = SelectionObserverSet()
        self.preview = PreviewBinding()
        self.load()

    # Persistence --------------------------------------------------------------
    def load(self):
        path = self.storage_path()
        try:
            self.record = load_settings(path)
            log_runtime_event("Settings loaded", f"path={path}")
        except SettingsError as e:
            self.record = SettingsRecord()
            log_exception(e, "Settings load")

    def save(self, record: Optional[SettingsRecord] = None):
        save_settings(self.storage_path(), record or self.record)

    def apply(self):
        """Persist the current record, then apply its scale to the window."""
        snapshot = copy.copy(self.record)
        try:
            self.save(snapshot)
            log_runtime_event("Settings applied", f"scale={snapshot.scale}")
        except SettingsError as e:
            log_exception(e, "Settings save")
        if self.apply_scale is not None:
            self.apply_scale(snapshot.scale)

    # Accessors ----------------------------------------------------------------
    def current_theme(self) -> ThemeChoice:
        return self.record.theme

    def current_accent_color(self) -> AccentColor:
        return self.record.primary_color or DEFAULT_ACCENT

    def current_scale(self) -> float:
        if self.record.scale > 0:
            return self.record.scale
        return default_scale()

    # Mutations ----------------------------------------------------------------
    def set_theme(self, theme):
        """Select a theme by enum or label ("system default" is accepted)."""
        self.record.theme = ThemeChoice.parse(theme)
        logger.debug("Theme set to %r", self.record.theme.value)
        self.preview.update(self.record.theme)

    def set_accent_color(self, color):
        self.record.primary_color = AccentColor.parse(color)
        logger.debug("Accent colour set to %s", self.record.primary_color.value)
        self.selection.broadcast_refresh()

    def set_scale(self, scale: float):
        scale = float(scale)
        if not math.isfinite(scale) or scale < 0:
            raise ValueError(f"scale must be a finite, non-negative number, got {scale}")
        self.record.scale = scale
        logger.debug("Scale set to %s", scale)
