"""Tkinter appearance screen for ThemePrefs."""

import tkinter as tk
from tkinter import ttk
from tkinter import font as tkfont
from typing import Optional
import logging

import pygame

from .config import (
    AccentColor, PALETTE, SCALE_PRESETS, theme_labels, display_label, default_scale
)
from .preview import PreviewVariant, preview_image_path
from .store import PaletteEntry, SettingsStore
from .ui_theme import apply_theme, create_palette
from .utils import log_runtime_event, log_exception

logger = logging.getLogger(__name__)

SWATCH_SIZE = 32
SWATCH_RING = 4
GRID_COLUMNS = 6


def apply_scale_to_window(window: tk.Misc, scale: float, base_scaling: float):
    """Re-lay out ``window`` at ``scale`` times its initial Tk scaling."""
    factor = scale if scale > 0 else default_scale()
    window.tk.call("tk", "scaling", base_scaling * factor)
    # Named fonts are measured in points; reconfiguring makes Tk re-measure them.
    for name in tkfont.names(window):
        f = tkfont.nametofont(name, root=window)
        f.configure(size=f.cget("size"))
    window.update_idletasks()
    log_runtime_event("Applied window scale", f"scale={factor}")


class ColorButton(PaletteEntry):
    """Clickable accent swatch drawn on a canvas."""

    def __init__(self, parent: tk.Misc, color: AccentColor, store: SettingsStore):
        super().__init__(color, store)
        self.highlight = "#ffffff"
        self.canvas = tk.Canvas(parent, width=SWATCH_SIZE, height=SWATCH_SIZE,
                                bg=color.hex, highlightthickness=0, cursor="hand2")
        half = SWATCH_RING // 2
        self._ring = self.canvas.create_rectangle(
            half, half, SWATCH_SIZE - half, SWATCH_SIZE - half,
            width=SWATCH_RING, outline=color.hex)
        self.canvas.bind("<Button-1>", self._on_tap)

    def _on_tap(self, _=None):
        self.store.set_accent_color(self.color)

    def redraw(self):
        outline = self.highlight if self.selected else self.color.hex
        self.canvas.itemconfigure(self._ring, outline=outline)


class AppearanceScreen(ttk.Frame):
    """Scale, accent colour and theme controls with a live preview."""

    def __init__(self, parent: tk.Misc, store: SettingsStore, platform: Optional[str] = None):
        super().__init__(parent, padding=12)
        self.store = store
        self.platform = platform
        self.window = self.winfo_toplevel()
        self._base_scaling = float(self.window.tk.call("tk", "scaling"))
        self._preview_image: Optional[tk.PhotoImage] = None
        self.color_buttons = []

        store.apply_scale = self.apply_scale_to_window
        store.preview.listener = self._show_preview

        log_runtime_event("Building appearance screen")
        controls = ttk.Frame(self)
        controls.pack(side="top", fill="x")
        self._build_scale_group(controls)
        self._build_color_group(controls)
        self._build_theme_group(controls)

        bottom = ttk.Frame(self)
        bottom.pack(side="bottom", fill="x", pady=(12, 0))
        ttk.Button(bottom, text="Apply", style="Accent.TButton",
                   command=self.on_apply).pack(side="right")

        self.preview_label = ttk.Label(self, anchor="center")
        self.preview_label.pack(fill="both", expand=True, pady=(12, 0))

        self._restyle()
        store.preview.update(store.current_theme())

    # Construction -------------------------------------------------------------
    def _build_scale_group(self, parent):
        frame = ttk.LabelFrame(parent, text="Scale", padding=8)
        frame.pack(fill="x", pady=(0, 8))
        self.scale_var = tk.DoubleVar(value=self.store.current_scale())
        for i, (label, value) in enumerate(SCALE_PRESETS):
            ttk.Radiobutton(frame, text=label, value=value, variable=self.scale_var,
                            command=self._on_scale_selected).grid(row=0, column=i, padx=4)
            frame.columnconfigure(i, weight=1)

    def _build_color_group(self, parent):
        frame = ttk.LabelFrame(parent, text="Main Color", padding=8)
        frame.pack(fill="x", pady=(0, 8))
        for i, color in enumerate(PALETTE):
            button = ColorButton(frame, color, self.store)
            button.canvas.grid(row=i // GRID_COLUMNS, column=i % GRID_COLUMNS, padx=4, pady=4)
            frame.columnconfigure(i % GRID_COLUMNS, weight=1)
            self.store.selection.register(button)
            self.color_buttons.append(button)

    def _build_theme_group(self, parent):
        frame = ttk.LabelFrame(parent, text="Theme", padding=8)
        frame.pack(fill="x")
        current = display_label(self.store.current_theme(), self.platform)
        self.theme_var = tk.StringVar(value=current)
        ttk.OptionMenu(frame, self.theme_var, current, *theme_labels(self.platform),
                       command=self._on_theme_selected).pack(fill="x")

    # Callbacks ----------------------------------------------------------------
    def _on_scale_selected(self):
        self.store.set_scale(self.scale_var.get())

    def _on_theme_selected(self, label):
        self.store.set_theme(label)

    def _show_preview(self, variant: PreviewVariant):
        try:
            self._preview_image = tk.PhotoImage(master=self, file=preview_image_path(variant))
        except (pygame.error, tk.TclError, OSError) as e:
            logger.error(f"Could not load {variant.value} preview: {e}")
            return
        self.preview_label.configure(image=self._preview_image)

    def on_apply(self):
        self.store.apply()
        try:
            self._restyle()
        except tk.TclError as e:
            logger.error(f"Error applying theme: {e}")

    def apply_scale_to_window(self, scale: float):
        try:
            apply_scale_to_window(self.window, scale, self._base_scaling)
        except tk.TclError as e:
            log_exception(e, "apply_scale_to_window")

    def _restyle(self):
        palette = create_palette(self.store.current_theme(), self.store.current_accent_color())
        apply_theme(self.window, palette)
        for button in self.color_buttons:
            button.highlight = palette["fg"]
        self.store.selection.broadcast_refresh()
