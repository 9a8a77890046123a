"""Tkinter/ttk styling for the selected theme and accent colour.

The palette built by ``create_palette`` is applied to every ttk style and
to the classic Tk widgets through the option database, so the settings
window itself reflects the applied appearance.
"""

import tkinter as tk
from tkinter import ttk
from typing import Dict
import logging

from .config import ThemeChoice, AccentColor, hex2rgb, rgb2hex, blend
from .utils import log_runtime_event, log_exception

logger = logging.getLogger(__name__)

THEME_TOKENS: Dict[ThemeChoice, Dict[str, str]] = {
    ThemeChoice.DARK: {
        "bg": "#303030",
        "fg": "#ffffff",
        "field_bg": "#424242",
        "border": "#616161",
        "muted": "#9e9e9e",
    },
    ThemeChoice.LIGHT: {
        "bg": "#f5f5f5",
        "fg": "#212121",
        "field_bg": "#ffffff",
        "border": "#bdbdbd",
        "muted": "#757575",
    },
}


def resolve_theme(theme: ThemeChoice) -> ThemeChoice:
    """Concrete theme to draw; the system default is drawn dark."""
    return ThemeChoice.LIGHT if theme is ThemeChoice.LIGHT else ThemeChoice.DARK


def create_palette(theme: ThemeChoice, accent: AccentColor) -> Dict[str, str]:
    """Colour tokens for ``apply_theme``."""
    palette = dict(THEME_TOKENS[resolve_theme(theme)])
    bg = hex2rgb(palette["bg"])
    palette["accent"] = accent.hex
    palette["hover_bg"] = rgb2hex(blend(bg, hex2rgb(accent.hex), 0.25))
    palette["disabled_fg"] = rgb2hex(blend(hex2rgb(palette["muted"]), bg, 0.5))
    return palette


def apply_theme(root: tk.Misc, palette: Dict[str, str]):
    """Apply a palette to the whole Tk application."""
    try:
        log_runtime_event("Starting theme application", f"accent={palette['accent']}")

        style = ttk.Style()
        style.theme_use("clam")  # Required for reliable color overrides

        try:
            root.configure(bg=palette["bg"])
        except tk.TclError as e:
            logger.debug(f"Could not configure root background: {e}")

        _configure_ttk_styles(style, palette)
        _configure_classic_widgets(root, palette)

        log_runtime_event("Theme application completed")
    except Exception as e:
        log_exception(e, "apply_theme")
        raise


def _configure_ttk_styles(style: ttk.Style, p: Dict[str, str]):
    bg, fg, accent = p["bg"], p["fg"], p["accent"]

    for name in ("TFrame", "TLabel", "TLabelframe", "TLabelframe.Label",
                 "TButton", "TRadiobutton", "TMenubutton"):
        style.configure(name, background=bg, foreground=fg)

    style.configure("TLabelframe", bordercolor=p["border"])
    style.configure("Muted.TLabel", foreground=p["muted"])

    style.map("TButton",
              background=[("active", p["hover_bg"])], foreground=[("active", fg)])
    style.configure("Accent.TButton", background=accent, foreground="#ffffff")
    style.map("Accent.TButton", background=[("active", p["hover_bg"])])

    style.map("TRadiobutton",
              indicatorcolor=[("selected", accent)],
              foreground=[("disabled", p["disabled_fg"])])
    style.configure("TMenubutton", background=p["field_bg"], arrowcolor=accent)


def _configure_classic_widgets(root: tk.Misc, p: Dict[str, str]):
    # Menus and canvases are not ttk-stylable; use the option database.
    try:
        root.option_add("*Menu.background", p["bg"])
        root.option_add("*Menu.foreground", p["fg"])
        root.option_add("*Menu.activeBackground", p["accent"])
        root.option_add("*Menu.activeForeground", p["bg"])
    except tk.TclError as e:
        logger.debug(f"Could not set option database entries: {e}")
