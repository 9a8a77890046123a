"""Theme preview selection and pygame-drawn preview images."""

import os
import tempfile
import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import pygame

from .config import ThemeChoice, DEFAULT_ACCENT, hex2rgb, blend

logger = logging.getLogger(__name__)

PREVIEW_SIZE = (320, 200)
TITLE_BAR_HEIGHT = 24
PREVIEW_MARGIN = 16
LINE_HEIGHT = 8
LINE_GAP = 10
BUTTON_SIZE = (96, 28)

# Colour tokens for the mock window in each preview
PREVIEW_COLORS: Dict[str, Dict[str, str]] = {
    "dark": {
        "bg": "#424242",
        "title": "#303030",
        "fg": "#ffffff",
        "muted": "#9e9e9e",
    },
    "light": {
        "bg": "#f5f5f5",
        "title": "#e0e0e0",
        "fg": "#212121",
        "muted": "#757575",
    },
}


class PreviewVariant(Enum):
    DARK = "dark"
    LIGHT = "light"


def for_theme(theme) -> PreviewVariant:
    """Preview to show for a theme; only light gets the light preview."""
    if isinstance(theme, ThemeChoice):
        theme = theme.value
    if theme == ThemeChoice.LIGHT.value:
        return PreviewVariant.LIGHT
    return PreviewVariant.DARK


class PreviewBinding:
    """Holds the preview variant derived from the selected theme.

    A single listener (usually the preview image widget) is called with the
    new variant every time ``update`` runs.
    """

    def __init__(self, listener: Optional[Callable[[PreviewVariant], None]] = None):
        self.variant = PreviewVariant.DARK
        self.listener = listener

    def update(self, theme) -> PreviewVariant:
        self.variant = for_theme(theme)
        if self.listener is not None:
            self.listener(self.variant)
        return self.variant


def render_preview(variant: PreviewVariant, size: Tuple[int, int] = PREVIEW_SIZE,
                   accent: str = DEFAULT_ACCENT.hex) -> "pygame.Surface":
    """Draw a small mock application window in the variant's colours."""
    tokens = PREVIEW_COLORS[variant.value]
    bg = hex2rgb(tokens["bg"])
    fg = hex2rgb(tokens["fg"])
    muted = hex2rgb(tokens["muted"])
    w, h = size

    surf = pygame.Surface(size)
    surf.fill(bg)
    pygame.draw.rect(surf, hex2rgb(tokens["title"]), pygame.Rect(0, 0, w, TITLE_BAR_HEIGHT))

    # Window controls on the title bar
    for i in range(3):
        cx = w - PREVIEW_MARGIN - i * 14
        pygame.draw.circle(surf, muted, (cx, TITLE_BAR_HEIGHT // 2), 4)

    # Text lines, the first one emphasised
    y = TITLE_BAR_HEIGHT + PREVIEW_MARGIN
    for i, frac in enumerate((0.6, 0.85, 0.75, 0.5)):
        color = fg if i == 0 else blend(muted, bg, 0.2)
        line_w = int((w - 2 * PREVIEW_MARGIN) * frac)
        pygame.draw.rect(surf, color, pygame.Rect(PREVIEW_MARGIN, y, line_w, LINE_HEIGHT))
        y += LINE_HEIGHT + LINE_GAP

    bw, bh = BUTTON_SIZE
    button = pygame.Rect(w - PREVIEW_MARGIN - bw, h - PREVIEW_MARGIN - bh, bw, bh)
    pygame.draw.rect(surf, hex2rgb(accent), button, border_radius=4)
    return surf


def preview_image_path(variant: PreviewVariant, cache_dir: Optional[str] = None) -> str:
    """Render the variant to a PNG once and return its path."""
    cache_dir = cache_dir or os.path.join(tempfile.gettempdir(), "themeprefs-previews")
    path = os.path.join(cache_dir, f"theme_{variant.value}_preview.png")
    if not os.path.exists(path):
        os.makedirs(cache_dir, exist_ok=True)
        pygame.image.save(render_preview(variant), path)
        logger.debug("Rendered %s preview to %s", variant.value, path)
    return path
