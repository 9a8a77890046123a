"""Command-line entry point for ThemePrefs."""

import argparse
import json
import math
import sys

from .config import PALETTE, ThemeChoice, SYSTEM_THEME_LABEL, storage_path
from .main import main as gui_main
from .store import SettingsStore
from .utils import setup_logging


def _path_fn(config_path):
    if config_path:
        return lambda: config_path
    return storage_path


def show_settings(store: SettingsStore) -> int:
    """Print the stored record and the values it resolves to."""
    print(json.dumps({
        "path": store.storage_path(),
        "stored": store.record.to_json(),
        "theme": store.current_theme().label,
        "accent": store.current_accent_color().value,
        "scale": store.current_scale(),
    }, indent=2))
    return 0


def run_headless(store: SettingsStore, theme=None, color=None, scale=None) -> int:
    """Change settings without a window and apply them."""
    if theme is not None:
        store.set_theme(theme)
    if color is not None:
        store.set_accent_color(color)
    if scale is not None:
        store.set_scale(scale)
    store.apply()
    print(f"Settings written to {store.storage_path()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="themeprefs",
                                     description="Appearance settings: theme, accent colour and scale.")
    parser.add_argument("--config", help="settings file to use instead of the per-user default")
    parser.add_argument("--show", action="store_true", help="print the current settings and exit")
    parser.add_argument("--theme", choices=[ThemeChoice.DARK.value, ThemeChoice.LIGHT.value, SYSTEM_THEME_LABEL])
    parser.add_argument("--color", choices=[c.value for c in PALETTE])
    parser.add_argument("--scale", type=float)
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.scale is not None and (not math.isfinite(args.scale) or args.scale < 0):
        parser.error("--scale must be a finite, non-negative number")

    headless = args.show or any(v is not None for v in (args.theme, args.color, args.scale))
    if not headless:
        return gui_main(path_fn=_path_fn(args.config), log_level=args.log_level)

    setup_logging(level=args.log_level)
    store = SettingsStore(storage_path=_path_fn(args.config))
    if args.show and args.theme is None and args.color is None and args.scale is None:
        return show_settings(store)
    code = run_headless(store, args.theme, args.color, args.scale)
    if args.show:
        show_settings(store)
    return code


if __name__ == "__main__":
    sys.exit(main())
