"""Main entry points for ThemePrefs."""

import sys
import tkinter as tk
from typing import Callable, Optional

from .config import storage_path
from .gui import AppearanceScreen
from .store import SettingsStore
from .utils import setup_logging, setup_runtime_logging, get_logger, log_runtime_event, log_exception


def main(path_fn: Optional[Callable[[], str]] = None, log_level: str = "INFO") -> int:
    """Open the appearance settings window."""
    setup_logging(level=log_level)
    setup_runtime_logging()
    logger = get_logger("themeprefs.main")

    store = SettingsStore(storage_path=path_fn or storage_path)
    logger.info("Using settings file %s", store.storage_path())

    try:
        root = tk.Tk()
    except tk.TclError as e:
        log_exception(e, "Tk initialisation")
        logger.error("No display available; use --show, --theme, --color or --scale instead")
        return 1

    root.title("ThemePrefs - Appearance")
    root.geometry("420x560")
    root.minsize(360, 480)

    screen = AppearanceScreen(root, store)
    screen.pack(fill="both", expand=True)

    log_runtime_event("Entering Tk main loop")
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
