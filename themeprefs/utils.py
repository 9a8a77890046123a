"""Logging helpers for ThemePrefs."""

import os
import logging
import inspect
import traceback
from typing import Optional


# Setup logging
def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """Setup logging configuration for ThemePrefs."""
    logger = logging.getLogger("themeprefs")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logger.level)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_runtime_logging(log_file: Optional[str] = None) -> logging.Logger:
    """Setup the runtime logger used to trace screen and store activity."""
    runtime_logger = logging.getLogger("themeprefs.runtime")
    runtime_logger.setLevel(logging.DEBUG)

    runtime_logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8", mode="w")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        runtime_logger.addHandler(file_handler)

    # Console output comes from the "themeprefs" handlers via propagation

    return runtime_logger


def log_runtime_event(event: str, details: str = "", level: str = "INFO"):
    """Log a runtime event tagged with the caller's location."""
    runtime_logger = logging.getLogger("themeprefs.runtime")

    frame = inspect.currentframe().f_back
    if frame:
        filename = os.path.basename(frame.f_code.co_filename)
        context = f"{filename}:{frame.f_lineno}:{frame.f_code.co_name}"
    else:
        context = "unknown"

    message = f"[{context}] {event}"
    if details:
        message += f" - {details}"

    runtime_logger.log(getattr(logging, level.upper(), logging.INFO), message)


def log_exception(e: BaseException, context: str = ""):
    """Log an exception together with its traceback. Never raises."""
    runtime_logger = logging.getLogger("themeprefs.runtime")

    runtime_logger.error(f"EXCEPTION in {context}: {type(e).__name__}: {e}")

    tb = "".join(traceback.format_exception(type(e), e, e.__traceback__))
    runtime_logger.debug(f"Traceback:\n{tb}")


def get_logger(name: str = "themeprefs") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
