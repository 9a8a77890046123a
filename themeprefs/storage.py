"""JSON persistence of the settings record."""

import json
import os
import logging

from .config import SettingsRecord, DIR_MODE, FILE_MODE

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Base class for settings persistence failures."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class SettingsIOError(SettingsError):
    """The settings file or its directory could not be read or written."""


class SettingsDecodeError(SettingsError):
    """The settings file exists but does not hold a valid record."""


def encode(record: SettingsRecord) -> bytes:
    return json.dumps(record.to_json(), allow_nan=False).encode("utf-8")


def decode(data: bytes) -> SettingsRecord:
    """Parse settings bytes; raises ValueError for anything but a valid record."""
    doc = json.loads(data.decode("utf-8"))
    if not isinstance(doc, dict):
        raise ValueError(f"expected a JSON object, got {type(doc).__name__}")
    return SettingsRecord.from_json(doc)


def _ensure_parent(path: str):
    parent = os.path.dirname(os.path.abspath(path))
    try:
        os.makedirs(parent, mode=DIR_MODE, exist_ok=True)
    except OSError as e:
        raise SettingsIOError(path, f"cannot create directory {parent}: {e}") from e


def load_settings(path: str) -> SettingsRecord:
    """Read the record stored at ``path``.

    A missing file is the normal first-run state: the parent directory is
    created for the next save and a default record is returned.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        logger.debug("No settings at %s, using defaults", path)
        _ensure_parent(path)
        return SettingsRecord()
    except OSError as e:
        raise SettingsIOError(path, str(e)) from e

    try:
        return decode(data)
    except (ValueError, RecursionError) as e:
        raise SettingsDecodeError(path, f"corrupt settings file: {e}") from e


def save_settings(path: str, record: SettingsRecord):
    """Overwrite ``path`` with the encoded record."""
    _ensure_parent(path)
    data = encode(record)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise SettingsIOError(path, str(e)) from e
    logger.debug("Saved settings to %s", path)
