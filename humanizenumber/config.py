"""Library configuration — formatting defaults, settings persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

APP_NAME = "humanizenumber"
APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

# ── Directories ───────────────────────────────────────────────────────────────

_XDG_CONFIG = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

CONFIG_DIR: Path = _XDG_CONFIG / "humanizenumber"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.json"

# ── Formatting defaults ───────────────────────────────────────────────────────

DECIMAL_POINT: str = "."
THOUSANDS_SEP: str = ","
BYTES_IN_KB: int = 1024                 # 1024 binary | 1000 decimal
SHORTEN_WHEN_LONGER: int = 5


# ── Persistence ───────────────────────────────────────────────────────────────

def save_settings(path: Path | None = None) -> None:
    """Persist the current formatting defaults to disk."""
    path = Path(path) if path else SETTINGS_PATH
    data = {
        "decimal_point": DECIMAL_POINT,
        "thousands_sep": THOUSANDS_SEP,
        "bytes_in_kb": BYTES_IN_KB,
        "shorten_when_longer": SHORTEN_WHEN_LONGER,
    }
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save settings: %s", exc)


def load_settings(path: Path | None = None) -> None:
    """Load persisted settings from disk, falling back to defaults."""
    global DECIMAL_POINT, THOUSANDS_SEP, BYTES_IN_KB, SHORTEN_WHEN_LONGER
    path = Path(path) if path else SETTINGS_PATH
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        decimal_point = str(data.get("decimal_point", DECIMAL_POINT))
        thousands_sep = str(data.get("thousands_sep", THOUSANDS_SEP))
        bytes_in_kb = int(data.get("bytes_in_kb", BYTES_IN_KB))
        shorten_when_longer = int(data.get("shorten_when_longer", SHORTEN_WHEN_LONGER))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Could not load settings from %s: %s", path, exc)
        return

    if bytes_in_kb < 2:
        logger.warning("Ignoring bytes_in_kb=%d from %s", bytes_in_kb, path)
        bytes_in_kb = BYTES_IN_KB
    DECIMAL_POINT = decimal_point
    THOUSANDS_SEP = thousands_sep
    BYTES_IN_KB = bytes_in_kb
    SHORTEN_WHEN_LONGER = shorten_when_longer
