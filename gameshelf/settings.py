import json
import logging
from typing import Dict
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULTS = {"confirm_delete": True, "show_paths": True}

def load_settings(settings_file: Path) -> Dict:
    settings = dict(DEFAULTS)
    if not settings_file.exists():
        return settings
    try:
        data = json.loads(settings_file.read_text("utf-8"))
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable settings file %s: %s", settings_file, e)
        return settings
    if isinstance(data, dict):
        settings.update({k: bool(data[k]) for k in DEFAULTS if k in data})
    return settings

def save_settings(settings_file: Path, settings: dict) -> None:
    settings_file.write_text(json.dumps(settings, indent=2), encoding="utf-8")
