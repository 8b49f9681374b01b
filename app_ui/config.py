# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] Config loading (defaults/roaming)
# [NAV-20] Public getters
# [NAV-99] End
# =============================================================================

# === [NAV-00] Imports / constants ============================================
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from diagnostics.logging_setup import get_logger

CONFIG_PATH = Path("data/roaming/console_config.json")
_DEFAULT_CONFIG = {
    "data_dir": "data/roaming",
    "start_module": "",
    "window_title": "Consola de Gestión",
}

logger = get_logger("app_ui.config")


# === [NAV-10] Config loading (defaults/roaming) ==============================
def load_config(path: Optional[Path] = None) -> Dict:
    path = path or CONFIG_PATH
    if not path.exists():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(_DEFAULT_CONFIG, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not write default config to %s: %s", path, exc)
        return _DEFAULT_CONFIG.copy()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("config %s unreadable, using defaults: %s", path, exc)
        return _DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return _DEFAULT_CONFIG.copy()
    for key, value in _DEFAULT_CONFIG.items():
        data.setdefault(key, value)
    return data


# === [NAV-20] Public getters ==================================================
def get_data_dir(config: Optional[Dict] = None) -> Path:
    config = config if config is not None else load_config()
    value = str(config.get("data_dir") or "").strip()
    return Path(value or _DEFAULT_CONFIG["data_dir"])


def get_store_dir(config: Optional[Dict] = None) -> Path:
    return get_data_dir(config) / "store"


# === [NAV-99] End =============================================================
__all__ = [
    "CONFIG_PATH",
    "load_config",
    "get_data_dir",
    "get_store_dir",
]
