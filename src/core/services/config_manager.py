"""
config_manager.py
-----------------
JSON configuration loader for externalized game data (sound cues, key
bindings).

Features:
- Looks up bare filenames in src/config/ (independent of the working dir)
- Recursively merges loaded data over caller-supplied defaults
- Ignores '_notes' keys so config files can carry human comments
- Falls back to the defaults with a warning unless strict=True
"""

import json
import os

from src.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

CONFIG_ROOT = os.path.normpath(
    os.path.join(os.path.dirname(__file__), "..", "..", "config")
)


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Bare filename (looked up in CONFIG_ROOT) or a path
        default_dict: Defaults the file is merged over
        strict: If True, raise instead of falling back to defaults

    Returns:
        dict: Merged configuration

    Raises:
        FileNotFoundError: strict=True and the file is missing or unreadable
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename)
    try:
        data = _load_json(path)
    except (json.JSONDecodeError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts({}, default_dict)

    if not isinstance(data, dict):
        if strict:
            raise FileNotFoundError(f"Config {filename} is not a JSON object")
        DebugLogger.warn(f"{path} is not a JSON object - using defaults", category="loading")
        return _merge_dicts({}, default_dict)

    return _merge_dicts(default_dict, data)


def resolve_path(filename):
    """Map a bare filename into CONFIG_ROOT; leave real paths alone."""
    if os.path.isabs(filename) or os.path.dirname(filename):
        return filename
    if not filename.endswith(".json"):
        filename += ".json"
    return os.path.join(CONFIG_ROOT, filename)


# ===========================================================
# Loaders & Merge
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: v for k, v in default.items() if k != "_notes"}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
