"""
config_manager.py
-----------------
Configuration loader for the bundled JSON presets.

Features:
- Builds a file index of the package ``config`` directory once
- Recursively merges loaded data over caller defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
from swarmfall.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_ROOT = os.path.join(PACKAGE_ROOT, "config")

SEARCH_DIRS = [
    DATA_ROOT,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Bare filename (looked up in the index) or absolute path
        default_dict: Default fallback config
        strict: If True, raise on a missing or unreadable file

    Returns:
        dict: default_dict with the file contents merged over it
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"top-level value must be an object, got {type(data).__name__}")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not usable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def build_file_index():
    """Scan config directories and cache all file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(".json") and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """O(1) lookup from pre-built index."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    key = filename + ".json"
    if key in _FILE_INDEX:
        return _FILE_INDEX[key]

    return os.path.join(DATA_ROOT, filename)


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: (_merge_dicts(v, {}) if isinstance(v, dict) else v)
              for k, v in default.items()}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
