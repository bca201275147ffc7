#===============================================================================
#  Browser_Picker | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of the persistent picker state (app order, hotkeys, window height).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .registry import Registry, default_snapshot

LOGGER = logging.getLogger("picker.state")


def _apps_shape_ok(apps: Any) -> bool:
    """Every stored app must be a record with a string app_id."""
    return isinstance(apps, list) and all(
        isinstance(a, dict) and isinstance(a.get("app_id"), str) for a in apps
    )


def load_state(state_path: Path) -> Dict[str, Any]:
    """Load state from disk (or create defaults)."""
    d = default_snapshot()
    if not state_path.exists():
        return d
    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        LOGGER.warning("State file %s unreadable, starting fresh: %s", state_path, e)
        return d
    if not isinstance(data, dict) or not _apps_shape_ok(data.get("apps", [])):
        LOGGER.warning("State file %s has unexpected shape, starting fresh", state_path)
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_state(state_path: Path, state: Dict[str, Any]) -> None:
    """Persist state to disk."""
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_text(json.dumps(state, indent=2), encoding="utf-8")


def load_registry(state_path: Path) -> Registry:
    try:
        return Registry.from_dict(load_state(state_path))
    except (KeyError, TypeError, ValueError) as e:
        LOGGER.warning("State file %s could not be restored, starting fresh: %s", state_path, e)
        return Registry.from_dict(default_snapshot())


def save_registry(state_path: Path, registry: Registry) -> None:
    save_state(state_path, registry.to_dict())


class StateWriter:
    """Saves the registry only when its snapshot differs from the last write."""

    def __init__(self, state_path: Path):
        self.state_path = state_path
        self._last_saved: Optional[Dict[str, Any]] = None

    def save(self, registry: Registry) -> bool:
        data = registry.to_dict()
        if data == self._last_saved:
            return False
        save_state(self.state_path, data)
        self._last_saved = data
        return True
