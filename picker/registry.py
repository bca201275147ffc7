#===============================================================================
#  Browser_Picker | registry.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The ordered list of apps/profiles shown by the picker, and the rules that
#  fold scan results and user actions into it:
#    - installed-app scans flip 'installed' on whole-app entries, append new apps
#    - profile scans re-confirm profile entries, refresh names, append new ones
#    - hotkeys are unique: assigning one revokes it from its previous holder
#    - reorder moves one entry to another entry's slot
#  Entries are never removed except by reset(), so user configuration for an
#  app that disappears (and comes back) is kept.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from .models import AppEntry, ChromeProfile, EntryKey

LOGGER = logging.getLogger("picker.registry")

SNAPSHOT_VERSION = 1
DEFAULT_HEIGHT = 450

_KNOWN_FIELDS = ("version", "apps", "is_setup", "height", "support_message")


class UnknownEntryError(LookupError):
    """Raised when an action targets an entry that is not in the registry."""


def default_snapshot() -> Dict[str, Any]:
    return {
        "version": SNAPSHOT_VERSION,
        "apps": [],             # ordered list of AppEntry dicts
        "is_setup": False,      # set once the first scan completed
        "height": DEFAULT_HEIGHT,
        "support_message": 0,   # -1 donated, else ms timestamp of "maybe later"
    }


class Registry:
    """Single owner of the picker's persisted app list.

    Every public mutator runs under one lock, so readers only ever see the
    registry between events.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.entries: List[AppEntry] = []
        self.is_setup = False
        self.height = DEFAULT_HEIGHT
        self.support_message = 0
        self.extras: Dict[str, Any] = {}

    # ----------------------------
    # Snapshot in / out
    # ----------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Registry":
        reg = cls()
        reg.hydrate(data)
        return reg

    def hydrate(self, data: Dict[str, Any]) -> None:
        """Replace the whole registry with a persisted snapshot (no merging)."""
        with self._lock:
            self.entries = [AppEntry.from_dict(a) for a in data.get("apps", [])]
            self.is_setup = bool(data.get("is_setup", False))
            self.height = data.get("height", DEFAULT_HEIGHT)
            self.support_message = data.get("support_message", 0)
            self.extras = {k: v for k, v in data.items() if k not in _KNOWN_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            data = copy.deepcopy(self.extras)
            data.update({
                "version": SNAPSHOT_VERSION,
                "apps": [e.to_dict() for e in self.entries],
                "is_setup": self.is_setup,
                "height": self.height,
                "support_message": self.support_message,
            })
            return data

    def reset(self) -> None:
        """Factory reset: back to the empty default state."""
        with self._lock:
            self.hydrate(default_snapshot())
        LOGGER.info("Registry reset to defaults")

    # ----------------------------
    # Reads
    # ----------------------------
    def snapshot(self) -> List[AppEntry]:
        with self._lock:
            return copy.deepcopy(self.entries)

    def installed_entries(self) -> List[AppEntry]:
        with self._lock:
            return [copy.copy(e) for e in self.entries if e.installed]

    def keys(self) -> List[EntryKey]:
        with self._lock:
            return [e.key for e in self.entries]

    def find(self, app_id: str, profile_id: Optional[str] = None) -> Optional[AppEntry]:
        with self._lock:
            idx = self._index_of((app_id, profile_id))
            return None if idx < 0 else copy.copy(self.entries[idx])

    def entry_for_hotkey(self, code: str) -> Optional[AppEntry]:
        """Installed entry bound to `code`, if any."""
        with self._lock:
            for e in self.entries:
                if e.installed and e.hotkey is not None and e.hotkey == code:
                    return copy.copy(e)
        return None

    def _index_of(self, key: EntryKey) -> int:
        app_id, profile_id = key
        for i, e in enumerate(self.entries):
            if e.app_id == app_id and e.profile_id == (profile_id or None):
                return i
        return -1

    # ----------------------------
    # Discovery events
    # ----------------------------
    def reconcile_installed_apps(self, app_ids: Iterable[str]) -> None:
        """Fold an installed-app scan into the registry.

        Only whole-app entries (no profile) are touched; profile entries are
        governed by reconcile_profiles().
        """
        installed = list(dict.fromkeys(app_ids))
        with self._lock:
            for e in self.entries:
                if e.profile_id is None:
                    e.installed = e.app_id in installed

            known = {e.app_id for e in self.entries if e.profile_id is None}
            added = [a for a in installed if a not in known]
            for app_id in added:
                self.entries.append(AppEntry(app_id=app_id))

        LOGGER.debug("Installed apps reconciled: %d found, %d new", len(installed), len(added))

    def reconcile_profiles(self, profiles: Iterable[ChromeProfile]) -> None:
        """Fold a *complete* profile scan into the registry.

        Every profile entry is first marked absent, then re-confirmed (and
        renamed) if present in the scan. Unknown profiles are appended.
        """
        profiles = list(profiles)
        with self._lock:
            for e in self.entries:
                if e.profile_id is not None:
                    e.installed = False

            added = 0
            for p in profiles:
                idx = self._index_of((p.app_id, p.profile_id))
                if idx >= 0:
                    existing = self.entries[idx]
                    existing.installed = True
                    existing.display_name = p.display_name
                else:
                    self.entries.append(AppEntry(
                        app_id=p.app_id,
                        profile_id=p.profile_id,
                        display_name=p.display_name,
                    ))
                    added += 1

        LOGGER.debug("Profiles reconciled: %d found, %d new", len(profiles), added)

    # ----------------------------
    # User actions
    # ----------------------------
    def assign_hotkey(self, app_id: str, profile_id: Optional[str], code: Optional[str]) -> None:
        """Bind `code` to one entry, taking it away from any other holder.

        A None code clears the entry's hotkey.
        """
        with self._lock:
            idx = self._index_of((app_id, profile_id))
            if idx < 0:
                raise UnknownEntryError(f"No registry entry for {app_id!r} / {profile_id!r}")

            if code is not None:
                for i, e in enumerate(self.entries):
                    if i != idx and e.hotkey == code:
                        LOGGER.info("Hotkey %r moved from %s to %s", code, e.label, self.entries[idx].label)
                        e.hotkey = None

            self.entries[idx].hotkey = code

    def reorder(self, source_key: EntryKey, destination_key: EntryKey) -> None:
        """Move the source entry into the destination entry's current slot."""
        with self._lock:
            src = self._index_of(source_key)
            dst = self._index_of(destination_key)
            if src < 0 or dst < 0 or src == dst:
                return
            moved = self.entries.pop(src)
            self.entries.insert(dst, moved)

    def mark_setup(self) -> None:
        with self._lock:
            self.is_setup = True

    def set_height(self, height: int) -> None:
        with self._lock:
            self.height = int(height)
