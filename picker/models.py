#===============================================================================
#  Browser_Picker | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the picker application.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

EntryKey = Tuple[str, Optional[str]]

# Keys the picker can detect as hotkeys (physical A-Z and 0-9)
HOTKEY_CHARS = frozenset(string.ascii_lowercase + string.digits)


def parse_hotkey(text: str) -> Optional[str]:
    """Normalize user input to a hotkey code; blank input clears it.

    Raises ValueError for anything but a single A-Z or 0-9 character.
    """
    code = text.strip().lower()
    if not code:
        return None
    if len(code) != 1 or code not in HOTKEY_CHARS:
        raise ValueError(f"Hotkey must be a single letter A-Z or digit 0-9, got {text!r}")
    return code


@dataclass
class AppEntry:
    """One row of the registry: a whole app, or one profile of an app."""
    app_id: str                         # application name, e.g. "Google Chrome"
    profile_id: Optional[str] = None    # Chromium profile directory, e.g. "Profile 1"
    hotkey: Optional[str] = None        # single character, unique across the registry
    installed: bool = True
    display_name: Optional[str] = None  # profile name as reported by the browser

    @property
    def key(self) -> EntryKey:
        return (self.app_id, self.profile_id)

    @property
    def label(self) -> str:
        if self.display_name:
            return f"{self.app_id} \u2014 {self.display_name}"
        return self.app_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "app_id": self.app_id,
            "profile_id": self.profile_id,
            "hotkey": self.hotkey,
            "installed": self.installed,
            "display_name": self.display_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppEntry":
        return cls(
            app_id=str(data["app_id"]),
            profile_id=data.get("profile_id") or None,
            hotkey=data.get("hotkey") or None,
            installed=bool(data.get("installed", False)),
            display_name=data.get("display_name") or None,
        )


@dataclass(frozen=True)
class ChromeProfile:
    """A profile found in a Chromium browser's Local State file."""
    app_id: str
    profile_id: str     # directory name, stable across scans
    display_name: str


@dataclass(frozen=True)
class AppConfig:
    """Launch traits of a known browser."""
    private_arg: Optional[str] = None   # flag that opens a private window
    profile_arg: Optional[str] = None   # flag that selects a profile directory
    convert_url: Optional[Callable[[str], str]] = None
