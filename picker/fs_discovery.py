#===============================================================================
#  Browser_Picker | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Filesystem discovery of installed browsers (.app bundles) and of Chromium
#  profiles (read from each browser's "Local State" JSON).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .apps import APPS, get_app_config
from .models import ChromeProfile
from .registry import Registry

LOGGER = logging.getLogger("picker.fs_discovery")

# App name -> folder under ~/Library/Application Support
CHROMIUM_APP_SUPPORT_DIRS = {
    "Brave Browser": "BraveSoftware/Brave-Browser",
    "Brave Browser Beta": "BraveSoftware/Brave-Browser-Beta",
    "Brave Browser Nightly": "BraveSoftware/Brave-Browser-Nightly",
    "Google Chrome": "Google/Chrome",
    "Google Chrome Beta": "Google/Chrome Beta",
    "Google Chrome Canary": "Google/Chrome Canary",
    "Google Chrome Dev": "Google/Chrome Dev",
}


def default_search_dirs(home: Optional[Path] = None) -> List[Path]:
    home = home or Path.home()
    return [
        Path("/Applications"),
        Path("/System/Applications"),
        # Safari lives in the cryptex on recent macOS
        Path("/System/Volumes/Preboot/Cryptexes/App/System/Applications"),
        home / "Applications",
    ]


def scan_installed_apps(search_dirs: Optional[Iterable[Path]] = None) -> List[str]:
    """Return the catalogue apps that have a bundle in any search dir.

    Result keeps catalogue order so new installs append predictably.
    """
    dirs = list(search_dirs) if search_dirs is not None else default_search_dirs()
    found: List[str] = []
    for name in APPS:
        for d in dirs:
            try:
                if (d / f"{name}.app").is_dir():
                    found.append(name)
                    break
            except OSError:
                continue
    LOGGER.debug("Installed apps: %s", ", ".join(found) or "(none)")
    return found


def local_state_path(app_id: str, home: Optional[Path] = None) -> Optional[Path]:
    support_dir = CHROMIUM_APP_SUPPORT_DIRS.get(app_id)
    if not support_dir:
        return None
    home = home or Path.home()
    return home / "Library" / "Application Support" / support_dir / "Local State"


def get_profiles_for_app(app_id: str, home: Optional[Path] = None) -> List[ChromeProfile]:
    """Read a Chromium "Local State" file and list its profiles.

    Any missing/corrupt file (or unexpected shape) yields an empty list.
    """
    path = local_state_path(app_id, home)
    if path is None:
        return []

    try:
        local_state = json.loads(path.read_text(encoding="utf-8"))
        info_cache = (local_state.get("profile") or {}).get("info_cache")
        if not info_cache:
            return []
        return [
            ChromeProfile(
                app_id=app_id,
                profile_id=directory,
                display_name=(info or {}).get("name") or directory,
            )
            for directory, info in info_cache.items()
        ]
    except (OSError, ValueError, AttributeError) as e:
        LOGGER.warning("Could not read profiles for %s: %s", app_id, e)
        return []


def get_chrome_profiles(installed_app_ids: Iterable[str], home: Optional[Path] = None) -> List[ChromeProfile]:
    """Profiles for installed Chromium browsers that support profile launch.

    Only apps with more than one profile contribute; a single profile is the
    app's default and is represented by the whole-app entry.
    """
    profiles: List[ChromeProfile] = []
    for app_id in installed_app_ids:
        if not get_app_config(app_id).profile_arg or app_id not in CHROMIUM_APP_SUPPORT_DIRS:
            continue
        app_profiles = get_profiles_for_app(app_id, home)
        if len(app_profiles) > 1:
            profiles.extend(app_profiles)
    return profiles


def apply_discovery(registry: Registry, search_dirs: Optional[Iterable[Path]] = None, home: Optional[Path] = None) -> List[str]:
    """Run both scans and fold them into `registry`. Returns installed app ids."""
    installed = scan_installed_apps(search_dirs)
    registry.reconcile_installed_apps(installed)
    registry.reconcile_profiles(get_chrome_profiles(installed, home))
    registry.mark_setup()
    return installed
