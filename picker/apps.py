#===============================================================================
#  Browser_Picker | apps.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Catalogue of apps the picker knows how to find and launch. The key is the
#  macOS application name (the bundle is "<name>.app"); the order here is the
#  order new installs are appended to the picker.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict

from .models import AppConfig


def _zoom_url(url: str) -> str:
    return (
        url.replace("https://", "zoommtg://")
        .replace("zoom.us/j/", "zoom.us/join?action=join&confno=")
        .replace("?pwd=", "&pwd=")
    )


_CHROMIUM = AppConfig(private_arg="--incognito", profile_arg="--profile-directory")
_FIREFOX = AppConfig(private_arg="--private-window")

APPS: Dict[str, AppConfig] = {
    "Safari": AppConfig(),
    "Google Chrome": _CHROMIUM,
    "Google Chrome Beta": _CHROMIUM,
    "Google Chrome Dev": _CHROMIUM,
    "Google Chrome Canary": _CHROMIUM,
    "Brave Browser": _CHROMIUM,
    "Brave Browser Beta": _CHROMIUM,
    "Brave Browser Nightly": _CHROMIUM,
    "Chromium": AppConfig(private_arg="--incognito"),
    "Firefox": _FIREFOX,
    "Firefox Developer Edition": _FIREFOX,
    "Firefox Nightly": _FIREFOX,
    "Microsoft Edge": AppConfig(private_arg="--inprivate"),
    "Opera": AppConfig(private_arg="--private"),
    "Vivaldi": AppConfig(private_arg="--incognito"),
    "Arc": AppConfig(),
    "Orion": AppConfig(),
    "zoom.us": AppConfig(convert_url=_zoom_url),
}


def get_app_config(app_id: str) -> AppConfig:
    """Launch traits for `app_id`; unknown apps launch with no extra flags."""
    return APPS.get(app_id, AppConfig())
