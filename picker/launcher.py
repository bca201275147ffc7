#===============================================================================
#  Browser_Picker | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Opens a URL in the chosen app (and profile) through macOS `open -a`.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

from .apps import get_app_config
from .models import AppEntry

LOGGER = logging.getLogger("picker.launcher")


def build_open_arguments(
    app_id: str,
    url: str,
    is_alt: bool = False,
    is_shift: bool = False,
    profile_id: Optional[str] = None,
) -> List[str]:
    """Arguments for `open`.

    modifiers:
      - alt  : open in the background (picker keeps focus elsewhere)
      - shift: private/incognito window, when the app has one and no
               profile was requested
    """
    config = get_app_config(app_id)

    args = ["-a", app_id]
    if is_alt:
        args.append("--background")

    # Profile args come first so they reach the app
    if profile_id and config.profile_arg:
        args += ["--new", "--args", f"{config.profile_arg}={profile_id}"]

    if is_shift and config.private_arg and not profile_id:
        args += ["--new", "--args", config.private_arg]

    # URL must be last, after the private flag
    args.append(config.convert_url(url) if config.convert_url else url)
    return args


def open_app(
    app_id: str,
    url: str,
    is_alt: bool = False,
    is_shift: bool = False,
    profile_id: Optional[str] = None,
) -> None:
    args = build_open_arguments(app_id, url, is_alt, is_shift, profile_id)
    LOGGER.info("open %s", " ".join(args))
    subprocess.Popen(["open", *args])


def launch_entry(entry: AppEntry, url: str, is_alt: bool = False, is_shift: bool = False) -> None:
    open_app(entry.app_id, url, is_alt, is_shift, entry.profile_id)
