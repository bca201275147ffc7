#===============================================================================
#  Browser_Picker | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for UI sizing, theme, and file/folder naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Browser Picker"
STATE_FILE_NAME = "picker_state.json"
DOMAINS_FILE_NAME = "domains.txt"
LOG_DIR_NAME = ".picker/logs"
LOG_FILE_NAME = "picker.log"

# Re-scan installed apps/profiles while the picker is open (ms)
RESCAN_INTERVAL_MS = 5000

# --- Metro style theme ---
METRO_BG = "#101010"

METRO_TILE_COLORS = [
    "#0078D7",  # blue
    "#00B294",  # teal
    "#E81123",  # red
    "#FFB900",  # yellow
    "#8764B8",  # purple
    "#2D7D9A",  # steel
    "#107C10",  # green
    "#5C2D91",  # deep purple
]

# Tile footprint (width, height); wrapped in QSize by the widgets
TILE_SIZE = (300, 64)
PICKER_WIDTH = 340

# How long a cold start waits for macOS to hand over the link (ms)
STARTUP_LINK_WAIT_MS = 500
