#===============================================================================
#  Browser_Picker  |  Choose which browser opens a link
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Set as the default browser on macOS. Every link opened is routed here and
#  the user picks the browser (or Chromium profile) that should open it.
#  Supports:
#    - installed browser discovery (/Applications, ~/Applications)
#    - Chrome/Brave profiles as separate tiles when more than one exists
#    - per-tile hotkeys and drag & drop ordering (picker_state.json)
#    - optional ./domains.txt: only show the picker for listed domains;
#      other links open straight away in the first app of the list
#
#  Folder Conventions
#  ------------------
#    ./domains.txt          -> one domain per line, "*.example.com" wildcards
#    ./picker_state.json    -> persisted order / hotkeys
#    ./.picker/logs/        -> picker.log
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project may use third-party libraries (e.g., PySide6) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QEvent, QTimer, Signal
from PySide6.QtWidgets import QApplication

from picker.constants import DOMAINS_FILE_NAME, STARTUP_LINK_WAIT_MS, STATE_FILE_NAME
from picker.domain_match import is_url_matching_domain_list
from picker.fs_discovery import apply_discovery
from picker.launcher import launch_entry
from picker.logging_setup import configure_logging
from picker.main_window import PickerWindow
from picker.registry import Registry
from picker.state import StateWriter, load_registry

LOGGER = logging.getLogger("picker.main")


class PickerApplication(QApplication):
    """Receives links from macOS (Apple Event 'open location')."""

    url_received = Signal(str)

    def event(self, e):
        if e.type() == QEvent.FileOpen:
            url = e.url().toString() or e.file()
            if url:
                self.url_received.emit(url)
            return True
        return super().event(e)


class Router:
    def __init__(self, base_dir: Path):
        self.base_dir = base_dir
        self.state_path = base_dir / STATE_FILE_NAME
        self.domains_path = base_dir / DOMAINS_FILE_NAME
        self.registry: Registry = load_registry(self.state_path)
        self.writer = StateWriter(self.state_path)
        self.window: Optional[PickerWindow] = None
        self.routed = False

    def open_directly(self, url: str) -> bool:
        """Open `url` in the first installed entry, skipping the picker."""
        apply_discovery(self.registry)
        self.writer.save(self.registry)
        entries = self.registry.installed_entries()
        if not entries:
            return False
        LOGGER.info("%s not in domain list, opening in %s", url, entries[0].label)
        launch_entry(entries[0], url)
        return True

    def route(self, url: str) -> None:
        self.routed = True
        if url and not is_url_matching_domain_list(url, self.domains_path):
            try:
                if self.open_directly(url):
                    if self.window is not None:
                        self.window.hide()
                    return
            except OSError as e:
                LOGGER.error("Direct open failed, showing picker: %s", e)

        if self.window is None:
            self.window = PickerWindow(self.registry, self.writer, url)
        else:
            self.window.set_url(url)
        self.window.show()
        self.window.raise_()
        self.window.activateWindow()

    def show_if_idle(self) -> None:
        """Show an empty picker when the app was started without a link."""
        if not self.routed:
            self.route("")


def main() -> int:
    base_dir = Path(__file__).resolve().parent
    configure_logging(base_dir)

    app = PickerApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)
    router = Router(base_dir)
    app.url_received.connect(router.route)

    url = sys.argv[1] if len(sys.argv) > 1 else ""
    if url:
        router.route(url)
    else:
        # On a cold start macOS delivers the link as a FileOpen event after exec()
        QTimer.singleShot(STARTUP_LINK_WAIT_MS, router.show_if_idle)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
