#===============================================================================
#  Browser_Picker | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The picker window shown for an intercepted link:
#    - one tile per installed app / Chromium profile, in registry order
#    - click a tile or press its hotkey to open the link there
#        * Alt   -> open in background
#        * Shift -> private window (when the app supports it)
#    - drag & drop ordering (persisted)
#    - right-click actions: set hotkey, clear hotkey, reset picker
#===============================================================================

from __future__ import annotations

import hashlib
import logging
from typing import Dict, List, Optional

from PySide6.QtCore import Qt, QSize, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QInputDialog,
    QLabel,
    QListWidgetItem,
    QMainWindow,
    QMenu,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from .constants import (
    APP_TITLE,
    METRO_BG,
    METRO_TILE_COLORS,
    PICKER_WIDTH,
    RESCAN_INTERVAL_MS,
    TILE_SIZE,
)
from .fs_discovery import apply_discovery
from .launcher import launch_entry
from .models import AppEntry, EntryKey, parse_hotkey
from .registry import Registry
from .state import StateWriter
from .tile_widget import TileVisual, TileWidget
from .ui_widgets import TileList

LOGGER = logging.getLogger("picker.main_window")


def _item_id(key: EntryKey) -> str:
    app_id, profile_id = key
    return f"{app_id}::{profile_id}" if profile_id else app_id


def _hotkey_from_key_event(event) -> Optional[str]:
    # Use the physical key, not event.text(): Option+letter yields a symbol on macOS
    key = event.key()
    if Qt.Key_A <= key <= Qt.Key_Z or Qt.Key_0 <= key <= Qt.Key_9:
        return chr(key).lower()
    return None


class PickerWindow(QMainWindow):
    def __init__(self, registry: Registry, writer: StateWriter, url: str = ""):
        super().__init__()
        self.setWindowTitle(APP_TITLE)

        self.registry = registry
        self.writer = writer
        self.url = url
        self.keys_by_id: Dict[str, EntryKey] = {}
        self.visible_keys: List[EntryKey] = []
        self._last_signature: Optional[list] = None

        self.setStyleSheet(f"""
        QMainWindow {{ background: {METRO_BG}; }}
        QLabel {{ color: white; font-family: "Helvetica Neue"; }}
        QListWidget {{ background: {METRO_BG}; border: none; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)

        self.url_label = QLabel()
        self.url_label.setWordWrap(True)
        self.url_label.setStyleSheet("color: rgba(255,255,255,0.7);")
        layout.addWidget(self.url_label)

        self.tile_list = TileList()
        # Keys go to the window so hotkeys are not eaten by keyboard search
        self.tile_list.setFocusPolicy(Qt.NoFocus)
        self.tile_list.itemClicked.connect(self.launch_item)
        self.tile_list.setContextMenuPolicy(Qt.CustomContextMenu)
        self.tile_list.customContextMenuRequested.connect(self.open_context_menu)
        self.tile_list.tile_moved.connect(self.persist_move_from_ui)
        layout.addWidget(self.tile_list)

        hint = QLabel("Drag to sort. Right-click a tile to set its hotkey.")
        hint.setStyleSheet("color: rgba(255,255,255,0.5); font-size: 11px;")
        layout.addWidget(hint)

        self.resize(PICKER_WIDTH, int(self.registry.height))

        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(RESCAN_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self.refresh)
        self.refresh_timer.start()

        self.set_url(url)
        self.refresh()

    def set_url(self, url: str) -> None:
        self.url = url
        self.url_label.setText(url or "(no link)")

    # ----------------------------
    # Discovery + rendering
    # ----------------------------
    def refresh(self):
        apply_discovery(self.registry)
        self.save()
        signature = [e.to_dict() for e in self.registry.installed_entries()]
        if signature != self._last_signature:
            self.rebuild_list()

    def save(self):
        try:
            self.writer.save(self.registry)
        except OSError as e:
            LOGGER.warning("Could not save state to %s: %s", self.writer.state_path, e)

    def _tile_color_for_key(self, item_id: str) -> str:
        h = hashlib.sha1(item_id.encode("utf-8")).hexdigest()
        idx = int(h[:2], 16) % len(METRO_TILE_COLORS)
        return METRO_TILE_COLORS[idx]

    def rebuild_list(self):
        entries = self.registry.installed_entries()
        self._last_signature = [e.to_dict() for e in entries]

        self.tile_list.clear()
        self.keys_by_id = {}
        self.visible_keys = []

        tile_size = QSize(*TILE_SIZE)
        for entry in entries:
            item_id = _item_id(entry.key)
            self.keys_by_id[item_id] = entry.key
            self.visible_keys.append(entry.key)

            item = QListWidgetItem()
            item.setData(Qt.UserRole, item_id)
            item.setSizeHint(tile_size)
            self.tile_list.addItem(item)

            tile = TileWidget(
                TileVisual(
                    bg_color=self._tile_color_for_key(item_id),
                    title=entry.label,
                    hotkey=entry.hotkey or "",
                ),
                size=tile_size,
            )
            self.tile_list.setItemWidget(item, tile)

    def _entry_for_item(self, item: QListWidgetItem) -> Optional[AppEntry]:
        key = self.keys_by_id.get(item.data(Qt.UserRole))
        if key is None:
            return None
        return self.registry.find(*key)

    # ----------------------------
    # Launch behavior
    # ----------------------------
    def launch(self, entry: AppEntry, modifiers) -> None:
        if not self.url:
            return
        try:
            launch_entry(
                entry,
                self.url,
                is_alt=bool(modifiers & Qt.AltModifier),
                is_shift=bool(modifiers & Qt.ShiftModifier),
            )
        except OSError as e:
            LOGGER.error("Launch of %s failed: %s", entry.label, e)
            QMessageBox.critical(self, "Launch failed", str(e))
            return
        self.close()

    def launch_item(self, item: QListWidgetItem):
        entry = self._entry_for_item(item)
        if entry:
            self.launch(entry, QApplication.keyboardModifiers())

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.close()
            return

        code = _hotkey_from_key_event(event)
        entry = self.registry.entry_for_hotkey(code) if code else None
        if entry:
            self.launch(entry, event.modifiers())
            return

        super().keyPressEvent(event)

    # ----------------------------
    # Ordering
    # ----------------------------
    def persist_move_from_ui(self, source: int, destination: int):
        if max(source, destination) >= len(self.visible_keys):
            return
        self.registry.reorder(self.visible_keys[source], self.visible_keys[destination])
        self.save()
        QTimer.singleShot(0, self.rebuild_list)

    # ----------------------------
    # Context menu
    # ----------------------------
    def open_context_menu(self, pos):
        item = self.tile_list.itemAt(pos)
        menu = QMenu(self)

        act_set = QAction("Set hotkey…", self)
        act_clear = QAction("Clear hotkey", self)
        act_reset = QAction("Reset picker…", self)

        entry = self._entry_for_item(item) if item else None
        if entry:
            menu.addAction(act_set)
            menu.addAction(act_clear)
            act_clear.setEnabled(bool(entry.hotkey))
            menu.addSeparator()
        menu.addAction(act_reset)

        chosen = menu.exec(self.tile_list.mapToGlobal(pos))
        if not chosen:
            return

        if chosen == act_set and entry:
            text, ok = QInputDialog.getText(
                self, "Set hotkey", f"Key for {entry.label} (A-Z, 0-9):", text=entry.hotkey or ""
            )
            if not ok:
                return
            try:
                code = parse_hotkey(text)
            except ValueError:
                QMessageBox.warning(self, "Invalid hotkey", "Use a single letter A-Z or digit 0-9.")
                return
            self.registry.assign_hotkey(entry.app_id, entry.profile_id, code)

        elif chosen == act_clear and entry:
            self.registry.assign_hotkey(entry.app_id, entry.profile_id, None)

        elif chosen == act_reset:
            answer = QMessageBox.question(
                self, "Reset picker", "Forget all hotkeys and ordering?"
            )
            if answer != QMessageBox.Yes:
                return
            self.registry.reset()
            self.refresh()
            return

        self.save()
        self.rebuild_list()

    def closeEvent(self, event):
        self.refresh_timer.stop()
        self.registry.set_height(self.height())
        self.save()
        super().closeEvent(event)
