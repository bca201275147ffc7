#===============================================================================
#  Browser_Picker | tile_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Flat Metro-style tile for one app/profile, with its hotkey badge.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel


@dataclass
class TileVisual:
    bg_color: str
    title: str
    hotkey: str = ""


class TileWidget(QFrame):
    """A flat tile used inside a QListWidget item."""

    def __init__(self, visual: TileVisual, size: QSize, parent=None):
        super().__init__(parent)
        self.setObjectName("MetroTile")
        self.setFixedSize(size)

        self.setStyleSheet(f"""
        QFrame#MetroTile {{
            background: {visual.bg_color};
        }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        title_label = QLabel(visual.title)
        title_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        title_font = QFont("Helvetica Neue", 13)
        title_font.setBold(True)
        title_label.setFont(title_font)
        title_label.setStyleSheet("color: white;")
        title_label.setWordWrap(True)
        layout.addWidget(title_label, 1)

        hotkey_label = QLabel(visual.hotkey.upper())
        hotkey_label.setAlignment(Qt.AlignCenter)
        hotkey_label.setFixedSize(28, 28)
        hotkey_label.setFont(QFont("Menlo", 12))
        hotkey_label.setStyleSheet(
            "color: white; border: 1px solid rgba(255,255,255,0.6); border-radius: 4px;"
        )
        hotkey_label.setVisible(bool(visual.hotkey.strip()))
        layout.addWidget(hotkey_label)
