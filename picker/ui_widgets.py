#===============================================================================
#  Browser_Picker | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Tile column for the picker. Translates Qt's drag & drop row moves into
#  "move tile i onto tile j's slot", which is what the registry reorders by.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSize, Signal
from PySide6.QtWidgets import QListWidget

from .constants import TILE_SIZE


def drop_slot(start: int, row: int, count: int) -> Optional[int]:
    """Index of the tile whose slot the moved tile now occupies.

    Qt reports `row` as the insertion point in the list *before* the move,
    so a downward move lands one slot higher. None when nothing moved.
    """
    if not (0 <= start < count):
        return None
    final = row if row <= start else row - 1
    if not (0 <= final < count) or final == start:
        return None
    return final


class TileList(QListWidget):
    """A vertical tile column with built-in internal drag/drop reorder.

    Emits tile_moved(source_index, destination_index) in pre-move indexes.
    """

    tile_moved = Signal(int, int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.ListMode)
        self.setUniformItemSizes(True)
        self.setGridSize(QSize(*TILE_SIZE))
        self.setSpacing(4)

        self.setDragEnabled(True)
        self.setDropIndicatorShown(True)
        self.setDragDropMode(QListWidget.InternalMove)
        self.setSelectionMode(QListWidget.SingleSelection)

        self.model().rowsMoved.connect(self._on_rows_moved)

    def _on_rows_moved(self, _parent, start, _end, _dest_parent, row):
        slot = drop_slot(start, row, self.count())
        if slot is not None:
            self.tile_moved.emit(start, slot)
