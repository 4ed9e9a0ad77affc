"""Grid arrangement of directory entries as thumbnail cells."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Sequence

_MAX_LISTED_NAMES = 10


@dataclass
class GridItem:
    """One entry shown in the grid."""

    path: str
    is_dir: bool = False
    thumb_height: int | None = None

    @property
    def file_name(self) -> str:
        return os.path.basename(self.path.rstrip("/\\")) or self.path

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    @property
    def absolute_path(self) -> str:
        return os.path.abspath(self.path)


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()


def columns_for_width(width: int, thumb_width: int) -> int:
    """Return how many thumbnail columns fit into width; at least one."""
    if thumb_width <= 0:
        raise ValueError("thumbnail width must be positive")
    return max(1, int(width / thumb_width))


def delete_confirmation_text(names: Sequence[str]) -> str | None:
    """Return the question asked before deleting the named files, or None if none."""
    if not names:
        return None
    if len(names) == 1:
        return f"Do you realy want to delete the selected file {names[0]}?"
    text = f"Do you realy want to delete the {len(names)} selected files?\n\n"
    for index, name in enumerate(names):
        if index >= _MAX_LISTED_NAMES:
            text += f"...\nAnd {len(names) - index} more"
            break
        text += name + "\n"
    return text


def copy_paths_text(paths: Iterable[str]) -> str | None:
    """Return the paths one per line, or None when there are none."""
    paths = list(paths)
    if not paths:
        return None
    text = ""
    for path in paths:
        if text:
            text += "\n"
        text += path
    return text


class ThumbGrid:
    """Lays a flat list of items out row by row in a fixed number of columns."""

    def __init__(self, default_row_height: int) -> None:
        self.default_row_height = default_row_height
        self._items: list[GridItem] = []
        self._columns = 1
        self._files: list[str] | None = None

    @property
    def items(self) -> list[GridItem]:
        return list(self._items)

    def set_items(self, items: Iterable[GridItem]) -> None:
        """Replace all items."""
        self._items = list(items)
        self._files = None

    def set_column_count(self, cols: int) -> bool:
        """Change the column count; returns whether it changed."""
        if cols < 1 or cols == self._columns:
            return False
        self._columns = cols
        return True

    def row_count(self) -> int:
        return -(-len(self._items) // self._columns)

    def column_count(self) -> int:
        return self._columns

    def item_by_index(self, index: int) -> GridItem | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def item_at(self, row: int, col: int) -> GridItem | None:
        """Return the item in a cell, or None for an empty or invalid cell."""
        if not (0 <= row < self.row_count() and 0 <= col < self._columns):
            return None
        return self.item_by_index(row * self._columns + col)

    def position_of(self, index: int) -> tuple[int, int]:
        """Return the (row, column) of the item at a flat index."""
        return divmod(index, self._columns)

    def index_of_path(self, path: str) -> int | None:
        wanted = os.path.abspath(path)
        for index, item in enumerate(self._items):
            if item.absolute_path == wanted:
                return index
        return None

    def row_height(self, row: int) -> int:
        """Return the tallest thumbnail height in the row, or the default."""
        heights = [
            item.thumb_height
            for col in range(self._columns)
            if (item := self.item_at(row, col)) is not None and item.thumb_height is not None
        ]
        return max(heights) if heights else self.default_row_height

    def update_thumb(self, path: str, thumb_height: int | None) -> int | None:
        """Record the thumbnail height of the item at path; returns its index."""
        for index, item in enumerate(self._items):
            if item.absolute_path == os.path.abspath(path):
                item.thumb_height = thumb_height
                return index
        return None

    def files(self) -> list[str]:
        """Return the absolute paths of the items that are files."""
        if self._files is None:
            self._files = [item.absolute_path for item in self._items if item.is_file]
        return list(self._files)

    def navigate(
        self, row: int | None, col: int | None, direction: Direction
    ) -> tuple[int, int] | None:
        """Wrap the selection around the grid edges.

        row and col are None when nothing is selected. Returns the new cell,
        or None when ordinary navigation should apply.
        """
        if not self._items:
            return None
        has_current = row is not None and col is not None
        current = (row * self._columns + col) if has_current else 0
        target = current
        if direction is Direction.LEFT and has_current and col == 0:
            target -= 1
            if target < 0:
                target = len(self._items) - 1
        elif direction is Direction.RIGHT:
            target += 1
            if target >= len(self._items):
                target = 0
        if target == current:
            return None
        return self.position_of(target)