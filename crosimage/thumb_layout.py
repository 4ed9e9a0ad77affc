"""Placement of a thumbnail and its caption inside a grid cell."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; right and bottom are the last pixels inside."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def with_top(self, top: int) -> "Rect":
        """Move the top edge, keeping the bottom edge."""
        return replace(self, y=top, height=self.bottom - top + 1)

    def with_left(self, left: int) -> "Rect":
        """Move the left edge, keeping the right edge."""
        return replace(self, x=left, width=self.right - left + 1)


def image_offset_x(thumb_width: int, image_width: int, column: int, column_count: int) -> int:
    """Horizontal offset of a narrow thumbnail inside its cell.

    The first column hugs the right, the last the left, others are centred,
    so images gather towards the middle of the view.
    """
    diff = thumb_width - image_width
    if diff <= 0:
        return 0
    if column == 0 and column_count > 1:
        return diff
    if column_count > 1 and column == column_count - 1:
        return 0
    return diff // 2


def text_placement(
    cell: Rect, image_width: int, image_height: int, font_height: int, thumb_width: int
) -> tuple[Rect, bool]:
    """Choose where the caption goes.

    Returns the caption rectangle and whether it is drawn over the image on a
    translucent band (when there is no room below or to the right).
    """
    free_right = cell.width - image_width
    free_bottom = cell.height - image_height
    if free_bottom <= font_height and free_right <= int(thumb_width / 3):
        rect = cell
        if rect.height > font_height:
            rect = rect.with_top(rect.bottom - font_height)
        return rect, True
    if free_bottom >= free_right:
        return cell.with_top(cell.top + image_height), False
    return cell.with_left(cell.left + image_width), False