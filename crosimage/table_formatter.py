"""Collects table cells and renders them as HTML, tab-separated or boxed text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from crosimage.to_string import format_bool, format_color

Color = Sequence[int]

_UNICODE_HLINE = "\u2500"
_UNICODE_VLINE = "\u2502"
_NBSP = "\u00a0"
_BOTTOM_LEFT = "\u2514"
_BOTTOM_RIGHT = "\u2518"


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return format_bool(value)
    return str(value)


def _html_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


@dataclass
class Cell:
    """One table cell."""

    value: Any = None
    is_html: bool = False
    text_color: Color | None = None
    background_color: Color | None = None

    @property
    def text(self) -> str:
        return _text(self.value)


def parse_row(line: str) -> list[Cell]:
    """Split a "|a|b|" style line into trimmed cells."""
    if line.endswith("|"):
        line = line[:-1]
    if line.startswith("|"):
        line = line[1:]
    return [Cell(part.strip()) for part in line.split("|")]


class TableFormatter:
    """Accumulates rows of cells and renders them in several text forms."""

    def __init__(self, border: int = 0) -> None:
        self.border = border
        self.horizontal_header: list[Any] = []
        self._last_row: list[Cell] = []
        self._rows: list[list[Cell]] = []

    def add(self, value: Any) -> "TableFormatter":
        """Append a plain cell to the current row."""
        self._last_row.append(Cell(value))
        return self

    def add_html(self, value: Any) -> "TableFormatter":
        """Append a cell whose text is already HTML."""
        self._last_row.append(Cell(value, is_html=True))
        return self

    def new_line(self) -> "TableFormatter":
        """Close the current row, even if empty, and start another."""
        self._rows.append(self._last_row)
        self._last_row = []
        return self

    def finalize(self) -> None:
        """Close the current row if it holds any cells."""
        if self._last_row:
            self._rows.append(self._last_row)
            self._last_row = []

    def rows(self) -> list[list[Cell]]:
        self.finalize()
        return self._rows

    def row_count(self) -> int:
        return len(self._rows)

    def columns(self, row: int) -> int:
        return len(self._rows[row])

    def cell(self, row: int, col: int) -> Cell:
        return self._rows[row][col]

    def set_color(self, row: int, col: int, color: Color | None) -> None:
        self.cell(row, col).text_color = color

    def set_background_color(self, row: int, col: int, color: Color | None) -> None:
        self.cell(row, col).background_color = color

    def _all_rows(self) -> list[list[Cell]]:
        rows: list[list[Cell]] = []
        if self.horizontal_header:
            rows.append([Cell(v) for v in self.horizontal_header])
        rows.extend(self._rows)
        if self._last_row:
            rows.append(self._last_row)
        return rows

    @staticmethod
    def _plain(cell: Cell) -> str:
        if cell.is_html:
            raise ValueError("cannot convert an HTML cell to plain text")
        return cell.text

    def to_html(self) -> str:
        parts = ["<table>\n" if self.border <= 0 else f'<table border="{self.border}">']
        for row in self._all_rows():
            parts.append("<tr>")
            for cell in row:
                text = cell.text if cell.is_html else _html_escape(cell.text)
                if cell.text_color is not None:
                    text = f'<font color="{format_color(cell.text_color)}">{text}</font>'
                parts.append(f"<td>{text}</td>")
            parts.append("</tr>\n")
        parts.append("</table>")
        return "".join(parts)

    def to_plain_text(self) -> str:
        return "\r\n".join(
            "\t".join(self._plain(cell) for cell in row) for row in self._all_rows()
        )

    def to_monospace(self, use_unicode: bool = True) -> str:
        rows = self._all_rows()
        widths: list[int] = []
        for row in rows:
            for col, cell in enumerate(row):
                if col == len(widths):
                    widths.append(0)
                widths[col] = max(widths[col], len(cell.text))

        out: list[str] = []
        width_line = ""
        if self.border:
            total = 1 + sum(widths) + len(widths)
            width_line = (_UNICODE_HLINE if use_unicode else "-") * total
            out.append("_" * total + "\r\n")
        vline = _UNICODE_VLINE if use_unicode else "|"
        pad_char = _NBSP if use_unicode else " "
        for index, row in enumerate(rows):
            if index:
                out.append("\r\n")
            if self.border:
                out.append(vline)
            for col, cell in enumerate(row):
                if col and not self.border:
                    out.append("\t")
                text = self._plain(cell)
                out.append(text)
                missing = widths[col] - len(text)
                if missing > 0:
                    out.append(pad_char * missing)
                if self.border:
                    out.append(vline)
            if index == 0 and self.border and self.horizontal_header:
                out.append("\r\n" + width_line)
        result = "".join(out)
        if self.border:
            result += "\r\n" + _BOTTOM_LEFT + width_line
            result = result[:-2] + _BOTTOM_RIGHT
        return result

    def load_from_plain_text(self, text: str) -> None:
        """Read "|a|b|" lines; a dashed line before the first row marks a header."""
        next_is_header = False
        header_met = False
        for line in text.replace("\r", "").split("\n"):
            if line == "-" * len(line):
                if not header_met:
                    next_is_header = True
                continue
            row = parse_row(line)
            if next_is_header:
                next_is_header = False
                header_met = True
                self.horizontal_header.extend(cell.value for cell in row)
                continue
            self._rows.append(row)