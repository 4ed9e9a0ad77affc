"""Builds folder thumbnails by packing a few child thumbnails onto a coloured card."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from PIL import Image, ImageDraw

from crosimage.topresult import TopResult

DIR_RGB = (0xFF, 0xCD, 0x52)

_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_SHEET_COLUMNS = 5
_ROWS_KEPT_AT_TOP = 2


@dataclass(frozen=True)
class _Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def bottom(self) -> int:
        return self.y + self.h - 1

    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: "_Rect") -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )


def _draw(canvas: Image.Image, image: Image.Image, position: tuple[int, int]) -> None:
    """Draw image onto canvas at position, blending any transparency."""
    if image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    ):
        rgba = image.convert("RGBA")
        canvas.paste(rgba.convert("RGB"), position, rgba)
    else:
        canvas.paste(image.convert("RGB"), position)


def _fit(image: Image.Image, box: tuple[int, int]) -> Image.Image:
    """Scale image to the largest size that fits box, keeping its aspect ratio."""
    width, height = image.size
    if width <= 0 or height <= 0:
        return image.copy()
    ratio = min(box[0] / width, box[1] / height)
    size = (max(1, round(width * ratio)), max(1, round(height * ratio)))
    return image.resize(size, Image.Resampling.LANCZOS)


class DirPainter:
    """Paints folder thumbnails of a fixed thumbnail size."""

    def __init__(self, thumb_width: int, thumb_height: int) -> None:
        if thumb_width <= 0 or thumb_height <= 0:
            raise ValueError("thumbnail size must be positive")
        self.thumb_width = thumb_width
        self.thumb_height = thumb_height
        self._stub = Image.new("RGB", (thumb_width, thumb_height), DIR_RGB)
        self._sub_dir: Image.Image | None = None

    @property
    def dir_color(self) -> tuple[int, int, int]:
        return DIR_RGB

    def dir_stub(self) -> Image.Image:
        """Return a fresh thumbnail-sized card in the folder colour."""
        return self._stub.copy()

    def sub_dir_thumb(self) -> Image.Image:
        """Return the placeholder for a subfolder: a card with a rounded black frame."""
        if self._sub_dir is None:
            image = self.dir_stub()
            ImageDraw.Draw(image).rounded_rectangle(
                [0, 0, self.thumb_width - 1, self.thumb_height - 1],
                radius=10,
                outline=_BLACK,
                width=3,
            )
            self._sub_dir = image
        return self._sub_dir.copy()

    def compose(self, images: Sequence[Image.Image]) -> Image.Image:
        """Pack the images onto a folder card and trim the empty bottom."""
        return self.compact_image(self._compose(list(images)))

    def _compose(self, images: list[Image.Image]) -> Image.Image:
        if not images:
            return self.dir_stub()
        if len(images) == 1:
            canvas = self.dir_stub()
            _draw(canvas, images[0], (0, 0))
            return canvas
        half = (max(1, self.thumb_width // 2), max(1, self.thumb_height // 2))
        scaled = sorted((_fit(img, half) for img in images), key=lambda i: i.height, reverse=True)
        used = [_Rect(0, 0, *scaled[0].size)]
        variants = [self._paint(scaled, used)]
        self._generate_variants(scaled, used, variants)
        best: TopResult[int, int] = TopResult()
        for index, variant in enumerate(variants):
            best.add_max_value(index, self.good_pixels(variant))
        return variants[best.key]

    def _paint(self, images: Sequence[Image.Image], used: Sequence[_Rect]) -> Image.Image:
        canvas = self.dir_stub()
        for image, rect in zip(images, used):
            _draw(canvas, image, (rect.x, rect.y))
        return canvas

    def _generate_variants(
        self, images: Sequence[Image.Image], used: list[_Rect], out: list[Image.Image]
    ) -> None:
        start = len(used)
        if start >= len(images):
            return
        width, height = images[start].size
        for rect in used:
            for x, y in ((rect.x + rect.w, rect.y), (rect.x, rect.y + rect.h)):
                candidate = _Rect(x, y, width, height)
                if (
                    candidate.x < self.thumb_width
                    and candidate.bottom < self.thumb_height
                    and not any(candidate.intersects(r) for r in used)
                ):
                    extended = [*used, candidate]
                    out.append(self._paint(images, extended))
                    self._generate_variants(images, extended, out)

    def good_pixels(self, image: Image.Image) -> int:
        """Count pixels whose colour differs from the folder colour."""
        rgb = image.convert("RGB")
        colors = rgb.getcolors(max(1, rgb.width * rgb.height)) or []
        return sum(count for count, color in colors if color != DIR_RGB)

    def compact_image(self, image: Image.Image) -> Image.Image:
        """Cut away bottom rows that hold only the folder colour, keeping a small margin."""
        rgb = image.convert("RGB")
        width, height = rgb.size
        new_height = height
        for y in range(height - 1, 1, -1):
            row = rgb.crop((0, y, width, y + 1))
            if row.getcolors(1) != [(width, DIR_RGB)]:
                break
            new_height -= 1
        if new_height + _ROWS_KEPT_AT_TOP < height:
            return image.crop((0, 0, width, new_height + _ROWS_KEPT_AT_TOP))
        return image.copy()

    def contact_sheet(
        self, images: Sequence[Image.Image], key_index: int
    ) -> Image.Image | None:
        """Lay the images out five per row with their scores; frame the one at key_index.

        Returns None when there are no images.
        """
        if not images:
            return None
        w, h = self.thumb_width, self.thumb_height
        rows = -(-len(images) // _SHEET_COLUMNS)
        sheet = Image.new("RGB", (_SHEET_COLUMNS * w, rows * h), _BLACK)
        draw = ImageDraw.Draw(sheet)
        for number, image in enumerate(images):
            row, col = divmod(number, _SHEET_COLUMNS)
            x, y = col * w, row * h
            _draw(sheet, image, (x, y))
            draw.text((x, y + h // 4), str(self.good_pixels(image)), fill=_RED)
            if number == key_index:
                draw.rectangle([x, y, x + w - 1, y + h - 1], outline=_RED, width=3)
        return sheet