# crosimage

Parts for a thumbnail-based image browser. The package builds folder
thumbnails from the pictures inside a folder and lays thumbnails out in rows
and columns. It also has a few text and table utilities.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `crosimage.dir_painter.DirPainter(thumb_width, thumb_height)` builds folder
  thumbnails with Pillow.
  - `compose(images)`: with no images it returns the plain folder card. With
    one image it draws that image at the top left. With several it scales
    each image to fit half the thumbnail size and sorts them from tallest to
    shortest. It then tries every arrangement that places each image to the
    right of, or below, one already placed. The arrangement that
    `good_pixels()` scores highest is kept, and empty folder-coloured rows
    are trimmed from its bottom with `compact_image()`.
  - `dir_stub()` returns the plain folder card and `sub_dir_thumb()` the
    sub-folder placeholder. `contact_sheet(images, key_index)` lays images
    out five per row, writes their scores on them and frames the image at
    `key_index`.
- `crosimage.video`:
  - `is_video_file(path)` recognises video file extensions, including names
    that end in `.crdownload`.
  - `color_monopolization(image)` returns the share of pixels taken by the
    three most common coarse colours.
  - `video_sample_offsets()` lists the second offsets at which video frames
    are tried.
- `crosimage.txtlnk` resolves `.txtlnk` link files. A link file is a text
  file that holds a path, which may be relative to the link's directory. The
  module has `seems_my_file`, `path_from_file`, `path_from_file_or_same` and
  `existing_linked_file_from_parent_dir`.
- `crosimage.thumb_queue.JobQueue` is a thread-safe queue of `GenerateThumb`
  and `SetThumb` jobs. `take_file()` puts a file at the front.
  `make_first()` swaps a pending job with the head of the queue.
  `push_back()`, `pop()` and `has_type()` do what their names say.
- `crosimage.thumb_grid.ThumbGrid` maps a flat list of `GridItem`s onto a
  grid:
  - It gives row and column counts and the items in cells.
  - `row_height()` returns the tallest thumbnail in a row and
    `files()` the paths of plain files.
  - `navigate()` wraps the selection around the edges of the grid for
    `Direction.LEFT` and `Direction.RIGHT`.
  - Helper functions: `columns_for_width`, `delete_confirmation_text` and
    `copy_paths_text`.
- `crosimage.thumb_layout`:
  - `image_offset_x()` gives the horizontal offset of a thumbnail inside its
    cell.
  - `text_placement()` chooses where the caption goes, as a `Rect`.
- `crosimage.topresult.TopResult` keeps the best key/value pair seen by a
  max or min comparison.
- `crosimage.restricted.RestrictedValue` is a number clamped into
  `[minimum, maximum]`.
- `crosimage.parser` has the following text helpers:
  - `remove_before`, `remove_after`, `leave_text_between`,
    `remove_between`: cut text at markers. They return `None` when a marker
    is not found.
  - `remove_html_comments`, `all_between`, `truncate_with_ellipsis`.
  - `add_or_increment_suffix`: turns `name(3)` into `name(4)` and appends
    `(0)` to a name without a suffix.
- `crosimage.to_string` formats booleans, sizes, rectangles, points,
  colours, dates and JSON values.
- `crosimage.string_status`:
  - `StringStatus` is either OK or carries an error message.
    `raise_for_error()` raises `StatusError` when it carries an error.
  - `ValueStatus` adds an attached value.
- `crosimage.table_formatter.TableFormatter` collects rows of cells:
  - It renders them with `to_html()`, `to_plain_text()` or `to_monospace()`.
  - `load_from_plain_text()` reads `|a|b|` lines back in. A dashed line
    before the first row marks the header.

## Example

```python
from PIL import Image
from crosimage.dir_painter import DirPainter
from crosimage.table_formatter import TableFormatter

painter = DirPainter(160, 120)
pictures = [Image.new("RGB", (200, 100), "red"), Image.new("RGB", (80, 160), "blue")]
folder_thumb = painter.compose(pictures)

table = TableFormatter(border=1)
table.add("name").add("size")
table.new_line()
print(table.to_monospace(use_unicode=False))
```

## What it does not do

This is a library of parts, not an image browser. It has no command, no
window and no worker thread that runs the jobs in `JobQueue`. It does not
store thumbnails on disk or in a database. It does not generate thumbnails
by scanning directories. It does not extract frames from video files: it
only recognises video names and scores frames given to it.