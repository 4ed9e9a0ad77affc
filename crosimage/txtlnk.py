"""Link files: a ``.txtlnk`` text file holds a path, possibly relative, to another file."""

from __future__ import annotations

import codecs
import os

EXTENSION_WITH_DOT = ".txtlnk"


def seems_my_file(path: str) -> bool:
    """Tell whether path has the link-file extension."""
    return path.lower().endswith(EXTENSION_WITH_DOT)


def _read_text(path: str) -> str:
    with open(path, "rb") as handle:
        data = handle.read()
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return data.decode("utf-16")
    return data.decode("utf-8-sig")


def path_from_file(path: str) -> str | None:
    """Return the path a link file points to.

    An unreadable file yields path itself; an empty one falls back to
    existing_linked_file_from_parent_dir.
    """
    try:
        target = _read_text(path)
    except (OSError, UnicodeDecodeError):
        return path
    if target:
        directory = os.path.dirname(os.path.abspath(path))
        return os.path.normpath(os.path.join(directory, target))
    return existing_linked_file_from_parent_dir(path)


def path_from_file_or_same(path: str) -> str:
    """Return the linked path if it exists, otherwise path itself."""
    target = path_from_file(path)
    if target and os.path.exists(target):
        return target
    return path


def existing_linked_file_from_parent_dir(path: str) -> str | None:
    """Find the file named like the link without its extension.

    It is looked for beside the link and then one directory up; None if absent.
    """
    if not path:
        return None
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1:
        return None
    stem = name[:dot]
    directory = os.path.dirname(os.path.abspath(path))
    for candidate_dir in (directory, os.path.dirname(directory)):
        candidate = os.path.join(candidate_dir, stem)
        if os.path.exists(candidate):
            return os.path.abspath(candidate)
    return None