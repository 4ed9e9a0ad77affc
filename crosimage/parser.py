"""Small text-cutting helpers."""

from __future__ import annotations

import re

_COMMENT_START = "<!--"
_COMMENT_END = "-->"


def _find(text: str, part: str, start: int = 0, case_sensitive: bool = True) -> int:
    if case_sensitive:
        return text.find(part, start)
    match = re.compile(re.escape(part), re.IGNORECASE).search(text, start)
    return -1 if match is None else match.start()


def remove_before(part: str, text: str, cut_part: bool = True, case_sensitive: bool = True) -> str | None:
    """Drop everything before the first `part` (and `part` itself if cut_part).

    Returns None when either string is empty or `part` is not found.
    """
    if not part or not text:
        return None
    index = _find(text, part, 0, case_sensitive)
    if index == -1:
        return None
    if cut_part:
        index += len(part)
    return text[index:]


def remove_after(part: str, text: str, cut_part: bool = True, case_sensitive: bool = True) -> str | None:
    """Drop everything after the first `part` (and `part` itself if cut_part).

    Returns None when either string is empty or `part` is not found.
    """
    if not part or not text:
        return None
    index = _find(text, part, 0, case_sensitive)
    if index == -1:
        return None
    if not cut_part:
        index += len(part)
    return text[:index]


def leave_text_between(start: str, end: str, text: str, case_sensitive: bool = True) -> str | None:
    """Return the text between the first `start` and the next `end`, or None."""
    rest = remove_before(start, text, True, case_sensitive)
    if rest is None:
        return None
    return remove_after(end, rest, True, case_sensitive)


def remove_between(start: str, end: str, text: str, case_sensitive: bool = True) -> str | None:
    """Remove the span from `start` through `end`, both included, or return None."""
    first = _find(text, start, 0, case_sensitive)
    if first == -1:
        return None
    last = _find(text, end, first, case_sensitive)
    if last == -1:
        return None
    return text[:first] + text[last + len(end):]


def remove_html_comments(text: str) -> str:
    """Remove every complete <!-- ... --> comment."""
    while True:
        start = text.find(_COMMENT_START)
        if start == -1:
            return text
        end = text.find(_COMMENT_END, start + len(_COMMENT_START))
        if end == -1:
            return text
        text = text[:start] + text[end + len(_COMMENT_END):]


def all_between(text: str, start: str, end: str) -> list[str]:
    """Return every piece of text enclosed by `start` and `end`."""
    found: list[str] = []
    if not start or not end:
        return found
    position = 0
    while True:
        position = text.find(start, position)
        if position == -1:
            break
        position += len(start)
        closing = text.find(end, position)
        if closing == -1:
            break
        found.append(text[position:closing])
        position = closing
    return found


def add_or_increment_suffix(text: str) -> str:
    """Turn "name(n)" into "name(n+1)"; otherwise append "(0)"."""
    number = 0
    if len(text) > 3 and "(" in text and text.endswith(")"):
        only_digits = True
        index = len(text) - 2
        while only_digits and index >= 0:
            char = text[index]
            if char == "(":
                break
            if not char.isdecimal():
                only_digits = False
            index -= 1
        if only_digits:
            digits = text[index + 1:-1]
            number = (int(digits) if digits else 0) + 1
            text = text[:index]
    return f"{text}({number})"


def truncate_with_ellipsis(text: str, length: int) -> str:
    """Cut text to `length` characters and append "..." if it was longer."""
    if len(text) > length:
        return text[:length] + "..."
    return text