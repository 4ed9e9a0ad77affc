from crosimage.parser import (
    add_or_increment_suffix,
    all_between,
    leave_text_between,
    remove_after,
    remove_before,
    remove_between,
    remove_html_comments,
    truncate_with_ellipsis,
)

PREFIX = "head "
PART = "[mark]"
SUFFIX = " tail"
TEXT = PREFIX + PART + SUFFIX


def test_remove_before_cuts_part():
    assert remove_before(PART, TEXT) == SUFFIX


def test_remove_before_keeps_part():
    assert remove_before(PART, TEXT, cut_part=False) == PART + SUFFIX


def test_remove_after_cuts_part():
    assert remove_after(PART, TEXT) == PREFIX


def test_remove_after_keeps_part():
    assert remove_after(PART, TEXT, cut_part=False) == PREFIX + PART


def test_not_found_or_empty_gives_none():
    assert remove_before("missing", TEXT) is None
    assert remove_after("missing", TEXT) is None
    assert remove_before("", TEXT) is None
    assert remove_after(PART, "") is None


def test_case_insensitive_search():
    text = PREFIX + PART.upper() + SUFFIX
    assert remove_before(PART, text, True, case_sensitive=False) == SUFFIX
    assert remove_after(PART, text, True, case_sensitive=False) == PREFIX
    assert remove_before(PART, text, True, case_sensitive=True) is None


def test_leave_text_between():
    middle = "inner"
    text = PREFIX + "<b>" + middle + "</b>" + SUFFIX
    assert leave_text_between("<b>", "</b>", text) == middle
    assert leave_text_between("<i>", "</i>", text) is None


def test_remove_between():
    text = PREFIX + "<b>" + "drop me" + "</b>" + SUFFIX
    assert remove_between("<b>", "</b>", text) == PREFIX + SUFFIX
    assert remove_between("<b>", "</x>", text) is None


def test_remove_html_comments():
    text = PREFIX + "<!--" + "one" + "-->" + "mid" + "<!--" + "two" + "-->" + SUFFIX
    assert remove_html_comments(text) == PREFIX + "mid" + SUFFIX


def test_unclosed_html_comment_stays():
    text = PREFIX + "<!--" + SUFFIX
    assert remove_html_comments(text) == text


def test_all_between_collects_pieces():
    pieces = ["alpha", "beta", "gamma"]
    text = "".join(f"x[{piece}]y" for piece in pieces)
    assert all_between(text, "[", "]") == pieces
    assert all_between(text, "", "]") == []


def test_add_or_increment_suffix():
    assert add_or_increment_suffix("photo(41)") == "photo(42)"


def test_add_or_increment_suffix_applied_twice():
    name = "picture"
    once = add_or_increment_suffix(name)
    assert once.startswith(name)
    twice = add_or_increment_suffix(once)
    assert twice.startswith(name)
    assert twice != once
    assert add_or_increment_suffix(once[:-1] + "x)") .startswith(once[:-1] + "x)")


def test_truncate_with_ellipsis():
    text = "a fairly long string"
    assert truncate_with_ellipsis(text, 6) == text[:6] + "..."
    assert truncate_with_ellipsis(text, len(text)) == text