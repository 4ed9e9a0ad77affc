import pytest

from crosimage.topresult import TopResult


def test_empty_result_is_not_set():
    result = TopResult()
    assert result.is_set is False


def test_constructor_with_pair_is_set():
    result = TopResult("k", 42)
    assert result.is_set
    assert (result.key, result.value) == ("k", 42)


def test_constructor_requires_both():
    with pytest.raises(TypeError):
        TopResult("k")


def test_add_max_key_keeps_greatest():
    result = TopResult()
    assert result.add_max_key(3, "three") is True
    assert result.add_max_key(7, "seven") is True
    assert result.add_max_key(5, "five") is False
    assert (result.key, result.value) == (7, "seven")


def test_add_min_key_keeps_smallest():
    result = TopResult()
    for key in [4, 2, 9]:
        result.add_min_key(key, str(key))
    assert (result.key, result.value) == (2, "2")


def test_ties_keep_first_candidate():
    result = TopResult()
    result.add_max_key(1, "first")
    assert result.add_max_key(1, "second") is False
    assert result.value == "first"


def test_add_max_value_and_min_value():
    high = TopResult()
    low = TopResult()
    for index, pixels in enumerate([10, 30, 20]):
        high.add_max_value(index, pixels)
        low.add_min_value(index, pixels)
    assert (high.key, high.value) == (1, 30)
    assert (low.key, low.value) == (0, 10)


def test_by_map_variants():
    data = {"a": 5, "b": 1, "c": 9}
    max_key = TopResult()
    max_key.add_max_key_by_map(data)
    assert max_key.key == "c"

    min_key = TopResult()
    min_key.add_min_key_by_map(data)
    assert min_key.key == "a"

    max_value = TopResult()
    max_value.add_max_value_by_map(data)
    assert (max_value.key, max_value.value) == ("c", 9)

    min_value = TopResult()
    min_value.add_min_value_by_map(data)
    assert (min_value.key, min_value.value) == ("b", 1)


def test_existing_pair_competes_with_new_ones():
    result = TopResult(10, "ten")
    assert result.add_max_key(4, "four") is False
    assert result.add_min_key(4, "four") is True
    assert result.key == 4