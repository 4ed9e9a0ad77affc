import pytest

from crosimage.string_status import StatusError, StringStatus, ValueStatus


def test_default_is_ok():
    status = StringStatus()
    assert status.ok()
    assert not status.is_error()
    assert status.msg() == ""


def test_message_is_error():
    status = StringStatus("disk full")
    assert status.is_error()
    assert not status.ok()
    assert status.msg() == "disk full"


@pytest.mark.parametrize("flag, ok", [(True, True), (False, False)])
def test_bool_constructor(flag, ok):
    status = StringStatus(flag)
    assert status.ok() is ok
    assert status.msg() == ""


def test_str_forms():
    assert str(StringStatus()) == "Status: OK"
    assert str(StringStatus("bad")) == "Status: error bad"


def test_located():
    status = StringStatus.located("boom", "load", "file.cpp", 12)
    assert status.msg() == "boom in load file.cpp:12"


def test_set_error_and_set_ok():
    status = StringStatus()
    status.set_error("first")
    assert status.msg() == "first"
    status.set_error("second")
    assert status.msg() == "second"
    status.set_ok()
    assert status.ok()


def test_set_copies_other():
    status = StringStatus("old")
    status.set(StringStatus())
    assert status.ok()
    status.set(StringStatus("new"))
    assert status.msg() == "new"


def test_raise_for_error():
    with pytest.raises(StatusError, match="broken"):
        StringStatus("broken").raise_for_error()
    assert StringStatus().raise_for_error() is None


def test_value_status_carries_value():
    status = ValueStatus([1, 2], None)
    assert status.ok()
    assert status.value == [1, 2]
    failed = ValueStatus(None, "nope")
    assert failed.is_error()
    assert failed.value is None
    assert failed.msg() == "nope"


def test_equality():
    assert StringStatus("x") == StringStatus("x")
    assert StringStatus() == StringStatus(True)
    assert not (StringStatus("x") == StringStatus())