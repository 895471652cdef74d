import pytest

from hoshi.utils import assert_is_exception, omit_none, should_exclude


def test_omit_none():
    items = {"a": None, "b": 0, "c": "a", "d": 1, "e": True, "f": False}

    assert omit_none(items) == {"b": 0, "c": "a", "d": 1, "e": True, "f": False}
    assert items["a"] is None


def test_should_exclude():
    assert should_exclude(["h", "i", "j"], lambda i: i == "h")
    assert not should_exclude(["a", "b", "c"], lambda i: len(i) == 3)
    assert not should_exclude([], lambda i: True)


def test_assert_is_exception():
    assert_is_exception(ValueError("beep boop"))

    with pytest.raises(TypeError):
        assert_is_exception("abcd")
