import pytest

from hoshi.deprecate import deprecated, deprecated_class


def old_add(a, b):
    """Add two numbers."""
    return a + b


def test_deprecated_function_warns_and_runs():
    wrapped = deprecated(old_add)

    with pytest.warns(DeprecationWarning, match="Function old_add is deprecated"):
        assert wrapped(1, 2) == 3

    assert wrapped.__name__ == "old_add"
    assert wrapped.__doc__ == "Add two numbers."


def test_deprecated_function_lists_alternatives():
    wrapped = deprecated(old_add, alternatives=["add", "sum"])

    with pytest.warns(DeprecationWarning, match="alternatives of old_add: add, sum"):
        wrapped(1, 1)


def test_deprecated_function_custom_message():
    wrapped = deprecated(old_add, "`old_add` is going away")

    with pytest.warns(DeprecationWarning, match="`old_add` is going away"):
        wrapped(1, 1)


def test_deprecated_function_message_builder():
    wrapped = deprecated(
        old_add,
        lambda name, alternatives: f"{name} -> {alternatives[0]}",
        ["add"],
    )

    with pytest.warns(DeprecationWarning, match="old_add -> add"):
        wrapped(1, 1)


def test_deprecated_class_warns_on_instantiation(recwarn):
    @deprecated_class(alternatives=["NewClient"])
    class OldClient:
        def __init__(self, host):
            self.host = host

    assert len(recwarn) == 0

    with pytest.warns(DeprecationWarning, match="Class OldClient is deprecated"):
        client = OldClient("localhost")

    assert client.host == "localhost"
    assert isinstance(client, OldClient)
