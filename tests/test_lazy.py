from hoshi.lazy import Lazy, lazy


def test_lazy_computes_once():
    calls = []

    def compute():
        calls.append(1)
        return 1

    value = Lazy(compute)
    assert not value.evaluated
    assert value.get() == 1
    assert value.get() == 1
    assert value.evaluated
    assert calls == [1]


def test_lazy_caches_none():
    calls = []
    value = lazy(lambda: calls.append(1))

    assert value.get() is None
    assert value.get() is None
    assert calls == [1]


def test_lazy_arguments_only_used_first_time():
    value = lazy(lambda a, b=0: a + b)

    assert value.get(1, b=2) == 3
    assert value.get(10) == 3


def test_lazy_reset():
    counter = iter(range(10))
    value = lazy(lambda: next(counter))

    assert value.get() == 0
    value.reset()
    assert value.get() == 1
