from hypothesis import given
from hypothesis import strategies as st

from hoshi.events import EventBus, ListenerLimitExceededError


@given(st.lists(st.integers(), min_size=1, max_size=50))
def test_emit_preserves_registration_order(tags: list[int]):
    bus = EventBus(max_listeners=-1)
    calls: list[int] = []
    for tag in tags:
        bus.on("evt", lambda tag=tag: calls.append(tag))

    bus.emit("evt")
    assert calls == tags


@given(st.lists(st.sampled_from(["a", "b", "c", "d"]), max_size=40))
def test_size_counts_distinct_events(events: list[str]):
    bus = EventBus(max_listeners=-1)
    for event in events:
        bus.on(event, print)

    assert bus.size() == len(set(events))
    for event in set(events):
        assert bus.size(event) == events.count(event)


@given(st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=30))
def test_cap_accepts_exactly_limit_listeners(limit: int, attempts: int):
    bus = EventBus(max_listeners=limit)
    accepted = 0
    for _ in range(attempts):
        try:
            bus.on("evt", print)
            accepted += 1
        except ListenerLimitExceededError:
            pass

    assert accepted == min(limit, attempts)
    assert bus.size("evt") == accepted
