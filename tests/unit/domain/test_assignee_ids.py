"""Tests for assignee id minting."""

from app.domain.policies.assignee_ids import TimestampIdGenerator, mint_assignee_id


def test_id_uses_prefix_and_millis():
    gen = TimestampIdGenerator(clock=lambda: 1_700_000_000_123_456_789)
    assert gen.next_id() == "ca_1700000000123"


def test_same_millisecond_still_unique():
    gen = TimestampIdGenerator(clock=lambda: 5_000_000)
    ids = [gen.next_id() for _ in range(3)]
    assert ids == ["ca_5", "ca_6", "ca_7"]


def test_clock_going_backwards_keeps_increasing():
    ticks = iter([10_000_000, 3_000_000])
    gen = TimestampIdGenerator(clock=lambda: next(ticks))
    assert gen.next_id() == "ca_10"
    assert gen.next_id() == "ca_11"


def test_default_minter_never_repeats():
    ids = {mint_assignee_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(i.startswith("ca_") for i in ids)
