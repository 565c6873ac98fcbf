import pytest

from reviewsvc import snowflake
from reviewsvc.snowflake import (
    NODE_MAX,
    NODE_SHIFT,
    STEP_MASK,
    TIME_SHIFT,
    SnowflakeError,
    SnowflakeNode,
)


class _FakeClock:
    """Returns a fixed time for a number of calls, then advances."""

    def __init__(self, start, hold):
        self.value = start
        self.hold = hold
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls > self.hold:
            return self.value + 1
        return self.value


def test_node_rejects_out_of_range_ids():
    with pytest.raises(SnowflakeError):
        SnowflakeNode(NODE_MAX + 1)
    with pytest.raises(SnowflakeError):
        SnowflakeNode(-1)


def test_generated_id_carries_node_number():
    node = SnowflakeNode(37)
    ident = node.generate()
    assert (ident >> NODE_SHIFT) & NODE_MAX == 37


def test_ids_are_unique_and_increasing():
    node = SnowflakeNode(5)
    ids = [node.generate() for _ in range(2000)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_same_millisecond_increments_step():
    epoch = 1_000_000
    node = SnowflakeNode(3, epoch_ms=epoch, clock=_FakeClock(epoch + 50, hold=10))
    first = node.generate()
    second = node.generate()
    assert first >> TIME_SHIFT == second >> TIME_SHIFT
    assert (second & STEP_MASK) == (first & STEP_MASK) + 1


def test_step_overflow_waits_for_next_millisecond():
    epoch = 1_000_000
    clock = _FakeClock(epoch + 50, hold=STEP_MASK + 1)
    node = SnowflakeNode(9, epoch_ms=epoch, clock=clock)
    ids = [node.generate() for _ in range(STEP_MASK + 2)]
    assert len(set(ids)) == len(ids)
    assert ids[-1] >> TIME_SHIFT == (ids[0] >> TIME_SHIFT) + 1
    assert ids[-1] & STEP_MASK == 0
    assert ids[-2] & STEP_MASK == STEP_MASK


@pytest.mark.parametrize(
    "start, machine",
    [("", 1), ("2024-01-01", 0), ("2024-01-01", -3)],
)
def test_init_rejects_invalid_params(start, machine):
    with pytest.raises(SnowflakeError, match="invalid start time or machine id"):
        snowflake.init(start, machine)


@pytest.mark.parametrize("start", ["2024/01/01", "2024-1-1", "2024-13-01", "20240101"])
def test_init_rejects_bad_date_format(start):
    with pytest.raises(SnowflakeError, match="format"):
        snowflake.init(start, 1)


def test_init_rejects_machine_id_too_large():
    with pytest.raises(SnowflakeError):
        snowflake.init("2024-01-01", NODE_MAX + 1)


def test_gen_id_after_init():
    snowflake.init("2020-01-01", 12)
    ids = [snowflake.gen_id() for _ in range(100)]
    assert all(i > 0 for i in ids)
    assert len(set(ids)) == 100
    assert all((i >> NODE_SHIFT) & NODE_MAX == 12 for i in ids)