"""Snowflake-style unique 64-bit identifiers.

An identifier packs milliseconds since a configurable epoch, a node number
and a per-millisecond sequence: ``time << 22 | node << 12 | step``.
"""

from __future__ import annotations

import re
import threading
import time
from collections.abc import Callable
from datetime import date, datetime, timezone

NODE_BITS = 10
STEP_BITS = 12
NODE_MAX = (1 << NODE_BITS) - 1
STEP_MASK = (1 << STEP_BITS) - 1
NODE_SHIFT = STEP_BITS
TIME_SHIFT = NODE_BITS + STEP_BITS
DEFAULT_EPOCH_MS = 1288834974657

INVALID_INIT_PARAM = "snowflake init failed: invalid start time or machine id"
INVALID_TIME_FORMAT = "snowflake init failed: invalid start time format"

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class SnowflakeError(Exception):
    """Raised when the generator is misconfigured or not initialised."""


def _monotonic_wall_clock() -> Callable[[], int]:
    """Return a clock giving Unix milliseconds that never runs backwards."""
    wall_ns = time.time_ns()
    mono_ns = time.monotonic_ns()

    def now() -> int:
        return (wall_ns + time.monotonic_ns() - mono_ns) // 1_000_000

    return now


class SnowflakeNode:
    """Generates unique identifiers for one node number."""

    def __init__(
        self,
        node_id: int,
        epoch_ms: int = DEFAULT_EPOCH_MS,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if not 0 <= node_id <= NODE_MAX:
            raise SnowflakeError(f"node number must be between 0 and {NODE_MAX}")
        self.node_id = node_id
        self.epoch_ms = epoch_ms
        self._clock = clock if clock is not None else _monotonic_wall_clock()
        self._lock = threading.Lock()
        self._time = 0
        self._step = 0

    def _elapsed(self) -> int:
        return self._clock() - self.epoch_ms

    def generate(self) -> int:
        """Return the next identifier for this node."""
        with self._lock:
            now = self._elapsed()
            if now == self._time:
                self._step = (self._step + 1) & STEP_MASK
                if self._step == 0:
                    while now <= self._time:
                        now = self._elapsed()
            else:
                self._step = 0
            self._time = now
            return (now << TIME_SHIFT) | (self.node_id << NODE_SHIFT) | self._step


_node: SnowflakeNode | None = None
_node_lock = threading.Lock()


def init(start_time: str, machine_id: int) -> None:
    """Configure the shared generator with an epoch date and a machine id."""
    global _node
    if not start_time or machine_id <= 0:
        raise SnowflakeError(INVALID_INIT_PARAM)
    if not _DATE_RE.fullmatch(start_time):
        raise SnowflakeError(INVALID_TIME_FORMAT)
    try:
        day = date.fromisoformat(start_time)
    except ValueError as exc:
        raise SnowflakeError(INVALID_TIME_FORMAT) from exc
    epoch = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    epoch_ms = int(epoch.timestamp()) * 1000
    with _node_lock:
        _node = None
        _node = SnowflakeNode(machine_id, epoch_ms)


def gen_id() -> int:
    """Return a new identifier from the shared generator."""
    node = _node
    if node is None:
        raise SnowflakeError("snowflake generator is not initialised")
    return node.generate()