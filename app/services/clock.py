"""Sequence clock - the externally supplied logical time of the ledger."""

from loguru import logger


class SequenceClock:
    """Monotonically non-decreasing sequence counter.

    The hosting environment owns this clock and moves it forward (e.g. one
    tick per produced block). The ledger only reads ``now()``.
    """

    def __init__(self, start: int = 1):
        if start < 0:
            raise ValueError(f"Sequence must be non-negative, got {start}")
        self._seq = start

    def now(self) -> int:
        return self._seq

    def advance(self, ticks: int = 1) -> int:
        """Move forward by ``ticks`` and return the new sequence."""
        if ticks < 0:
            raise ValueError(f"Sequence cannot move backwards ({ticks} ticks)")
        self._seq += ticks
        return self._seq

    def set(self, seq: int) -> None:
        """Jump to ``seq``, which must not be behind the current value."""
        if seq < self._seq:
            raise ValueError(f"Sequence cannot move backwards ({self._seq} -> {seq})")
        self._seq = seq
        logger.debug("Sequence set to {}", seq)
