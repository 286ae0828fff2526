"""Deterministic random source stub for tests.

Replays a scripted sequence of picks so selection tests can force a
specific winner without weakening the production random source.

Usage:
    # Always take the first candidate
    source = SequenceRandomSource()

    # Take index 1, then 0, then fall back to the default
    source = SequenceRandomSource([1, 0])
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from src.application.ports.random_source import RandomSourceProtocol


class SequenceRandomSource(RandomSourceProtocol):
    """Returns scripted indices, clamped into range.

    When the script runs out, default_index is used. Each pick is clamped to
    upper - 1 so a script written for a larger pool stays valid.

    WARNING: This stub is NOT for production use.

    Attributes:
        calls: Pool sizes seen, in call order (for assertions).
    """

    def __init__(self, picks: Iterable[int] = (), default_index: int = 0) -> None:
        """Initialize the stub.

        Args:
            picks: Indices to return, in order.
            default_index: Index returned once picks are exhausted.
        """
        self._picks: deque[int] = deque(picks)
        self._default = default_index
        self.calls: list[int] = []

    def pick_index(self, upper: int) -> int:
        """Return the next scripted index.

        Args:
            upper: Pool size. Must be positive.

        Returns:
            Next scripted index, clamped to [0, upper).

        Raises:
            ValueError: If upper is not positive.
        """
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        self.calls.append(upper)
        index = self._picks.popleft() if self._picks else self._default
        return max(0, min(index, upper - 1))
