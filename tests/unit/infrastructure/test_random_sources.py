"""Unit tests for SecureRandomSource and SequenceRandomSource."""

from collections import Counter

import pytest

from src.infrastructure.adapters.secure_random_source import SecureRandomSource
from src.infrastructure.stubs.sequence_random_source import SequenceRandomSource


class TestSecureRandomSource:
    """Tests for the production random source."""

    def test_indices_in_range(self) -> None:
        """Test every pick is inside the pool."""
        source = SecureRandomSource()
        for upper in (1, 2, 7):
            assert all(0 <= source.pick_index(upper) < upper for _ in range(200))

    def test_single_member_pool(self) -> None:
        """Test a pool of one always yields zero."""
        assert SecureRandomSource().pick_index(1) == 0

    def test_every_index_reachable(self) -> None:
        """Test all indices of a small pool show up."""
        source = SecureRandomSource()
        seen = Counter(source.pick_index(3) for _ in range(600))
        assert set(seen) == {0, 1, 2}

    @pytest.mark.parametrize("upper", [0, -1])
    def test_empty_pool_rejected(self, upper: int) -> None:
        """Test a non-positive pool size is rejected."""
        with pytest.raises(ValueError):
            SecureRandomSource().pick_index(upper)


class TestSequenceRandomSource:
    """Tests for the scripted stub."""

    def test_replays_script_then_default(self) -> None:
        """Test scripted picks come first, then the default."""
        source = SequenceRandomSource([2, 1], default_index=0)
        assert [source.pick_index(5) for _ in range(3)] == [2, 1, 0]

    def test_clamps_to_pool(self) -> None:
        """Test a pick larger than the pool is clamped."""
        source = SequenceRandomSource([9])
        assert source.pick_index(3) == 2

    def test_records_pool_sizes(self) -> None:
        """Test calls holds every pool size seen."""
        source = SequenceRandomSource()
        source.pick_index(4)
        source.pick_index(1)
        assert source.calls == [4, 1]

    def test_empty_pool_rejected(self) -> None:
        """Test a zero pool size is rejected."""
        with pytest.raises(ValueError):
            SequenceRandomSource().pick_index(0)
