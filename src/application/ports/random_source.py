"""Random source protocol for unbiased candidate selection.

Selection between eligible users must be uniform and unpredictable in
production. Tests replace the source instead of relying on a fixed order, so
the selection algorithm itself never has to be deterministic.
"""

from abc import ABC, abstractmethod


class RandomSourceProtocol(ABC):
    """Abstract interface for drawing a random index.

    For production:
        Use SecureRandomSource from src/infrastructure/adapters/

    For testing:
        Use SequenceRandomSource from src/infrastructure/stubs/
    """

    @abstractmethod
    def pick_index(self, upper: int) -> int:
        """Return an integer i with 0 <= i < upper.

        Args:
            upper: Size of the pool being drawn from. Must be positive.

        Returns:
            Index into the pool.

        Raises:
            ValueError: If upper is not positive.
        """
        ...
