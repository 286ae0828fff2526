"""Time Authority Protocol - interface for consistent timestamp provisioning.

Services that need timestamps inject a TimeAuthorityProtocol implementation
instead of calling datetime.now() directly, so that time-dependent rules
(task creation time, minimum retention before completion) can be tested
deterministically.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.utcnow()  # NOT datetime.now()
                ...

    For production:
        Use SystemTimeAuthority from src/infrastructure/adapters/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current local time with timezone awareness.

        Returns:
            Current datetime with timezone information (UTC recommended).
        """
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Current datetime in UTC timezone.
        """
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Returns:
            Monotonically increasing float value (in seconds).

        Note:
            Use this for measuring elapsed time, not for timestamps.
            The reference point is arbitrary - only differences are meaningful.
        """
        ...
