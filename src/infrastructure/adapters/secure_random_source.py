"""Cryptographically sound random source for candidate selection."""

from __future__ import annotations

import secrets

from src.application.ports.random_source import RandomSourceProtocol


class SecureRandomSource(RandomSourceProtocol):
    """Draws indices with the secrets module (OS CSPRNG, no modulo bias)."""

    def pick_index(self, upper: int) -> int:
        """Return a uniformly distributed integer in [0, upper).

        Args:
            upper: Pool size. Must be positive.

        Returns:
            Random index.

        Raises:
            ValueError: If upper is not positive.
        """
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        return secrets.randbelow(upper)
