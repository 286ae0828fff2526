"""Infrastructure adapters for task rotation.

Adapters implement the ports defined in the application layer,
providing concrete implementations for storage, randomness and time.
"""

from src.infrastructure.adapters.in_memory_rotation_store import (
    InMemoryRotationStore,
)
from src.infrastructure.adapters.secure_random_source import SecureRandomSource
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = [
    "InMemoryRotationStore",
    "SecureRandomSource",
    "SystemTimeAuthority",
]
