"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- RotationStoreProtocol: Exclusive owner of the user/task aggregate
- RandomSourceProtocol: Uniform random index for candidate selection
- TimeAuthorityProtocol: Injected clock
"""

from src.application.ports.random_source import RandomSourceProtocol
from src.application.ports.rotation_store import (
    LiveWriter,
    RotationStoreProtocol,
    SnapshotReader,
)
from src.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "LiveWriter",
    "RandomSourceProtocol",
    "RotationStoreProtocol",
    "SnapshotReader",
    "TimeAuthorityProtocol",
]
