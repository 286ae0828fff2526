"""
Application layer - Use cases and orchestration for task rotation.

This layer contains:
- The task rotation service (user/task lifecycle, rotation sweep)
- The rotation scheduler (periodic sweep driver)
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""

from src.application.ports import (
    RandomSourceProtocol,
    RotationStoreProtocol,
    TimeAuthorityProtocol,
)

__all__: list[str] = [
    "RandomSourceProtocol",
    "RotationStoreProtocol",
    "TimeAuthorityProtocol",
]
