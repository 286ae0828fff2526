"""
Pytest configuration and shared fixtures for task rotation tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Use SequenceRandomSource to script selection, FakeTimeAuthority for time
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from datetime import timedelta

import pytest

from src.application.services.task_rotation_service import TaskRotationService
from src.infrastructure.adapters.in_memory_rotation_store import InMemoryRotationStore
from src.infrastructure.stubs.sequence_random_source import SequenceRandomSource
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Provide a frozen clock."""
    return FakeTimeAuthority()


@pytest.fixture
def random_source() -> SequenceRandomSource:
    """Provide a random source that always picks the first candidate."""
    return SequenceRandomSource()


@pytest.fixture
def store() -> InMemoryRotationStore:
    """Provide an empty store."""
    return InMemoryRotationStore()


@pytest.fixture
def rotation_service(
    store: InMemoryRotationStore,
    random_source: SequenceRandomSource,
    fake_time_authority: FakeTimeAuthority,
) -> TaskRotationService:
    """Provide an engine with the completion guard disabled."""
    return TaskRotationService(
        store=store,
        random_source=random_source,
        time_authority=fake_time_authority,
        min_retention=timedelta(0),
    )


@pytest.fixture
def guarded_rotation_service(
    store: InMemoryRotationStore,
    random_source: SequenceRandomSource,
    fake_time_authority: FakeTimeAuthority,
) -> TaskRotationService:
    """Provide an engine whose tasks cannot complete for ten minutes."""
    return TaskRotationService(
        store=store,
        random_source=random_source,
        time_authority=fake_time_authority,
        min_retention=timedelta(minutes=10),
    )
