"""Unit tests for the application factory, lifespan, health and middleware."""


import pytest
from fastapi.testclient import TestClient

from src.api.adapters.service_result import status_for
from src.api.main import create_app
from src.api.middleware.logging_middleware import CORRELATION_HEADER
from src.bootstrap.rotation import RotationContainer, build_rotation_container
from src.config.rotation_config import TEST_ROTATION_CONFIG, RotationConfig
from src.domain.models.service_result import ErrorKind
from src.infrastructure.stubs.sequence_random_source import SequenceRandomSource
from tests.helpers.fake_time_authority import FakeTimeAuthority


def _container(config: RotationConfig) -> RotationContainer:
    return build_rotation_container(
        config,
        random_source=SequenceRandomSource(),
        time_authority=FakeTimeAuthority(),
    )


class TestHealth:
    """Tests for /v1/health."""

    def test_health_without_scheduler(self) -> None:
        """Test health reports the disabled loop."""
        with TestClient(create_app(_container(TEST_ROTATION_CONFIG), configure_logs=False)) as client:
            response = client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "rotation_scheduler_running": False}

    def test_health_with_scheduler(self) -> None:
        """Test health reports the running loop and shutdown stops it."""
        container = _container(RotationConfig(interval_seconds=60))
        with TestClient(create_app(container, configure_logs=False)) as client:
            response = client.get("/v1/health")
            assert response.json()["rotation_scheduler_running"] is True

        assert not container.scheduler.running


class TestLifespan:
    """Tests for startup behaviour."""

    def test_seed_on_startup(self) -> None:
        """Test demo data is present once the app has started."""
        container = _container(
            RotationConfig(scheduler_enabled=False, seed_on_startup=True)
        )
        with TestClient(create_app(container, configure_logs=False)) as client:
            users = client.get("/api/users").json()
            tasks = client.get("/api/tasks").json()

        assert len(users) == 10
        assert len(tasks) == 20
        assert all(task["state"] == "in_progress" for task in tasks)

    def test_no_seed_by_default(self) -> None:
        """Test the store starts empty."""
        with TestClient(create_app(_container(TEST_ROTATION_CONFIG), configure_logs=False)) as client:
            assert client.get("/api/users").json() == []

    def test_startup_sweep_runs_immediately(self) -> None:
        """Test the scheduler's first sweep happens without waiting."""
        container = _container(RotationConfig(interval_seconds=60, seed_on_startup=True))
        with TestClient(create_app(container, configure_logs=False)) as client:
            for _ in range(50):
                tasks = client.get("/api/tasks").json()
                if any(len(t["assignment_history"]) > 1 for t in tasks):
                    break
            else:
                pytest.fail("startup sweep did not move any task")


class TestLoggingMiddleware:
    """Tests for correlation id propagation."""

    def test_echoes_incoming_correlation_id(self) -> None:
        """Test a supplied correlation id is returned."""
        with TestClient(create_app(_container(TEST_ROTATION_CONFIG), configure_logs=False)) as client:
            response = client.get("/v1/health", headers={CORRELATION_HEADER: "req-42"})

        assert response.headers[CORRELATION_HEADER] == "req-42"

    def test_generates_correlation_id(self) -> None:
        """Test an id is generated when none is supplied."""
        with TestClient(create_app(_container(TEST_ROTATION_CONFIG), configure_logs=False)) as client:
            response = client.get("/v1/health")

        assert response.headers[CORRELATION_HEADER]


class TestStatusMapping:
    """Tests for ErrorKind to HTTP status mapping."""

    @pytest.mark.parametrize(
        ("kind", "status"),
        [
            (ErrorKind.DUPLICATE, 409),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.INVALID, 400),
            (ErrorKind.LIMIT_REACHED, 400),
        ],
    )
    def test_failure_kinds(self, kind: ErrorKind, status: int) -> None:
        """Test each failure kind maps to its status."""
        assert status_for(kind) == status

    def test_none_is_not_a_failure(self) -> None:
        """Test NONE has no status."""
        with pytest.raises(ValueError):
            status_for(ErrorKind.NONE)
