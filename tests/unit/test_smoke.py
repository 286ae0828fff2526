"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed
2. All runtime dependencies are importable
3. The project version is accessible

Run with: pytest tests/unit/test_smoke.py -v
"""

import sys

import pytest


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        """Python 3.11+ is required."""
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreFramework:
    """Verify core framework dependencies."""

    def test_fastapi_import(self) -> None:
        """FastAPI must be importable."""
        from fastapi import FastAPI

        app = FastAPI()
        assert app is not None

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed (required for FastAPI integration)."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_uvicorn_import(self) -> None:
        """Uvicorn must be importable to serve src.api.main:app."""
        import uvicorn

        assert uvicorn is not None

    def test_httpx_import(self) -> None:
        """httpx must be importable for fastapi.testclient."""
        import httpx

        assert httpx.AsyncClient is not None


class TestLoggingAndIds:
    """Verify logging and identifier dependencies."""

    def test_structlog_import(self) -> None:
        """structlog must be importable."""
        import structlog

        assert structlog.get_logger() is not None

    def test_uuid7_generation(self) -> None:
        """uuid6 must provide UUIDv7 ids."""
        from uuid6 import uuid7

        assert uuid7().version == 7


class TestProjectVersion:
    """Verify project version is accessible."""

    def test_version_accessible(self, project_version: str) -> None:
        """Project version must be importable."""
        assert project_version == "0.1.0"

    def test_app_importable(self) -> None:
        """The ASGI app must import without side effects."""
        from src.api.main import app

        assert app.title == "Task Rotation API"


class TestAsyncCapabilities:
    """Verify async functionality works."""

    @pytest.mark.asyncio
    async def test_async_function_runs(self) -> None:
        """Basic async functions must work."""
        import asyncio

        await asyncio.sleep(0)
        assert True
