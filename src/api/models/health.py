"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        rotation_scheduler_running: Whether the background sweep is active.
    """

    status: str
    rotation_scheduler_running: bool = False
