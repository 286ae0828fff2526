"""
API routes for the task rotation service.

Available routers:
- health: Health check endpoint
- users: User registration, lookup and removal
- tasks: Task creation and lookup
- seed: Demo data seeding
"""

from src.api.routes.health import router as health_router
from src.api.routes.seed import router as seed_router
from src.api.routes.tasks import router as tasks_router
from src.api.routes.users import router as users_router

__all__: list[str] = ["health_router", "seed_router", "tasks_router", "users_router"]
