"""
Router package for the Liftlog API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- progression: Double progression recommendations
- programs: Program matching and plan generation
- progress: Streaks, personal records and weekly volume
"""

from api.routers.health import router as health_router
from api.routers.progression import router as progression_router
from api.routers.programs import router as programs_router
from api.routers.progress import router as progress_router

__all__ = [
    "health_router",
    "progression_router",
    "programs_router",
    "progress_router",
]
