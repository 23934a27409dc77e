"""
API routers module.

One router per entity group, plus the operational endpoints.
"""
from api.routers.health import router as health_router
from api.routers.users import router as users_router
from api.routers.records import router as health_records_router
from api.routers.medications import router as medications_router
from api.routers.consultations import router as consultations_router
from api.routers.diet import router as diet_router
from api.routers.exercise import router as exercise_router
from api.routers.mental_health import router as mental_health_router
from api.routers.challenges import router as challenges_router

ENTITY_ROUTERS = [
    users_router,
    health_records_router,
    medications_router,
    consultations_router,
    diet_router,
    exercise_router,
    mental_health_router,
    challenges_router,
]

__all__ = [
    "health_router",
    "users_router",
    "health_records_router",
    "medications_router",
    "consultations_router",
    "diet_router",
    "exercise_router",
    "mental_health_router",
    "challenges_router",
    "ENTITY_ROUTERS",
]
