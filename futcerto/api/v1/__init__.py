from fastapi import APIRouter

from .auth_routes import router as auth_router
from .config_routes import router as config_router
from .court_routes import router as court_router
from .manager_routes import router as manager_router
from .profile_routes import router as profile_router
from .reservation_routes import router as reservation_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(court_router)
router.include_router(reservation_router)
router.include_router(manager_router)
router.include_router(profile_router)
router.include_router(config_router)

__all__ = [
    "router",
    "auth_router",
    "config_router",
    "court_router",
    "manager_router",
    "profile_router",
    "reservation_router",
]
