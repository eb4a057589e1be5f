from contact_api.routers.admin import router as admin_router
from contact_api.routers.contact import router as contact_router
from contact_api.routers.feedback import router as feedback_router
from contact_api.routers.health import router as health_router

__all__ = [
    "admin_router",
    "contact_router",
    "feedback_router",
    "health_router",
]
