from __future__ import annotations

from fastapi import APIRouter

from contact_api.config import get_settings


router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict:
    return {"status": "healthy"}


@router.get("/api/info")
def api_info() -> dict:
    return {
        "service": get_settings().app_name,
        "status": "online",
        "version": "1.0.0",
        "endpoints": {
            "contact": "POST /api/contact",
            "contacts": "GET /api/contacts",
            "admin_contacts": "GET /api/admin/contacts",
            "admin_contact_count": "GET /api/admin/contact-count",
            "feedback": "POST /api/feedback",
        },
    }
