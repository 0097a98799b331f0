from __future__ import annotations

from fastapi import Request

from galileo.modules.education.service import EducationService


def get_education_service(request: Request) -> EducationService:
    """Return the app-wide service created in the lifespan handler."""
    return request.app.state.education_service
