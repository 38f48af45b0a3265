# eventboard/api/v1/api.py

from fastapi import APIRouter
from eventboard.api.v1.endpoints import (
    auth,
    organizer,
    categories,
    events,
    overview,
    attendees,
)

# Main router for the v1 API; each endpoint module contributes its own router.
api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(organizer.router)
api_router.include_router(categories.router)
api_router.include_router(events.router)
api_router.include_router(overview.router)
api_router.include_router(attendees.router)
