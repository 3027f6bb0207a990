from fastapi import Depends

from trip_planner.config import Settings, get_settings
from trip_planner.services.itinerary_service import ItineraryService


# ---------------------------
# FastAPI dependencies
# ---------------------------
def get_itinerary_service(settings: Settings = Depends(get_settings)) -> ItineraryService:
    """
    Itinerary service bound to the current settings. The model client is
    created on first use so that a missing credential is reported by the
    request rather than at startup.
    """
    return ItineraryService(settings=settings)
