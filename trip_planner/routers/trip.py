from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
import logging
from datetime import datetime

from trip_planner.dependencies import get_itinerary_service
from trip_planner.errors import ItineraryGenerationError
from trip_planner.models.itinerary import ErrorResponse, GenerateItineraryRequest, GenerateItineraryResponse
from trip_planner.services.itinerary_service import ItineraryService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["trip"])


@router.post("/generate-itinerary", response_model=GenerateItineraryResponse, responses={
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    500: {"model": ErrorResponse, "description": "Model service not configured"},
    502: {"model": ErrorResponse, "description": "Model call or response parsing failed"}
})
def generate_itinerary(
    request: GenerateItineraryRequest,
    response: Response,
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    """
    Generate a personality-matched itinerary.

    Either the complete itinerary is returned or a single ``error`` message;
    no partial itinerary is ever produced and nothing is retried.
    """
    start_time = datetime.now()

    try:
        itinerary = itinerary_service.generate_itinerary(
            trip_parameters=request.tripParameters,
            personality_scores=request.personalityScores
        )
    except ItineraryGenerationError as e:
        logger.error(f"Itinerary generation failed ({type(e).__name__}): {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception as e:
        logger.error(f"Unexpected error in itinerary generation: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate itinerary"}
        )

    processing_time = (datetime.now() - start_time).total_seconds()
    logger.info(f"Itinerary generation completed successfully in {processing_time:.2f}s")

    response.headers["X-Request-Timeout"] = f"{itinerary_service.settings.llm_timeout_seconds:g}"
    response.headers["X-Processing-Time"] = str(processing_time)

    return GenerateItineraryResponse(itinerary=itinerary)
