import logging
import time
import uuid
from typing import Optional
from datetime import datetime, timezone

from trip_planner.config import Settings, get_settings
from trip_planner.errors import ConfigurationError, TransportError, ValidationError
from trip_planner.models.itinerary import Itinerary, TripParameters
from trip_planner.models.personality import PersonalityScore
from trip_planner.services.llm_service import LLMConfig, get_llm_service
from trip_planner.services.prompt_builder import build_itinerary_prompt, calculate_num_days
from trip_planner.services.response_parser import parse_itinerary_response
from trip_planner.services.trait_mappings import derive_personality_influence

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def new_itinerary_id() -> str:
    return f"itinerary_{int(time.time() * 1000)}_{uuid.uuid4().hex[:12]}"


class ItineraryService:
    """Generates personality-matched itineraries through the model service"""

    def __init__(self, settings: Optional[Settings] = None, llm_service=None):
        self.settings = settings or get_settings()
        self.llm_service = llm_service

    def _get_llm_service(self):
        if not self.settings.google_api_key:
            raise ConfigurationError("API key not configured")
        if self.llm_service is None:
            self.llm_service = get_llm_service(self.settings)
        return self.llm_service

    def _llm_config(self) -> LLMConfig:
        return LLMConfig(
            model=self.settings.llm_model,
            temperature=self.settings.llm_temperature,
            top_p=self.settings.llm_top_p,
            max_output_tokens=self.settings.llm_max_output_tokens,
        )

    def generate_itinerary(
        self,
        trip_parameters: Optional[TripParameters],
        personality_scores: Optional[PersonalityScore],
    ) -> Itinerary:
        """
        Generate a complete itinerary or raise an ItineraryGenerationError.

        The inputs are deep-copied into the result so later changes to the
        caller's objects do not leak into the itinerary.
        """
        missing = [
            name for name, value in (("tripParameters", trip_parameters), ("personalityScores", personality_scores))
            if value is None
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        llm_service = self._get_llm_service()

        trip = trip_parameters.model_copy(deep=True)
        scores = personality_scores.model_copy(deep=True)

        num_days = calculate_num_days(trip.startDate, trip.endDate)
        logger.info(f"Generating itinerary for {trip.destination}, {num_days} days, budget: {trip.budget.currency} {trip.budget.amount}")

        influence = derive_personality_influence(scores)
        prompt = build_itinerary_prompt(scores, influence, trip)

        logger.info("Making LLM call for itinerary generation")
        response = llm_service.generate_content(
            user_message=prompt,
            system_instruction="",
            config=self._llm_config()
        )

        if not response.success:
            logger.error(f"LLM call failed: {response.error}")
            raise TransportError(f"Model request failed: {response.error}")

        logger.info(f"LLM call successful, response length: {len(response.content)}")

        parsed = parse_itinerary_response(response.content, start_date=trip.startDate)

        itinerary = Itinerary(
            id=new_itinerary_id(),
            tripParameters=trip,
            personalityScores=scores,
            days=parsed.days,
            totalCost=parsed.total_cost,
            personalityInsights=parsed.personality_insights,
            createdAt=datetime.now(timezone.utc),
        )
        logger.info(f"Itinerary {itinerary.id} generated with {len(itinerary.days)} days")
        return itinerary
