from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from mock_llm_service import MockLLMService
from trip_planner.config import Settings
from trip_planner.errors import ConfigurationError, ModelResponseError, TransportError, ValidationError
from trip_planner.services.itinerary_service import ItineraryService


@pytest.fixture
def llm(model_reply):
    return MockLLMService(content=model_reply)


@pytest.fixture
def service(settings, llm):
    return ItineraryService(settings=settings, llm_service=llm)


def test_generates_complete_itinerary(service, llm, trip_parameters, personality_scores):
    itinerary = service.generate_itinerary(trip_parameters, personality_scores)

    assert itinerary.id.startswith("itinerary_")
    assert itinerary.createdAt.tzinfo is not None
    assert [d.date for d in itinerary.days] == [date(2024, 6, 1), date(2024, 6, 2)]
    assert itinerary.totalCost == 70
    assert itinerary.personalityInsights == "Culture-rich days with room for nature."
    assert itinerary.tripParameters == trip_parameters
    assert itinerary.personalityScores == personality_scores
    assert len(llm.calls) == 1


def test_model_call_uses_fixed_generation_config(service, llm, trip_parameters, personality_scores):
    service.generate_itinerary(trip_parameters, personality_scores)

    call = llm.calls[0]
    assert call["config"].max_output_tokens == 8000
    assert call["config"].temperature == 0.7
    assert "- Destination: Lisbon" in call["user_message"]
    assert "(2 days)" in call["user_message"]


def test_itinerary_holds_copies_of_inputs(service, trip_parameters, personality_scores):
    itinerary = service.generate_itinerary(trip_parameters, personality_scores)

    trip_parameters.interests.append("nightlife")

    assert itinerary.tripParameters.interests == ["cultural", "culinary"]
    assert itinerary.tripParameters is not trip_parameters
    assert itinerary.tripParameters.budget is not trip_parameters.budget


def test_itinerary_is_immutable(service, trip_parameters, personality_scores):
    itinerary = service.generate_itinerary(trip_parameters, personality_scores)

    with pytest.raises(PydanticValidationError):
        itinerary.tripParameters.destination = "Porto"
    with pytest.raises(PydanticValidationError):
        itinerary.tripParameters.budget.amount = 1
    with pytest.raises(PydanticValidationError):
        itinerary.personalityScores.openness = 10
    assert itinerary.tripParameters.destination == "Lisbon"


def test_each_itinerary_gets_a_new_id(service, trip_parameters, personality_scores):
    first = service.generate_itinerary(trip_parameters, personality_scores)
    second = service.generate_itinerary(trip_parameters, personality_scores)
    assert first.id != second.id


def test_missing_trip_parameters_fails_before_model_call(service, llm, personality_scores):
    with pytest.raises(ValidationError, match="Missing required fields: tripParameters"):
        service.generate_itinerary(None, personality_scores)
    assert llm.calls == []


def test_missing_both_fields_are_reported(service, llm):
    with pytest.raises(ValidationError, match="tripParameters, personalityScores"):
        service.generate_itinerary(None, None)
    assert llm.calls == []


def test_missing_credential_fails_before_model_call(llm, trip_parameters, personality_scores):
    service = ItineraryService(settings=Settings(google_api_key=""), llm_service=llm)

    with pytest.raises(ConfigurationError, match="API key not configured"):
        service.generate_itinerary(trip_parameters, personality_scores)
    assert llm.calls == []


def test_validation_is_checked_before_credential(llm, personality_scores):
    service = ItineraryService(settings=Settings(google_api_key=""), llm_service=llm)
    with pytest.raises(ValidationError):
        service.generate_itinerary(None, personality_scores)


def test_transport_failure_is_surfaced(settings, trip_parameters, personality_scores):
    llm = MockLLMService(success=False, error="503 UNAVAILABLE: model overloaded")
    service = ItineraryService(settings=settings, llm_service=llm)

    with pytest.raises(TransportError, match="503 UNAVAILABLE: model overloaded"):
        service.generate_itinerary(trip_parameters, personality_scores)
    assert len(llm.calls) == 1


def test_unparsable_reply_is_a_model_response_error(settings, trip_parameters, personality_scores):
    service = ItineraryService(settings=settings, llm_service=MockLLMService(content="I'd love to help!"))

    with pytest.raises(ModelResponseError):
        service.generate_itinerary(trip_parameters, personality_scores)
