import json
from datetime import date

import pytest

from trip_planner.config import Settings
from trip_planner.models.itinerary import Budget, TripParameters
from trip_planner.models.personality import PersonalityScore

SAMPLE_ITINERARY = {
    "days": [
        {
            "day": 1,
            "date": "June 1, 2024",
            "summary": "Old town and food",
            "activities": [
                {
                    "id": "alfama-walk",
                    "name": "Alfama Walking Tour",
                    "description": "Wander the oldest district of Lisbon.",
                    "category": "historical",
                    "location": {
                        "name": "Alfama",
                        "address": "Alfama, Lisbon",
                        "coordinates": {"lat": 38.7114, "lng": -9.1300}
                    },
                    "duration": 150,
                    "cost": {"amount": 20, "currency": "EUR", "category": "budget"},
                    "timeOfDay": "morning",
                    "startTime": "09:30",
                    "personalityMatch": "Fits high openness"
                },
                {
                    "name": "Time Out Market Dinner",
                    "description": "Sample Portuguese dishes.",
                    "category": "culinary",
                    "location": {"name": "Time Out Market", "address": "Cais do Sodre"},
                    "duration": 90,
                    "cost": {"amount": 35, "currency": "EUR", "category": "moderate"},
                    "timeOfDay": "evening",
                    "startTime": "19:00"
                }
            ],
            "totalCost": 55
        },
        {
            "day": 2,
            "date": "2024-06-02",
            "summary": "Coast",
            "activities": [
                {
                    "name": "Sintra Hike",
                    "description": "Trails around Pena Palace.",
                    "category": "nature",
                    "location": {"name": "Sintra", "address": "Sintra"},
                    "duration": 240,
                    "cost": {"amount": 15, "currency": "EUR", "category": "budget"},
                    "timeOfDay": "morning"
                }
            ]
        }
    ],
    "totalCost": 70,
    "personalityInsights": "Culture-rich days with room for nature."
}


@pytest.fixture
def settings():
    return Settings(google_api_key="test-key")


@pytest.fixture
def personality_scores():
    return PersonalityScore(
        openness=80,
        conscientiousness=60,
        extraversion=20,
        agreeableness=55,
        neuroticism=30,
    )


@pytest.fixture
def trip_parameters():
    return TripParameters(
        destination="Lisbon",
        startDate=date(2024, 6, 1),
        endDate=date(2024, 6, 2),
        budget=Budget(amount=1500, currency="EUR", flexibility="moderate"),
        travelStyle="solo",
        interests=["cultural", "culinary"],
    )


@pytest.fixture
def model_reply():
    return "Here is your itinerary:\n```json\n" + json.dumps(SAMPLE_ITINERARY, indent=2) + "\n```\nEnjoy!"


@pytest.fixture
def request_body(trip_parameters, personality_scores):
    return {
        "tripParameters": trip_parameters.model_dump(mode="json"),
        "personalityScores": personality_scores.model_dump(),
    }
