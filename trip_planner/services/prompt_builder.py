"""
Prompt construction for itinerary generation.

The prompt carries the traveler's trait profile, the derived travel
preferences, the trip parameters and the exact JSON shape the model must
return.
"""

from datetime import date

from trip_planner.models.itinerary import TripParameters
from trip_planner.models.personality import PersonalityInfluence, PersonalityScore, TRAITS
from trip_planner.services.personality_scoring import get_trait_label, trait_level
from trip_planner.services.trait_mappings import generate_personality_explanation


TRAIT_DESCRIPTIONS = {
    "openness": {
        "high": "Seeks novel experiences, appreciates art and culture, enjoys diverse activities",
        "moderate": "Balances familiar with novel, open to some new experiences",
        "low": "Prefers routine and familiar activities, practical approach",
    },
    "conscientiousness": {
        "high": "Organized, detail-oriented, follows schedules strictly",
        "moderate": "Balanced planning with flexibility",
        "low": "Spontaneous, flexible, goes with the flow",
    },
    "extraversion": {
        "high": "Energized by social interaction, enjoys group activities",
        "moderate": "Balanced between social and solo time",
        "low": "Prefers quieter, intimate settings and solo activities",
    },
    "agreeableness": {
        "high": "Cooperative, values harmony, enjoys local interactions",
        "moderate": "Balances cooperation with assertiveness",
        "low": "Direct, competitive, prioritizes own goals",
    },
    "neuroticism": {
        "high": "Benefits from relaxed pace, predictable schedule, low-stress activities",
        "moderate": "Handles moderate stress, needs some buffer time",
        "low": "Emotionally stable, handles intensive schedules and adventure well",
    },
}

ACTIVITY_FIELD_DOCS = """For each activity, provide:
- Name (specific place or experience)
- Description (2-3 sentences explaining what it is)
- Category (one of: adventure, cultural, culinary, nature, shopping, nightlife, relaxation, historical)
- Location (name, address, coordinates as lat/lng)
- Duration in minutes
- Cost (amount in {currency}, category: free/budget/moderate/expensive)
- Time of day (morning/afternoon/evening/night)
- Start time (HH:MM format, 24-hour)
- Brief explanation of how this activity matches the traveler's personality"""

RESPONSE_EXAMPLE = """{{
  "days": [
    {{
      "day": 1,
      "date": "{start_date}",
      "summary": "Brief summary of the day",
      "activities": [
        {{
          "id": "unique-id",
          "name": "Activity name",
          "description": "Description",
          "category": "cultural",
          "location": {{
            "name": "Location name",
            "address": "Full address",
            "coordinates": {{ "lat": 40.7128, "lng": -74.0060 }}
          }},
          "duration": 120,
          "cost": {{
            "amount": 25,
            "currency": "{currency}",
            "category": "moderate"
          }},
          "timeOfDay": "morning",
          "startTime": "09:00",
          "personalityMatch": "Matches high openness..."
        }}
      ],
      "totalCost": 100
    }}
  ],
  "totalCost": 500,
  "personalityInsights": "Overall explanation of how the itinerary matches this personality profile"
}}"""


def format_prompt_date(value: date) -> str:
    """e.g. June 1, 2024"""
    return f"{value:%B} {value.day}, {value.year}"


def calculate_num_days(start_date: date, end_date: date) -> int:
    """Inclusive number of calendar days between two dates"""
    return (end_date - start_date).days + 1


def get_trait_description(trait: str, score: int) -> str:
    return TRAIT_DESCRIPTIONS.get(trait, {}).get(trait_level(score), "")


def _format_amount(amount: float) -> str:
    return str(int(amount)) if float(amount).is_integer() else f"{amount:.2f}"


def build_itinerary_prompt(
    scores: PersonalityScore,
    influence: PersonalityInfluence,
    trip: TripParameters,
) -> str:
    """Build the full instruction string sent to the model."""
    explanation = generate_personality_explanation(scores, influence)
    start_date = format_prompt_date(trip.startDate)
    end_date = format_prompt_date(trip.endDate)
    num_days = calculate_num_days(trip.startDate, trip.endDate)
    currency = trip.budget.currency

    trait_lines = []
    for trait in TRAITS:
        score = scores.get(trait)
        trait_lines.append(
            f"- {trait.capitalize()}: {score}/100 ({get_trait_label(score)}) - {get_trait_description(trait, score)}"
        )

    preference_lines = [
        f"- Activity Pacing: {influence.activityPacing}",
        f"- Activity Variety: {influence.activityVariety}",
        f"- Social Preference: {influence.socialPreference}",
        f"- Planning Style: {influence.planningStyle}",
        f"- Adventure Level: {influence.adventureLevel}",
        f"- Cultural Immersion: {influence.culturalImmersion}",
        f"- Preferred Activities: {', '.join(influence.preferredActivities) or 'none'}",
    ]
    if influence.avoidedActivities:
        preference_lines.append(f"- Activities to Minimize: {', '.join(influence.avoidedActivities)}")

    sections = [
        "You are an expert travel planner creating a personalized trip itinerary.",
        "# TRAVELER PERSONALITY PROFILE",
        "## Big Five Scores (0-100 scale)\n" + "\n".join(trait_lines),
        "## Derived Travel Preferences\n" + (explanation + "\n\n" if explanation else "") + "\n".join(preference_lines),
        "# TRIP PARAMETERS\n" + "\n".join([
            f"- Destination: {trip.destination}",
            f"- Dates: {start_date} to {end_date} ({num_days} days)",
            f"- Budget: {currency} {_format_amount(trip.budget.amount)} ({trip.budget.flexibility} flexibility)",
            f"- Travel Style: {trip.travelStyle}",
            f"- Interests: {', '.join(trip.interests)}",
        ]),
        "# TASK\n" + "\n".join([
            "Create a detailed day-by-day itinerary that:",
            "1. Matches this traveler's personality profile and preferences",
            "2. Stays within the specified budget (total cost should be close to but not exceed the budget)",
            "3. Includes activities from their stated interests",
            "4. Respects their social preferences and pacing",
            "5. Provides variety appropriate to their openness score",
            "6. Includes specific activity times and durations",
            f"7. Covers every one of the {num_days} days from {start_date} to {end_date}",
        ]),
        ACTIVITY_FIELD_DOCS.format(currency=currency),
        "Return your response as a valid JSON object with this exact structure:\n"
        + RESPONSE_EXAMPLE.format(start_date=start_date, currency=currency),
        "IMPORTANT: Return ONLY the JSON object, no additional text before or after.",
    ]

    return "\n\n".join(sections)
