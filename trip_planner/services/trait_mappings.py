"""
Personality-to-travel-preference inference.

Each dimension is an independent threshold rule over the trait scores.
Preferred and avoided categories come from separate rule sets and are not
reconciled against each other.
"""

from typing import List

from trip_planner.models.personality import (
    ACTIVITY_CATEGORIES,
    ActivityRecommendations,
    PersonalityInfluence,
    PersonalityScore,
)


def derive_personality_influence(scores: PersonalityScore) -> PersonalityInfluence:
    return PersonalityInfluence(
        activityPacing=derive_activity_pacing(scores),
        activityVariety=derive_activity_variety(scores),
        socialPreference=derive_social_preference(scores),
        planningStyle=derive_planning_style(scores),
        adventureLevel=derive_adventure_level(scores),
        culturalImmersion=derive_cultural_immersion(scores),
        preferredActivities=derive_preferred_activities(scores),
        avoidedActivities=derive_avoided_activities(scores),
    )


def derive_activity_pacing(scores: PersonalityScore) -> str:
    """High conscientiousness with low neuroticism packs the schedule."""
    pacing = scores.conscientiousness - scores.neuroticism
    if pacing > 20:
        return "packed"
    if pacing < -20:
        return "relaxed"
    return "moderate"


def derive_activity_variety(scores: PersonalityScore) -> str:
    if scores.openness >= 60:
        return "diverse"
    if scores.openness <= 40:
        return "focused"
    return "balanced"


def derive_social_preference(scores: PersonalityScore) -> str:
    if scores.extraversion >= 70:
        return "large-groups"
    if scores.extraversion >= 50:
        return "small-groups"
    if scores.extraversion >= 30:
        return "mixed"
    return "solitary"


def derive_planning_style(scores: PersonalityScore) -> str:
    if scores.conscientiousness >= 65:
        return "detailed"
    if scores.conscientiousness <= 35 and scores.openness >= 55:
        return "spontaneous"
    return "semi-planned"


def derive_adventure_level(scores: PersonalityScore) -> str:
    adventure = scores.openness - scores.neuroticism
    if adventure > 30:
        return "adventurous"
    if adventure < -30:
        return "safe"
    return "moderate-risk"


def derive_cultural_immersion(scores: PersonalityScore) -> str:
    immersion = (scores.openness + scores.agreeableness) / 2
    if immersion >= 65:
        return "deep-local"
    if immersion <= 40:
        return "tourist-friendly"
    return "moderate"


def _dedupe(categories: List[str]) -> List[str]:
    return list(dict.fromkeys(categories))


def derive_preferred_activities(scores: PersonalityScore) -> List[str]:
    preferred: List[str] = []

    if scores.openness >= 55:
        preferred.extend(["cultural", "historical"])
        if scores.neuroticism <= 50:
            preferred.append("adventure")

    if scores.extraversion >= 60:
        preferred.append("nightlife")

    if scores.agreeableness >= 55:
        preferred.append("culinary")

    if scores.neuroticism <= 40:
        preferred.append("nature")
        if "adventure" not in preferred:
            preferred.append("adventure")

    if scores.neuroticism >= 60:
        preferred.append("relaxation")

    if scores.openness <= 40:
        preferred.append("shopping")

    return _dedupe(preferred)


def derive_avoided_activities(scores: PersonalityScore) -> List[str]:
    avoided: List[str] = []

    if scores.neuroticism >= 65 and scores.openness <= 45:
        avoided.append("adventure")

    if scores.extraversion <= 35:
        avoided.append("nightlife")

    if scores.openness <= 35:
        avoided.append("cultural")

    return _dedupe(avoided)


def generate_personality_explanation(scores: PersonalityScore, influence: PersonalityInfluence) -> str:
    """
    Short narrative of how notable traits shape the trip.

    Traits in the moderate band contribute nothing; agreeableness only has a
    high-end sentence.
    """
    explanations: List[str] = []

    if scores.openness >= 60:
        explanations.append("Your high openness suggests you'll enjoy diverse, novel experiences and cultural immersion.")
    elif scores.openness <= 40:
        explanations.append("You prefer familiar, structured activities with clear expectations.")

    if scores.conscientiousness >= 60:
        explanations.append("Your conscientiousness means you appreciate detailed planning and packed itineraries.")
    elif scores.conscientiousness <= 40:
        explanations.append("You prefer flexibility and spontaneity in your travel plans.")

    if scores.extraversion >= 60:
        explanations.append("As an extravert, you'll thrive in social settings and group activities.")
    elif scores.extraversion <= 40:
        explanations.append("You'll enjoy quieter, more intimate experiences with smaller groups or solo activities.")

    if scores.agreeableness >= 60:
        explanations.append("Your agreeableness draws you to cooperative experiences and local interactions.")

    if scores.neuroticism >= 60:
        explanations.append("You'll benefit from a relaxed pace with buffer time and low-stress activities.")
    elif scores.neuroticism <= 40:
        explanations.append("Your emotional stability allows for intensive schedules and adventurous activities.")

    return " ".join(explanations)


def get_activity_recommendations(influence: PersonalityInfluence) -> ActivityRecommendations:
    """Bucket all eight activity categories by how well they suit the traveler."""
    preferred = list(influence.preferredActivities)
    avoided = list(influence.avoidedActivities)

    return ActivityRecommendations(
        highly_recommended=preferred[:3],
        recommended=preferred[3:],
        neutral=[c for c in ACTIVITY_CATEGORIES if c not in preferred and c not in avoided],
        not_recommended=avoided,
    )
