import pytest

from trip_planner.models.personality import PersonalityScore
from trip_planner.services.trait_mappings import (
    derive_personality_influence,
    generate_personality_explanation,
    get_activity_recommendations,
)


def make_scores(**overrides):
    values = dict(openness=50, conscientiousness=50, extraversion=50, agreeableness=50, neuroticism=50)
    values.update(overrides)
    return PersonalityScore(**values)


def influence_for(**overrides):
    return derive_personality_influence(make_scores(**overrides))


@pytest.mark.parametrize("conscientiousness,neuroticism,expected", [
    (70, 49, "packed"),     # +21
    (70, 50, "moderate"),   # +20
    (30, 50, "moderate"),   # -20
    (30, 51, "relaxed"),    # -21
])
def test_activity_pacing(conscientiousness, neuroticism, expected):
    assert influence_for(conscientiousness=conscientiousness, neuroticism=neuroticism).activityPacing == expected


@pytest.mark.parametrize("openness,expected", [
    (60, "diverse"), (59, "balanced"), (41, "balanced"), (40, "focused"),
])
def test_activity_variety(openness, expected):
    assert influence_for(openness=openness).activityVariety == expected


@pytest.mark.parametrize("extraversion,expected", [
    (70, "large-groups"), (69, "small-groups"), (50, "small-groups"),
    (49, "mixed"), (30, "mixed"), (29, "solitary"),
])
def test_social_preference(extraversion, expected):
    assert influence_for(extraversion=extraversion).socialPreference == expected


@pytest.mark.parametrize("conscientiousness,openness,expected", [
    (65, 80, "detailed"),
    (35, 55, "spontaneous"),
    (35, 54, "semi-planned"),
    (36, 80, "semi-planned"),
])
def test_planning_style(conscientiousness, openness, expected):
    assert influence_for(conscientiousness=conscientiousness, openness=openness).planningStyle == expected


@pytest.mark.parametrize("openness,neuroticism,expected", [
    (81, 50, "adventurous"),
    (80, 50, "moderate-risk"),
    (20, 50, "moderate-risk"),
    (19, 50, "safe"),
])
def test_adventure_level(openness, neuroticism, expected):
    assert influence_for(openness=openness, neuroticism=neuroticism).adventureLevel == expected


@pytest.mark.parametrize("openness,agreeableness,expected", [
    (65, 65, "deep-local"),
    (64, 65, "moderate"),
    (41, 40, "moderate"),
    (40, 40, "tourist-friendly"),
])
def test_cultural_immersion(openness, agreeableness, expected):
    assert influence_for(openness=openness, agreeableness=agreeableness).culturalImmersion == expected


def test_preferred_activities_keep_first_seen_order_without_duplicates():
    influence = influence_for(openness=80, neuroticism=30, extraversion=20)

    assert influence.preferredActivities == ["cultural", "historical", "adventure", "nature"]
    assert influence.avoidedActivities == ["nightlife"]


def test_low_neuroticism_adds_adventure_when_openness_does_not():
    influence = influence_for(openness=30, neuroticism=30)

    assert influence.preferredActivities == ["nature", "adventure", "shopping"]
    assert influence.avoidedActivities == ["cultural"]


def test_anxious_traveler_preferences():
    influence = influence_for(openness=40, neuroticism=70, agreeableness=60)

    assert influence.preferredActivities == ["culinary", "relaxation", "shopping"]
    assert influence.avoidedActivities == ["adventure"]


def test_moderate_profile_has_no_category_opinions():
    influence = influence_for()

    assert influence.preferredActivities == []
    assert influence.avoidedActivities == []


def test_influence_is_deterministic():
    scores = make_scores(openness=72, conscientiousness=33, extraversion=61, agreeableness=58, neuroticism=44)
    assert derive_personality_influence(scores) == derive_personality_influence(scores)


def test_activity_recommendation_tiers():
    influence = influence_for(openness=80, neuroticism=30, extraversion=20)
    tiers = get_activity_recommendations(influence)

    assert tiers.highly_recommended == ["cultural", "historical", "adventure"]
    assert tiers.recommended == ["nature"]
    assert tiers.not_recommended == ["nightlife"]
    assert tiers.neutral == ["culinary", "shopping", "relaxation"]


def test_moderate_traits_produce_no_explanation():
    scores = make_scores()
    assert generate_personality_explanation(scores, derive_personality_influence(scores)) == ""


def test_explanation_joins_notable_traits_with_spaces():
    scores = make_scores(openness=60, agreeableness=40, neuroticism=40)
    text = generate_personality_explanation(scores, derive_personality_influence(scores))

    assert text == (
        "Your high openness suggests you'll enjoy diverse, novel experiences and cultural immersion. "
        "Your emotional stability allows for intensive schedules and adventurous activities."
    )


def test_low_conscientiousness_and_introversion_sentences():
    scores = make_scores(conscientiousness=40, extraversion=40)
    text = generate_personality_explanation(scores, derive_personality_influence(scores))

    assert "flexibility and spontaneity" in text
    assert "quieter, more intimate experiences" in text
