from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal


# ---------------------------
# Enumerations
# ---------------------------

BigFiveTrait = Literal["openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism"]

TRAITS: tuple = ("openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism")

ActivityCategory = Literal[
    "adventure", "cultural", "culinary", "nature", "shopping", "nightlife", "relaxation", "historical"
]

ACTIVITY_CATEGORIES: tuple = (
    "adventure", "cultural", "culinary", "nature", "shopping", "nightlife", "relaxation", "historical"
)

ActivityPacing = Literal["relaxed", "moderate", "packed"]
ActivityVariety = Literal["focused", "balanced", "diverse"]
SocialPreference = Literal["solitary", "small-groups", "large-groups", "mixed"]
PlanningStyle = Literal["spontaneous", "semi-planned", "detailed"]
AdventureLevel = Literal["safe", "moderate-risk", "adventurous"]
CulturalImmersion = Literal["tourist-friendly", "moderate", "deep-local"]

TraitScore = Annotated[int, Field(ge=0, le=100)]
LikertValue = Annotated[int, Field(strict=True, ge=1, le=5)]


# ---------------------------
# Questionnaire
# ---------------------------

class Question(BaseModel):
    id: int
    text: str
    trait: BigFiveTrait
    reversed: bool

    model_config = ConfigDict(frozen=True)


class QuestionResponse(BaseModel):
    """One Likert answer (1 = Strongly Disagree, 5 = Strongly Agree)"""
    questionId: int
    value: LikertValue

    model_config = ConfigDict(frozen=True)


# ---------------------------
# Derived values
# ---------------------------

class PersonalityScore(BaseModel):
    """Big Five trait scores normalized to 0-100"""
    openness: TraitScore
    conscientiousness: TraitScore
    extraversion: TraitScore
    agreeableness: TraitScore
    neuroticism: TraitScore

    model_config = ConfigDict(frozen=True)

    def get(self, trait: str) -> int:
        return getattr(self, trait)


class PersonalityInfluence(BaseModel):
    """Travel preferences derived from a PersonalityScore"""
    activityPacing: ActivityPacing
    activityVariety: ActivityVariety
    socialPreference: SocialPreference
    planningStyle: PlanningStyle
    adventureLevel: AdventureLevel
    culturalImmersion: CulturalImmersion
    preferredActivities: List[ActivityCategory] = []
    avoidedActivities: List[ActivityCategory] = []

    model_config = ConfigDict(frozen=True)


class ActivityRecommendations(BaseModel):
    highly_recommended: List[ActivityCategory] = []
    recommended: List[ActivityCategory] = []
    neutral: List[ActivityCategory] = []
    not_recommended: List[ActivityCategory] = []

    model_config = ConfigDict(frozen=True)
