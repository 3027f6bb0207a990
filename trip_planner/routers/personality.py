from fastapi import APIRouter
from pydantic import BaseModel
from typing import Dict, List
import logging

from trip_planner.models.personality import (
    ActivityRecommendations,
    PersonalityInfluence,
    PersonalityScore,
    Question,
    QuestionResponse,
    TRAITS,
)
from trip_planner.services.personality_scoring import (
    calculate_personality_scores,
    get_trait_interpretation,
    get_trait_label,
    record_response,
    validate_responses,
)
from trip_planner.services.questions import BFI_QUESTIONS, LIKERT_SCALE
from trip_planner.services.trait_mappings import (
    derive_personality_influence,
    generate_personality_explanation,
    get_activity_recommendations,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/personality", tags=["personality"])


# Request/Response Models
class LikertOption(BaseModel):
    value: int
    label: str


class QuestionnaireResponse(BaseModel):
    questions: List[Question]
    scale: List[LikertOption]
    totalQuestions: int


class ScoreRequest(BaseModel):
    responses: List[QuestionResponse] = []


class ScoreResponse(BaseModel):
    scores: PersonalityScore
    labels: Dict[str, str]
    interpretations: Dict[str, str]
    complete: bool
    missingQuestionIds: List[int]


class InfluenceResponse(BaseModel):
    influence: PersonalityInfluence
    explanation: str
    recommendations: ActivityRecommendations


@router.get("/questions", response_model=QuestionnaireResponse)
def get_questions():
    """The BFI-44 questionnaire and its answer scale"""
    return QuestionnaireResponse(
        questions=list(BFI_QUESTIONS),
        scale=[LikertOption(**option) for option in LIKERT_SCALE],
        totalQuestions=len(BFI_QUESTIONS)
    )


@router.post("/scores", response_model=ScoreResponse)
def score_responses(request: ScoreRequest):
    """Score questionnaire answers; a repeated question id keeps its last answer."""
    responses: List[QuestionResponse] = []
    for answer in request.responses:
        responses = record_response(responses, answer.questionId, answer.value)

    scores = calculate_personality_scores(responses)
    complete, missing = validate_responses(responses)
    logger.info(f"Scored {len(responses)} responses, complete: {complete}")

    return ScoreResponse(
        scores=scores,
        labels={trait: get_trait_label(scores.get(trait)) for trait in TRAITS},
        interpretations={trait: get_trait_interpretation(trait, scores.get(trait)) for trait in TRAITS},
        complete=complete,
        missingQuestionIds=missing
    )


@router.post("/influence", response_model=InfluenceResponse)
def personality_influence(scores: PersonalityScore):
    """Travel preferences derived from trait scores"""
    influence = derive_personality_influence(scores)
    return InfluenceResponse(
        influence=influence,
        explanation=generate_personality_explanation(scores, influence),
        recommendations=get_activity_recommendations(influence)
    )
