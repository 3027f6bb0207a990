"""
Big Five scoring for BFI-44 questionnaire responses.

Scores are the mean Likert answer per trait (reversed items flipped to
``6 - value``) rescaled from 1-5 to 0-100 and rounded.
"""

import math
from typing import Dict, Iterable, List, Sequence, Tuple

from trip_planner.models.personality import PersonalityScore, QuestionResponse, TRAITS
from trip_planner.services.questions import BFI_QUESTIONS, QUESTIONS_BY_ID

SCALE_MIDPOINT = 3


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 62.5 must become 63
    return int(math.floor(value + 0.5))


def calculate_personality_scores(responses: Iterable[QuestionResponse]) -> PersonalityScore:
    """
    Calculate Big Five scores from questionnaire responses.

    Responses to unknown question ids are ignored. A trait with no answered
    questions averages to the scale midpoint, i.e. a score of 50. Values are
    not range checked here; see ``is_valid_response``.
    """
    sums: Dict[str, float] = {trait: 0 for trait in TRAITS}
    counts: Dict[str, int] = {trait: 0 for trait in TRAITS}

    for response in responses:
        question = QUESTIONS_BY_ID.get(response.questionId)
        if question is None:
            continue
        value = 6 - response.value if question.reversed else response.value
        sums[question.trait] += value
        counts[question.trait] += 1

    scores = {}
    for trait in TRAITS:
        average = sums[trait] / counts[trait] if counts[trait] else SCALE_MIDPOINT
        scores[trait] = _round_half_up((average - 1) / 4 * 100)

    return PersonalityScore(**scores)


def record_response(
    responses: Sequence[QuestionResponse], question_id: int, value: int
) -> List[QuestionResponse]:
    """Return a new response list with ``question_id`` answered; a later answer replaces an earlier one."""
    updated = [r for r in responses if r.questionId != question_id]
    updated.append(QuestionResponse(questionId=question_id, value=value))
    return updated


def validate_responses(responses: Iterable[QuestionResponse]) -> Tuple[bool, List[int]]:
    """Check that every question has been answered; returns (valid, missing ids)."""
    answered = {r.questionId for r in responses}
    missing = [q.id for q in BFI_QUESTIONS if q.id not in answered]
    return len(missing) == 0, missing


def is_valid_response(value) -> bool:
    """A Likert value must be an integer from 1 to 5"""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 5


def get_trait_label(score: int) -> str:
    if score >= 70:
        return "Very High"
    if score >= 55:
        return "High"
    if score >= 45:
        return "Moderate"
    if score >= 30:
        return "Low"
    return "Very Low"


def trait_level(score: int) -> str:
    """Three-band level used by interpretations and prompt descriptions"""
    if score >= 55:
        return "high"
    if score >= 45:
        return "moderate"
    return "low"


TRAIT_INTERPRETATIONS = {
    "openness": {
        "high": "You are imaginative, curious, and open to new experiences. You appreciate art, adventure, and variety.",
        "moderate": "You balance familiarity with novelty, enjoying some new experiences while valuing tradition.",
        "low": "You prefer routine and familiar experiences. You are practical and traditional in your approach.",
    },
    "conscientiousness": {
        "high": "You are organized, reliable, and goal-oriented. You plan carefully and follow through on commitments.",
        "moderate": "You balance structure with flexibility, maintaining organization while adapting when needed.",
        "low": "You are spontaneous and flexible. You prefer to go with the flow rather than strict planning.",
    },
    "extraversion": {
        "high": "You are outgoing, energetic, and enjoy social interactions. You thrive in group settings.",
        "moderate": "You enjoy socializing but also value alone time. You adapt to both group and solo activities.",
        "low": "You are reserved and prefer smaller, intimate gatherings or solitary activities.",
    },
    "agreeableness": {
        "high": "You are compassionate, cooperative, and value harmony. You prioritize others' needs and feelings.",
        "moderate": "You balance self-interest with consideration for others, being cooperative yet assertive.",
        "low": "You are competitive and direct. You prioritize your own goals and speak your mind.",
    },
    "neuroticism": {
        "high": "You are sensitive and may experience stress more intensely. You benefit from calm, predictable environments.",
        "moderate": "You handle stress reasonably well with occasional anxiety. You adapt to most situations.",
        "low": "You are emotionally stable and resilient. You remain calm under pressure and handle stress well.",
    },
}


def get_trait_interpretation(trait: str, score: int) -> str:
    return TRAIT_INTERPRETATIONS[trait][trait_level(score)]
