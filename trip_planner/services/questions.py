"""
BFI-44 (Big Five Inventory, 44 items).

Answers use a 5-point Likert scale. Items flagged ``reversed`` are scored
as ``6 - value``.
"""

from typing import List, Tuple

from trip_planner.models.personality import Question


def _q(qid: int, text: str, trait: str, reversed: bool = False) -> Question:
    return Question(id=qid, text=f"I see myself as someone who {text}", trait=trait, reversed=reversed)


BFI_QUESTIONS: Tuple[Question, ...] = (
    # EXTRAVERSION (8 items)
    _q(1, "is talkative", "extraversion"),
    _q(6, "is reserved", "extraversion", True),
    _q(11, "is full of energy", "extraversion"),
    _q(16, "generates a lot of enthusiasm", "extraversion"),
    _q(21, "tends to be quiet", "extraversion", True),
    _q(26, "has an assertive personality", "extraversion"),
    _q(31, "is sometimes shy, inhibited", "extraversion", True),
    _q(36, "is outgoing, sociable", "extraversion"),

    # AGREEABLENESS (9 items)
    _q(2, "tends to find fault with others", "agreeableness", True),
    _q(7, "is helpful and unselfish with others", "agreeableness"),
    _q(12, "starts quarrels with others", "agreeableness", True),
    _q(17, "has a forgiving nature", "agreeableness"),
    _q(22, "is generally trusting", "agreeableness"),
    _q(27, "can be cold and aloof", "agreeableness", True),
    _q(32, "is considerate and kind to almost everyone", "agreeableness"),
    _q(37, "is sometimes rude to others", "agreeableness", True),
    _q(42, "likes to cooperate with others", "agreeableness"),

    # CONSCIENTIOUSNESS (9 items)
    _q(3, "does a thorough job", "conscientiousness"),
    _q(8, "can be somewhat careless", "conscientiousness", True),
    _q(13, "is a reliable worker", "conscientiousness"),
    _q(18, "tends to be disorganized", "conscientiousness", True),
    _q(23, "tends to be lazy", "conscientiousness", True),
    _q(28, "perseveres until the task is finished", "conscientiousness"),
    _q(33, "does things efficiently", "conscientiousness"),
    _q(38, "makes plans and follows through with them", "conscientiousness"),
    _q(43, "is easily distracted", "conscientiousness", True),

    # NEUROTICISM (8 items)
    _q(4, "is depressed, blue", "neuroticism"),
    _q(9, "is relaxed, handles stress well", "neuroticism", True),
    _q(14, "can be tense", "neuroticism"),
    _q(19, "worries a lot", "neuroticism"),
    _q(24, "is emotionally stable, not easily upset", "neuroticism", True),
    _q(29, "can be moody", "neuroticism"),
    _q(34, "remains calm in tense situations", "neuroticism", True),
    _q(39, "gets nervous easily", "neuroticism"),

    # OPENNESS (10 items)
    _q(5, "is original, comes up with new ideas", "openness"),
    _q(10, "is curious about many different things", "openness"),
    _q(15, "is ingenious, a deep thinker", "openness"),
    _q(20, "has an active imagination", "openness"),
    _q(25, "is inventive", "openness"),
    _q(30, "values artistic, aesthetic experiences", "openness"),
    _q(35, "prefers work that is routine", "openness", True),
    _q(40, "likes to reflect, play with ideas", "openness"),
    _q(41, "has few artistic interests", "openness", True),
    _q(44, "is sophisticated in art, music, or literature", "openness"),
)

LIKERT_SCALE = (
    {"value": 1, "label": "Strongly Disagree"},
    {"value": 2, "label": "Disagree"},
    {"value": 3, "label": "Neutral"},
    {"value": 4, "label": "Agree"},
    {"value": 5, "label": "Strongly Agree"},
)

TOTAL_QUESTIONS = len(BFI_QUESTIONS)

QUESTIONS_BY_ID = {q.id: q for q in BFI_QUESTIONS}


def get_questions_by_trait(trait: str) -> List[Question]:
    return [q for q in BFI_QUESTIONS if q.trait == trait]
