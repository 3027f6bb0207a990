"""
Interpretation of the model's free-text reply.

The reply should be a single JSON object, but models often wrap it in prose
or markdown fences. The object is located with a string-aware balanced brace
scan and tried in order, then the widest ``{...}`` span, then the whole text.
An object holding a ``days`` list is preferred over stray objects in prose.
"""

import json
import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterator, List, Optional, Set

from pydantic import ValidationError as PydanticValidationError

from trip_planner.errors import ModelResponseError
from trip_planner.models.itinerary import Activity, DayItinerary

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

DAY_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%m/%d/%Y")


@dataclass
class ParsedItinerary:
    """Itinerary content recovered from a model reply"""
    days: List[DayItinerary] = field(default_factory=list)
    total_cost: float = 0
    personality_insights: Optional[str] = None


def iter_balanced_objects(text: str) -> Iterator[str]:
    """Yield successive top-level ``{...}`` spans, honouring JSON strings."""
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        end = -1
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    end = i
                    break
        if end == -1:
            # Unclosed brace in prose; resume after it
            start = text.find("{", start + 1)
            continue
        yield text[start:end + 1]
        start = text.find("{", end + 1)


def find_balanced_object(text: str) -> Optional[str]:
    """Return the first complete top-level ``{...}`` span, or None."""
    return next(iter_balanced_objects(text), None)


def _candidate_spans(text: str) -> List[str]:
    candidates = list(iter_balanced_objects(text))
    first, last = text.find("{"), text.rfind("}")
    if first != -1 and last > first:
        candidates.append(text[first:last + 1])
    candidates.append(text)
    return list(dict.fromkeys(candidates))


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Parse the JSON object embedded in ``text`` or raise ModelResponseError.

    The first object carrying a ``days`` list wins; failing that, the first
    object found at all.
    """
    first_object = None
    for candidate in _candidate_spans(text.strip()):
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if not isinstance(data, dict):
            continue
        if isinstance(data.get("days"), list):
            return data
        if first_object is None:
            first_object = data

    if first_object is not None:
        return first_object

    logger.error(f"Failed to parse model response as JSON. Raw response (first 1000 chars): {text[:1000]}")
    raise ModelResponseError("Invalid JSON response from model")


def new_activity_id(taken: Set[str]) -> str:
    """Time component plus random component, re-drawn if already taken"""
    while True:
        candidate = f"activity_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"
        if candidate not in taken:
            return candidate


def parse_day_date(value: Any, start_date: Optional[date], day_number: int) -> date:
    if isinstance(value, str) and value.strip():
        raw = value.strip()
        try:
            return date.fromisoformat(raw[:10])
        except ValueError:
            pass
        for fmt in DAY_DATE_FORMATS:
            try:
                return datetime.strptime(raw, fmt).date()
            except ValueError:
                continue

    if start_date is None:
        raise ModelResponseError(f"Model response has an unreadable date for day {day_number}")
    logger.warning(f"Deriving date for day {day_number} from trip start; model gave {value!r}")
    return start_date + timedelta(days=day_number - 1)


def _normalize_activity(raw: Dict[str, Any], taken: Set[str]) -> Dict[str, Any]:
    activity = dict(raw)

    activity_id = activity.get("id")
    if not activity_id or not isinstance(activity_id, str) or activity_id in taken:
        activity_id = new_activity_id(taken)
    activity["id"] = activity_id
    taken.add(activity_id)

    # Tolerate flattened shapes
    if isinstance(activity.get("cost"), (int, float)):
        activity["cost"] = {"amount": activity["cost"]}
    if isinstance(activity.get("location"), str):
        activity["location"] = {"name": activity["location"]}
    for key in ("cost", "location", "startTime", "personalityMatch"):
        if activity.get(key) is None:
            activity.pop(key, None)

    return activity


def _sum_costs(values) -> float:
    return round(sum(values), 2)


def parse_itinerary_response(text: str, start_date: Optional[date] = None) -> ParsedItinerary:
    """
    Turn the raw model reply into itinerary days.

    Day dates are converted to ``date`` values and activities without an
    id get a synthesized one. Costs, date ranges and categories are taken
    as given by the model.
    """
    logger.info(f"Raw model response (first 200 chars): {text[:200]}")
    data = extract_json_object(text)

    raw_days = data.get("days")
    if not isinstance(raw_days, list):
        logger.error(f"Model response has no 'days' list. Raw response (first 1000 chars): {text[:1000]}")
        raise ModelResponseError("Model response did not contain an itinerary")

    taken: Set[str] = set()
    days: List[DayItinerary] = []
    try:
        for index, raw_day in enumerate(raw_days):
            if not isinstance(raw_day, dict):
                raise ModelResponseError(f"Day {index + 1} in model response is not an object")

            day_number = raw_day.get("day")
            if not isinstance(day_number, int) or isinstance(day_number, bool):
                day_number = index + 1

            raw_activities = raw_day.get("activities") or []
            if not isinstance(raw_activities, list) or not all(isinstance(a, dict) for a in raw_activities):
                raise ModelResponseError(f"Day {day_number} in model response has malformed activities")
            activities = [Activity.model_validate(_normalize_activity(a, taken)) for a in raw_activities]

            day_total = raw_day.get("totalCost")
            if day_total is None:
                day_total = _sum_costs(a.cost.amount for a in activities)

            days.append(DayItinerary(
                day=day_number,
                date=parse_day_date(raw_day.get("date"), start_date, day_number),
                activities=activities,
                totalCost=day_total,
                summary=raw_day.get("summary") or "",
            ))
    except PydanticValidationError as e:
        logger.error(f"Model response did not match itinerary structure: {e}. Raw response (first 1000 chars): {text[:1000]}")
        raise ModelResponseError("Model response did not match the itinerary structure")

    total_cost = data.get("totalCost")
    if not isinstance(total_cost, (int, float)) or isinstance(total_cost, bool):
        total_cost = _sum_costs(d.totalCost for d in days)

    insights = data.get("personalityInsights")
    logger.info(f"Parsed itinerary with {len(days)} days")
    return ParsedItinerary(
        days=days,
        total_cost=total_cost,
        personality_insights=insights if isinstance(insights, str) else None,
    )
