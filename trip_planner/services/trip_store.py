"""
Local itinerary storage and the planning session context.

- Saved itineraries live in a key-value store keyed by itinerary id and
  are read and written wholesale.
- ``TripSession`` holds the state of one planning flow (quiz results,
  trip parameters, current itinerary) with storage injected.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from trip_planner.models.itinerary import Itinerary
from trip_planner.models.personality import PersonalityScore

logger = logging.getLogger(__name__)

STEPS = ("landing", "personality", "parameters", "itinerary")


class ItineraryStorage(Protocol):
    def save(self, itinerary: Itinerary) -> None: ...

    def load_by_id(self, itinerary_id: str) -> Optional[Itinerary]: ...

    def delete_by_id(self, itinerary_id: str) -> None: ...

    def list_all(self) -> List[Itinerary]: ...


class InMemoryItineraryStorage:
    def __init__(self):
        self._items: Dict[str, Itinerary] = {}

    def save(self, itinerary: Itinerary) -> None:
        self._items[itinerary.id] = itinerary

    def load_by_id(self, itinerary_id: str) -> Optional[Itinerary]:
        return self._items.get(itinerary_id)

    def delete_by_id(self, itinerary_id: str) -> None:
        self._items.pop(itinerary_id, None)

    def list_all(self) -> List[Itinerary]:
        return list(self._items.values())


class JsonFileItineraryStorage:
    """Itineraries persisted as one JSON document: ``{id: itinerary}``"""

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, documents: Dict[str, Any]) -> None:
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(documents, f, indent=2)
        os.replace(tmp_path, self.path)

    def save(self, itinerary: Itinerary) -> None:
        documents = self._read()
        documents[itinerary.id] = itinerary.model_dump(mode="json")
        self._write(documents)
        logger.info(f"Saved itinerary {itinerary.id} to {self.path}")

    def load_by_id(self, itinerary_id: str) -> Optional[Itinerary]:
        document = self._read().get(itinerary_id)
        return Itinerary.model_validate(document) if document else None

    def delete_by_id(self, itinerary_id: str) -> None:
        documents = self._read()
        if documents.pop(itinerary_id, None) is not None:
            self._write(documents)
            logger.info(f"Deleted itinerary {itinerary_id} from {self.path}")

    def list_all(self) -> List[Itinerary]:
        return [Itinerary.model_validate(doc) for doc in self._read().values()]


@dataclass
class TripSession:
    storage: ItineraryStorage
    current_step: str = "landing"
    personality_scores: Optional[PersonalityScore] = None
    trip_parameters: Dict[str, Any] = field(default_factory=dict)
    current_itinerary: Optional[Itinerary] = None
    is_generating: bool = False
    error: Optional[str] = None

    def set_current_step(self, step: str) -> None:
        if step not in STEPS:
            raise ValueError(f"Unknown step: {step}")
        self.current_step = step

    def set_personality_scores(self, scores: PersonalityScore) -> None:
        self.personality_scores = scores
        self.current_step = "parameters"

    def clear_personality_scores(self) -> None:
        self.personality_scores = None

    def update_trip_parameters(self, **params: Any) -> None:
        """Merge partially filled trip parameters"""
        self.trip_parameters = {**self.trip_parameters, **params}

    def clear_trip_parameters(self) -> None:
        self.trip_parameters = {}

    def set_current_itinerary(self, itinerary: Itinerary) -> None:
        self.current_itinerary = itinerary
        self.current_step = "itinerary"

    def clear_current_itinerary(self) -> None:
        self.current_itinerary = None

    def set_is_generating(self, is_generating: bool) -> None:
        self.is_generating = is_generating

    def set_error(self, error: Optional[str]) -> None:
        self.error = error

    def save_itinerary(self, itinerary: Itinerary) -> None:
        """Insert or replace by id"""
        self.storage.save(itinerary)

    def delete_itinerary(self, itinerary_id: str) -> None:
        self.storage.delete_by_id(itinerary_id)
        if self.current_itinerary is not None and self.current_itinerary.id == itinerary_id:
            self.current_itinerary = None

    def load_itinerary(self, itinerary_id: str) -> Optional[Itinerary]:
        itinerary = self.storage.load_by_id(itinerary_id)
        if itinerary is None:
            return None
        self.current_itinerary = itinerary
        self.personality_scores = itinerary.personalityScores
        self.trip_parameters = itinerary.tripParameters.model_dump()
        self.current_step = "itinerary"
        return itinerary

    @property
    def saved_itineraries(self) -> List[Itinerary]:
        return self.storage.list_all()

    @property
    def has_trip_parameters(self) -> bool:
        return all(self.trip_parameters.get(key) is not None for key in ("destination", "startDate", "endDate"))

    @property
    def can_generate_itinerary(self) -> bool:
        return self.personality_scores is not None and self.has_trip_parameters and not self.is_generating

    def reset(self) -> None:
        """Back to the initial state; saved itineraries are kept in storage"""
        self.current_step = "landing"
        self.personality_scores = None
        self.trip_parameters = {}
        self.current_itinerary = None
        self.is_generating = False
        self.error = None


def create_trip_session(settings) -> TripSession:
    """Session backed by the JSON file configured in ``settings.itinerary_store_path``"""
    return TripSession(storage=JsonFileItineraryStorage(settings.itinerary_store_path))
