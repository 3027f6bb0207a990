from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Literal
from datetime import date, datetime

from trip_planner.models.personality import ActivityCategory, PersonalityScore


# ---------------------------
# Trip input
# ---------------------------

class Coordinates(BaseModel):
    lat: float
    lng: float

    model_config = ConfigDict(frozen=True)


class Budget(BaseModel):
    amount: float = Field(..., gt=0, description="Total budget")
    currency: str = Field(..., min_length=1, max_length=10, description="Currency code, e.g. USD")
    flexibility: Literal["strict", "moderate", "flexible"] = "moderate"

    model_config = ConfigDict(frozen=True)


class TripParameters(BaseModel):
    destination: str = Field(..., min_length=1, max_length=100, description="Travel destination")
    destinationCoords: Optional[Coordinates] = None
    startDate: date
    endDate: date
    budget: Budget
    travelStyle: Literal["solo", "couple", "family", "group"]
    interests: List[ActivityCategory] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("startDate", "endDate", mode="before")
    @classmethod
    def strip_time_component(cls, v):
        # Browsers serialize Date objects as full ISO timestamps
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        if isinstance(v, datetime):
            return v.date()
        return v

    @model_validator(mode="after")
    def check_date_range(self):
        if self.startDate > self.endDate:
            raise ValueError("startDate must not be after endDate")
        return self


# ---------------------------
# Generated itinerary
# ---------------------------

class Location(BaseModel):
    name: str = ""
    address: str = ""
    coordinates: Optional[Coordinates] = None

    model_config = ConfigDict(frozen=True)


class Cost(BaseModel):
    amount: float = 0
    currency: str = ""
    category: str = "free"  # free|budget|moderate|expensive

    model_config = ConfigDict(frozen=True)


class Activity(BaseModel):
    id: str
    name: str
    description: str = ""
    category: str = ""
    location: Location = Location()
    duration: int = 0  # minutes
    cost: Cost = Cost()
    timeOfDay: str = ""  # morning|afternoon|evening|night
    startTime: Optional[str] = None  # HH:MM, 24-hour
    personalityMatch: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class DayItinerary(BaseModel):
    day: int
    date: date
    activities: List[Activity] = []
    totalCost: float = 0
    summary: str = ""

    model_config = ConfigDict(frozen=True)


class Itinerary(BaseModel):
    id: str
    tripParameters: TripParameters
    personalityScores: PersonalityScore
    days: List[DayItinerary] = []
    totalCost: float = 0
    personalityInsights: Optional[str] = None
    createdAt: datetime

    model_config = ConfigDict(frozen=True)


# ---------------------------
# Request/Response Models
# ---------------------------

class GenerateItineraryRequest(BaseModel):
    # Both optional so that absence is reported as a missing-field error
    tripParameters: Optional[TripParameters] = None
    personalityScores: Optional[PersonalityScore] = None


class GenerateItineraryResponse(BaseModel):
    itinerary: Itinerary


class ErrorResponse(BaseModel):
    error: str
