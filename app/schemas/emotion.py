from pydantic import BaseModel, Field
from uuid import UUID
from datetime import date, datetime, time
from typing import Literal
from app.schemas.common import CamelModel, Pagination

SeverityLevel = Literal["low", "moderate", "high", "critical"]

class ConcerningThought(CamelModel):
    tag: str = Field(min_length=1, max_length=100)
    severity: SeverityLevel

class EmotionCheckinCreate(CamelModel):
    selected_struggles: list[str] = Field(default_factory=list)
    selected_positive_moments: list[str] = Field(default_factory=list)
    selected_concerning_thoughts: list[ConcerningThought] = Field(default_factory=list)
    grateful_for: str | None = Field(default=None, max_length=1000)
    proud_of_today: str | None = Field(default=None, max_length=1000)
    tomorrow_goal: str | None = Field(default=None, max_length=1000)
    additional_notes: str | None = Field(default=None, max_length=5000)
    entered_via_voice: bool = False

class CrisisResources(CamelModel):
    crisis_hotline: str
    emergency: str
    text_line: str
    maternal_hotline: str
    local_resources: str

class EmotionCheckinOut(CamelModel):
    id: UUID
    user_id: UUID
    record_date: date
    record_time: time
    selected_struggles: list[str]
    selected_positive_moments: list[str]
    selected_concerning_thoughts: list[ConcerningThought]
    grateful_for: str | None = None
    proud_of_today: str | None = None
    tomorrow_goal: str | None = None
    additional_notes: str | None = None
    crisis_alert_triggered: bool
    entered_via_voice: bool
    created_at: datetime | None = None
    intervention_triggered: bool | None = None
    resources: CrisisResources | None = None

class CrisisInterventionNotice(CamelModel):
    triggered: bool = True
    resources: CrisisResources
    message: str

class CheckinSubmitOut(CamelModel):
    success: bool = True
    message: str
    data: EmotionCheckinOut
    crisis_intervention: CrisisInterventionNotice | None = None

class CheckinDetailOut(CamelModel):
    success: bool = True
    data: EmotionCheckinOut

class CheckinListOut(CamelModel):
    success: bool = True
    data: list[EmotionCheckinOut]
    pagination: Pagination

class TrendPoint(CamelModel):
    day: date = Field(alias="date")
    struggles_count: int
    positive_count: int
    concerning_count: int
    crisis_alert_triggered: bool

class TrendPeriod(CamelModel):
    days: int
    start_date: date

class TrendSummary(CamelModel):
    total_checkins: int
    average_struggles: float
    average_positive: float
    concerning_thoughts: int
    crisis_alerts: int
    wellness_score: int | None = None
    period: TrendPeriod

class Trends(CamelModel):
    trends: list[TrendPoint]
    summary: TrendSummary

class TrendsOut(CamelModel):
    success: bool = True
    data: Trends

class InterventionDetails(BaseModel):
    # snapshot keys stay snake_case on the wire
    concerning_thoughts_count: int
    severity_levels: list[str]
    auto_triggered: bool
    timestamp: str

class CrisisInterventionOut(CamelModel):
    id: UUID
    user_id: UUID
    checkin_record_id: UUID
    intervention_type: str
    intervention_details: InterventionDetails
    user_response: str | None = None
    created_at: datetime | None = None
    record_date: date | None = None
    record_time: time | None = None

class CrisisInterventionListOut(CamelModel):
    success: bool = True
    data: list[CrisisInterventionOut]

class CrisisResponseIn(CamelModel):
    response: str

class MessageOut(CamelModel):
    success: bool = True
    message: str

class EmotionOption(CamelModel):
    id: str
    text: str
    emoji: str
    category: str | None = None
    severity: SeverityLevel | None = None

class EmotionOptions(CamelModel):
    struggles: list[EmotionOption]
    positive_moments: list[EmotionOption]
    concerning_thoughts: list[EmotionOption]

class EmotionOptionsOut(CamelModel):
    success: bool = True
    data: EmotionOptions
