from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy import func, ForeignKey, String, Text, Enum, JSON, Uuid
import uuid
from datetime import date, datetime, time
from typing import Optional, List

SEVERITY_LEVELS = ("low", "moderate", "high", "critical")
INTERVENTION_TYPES = ("alert_shown", "expert_contacted", "resources_accessed")
USER_RESPONSES = ("email_sent", "accepted", "dismissed", "completed")

intervention_type_enum = Enum(*INTERVENTION_TYPES, name="crisis_intervention_type")

user_response_enum = Enum(*USER_RESPONSES, name="crisis_user_response")

class Base(DeclarativeBase):
    pass

class User(Base):
    __tablename__ = "users"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255))
    first_name: Mapped[Optional[str]] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

class EmotionCheckin(Base):
    __tablename__ = "emotion_checkin_records"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    record_date: Mapped[date] = mapped_column(index=True)
    record_time: Mapped[time]
    selected_struggles: Mapped[List[str]] = mapped_column(JSON, default=list)
    selected_positive_moments: Mapped[List[str]] = mapped_column(JSON, default=list)
    selected_concerning_thoughts: Mapped[List[dict]] = mapped_column(JSON, default=list)
    grateful_for: Mapped[Optional[str]] = mapped_column(Text)
    proud_of_today: Mapped[Optional[str]] = mapped_column(Text)
    tomorrow_goal: Mapped[Optional[str]] = mapped_column(Text)
    additional_notes: Mapped[Optional[str]] = mapped_column(Text)
    crisis_alert_triggered: Mapped[bool] = mapped_column(default=False)
    entered_via_voice: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    intervention: Mapped[Optional["CrisisIntervention"]] = relationship(back_populates="checkin", cascade="all, delete")

class CrisisIntervention(Base):
    __tablename__ = "crisis_interventions"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    checkin_record_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("emotion_checkin_records.id", ondelete="CASCADE"), unique=True
    )
    checkin: Mapped["EmotionCheckin"] = relationship(back_populates="intervention")
    intervention_type: Mapped[str] = mapped_column(intervention_type_enum)
    intervention_details: Mapped[dict] = mapped_column(JSON)
    user_response: Mapped[Optional[str]] = mapped_column(user_response_enum)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[Optional[datetime]] = mapped_column(onupdate=func.now())
