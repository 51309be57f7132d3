from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from math import ceil
from typing import Callable, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import CheckinNotFoundError, InterventionNotFoundError, NotificationError, UserNotFoundError
from app.db.models import CrisisIntervention, EmotionCheckin
from app.db.session import transaction
from app.repositories import checkin_repo, intervention_repo
from app.repositories.user_repo import UserContact, get_user_contact
from app.schemas.emotion import ConcerningThought, EmotionCheckinCreate
from app.services.crisis import CRISIS_RESOURCES, InterventionType, classify, severity_levels
from app.services.notifier import CrisisNotifier
from app.services.trends import summarize_trends
from app.utils.time import days_ago, isoformat_z, split_instant, utcnow

logger = logging.getLogger(__name__)

USER_RESPONSE_CHOICES = ("accepted", "dismissed", "completed")


@dataclass(slots=True)
class InterventionOutcome:
    intervention_id: UUID
    intervention_type: InterventionType
    resources: dict[str, str] = field(default_factory=lambda: dict(CRISIS_RESOURCES))
    intervention_triggered: bool = True
    user_response: Optional[str] = None
    # set when the crisis email is deferred until after commit
    email_to: Optional[UserContact] = field(default=None, repr=False)


@dataclass(slots=True)
class CheckinResult:
    checkin: EmotionCheckin
    outcome: Optional[InterventionOutcome] = None

    @property
    def intervention_triggered(self) -> bool:
        return self.outcome is not None


class EmotionCheckinService:
    """
    Emotion check-in recording and the crisis-intervention workflow.

    Collaborators are injected so the workflow runs against fakes in tests:
    the SQLAlchemy session, the crisis notifier, a user-contact lookup and
    a clock.
    """

    def __init__(
        self,
        db: Session,
        notifier: CrisisNotifier,
        *,
        user_lookup: Callable[[Session, UUID], Optional[UserContact]] = get_user_contact,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.notifier = notifier
        self.user_lookup = user_lookup
        self.clock = clock

    def create_checkin(self, user_id: UUID, payload: EmotionCheckinCreate) -> EmotionCheckin:
        """
        Persist one check-in stamped with the server's current date/time and
        return it as read back from the database. Runs inside the caller's
        transaction (flush only).
        """
        thoughts = [t.model_dump() for t in payload.selected_concerning_thoughts]
        record_date, record_time = split_instant(self.clock())

        ci = checkin_repo.create_checkin(self.db, user_id, record_date, record_time, {
            "selected_struggles": payload.selected_struggles,
            "selected_positive_moments": payload.selected_positive_moments,
            "selected_concerning_thoughts": thoughts,
            "grateful_for": payload.grateful_for,
            "proud_of_today": payload.proud_of_today,
            "tomorrow_goal": payload.tomorrow_goal,
            "additional_notes": payload.additional_notes,
            # critical-only; narrower than the intervention gate below
            "crisis_alert_triggered": classify(thoughts).has_critical,
            "entered_via_voice": payload.entered_via_voice,
        })

        logger.info(
            "Emotion check-in created checkin_id=%s user_id=%s critical=%s struggles=%d positive=%d concerning=%d",
            ci.id, user_id, ci.crisis_alert_triggered,
            len(payload.selected_struggles), len(payload.selected_positive_moments), len(thoughts),
        )
        return checkin_repo.get_checkin(self.db, ci.id)

    def maybe_intervene(
        self,
        user_id: UUID,
        checkin_id: UUID,
        thoughts: Sequence[ConcerningThought | dict],
        *,
        defer_email: bool = False,
    ) -> Optional[InterventionOutcome]:
        """
        Record a crisis intervention for a check-in with concerning thoughts.

        Returns None when there are no concerning thoughts. Raises
        UserNotFoundError when the user has no contact record, so the
        enclosing transaction rolls back. A failed crisis email is logged
        and swallowed; the intervention keeps user_response = NULL.

        With defer_email the critical-case email is not sent here; the
        outcome carries the recipient in `email_to` for send_deferred_email.
        """
        if not thoughts:
            return None

        contact = self.user_lookup(self.db, user_id)
        if contact is None:
            logger.error("User not found for crisis intervention user_id=%s checkin_id=%s", user_id, checkin_id)
            raise UserNotFoundError("User not found for crisis intervention")

        assessment = classify(thoughts)
        details = {
            "concerning_thoughts_count": len(thoughts),
            "severity_levels": severity_levels(thoughts),
            "auto_triggered": True,
            "timestamp": isoformat_z(self.clock()),
        }
        intervention = intervention_repo.create_intervention(
            self.db, user_id, checkin_id, assessment.intervention_type.value, details
        )

        outcome = InterventionOutcome(
            intervention_id=intervention.id,
            intervention_type=assessment.intervention_type,
        )
        if assessment.has_critical:
            if defer_email:
                outcome.email_to = contact
            elif self._send_crisis_email(intervention.id, contact):
                intervention_repo.set_user_response(self.db, intervention, "email_sent")
        outcome.user_response = intervention.user_response

        logger.info(
            "Crisis intervention handled user_id=%s checkin_id=%s intervention_id=%s type=%s severity=%s",
            user_id, checkin_id, intervention.id, assessment.intervention_type.value, assessment.overall_severity.value,
        )
        return outcome

    def _send_crisis_email(self, intervention_id: UUID, contact: UserContact) -> bool:
        """Best-effort delivery. Any failure is logged and reported as False."""
        try:
            self.notifier.send_crisis_email(contact.email, contact.first_name, dict(CRISIS_RESOURCES))
        except NotificationError as e:
            logger.error("Crisis intervention email failed intervention_id=%s: %s", intervention_id, e)
            return False
        except Exception:
            logger.exception("Crisis intervention email failed unexpectedly intervention_id=%s", intervention_id)
            return False
        return True

    def send_deferred_email(self, checkin_id: UUID, outcome: InterventionOutcome) -> None:
        """
        Send the crisis email for an already committed intervention and mark
        it email_sent in a short transaction of its own.
        """
        contact, outcome.email_to = outcome.email_to, None
        if contact is None or not self._send_crisis_email(outcome.intervention_id, contact):
            return
        try:
            with transaction(self.db):
                intervention = intervention_repo.get_for_checkin(self.db, checkin_id)
                if intervention is not None:
                    intervention_repo.set_user_response(self.db, intervention, "email_sent")
        except SQLAlchemyError:
            # the email is out and the check-in is committed; only the status mark is lost
            logger.exception("Could not mark crisis email sent intervention_id=%s", outcome.intervention_id)
            return
        outcome.user_response = "email_sent"

    def submit_checkin(self, user_id: UUID, payload: EmotionCheckinCreate) -> CheckinResult:
        """
        Record the check-in and, when concerning thoughts were selected, its
        crisis intervention, as one transaction. A critical-case email goes
        out only after that transaction has committed.
        """
        with transaction(self.db):
            checkin = self.create_checkin(user_id, payload)
            outcome = None
            if payload.selected_concerning_thoughts:
                outcome = self.maybe_intervene(
                    user_id, checkin.id, payload.selected_concerning_thoughts, defer_email=True
                )
        if outcome is not None:
            self.send_deferred_email(checkin.id, outcome)
        return CheckinResult(checkin=checkin, outcome=outcome)

    def get_checkin(self, user_id: UUID, checkin_id: UUID) -> EmotionCheckin:
        ci = checkin_repo.get_checkin(self.db, checkin_id, user_id)
        if ci is None:
            raise CheckinNotFoundError("Check-in not found or doesn't belong to user")
        return ci

    def list_checkins(
        self,
        user_id: UUID,
        *,
        page: int = 1,
        limit: int = 20,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        sort_by: str = "record_date",
        sort_order: str = "DESC",
    ) -> tuple[list[EmotionCheckin], dict]:
        records, total = checkin_repo.list_checkins(
            self.db, user_id, page=page, limit=limit, start_date=start_date,
            end_date=end_date, sort_by=sort_by, sort_order=sort_order,
        )
        pagination = {"page": page, "limit": limit, "total": total, "total_pages": ceil(total / limit)}
        return records, pagination

    def trends(self, user_id: UUID, days: int = 30) -> dict:
        start = days_ago(days, today=self.clock().date())
        records = checkin_repo.list_checkins_since(self.db, user_id, start)
        return summarize_trends(records, days=days, start_date=start)

    def list_interventions(self, user_id: UUID) -> list[dict]:
        return [intervention_repo.intervention_detail(i) for i in intervention_repo.list_interventions(self.db, user_id)]

    def update_crisis_response(self, user_id: UUID, intervention_id: UUID, response: str) -> CrisisIntervention:
        if response not in USER_RESPONSE_CHOICES:
            raise ValueError("Invalid response. Must be accepted, dismissed, or completed")
        with transaction(self.db):
            intervention = intervention_repo.get_intervention_owned(self.db, user_id, intervention_id)
            if intervention is None:
                raise InterventionNotFoundError("Crisis intervention not found or doesn't belong to user")
            intervention_repo.set_user_response(self.db, intervention, response)
        logger.info("Crisis intervention response updated intervention_id=%s response=%s", intervention_id, response)
        return intervention
