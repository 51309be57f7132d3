from sqlalchemy.orm import Session, joinedload
from sqlalchemy import select
from app.db.models import CrisisIntervention, EmotionCheckin
from uuid import UUID

def create_intervention(db: Session, user_id: UUID, checkin_id: UUID, intervention_type: str, details: dict) -> CrisisIntervention:
    ci = CrisisIntervention(
        user_id=user_id,
        checkin_record_id=checkin_id,
        intervention_type=intervention_type,
        intervention_details=details,
        user_response=None,
    )
    db.add(ci); db.flush()
    return ci

def set_user_response(db: Session, intervention: CrisisIntervention, response: str) -> CrisisIntervention:
    intervention.user_response = response
    db.flush()
    return intervention

def get_intervention_owned(db: Session, user_id: UUID, intervention_id: UUID) -> CrisisIntervention | None:
    q = select(CrisisIntervention).where(
        CrisisIntervention.id == intervention_id, CrisisIntervention.user_id == user_id
    )
    return db.execute(q).scalar_one_or_none()

def get_for_checkin(db: Session, checkin_id: UUID) -> CrisisIntervention | None:
    q = select(CrisisIntervention).where(CrisisIntervention.checkin_record_id == checkin_id)
    return db.execute(q).scalar_one_or_none()

def list_interventions(db: Session, user_id: UUID) -> list[CrisisIntervention]:
    q = (
        select(CrisisIntervention)
        .options(joinedload(CrisisIntervention.checkin))
        .where(CrisisIntervention.user_id == user_id)
        .order_by(CrisisIntervention.created_at.desc())
    )
    return list(db.execute(q).scalars())

def intervention_detail(i: CrisisIntervention) -> dict:
    chk: EmotionCheckin = i.checkin
    return {
        "id": i.id,
        "user_id": i.user_id,
        "checkin_record_id": i.checkin_record_id,
        "intervention_type": i.intervention_type,
        "intervention_details": i.intervention_details or {},
        "user_response": i.user_response,
        "created_at": i.created_at,
        "record_date": chk.record_date if chk else None,
        "record_time": chk.record_time if chk else None,
    }
