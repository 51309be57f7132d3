from datetime import date, time
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.db.models import EmotionCheckin
from uuid import UUID

SORTABLE = {
    "record_date": (EmotionCheckin.record_date, EmotionCheckin.record_time),
    "created_at": (EmotionCheckin.created_at,),
}

def create_checkin(db: Session, user_id: UUID, record_date: date, record_time: time, fields: dict) -> EmotionCheckin:
    """Add and flush a check-in row; committing is left to the caller's transaction."""
    ci = EmotionCheckin(
        user_id=user_id,
        record_date=record_date,
        record_time=record_time,
        selected_struggles=list(fields.get("selected_struggles") or []),
        selected_positive_moments=list(fields.get("selected_positive_moments") or []),
        selected_concerning_thoughts=list(fields.get("selected_concerning_thoughts") or []),
        grateful_for=fields.get("grateful_for"),
        proud_of_today=fields.get("proud_of_today"),
        tomorrow_goal=fields.get("tomorrow_goal"),
        additional_notes=fields.get("additional_notes"),
        crisis_alert_triggered=bool(fields.get("crisis_alert_triggered")),
        entered_via_voice=bool(fields.get("entered_via_voice")),
    )
    db.add(ci)
    db.flush()
    return ci

def get_checkin(db: Session, checkin_id: UUID, user_id: UUID | None = None) -> EmotionCheckin | None:
    # populate_existing forces a real read instead of the identity-map copy
    q = select(EmotionCheckin).where(EmotionCheckin.id == checkin_id).execution_options(populate_existing=True)
    if user_id is not None:
        q = q.where(EmotionCheckin.user_id == user_id)
    return db.execute(q).scalar_one_or_none()

def _filtered(stmt, user_id: UUID, start_date: date | None, end_date: date | None):
    stmt = stmt.where(EmotionCheckin.user_id == user_id)
    if start_date:
        stmt = stmt.where(EmotionCheckin.record_date >= start_date)
    if end_date:
        stmt = stmt.where(EmotionCheckin.record_date <= end_date)
    return stmt

def list_checkins(
    db: Session,
    user_id: UUID,
    *,
    page: int = 1,
    limit: int = 20,
    start_date: date | None = None,
    end_date: date | None = None,
    sort_by: str = "record_date",
    sort_order: str = "DESC",
) -> tuple[list[EmotionCheckin], int]:
    columns = SORTABLE.get(sort_by, SORTABLE["record_date"])
    order = [c.asc() if sort_order.upper() == "ASC" else c.desc() for c in columns]
    stmt = _filtered(select(EmotionCheckin), user_id, start_date, end_date)
    stmt = stmt.order_by(*order).limit(limit).offset((page - 1) * limit)
    records = list(db.execute(stmt).scalars())
    total = db.execute(_filtered(select(func.count(EmotionCheckin.id)), user_id, start_date, end_date)).scalar_one()
    return records, total

def list_checkins_since(db: Session, user_id: UUID, start_date: date) -> list[EmotionCheckin]:
    stmt = (
        _filtered(select(EmotionCheckin), user_id, start_date, None)
        .order_by(EmotionCheckin.record_date.asc(), EmotionCheckin.record_time.asc())
    )
    return list(db.execute(stmt).scalars())
