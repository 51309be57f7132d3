from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session
from app.db.models import User


@dataclass(slots=True, frozen=True)
class UserContact:
    email: str
    first_name: Optional[str]


def get_user_contact(db: Session, user_id: UUID) -> UserContact | None:
    row = db.execute(select(User.email, User.first_name).where(User.id == user_id)).first()
    if row is None:
        return None
    return UserContact(email=row.email, first_name=row.first_name)
