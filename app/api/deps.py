from uuid import UUID
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.services.checkin import EmotionCheckinService
from app.services.notifier import CrisisNotifier, SendGridNotifier

def Authed(db: Session = Depends(get_db), user=Depends(get_current_user)):
    try:
        user_id = UUID(str(user["user_id"]))
    except ValueError as e:
        raise HTTPException(status_code=401, detail="Invalid user ID") from e
    return {"db": db, "user_id": user_id}

def get_notifier() -> CrisisNotifier:
    return SendGridNotifier()

def get_emotion_service(ctx=Depends(Authed), notifier: CrisisNotifier = Depends(get_notifier)) -> EmotionCheckinService:
    return EmotionCheckinService(ctx["db"], notifier)
