from datetime import date
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import Authed, get_emotion_service
from app.schemas.emotion import (
    CheckinDetailOut, CheckinListOut, CheckinSubmitOut, CrisisInterventionListOut,
    CrisisResources, CrisisResponseIn, EmotionCheckinCreate, EmotionCheckinOut, EmotionOptionsOut,
    MessageOut, TrendsOut,
)
from app.services.checkin import USER_RESPONSE_CHOICES, EmotionCheckinService
from app.services.crisis import CRISIS_RESOURCES, CRISIS_SUPPORT_MESSAGE
from app.services.options import checkin_options

router = APIRouter(prefix="/api/emotions", tags=["emotions"])

SAVED = "Emotion check-in saved successfully"

@router.post("/checkin", response_model=CheckinSubmitOut, response_model_exclude_unset=True, status_code=201)
def submit_checkin(payload: EmotionCheckinCreate, ctx=Depends(Authed), svc: EmotionCheckinService = Depends(get_emotion_service)):
    result = svc.submit_checkin(ctx["user_id"], payload)
    data = EmotionCheckinOut.model_validate(result.checkin)
    if not result.intervention_triggered:
        return CheckinSubmitOut(success=True, message=SAVED, data=data)

    data.intervention_triggered = True
    data.resources = CrisisResources.model_validate(result.outcome.resources)
    return CheckinSubmitOut(
        success=True,
        message=SAVED,
        data=data,
        crisis_intervention={
            "triggered": True,
            "resources": CRISIS_RESOURCES,
            "message": CRISIS_SUPPORT_MESSAGE,
        },
    )

@router.get("/checkins", response_model=CheckinListOut)
def list_checkins(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    sort_by: Literal["record_date", "created_at"] = Query(default="record_date", alias="sortBy"),
    sort_order: Literal["ASC", "DESC", "asc", "desc"] = Query(default="DESC", alias="sortOrder"),
    ctx=Depends(Authed),
    svc: EmotionCheckinService = Depends(get_emotion_service),
):
    records, pagination = svc.list_checkins(
        ctx["user_id"], page=page, limit=limit, start_date=start_date,
        end_date=end_date, sort_by=sort_by, sort_order=sort_order,
    )
    return {"success": True, "data": records, "pagination": pagination}

@router.get("/checkins/{checkin_id}", response_model=CheckinDetailOut)
def get_checkin(checkin_id: UUID, ctx=Depends(Authed), svc: EmotionCheckinService = Depends(get_emotion_service)):
    return {"success": True, "data": svc.get_checkin(ctx["user_id"], checkin_id)}

@router.get("/trends", response_model=TrendsOut)
def get_trends(days: int = Query(default=30, ge=1, le=365), ctx=Depends(Authed), svc: EmotionCheckinService = Depends(get_emotion_service)):
    return {"success": True, "data": svc.trends(ctx["user_id"], days)}

@router.get("/crisis-interventions", response_model=CrisisInterventionListOut)
def list_crisis_interventions(ctx=Depends(Authed), svc: EmotionCheckinService = Depends(get_emotion_service)):
    return {"success": True, "data": svc.list_interventions(ctx["user_id"])}

@router.put("/crisis-interventions/{intervention_id}/response", response_model=MessageOut)
def update_crisis_response(
    intervention_id: UUID,
    payload: CrisisResponseIn,
    ctx=Depends(Authed),
    svc: EmotionCheckinService = Depends(get_emotion_service),
):
    if payload.response not in USER_RESPONSE_CHOICES:
        raise HTTPException(status_code=400, detail="Invalid response. Must be accepted, dismissed, or completed")
    svc.update_crisis_response(ctx["user_id"], intervention_id, payload.response)
    return {"success": True, "message": "Response recorded successfully"}

@router.get("/options", response_model=EmotionOptionsOut)
def get_checkin_options(ctx=Depends(Authed)):
    return {"success": True, "data": checkin_options()}
