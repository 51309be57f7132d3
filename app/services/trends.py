from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from app.db.models import EmotionCheckin

BASELINE_SCORE = 50
POSITIVE_WEIGHT = 5
STRUGGLE_WEIGHT = 3
CONCERNING_WEIGHT = 10
CRISIS_WEIGHT = 20


def wellness_score(*, checkins: int, struggles: int, positive: int, concerning: int, crisis_alerts: int) -> Optional[int]:
    """
    Coarse 0-100 wellness indicator over a window of check-ins.
    None when there is nothing to score.
    """
    if checkins <= 0:
        return None
    raw = (
        BASELINE_SCORE
        + positive * POSITIVE_WEIGHT
        - struggles * STRUGGLE_WEIGHT
        - concerning * CONCERNING_WEIGHT
        - crisis_alerts * CRISIS_WEIGHT
    )
    return max(0, min(100, raw))


def summarize_trends(records: Iterable[EmotionCheckin], *, days: int, start_date: date) -> dict:
    trends = [
        {
            "date": r.record_date,
            "struggles_count": len(r.selected_struggles or []),
            "positive_count": len(r.selected_positive_moments or []),
            "concerning_count": len(r.selected_concerning_thoughts or []),
            "crisis_alert_triggered": bool(r.crisis_alert_triggered),
        }
        for r in records
    ]

    total = len(trends)
    struggles = sum(t["struggles_count"] for t in trends)
    positive = sum(t["positive_count"] for t in trends)
    concerning = sum(t["concerning_count"] for t in trends)
    crisis_alerts = sum(1 for t in trends if t["crisis_alert_triggered"])

    return {
        "trends": trends,
        "summary": {
            "total_checkins": total,
            "average_struggles": struggles / total if total else 0,
            "average_positive": positive / total if total else 0,
            "concerning_thoughts": concerning,
            "crisis_alerts": crisis_alerts,
            "wellness_score": wellness_score(
                checkins=total, struggles=struggles, positive=positive,
                concerning=concerning, crisis_alerts=crisis_alerts,
            ),
            "period": {"days": days, "start_date": start_date},
        },
    }
