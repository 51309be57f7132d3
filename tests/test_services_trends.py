"""
Unit tests for app.services.trends module.
"""
from datetime import date
from types import SimpleNamespace

import pytest

from app.services.trends import summarize_trends, wellness_score


def record(day, struggles=0, positive=0, concerning=0, crisis=False):
    return SimpleNamespace(
        record_date=day,
        selected_struggles=["s"] * struggles,
        selected_positive_moments=["p"] * positive,
        selected_concerning_thoughts=[{"tag": "t", "severity": "low"}] * concerning,
        crisis_alert_triggered=crisis,
    )


class TestWellnessScore:
    """Test wellness_score function."""

    def test_no_checkins_is_none(self):
        assert wellness_score(checkins=0, struggles=0, positive=0, concerning=0, crisis_alerts=0) is None

    def test_baseline(self):
        assert wellness_score(checkins=1, struggles=0, positive=0, concerning=0, crisis_alerts=0) == 50

    @pytest.mark.parametrize("kwargs,expected", [
        ({"positive": 20}, 100),
        ({"struggles": 10, "crisis_alerts": 2}, 0),
        ({"positive": 4, "struggles": 5}, 55),
    ])
    def test_clamped_to_range(self, kwargs, expected):
        args = {"checkins": 3, "struggles": 0, "positive": 0, "concerning": 0, "crisis_alerts": 0, **kwargs}

        assert wellness_score(**args) == expected


class TestSummarizeTrends:
    """Test summarize_trends function."""

    def test_empty(self):
        data = summarize_trends([], days=30, start_date=date(2026, 9, 19))

        assert data["trends"] == []
        assert data["summary"]["total_checkins"] == 0
        assert data["summary"]["average_struggles"] == 0
        assert data["summary"]["wellness_score"] is None

    def test_per_day_counts_and_totals(self):
        records = [
            record(date(2026, 10, 1), struggles=3, positive=1),
            record(date(2026, 10, 2), struggles=1, positive=3, concerning=2, crisis=True),
        ]

        data = summarize_trends(records, days=30, start_date=date(2026, 9, 19))

        assert data["trends"][1] == {
            "date": date(2026, 10, 2),
            "struggles_count": 1,
            "positive_count": 3,
            "concerning_count": 2,
            "crisis_alert_triggered": True,
        }
        summary = data["summary"]
        assert summary["average_struggles"] == 2
        assert summary["average_positive"] == 2
        assert summary["concerning_thoughts"] == 2
        assert summary["crisis_alerts"] == 1
        assert summary["period"] == {"days": 30, "start_date": date(2026, 9, 19)}
