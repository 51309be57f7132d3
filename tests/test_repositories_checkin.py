"""
Unit tests for app.repositories.checkin_repo module.
"""
import uuid
from datetime import date, time

from app.repositories.checkin_repo import create_checkin, get_checkin, list_checkins, list_checkins_since


def add(db, user_id, day, at=time(9, 0), **fields):
    return create_checkin(db, user_id, day, at, fields)


class TestCreateCheckin:
    """Test create_checkin function."""

    def test_create_checkin(self, db_session, test_user, test_user_id):
        ci = add(
            db_session, test_user_id, date(2026, 10, 19),
            selected_struggles=["tired"], crisis_alert_triggered=True, additional_notes="Long night",
        )
        db_session.commit()

        assert ci.id is not None
        assert ci.selected_struggles == ["tired"]
        assert ci.selected_positive_moments == []
        assert ci.crisis_alert_triggered is True
        assert ci.additional_notes == "Long night"
        assert ci.created_at is not None

    def test_get_checkin_scoped_by_owner(self, db_session, test_user, another_user, test_user_id, another_user_id):
        ci = add(db_session, test_user_id, date(2026, 10, 19))
        db_session.commit()

        assert get_checkin(db_session, ci.id).id == ci.id
        assert get_checkin(db_session, ci.id, test_user_id).id == ci.id
        assert get_checkin(db_session, ci.id, another_user_id) is None
        assert get_checkin(db_session, uuid.uuid4()) is None


class TestListCheckins:
    """Test list_checkins and list_checkins_since."""

    def test_same_day_ordered_by_time(self, db_session, test_user, test_user_id):
        morning = add(db_session, test_user_id, date(2026, 10, 19), time(8, 0))
        evening = add(db_session, test_user_id, date(2026, 10, 19), time(21, 0))
        db_session.commit()

        records, total = list_checkins(db_session, test_user_id)

        assert [r.id for r in records] == [evening.id, morning.id]
        assert total == 2

    def test_unknown_sort_column_falls_back(self, db_session, test_user, test_user_id):
        add(db_session, test_user_id, date(2026, 10, 18))
        add(db_session, test_user_id, date(2026, 10, 19))
        db_session.commit()

        records, _ = list_checkins(db_session, test_user_id, sort_by="grateful_for", sort_order="asc")

        assert [r.record_date for r in records] == [date(2026, 10, 18), date(2026, 10, 19)]

    def test_page_past_end(self, db_session, test_user, test_user_id):
        add(db_session, test_user_id, date(2026, 10, 19))
        db_session.commit()

        records, total = list_checkins(db_session, test_user_id, page=3, limit=10)

        assert records == []
        assert total == 1

    def test_since_is_inclusive_and_ascending(self, db_session, test_user, test_user_id):
        for day in (date(2026, 10, 1), date(2026, 10, 5), date(2026, 9, 30), date(2026, 10, 3)):
            add(db_session, test_user_id, day)
        db_session.commit()

        records = list_checkins_since(db_session, test_user_id, date(2026, 10, 1))

        assert [r.record_date for r in records] == [date(2026, 10, 1), date(2026, 10, 3), date(2026, 10, 5)]
