"""Unit tests for the exercise log pipeline."""

from datetime import datetime

from schemas.exercise import Exercise
from schemas.user import User
from services.log_query import build_log, filter_log, format_date


def _user(*entries):
    return User(
        id="65a1f0c2e4b0a1b2c3d4e5f6",
        username="alice",
        log=[Exercise(description=d, duration=m, date=when) for d, m, when in entries],
    )


def _three_entry_user():
    return _user(
        ("c", 30, datetime(2023, 1, 10)),
        ("a", 10, datetime(2023, 1, 1)),
        ("b", 20, datetime(2023, 1, 5)),
    )


class TestFormatDate:
    def test_day_of_week_month_day_year(self):
        assert format_date(datetime(2023, 1, 1)) == "Sun Jan 01 2023"

    def test_time_of_day_is_dropped(self):
        assert format_date(datetime(2024, 2, 29, 23, 59)) == "Thu Feb 29 2024"


class TestFilterLog:
    def test_sorts_ascending(self):
        user = _three_entry_user()
        assert [e.description for e in filter_log(user.log)] == ["a", "b", "c"]

    def test_does_not_mutate_stored_log(self):
        user = _three_entry_user()
        filter_log(user.log, limit="1")
        assert [e.description for e in user.log] == ["c", "a", "b"]

    def test_from_is_inclusive(self):
        user = _three_entry_user()
        result = filter_log(user.log, from_="2023-01-05")
        assert [e.description for e in result] == ["b", "c"]

    def test_to_is_inclusive(self):
        user = _three_entry_user()
        result = filter_log(user.log, to="2023-01-05")
        assert [e.description for e in result] == ["a", "b"]

    def test_unparsable_bounds_are_ignored(self):
        user = _three_entry_user()
        result = filter_log(user.log, from_="soon", to="later")
        assert len(result) == 3

    def test_limit_applies_after_sort(self):
        user = _three_entry_user()
        result = filter_log(user.log, limit="2")
        assert [e.description for e in result] == ["a", "b"]

    def test_equal_dates_keep_log_order(self):
        same_day = datetime(2023, 2, 2)
        user = _user(("first", 1, same_day), ("second", 2, same_day), ("early", 3, datetime(2023, 2, 1)))
        result = filter_log(user.log)
        assert [e.description for e in result] == ["early", "first", "second"]


class TestBuildLog:
    def test_from_filter(self):
        response = build_log(_three_entry_user(), from_="2023-01-03")
        assert response.count == 2
        assert [e.date for e in response.log] == ["Thu Jan 05 2023", "Tue Jan 10 2023"]

    def test_limit_zero_is_empty(self):
        response = build_log(_three_entry_user(), limit="0")
        assert response.count == 0
        assert response.log == []

    def test_limit_one_returns_earliest(self):
        response = build_log(_three_entry_user(), limit="1")
        assert response.count == 1
        assert response.log[0].description == "a"

    def test_invalid_limit_is_ignored(self):
        assert build_log(_three_entry_user(), limit="-2").count == 3

    def test_serializes_with_underscore_id(self):
        data = build_log(_three_entry_user()).model_dump(by_alias=True)
        assert list(data) == ["username", "count", "_id", "log"]
        assert data["_id"] == "65a1f0c2e4b0a1b2c3d4e5f6"
        assert data["log"][0] == {"description": "a", "duration": 10, "date": "Sun Jan 01 2023"}
