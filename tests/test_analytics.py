"""
tests/test_analytics.py - goal and achievement statistics

- counts by status, priority and category
- completion rate and average completion time rounding
- department, user, date and status filters
"""

from datetime import datetime

import pytest

from growth_tracker.db import models
from growth_tracker.schemas.analytics import AnalyticsQuery
from growth_tracker.api.v1.endpoints.analytics import _round_half_up, get_analytics_data


@pytest.fixture
def make_achievement(db):
    def _make_achievement(employee_id, category="Leadership", achieved_date=datetime(2024, 1, 15), goal_id=None):
        achievement = models.Achievement(
            title="Did it",
            description="Details",
            category=category,
            employee_id=employee_id,
            goal_id=goal_id,
            achieved_date=achieved_date,
        )
        db.add(achievement)
        db.commit()
        return achievement

    return _make_achievement


@pytest.fixture
def seeded(make_user, make_goal, make_achievement):
    sales = make_user(department="Sales")
    eng = make_user(department="Engineering")

    make_goal(sales.id, status="Completed", priority="High",
              created_at=datetime(2024, 1, 1), completed_date=datetime(2024, 1, 11))
    make_goal(sales.id, status="Completed", priority="Low",
              created_at=datetime(2024, 1, 1), completed_date=datetime(2024, 1, 4, 12))
    make_goal(sales.id, status="In_Progress", priority="High", created_at=datetime(2024, 2, 1))
    make_goal(eng.id, status="Cancelled", priority="Medium", created_at=datetime(2024, 3, 1))

    make_achievement(sales.id, category="Leadership", achieved_date=datetime(2024, 1, 20))
    make_achievement(sales.id, category="Innovation", achieved_date=datetime(2024, 2, 20))
    make_achievement(eng.id, category="Leadership", achieved_date=datetime(2024, 3, 20))

    return {"sales": sales, "eng": eng}


def test_round_half_up():
    assert _round_half_up(12.5) == 13
    assert _round_half_up(66.666) == 67
    assert _round_half_up(6.75) == 7
    assert _round_half_up(0.4) == 0


def test_no_data(db):
    result = get_analytics_data(db, AnalyticsQuery())
    assert result.total_goals == 0
    assert result.completion_rate == 0
    assert result.average_completion_time is None
    assert result.achievements_by_category == {}
    assert result.goals_by_priority == {}


def test_unfiltered_totals(db, seeded):
    result = get_analytics_data(db, AnalyticsQuery())

    assert result.total_goals == 4
    assert result.completed_goals == 2
    # Cancelled goals are neither completed nor pending
    assert result.pending_goals == 1
    assert result.goals_by_priority == {"High": 2, "Low": 1, "Medium": 1}
    assert result.total_achievements == 3
    assert result.achievements_by_category == {"Leadership": 2, "Innovation": 1}
    assert result.completion_rate == 50
    # (10 days + 3.5 days) / 2 rounds up to 7
    assert result.average_completion_time == 7


def test_department_filter(db, seeded):
    result = get_analytics_data(db, AnalyticsQuery(department="Sales"))
    assert result.total_goals == 3
    assert result.completion_rate == 67
    assert result.total_achievements == 2


def test_user_filter(db, seeded):
    result = get_analytics_data(db, AnalyticsQuery(user_id=seeded["eng"].id))
    assert result.total_goals == 1
    assert result.completed_goals == 0
    assert result.average_completion_time is None
    assert result.achievements_by_category == {"Leadership": 1}


def test_date_range_applies_to_created_and_achieved_dates(db, seeded):
    query = AnalyticsQuery(date_from=datetime(2024, 1, 15), date_to=datetime(2024, 2, 28))
    result = get_analytics_data(db, query)
    assert result.total_goals == 1
    assert result.goals_by_priority == {"High": 1}
    assert result.achievements_by_category == {"Leadership": 1, "Innovation": 1}


def test_status_and_category_filters(db, seeded):
    result = get_analytics_data(db, AnalyticsQuery(goal_status="Completed", achievement_category="Innovation"))
    assert result.total_goals == 2
    assert result.completion_rate == 100
    assert result.total_achievements == 1


class TestAnalyticsApi:

    def test_query_params(self, client, seeded):
        response = client.get("/api/v1/analytics", params={"department": "Engineering"})
        assert response.status_code == 200
        body = response.json()
        assert body["total_goals"] == 1
        assert body["completion_rate"] == 0
        assert body["average_completion_time"] is None

    def test_date_params(self, client, seeded):
        response = client.get("/api/v1/analytics", params={"date_from": "2024-03-01T00:00:00"})
        assert response.json()["total_goals"] == 1

    def test_invalid_status_param(self, client):
        assert client.get("/api/v1/analytics", params={"goal_status": "Done"}).status_code == 422
