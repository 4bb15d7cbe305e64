import math
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session, Query

from growth_tracker.db import models, session
from growth_tracker.db.models import AchievementCategory, GoalStatus
from growth_tracker.schemas import analytics as analytics_schema

router = APIRouter()

PENDING_STATUSES = (
    GoalStatus.DRAFT.value,
    GoalStatus.PENDING_APPROVAL.value,
    GoalStatus.APPROVED.value,
    GoalStatus.IN_PROGRESS.value,
)

SECONDS_PER_DAY = 60 * 60 * 24


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _filtered_goals(db: Session, query: analytics_schema.AnalyticsQuery) -> Query:
    goals = db.query(models.Goal)
    if query.department is not None:
        goals = goals.join(models.User, models.Goal.employee_id == models.User.id).filter(
            models.User.department == query.department
        )
    if query.user_id is not None:
        goals = goals.filter(models.Goal.employee_id == query.user_id)
    if query.date_from is not None:
        goals = goals.filter(models.Goal.created_at >= query.date_from)
    if query.date_to is not None:
        goals = goals.filter(models.Goal.created_at <= query.date_to)
    if query.goal_status is not None:
        goals = goals.filter(models.Goal.status == query.goal_status)
    return goals


def _filtered_achievements(db: Session, query: analytics_schema.AnalyticsQuery) -> Query:
    achievements = db.query(models.Achievement)
    if query.department is not None:
        achievements = achievements.join(models.User, models.Achievement.employee_id == models.User.id).filter(
            models.User.department == query.department
        )
    if query.user_id is not None:
        achievements = achievements.filter(models.Achievement.employee_id == query.user_id)
    if query.date_from is not None:
        achievements = achievements.filter(models.Achievement.achieved_date >= query.date_from)
    if query.date_to is not None:
        achievements = achievements.filter(models.Achievement.achieved_date <= query.date_to)
    if query.achievement_category is not None:
        achievements = achievements.filter(models.Achievement.category == query.achievement_category)
    return achievements


def get_analytics_data(db: Session, query: analytics_schema.AnalyticsQuery) -> analytics_schema.AnalyticsResponse:
    """Helper that aggregates goal and achievement statistics for the given filters."""
    goals = _filtered_goals(db, query)

    by_status = dict(
        goals.with_entities(models.Goal.status, func.count(models.Goal.id)).group_by(models.Goal.status).all()
    )
    goals_by_priority = dict(
        goals.with_entities(models.Goal.priority, func.count(models.Goal.id)).group_by(models.Goal.priority).all()
    )

    total_goals = sum(by_status.values())
    completed_goals = by_status.get(GoalStatus.COMPLETED.value, 0)
    pending_goals = sum(by_status.get(status, 0) for status in PENDING_STATUSES)

    # Mean days from creation to completion
    completion_spans = goals.with_entities(models.Goal.created_at, models.Goal.completed_date).filter(
        models.Goal.status == GoalStatus.COMPLETED.value,
        models.Goal.completed_date.isnot(None),
    ).all()
    average_completion_time = None
    if completion_spans:
        total_seconds = sum((completed - created).total_seconds() for created, completed in completion_spans)
        average_completion_time = _round_half_up(total_seconds / len(completion_spans) / SECONDS_PER_DAY)

    achievements = _filtered_achievements(db, query)
    achievements_by_category = dict(
        achievements.with_entities(models.Achievement.category, func.count(models.Achievement.id))
        .group_by(models.Achievement.category)
        .all()
    )

    completion_rate = _round_half_up(completed_goals / total_goals * 100) if total_goals > 0 else 0

    return analytics_schema.AnalyticsResponse(
        total_goals=total_goals,
        completed_goals=completed_goals,
        pending_goals=pending_goals,
        total_achievements=sum(achievements_by_category.values()),
        achievements_by_category=achievements_by_category,
        goals_by_priority=goals_by_priority,
        completion_rate=completion_rate,
        average_completion_time=average_completion_time,
    )


# --- API Endpoints ---

@router.get("", response_model=analytics_schema.AnalyticsResponse)
def read_analytics(
    user_id: Optional[int] = None,
    department: Optional[str] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
    goal_status: Optional[GoalStatus] = None,
    achievement_category: Optional[AchievementCategory] = None,
    db: Session = Depends(session.get_db),
):
    """ Goal and achievement statistics, narrowed by any combination of filters. """
    query = analytics_schema.AnalyticsQuery(
        user_id=user_id,
        department=department,
        date_from=date_from,
        date_to=date_to,
        goal_status=goal_status,
        achievement_category=achievement_category,
    )
    return get_analytics_data(db, query)
