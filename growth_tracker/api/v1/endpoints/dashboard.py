from fastapi import APIRouter, Depends
from sqlalchemy import or_, select
from sqlalchemy.orm import Session, joinedload

from growth_tracker.core import permissions
from growth_tracker.core.config import settings
from growth_tracker.core.exceptions import NotFound
from growth_tracker.db import models, repository, session
from growth_tracker.schemas import achievement as achievement_schema
from growth_tracker.schemas import dashboard as dashboard_schema
from growth_tracker.schemas import goal as goal_schema
from growth_tracker.schemas import user as user_schema
from growth_tracker.services.approvals import can_approve

router = APIRouter()


# --- Helper Functions to build the dashboard ---

def get_pending_approvals(db: Session, user: models.User):
    """Pending goals the user owns, plus those they are allowed to approve."""
    pending = (
        db.query(models.Goal)
        .options(joinedload(models.Goal.employee))
        .filter(models.Goal.status == models.GoalStatus.PENDING_APPROVAL.value)
    )
    if not permissions.can_manage(user):
        pending = pending.filter(models.Goal.employee_id == user.id)
    elif not permissions.is_admin(user):
        # Own goals, goals assigned to the user, goals of direct reports
        direct_report_ids = select(models.User.id).where(models.User.manager_id == user.id)
        pending = pending.filter(or_(
            models.Goal.employee_id == user.id,
            models.Goal.manager_id == user.id,
            models.Goal.employee_id.in_(direct_report_ids),
        ))

    goals = pending.order_by(models.Goal.created_at.desc(), models.Goal.id.desc()).all()
    return [
        goal for goal in goals
        if goal.employee_id == user.id or can_approve(goal, user, goal.employee)
    ]


def get_dashboard_data(db: Session, user_id: int) -> dashboard_schema.DashboardData:
    user = repository.find_user_by_id(db, user_id)
    if not user:
        raise NotFound("User not found")

    limit = settings.RECENT_ITEMS_LIMIT

    recent_goals = (
        db.query(models.Goal)
        .filter(models.Goal.employee_id == user_id)
        .order_by(models.Goal.created_at.desc(), models.Goal.id.desc())
        .limit(limit)
        .all()
    )
    recent_achievements = (
        db.query(models.Achievement)
        .filter(models.Achievement.employee_id == user_id)
        .order_by(models.Achievement.achieved_date.desc(), models.Achievement.id.desc())
        .limit(limit)
        .all()
    )

    data = dashboard_schema.DashboardData(
        user=user_schema.User.model_validate(user),
        recent_goals=[goal_schema.Goal.model_validate(goal) for goal in recent_goals],
        recent_achievements=[achievement_schema.Achievement.model_validate(a) for a in recent_achievements],
        pending_approvals=[goal_schema.Goal.model_validate(goal) for goal in get_pending_approvals(db, user)],
    )

    # Team statistics only make sense for people who manage goals
    if permissions.can_manage(user):
        data.team_goals_count = db.query(models.Goal).filter(models.Goal.manager_id == user_id).count()
        data.team_achievements_count = (
            db.query(models.Achievement)
            .join(models.Goal, models.Achievement.goal_id == models.Goal.id)
            .filter(models.Goal.manager_id == user_id)
            .count()
        )

    return data


# --- API Endpoints ---

@router.get("/{user_id}/dashboard", response_model=dashboard_schema.DashboardData)
def read_dashboard(user_id: int, db: Session = Depends(session.get_db)):
    """ Personal overview: recent goals and achievements, approvals waiting, team totals. """
    return get_dashboard_data(db=db, user_id=user_id)
