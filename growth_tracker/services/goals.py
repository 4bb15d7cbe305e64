# growth-tracker/growth_tracker/services/goals.py
from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import NotFound
from growth_tracker.core.logging import get_logger
from growth_tracker.db import models, repository
from growth_tracker.schemas import goal as goal_schema

logger = get_logger(__name__)

APPROVED = models.GoalStatus.APPROVED.value
COMPLETED = models.GoalStatus.COMPLETED.value


def create_goal(db: Session, goal_in: goal_schema.GoalCreate) -> models.Goal:
    if repository.find_user_by_id(db, goal_in.employee_id) is None:
        raise NotFound("Employee not found")

    if goal_in.manager_id is not None and repository.find_user_by_id(db, goal_in.manager_id) is None:
        raise NotFound("Manager not found")

    db_goal = models.Goal(**goal_in.model_dump(), status=models.GoalStatus.DRAFT.value)
    db.add(db_goal)
    db.commit()
    db.refresh(db_goal)
    return db_goal


def status_side_effects(current_status: str, new_status: str) -> dict:
    """Date fields implied by moving a goal from ``current_status`` to ``new_status``."""
    now = models.utcnow()
    fields = {}
    if new_status == APPROVED and current_status != APPROVED:
        fields["approval_date"] = now
    if new_status == COMPLETED and current_status != COMPLETED:
        fields["completed_date"] = now
    if new_status != COMPLETED and current_status == COMPLETED:
        fields["completed_date"] = None
    return fields


def update_goal(db: Session, goal_id: int, updates: goal_schema.GoalUpdate) -> models.Goal:
    goal = repository.find_goal_by_id(db, goal_id)
    if goal is None:
        raise NotFound("Goal not found")

    requested = updates.model_dump(exclude_unset=True)

    if requested.get("manager_id") is not None and repository.find_user_by_id(db, requested["manager_id"]) is None:
        raise NotFound("Manager not found")

    fields = {"updated_at": models.utcnow()}
    if "status" in requested:
        fields.update(status_side_effects(goal.status, requested["status"]))
    # Explicit dates in the request win over the derived ones
    fields.update(requested)

    previous_status = goal.status
    goal = repository.update_goal(db, goal, fields)
    if goal.status != previous_status:
        logger.info("Goal %s moved %s -> %s", goal.id, previous_status, goal.status)
    return goal
