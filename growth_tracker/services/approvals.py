# growth-tracker/growth_tracker/services/approvals.py
from typing import Optional

from sqlalchemy.orm import Session

from growth_tracker.core import permissions
from growth_tracker.core.exceptions import Forbidden, InvalidState, NotFound
from growth_tracker.core.logging import get_logger
from growth_tracker.db import models, repository

logger = get_logger(__name__)


def can_approve(goal: models.Goal, actor: models.User, employee: Optional[models.User]) -> bool:
    """
    Relationship rule for approving ``goal``: the actor is the goal's
    manager, an admin, or the employee's direct manager.
    Role gating (approver roles only) is the caller's job.
    """
    if goal.manager_id == actor.id:
        return True
    if permissions.is_admin(actor):
        return True
    return employee is not None and employee.manager_id == actor.id


def approve_goal(db: Session, goal_id: int, acting_user_id: int) -> models.Goal:
    """
    Move a goal from Pending_Approval to Approved on behalf of ``acting_user_id``.

    The approver becomes the goal's manager of record. The write only
    lands if the goal is still pending, so a concurrent approval that
    committed first turns this call into InvalidState instead of a second
    approval.
    """
    goal = repository.find_goal_by_id(db, goal_id)
    if goal is None:
        raise NotFound(f"Goal with id {goal_id} not found")

    if goal.status != models.GoalStatus.PENDING_APPROVAL.value:
        raise InvalidState(f"Goal is not pending approval. Current status: {goal.status}")

    actor = repository.find_user_by_id(db, acting_user_id)
    if actor is None:
        raise NotFound(f"Manager with id {acting_user_id} not found")

    if not permissions.can_manage(actor):
        raise Forbidden("User does not have permission to approve goals: insufficient role")

    employee = repository.find_user_by_id(db, goal.employee_id)
    if not can_approve(goal, actor, employee):
        logger.warning("User %s denied approval of goal %s", acting_user_id, goal_id)
        raise Forbidden("Manager does not have permission to approve this goal")

    now = models.utcnow()
    changed = repository.approve_pending_goal(db, goal_id, {
        "status": models.GoalStatus.APPROVED.value,
        "manager_id": acting_user_id,
        "approval_date": now,
        "updated_at": now,
    })
    if changed == 0:
        db.expire(goal)
        raise InvalidState(f"Goal is not pending approval. Current status: {goal.status}")

    db.refresh(goal)
    logger.info("Goal %s approved by user %s", goal_id, acting_user_id)
    return goal
