"""
Persistence lookups shared by the service layer.

Thin wrappers over SQLAlchemy queries so the hierarchy checker and the
approval authorizer read like the operations they perform. None of these
commit except ``insert_team_membership``, which is a complete write.
"""
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from growth_tracker.db import models


def find_user_by_id(db: Session, user_id: int) -> Optional[models.User]:
    return db.get(models.User, user_id)


def find_goal_by_id(db: Session, goal_id: int) -> Optional[models.Goal]:
    return db.get(models.Goal, goal_id)


def find_team_memberships_by_employee_id(db: Session, employee_id: int) -> List[models.TeamMembership]:
    """Rows naming who manages ``employee_id``."""
    return (
        db.query(models.TeamMembership)
        .filter(models.TeamMembership.employee_id == employee_id)
        .all()
    )


def find_team_membership(db: Session, manager_id: int, employee_id: int) -> Optional[models.TeamMembership]:
    return (
        db.query(models.TeamMembership)
        .filter(
            models.TeamMembership.manager_id == manager_id,
            models.TeamMembership.employee_id == employee_id,
        )
        .first()
    )


def list_team_edges(db: Session) -> Dict[int, List[int]]:
    """Adjacency of the membership graph: employee id -> ids of its managers."""
    managers_of: Dict[int, List[int]] = {}
    rows = db.query(models.TeamMembership.employee_id, models.TeamMembership.manager_id).all()
    for employee_id, manager_id in rows:
        managers_of.setdefault(employee_id, []).append(manager_id)
    return managers_of


def insert_team_membership(db: Session, manager_id: int, employee_id: int) -> models.TeamMembership:
    membership = models.TeamMembership(manager_id=manager_id, employee_id=employee_id)
    db.add(membership)
    db.commit()
    db.refresh(membership)
    return membership


def update_goal(db: Session, goal: models.Goal, fields: dict) -> models.Goal:
    for field, value in fields.items():
        setattr(goal, field, value)
    db.commit()
    db.refresh(goal)
    return goal


def approve_pending_goal(db: Session, goal_id: int, fields: dict) -> int:
    """
    Apply ``fields`` only while the goal is still pending approval.

    Returns the number of rows changed; zero means another writer moved
    the goal out of Pending_Approval first.
    """
    changed = (
        db.query(models.Goal)
        .filter(
            models.Goal.id == goal_id,
            models.Goal.status == models.GoalStatus.PENDING_APPROVAL.value,
        )
        .update(fields, synchronize_session=False)
    )
    db.commit()
    return changed
