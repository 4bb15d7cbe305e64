# growth-tracker/growth_tracker/services/hierarchy.py
"""
Team hierarchy integrity.

Team memberships form a graph of "employee is managed by manager" edges
that must stay acyclic. Only TeamMembership rows take part in the check;
the direct-report edge on ``User.manager_id`` is a separate relation.
"""
from typing import Dict, Iterable, List, Mapping

from sqlalchemy.orm import Session

from growth_tracker.core import permissions
from growth_tracker.core.exceptions import Conflict, Forbidden, InvalidInput, NotFound
from growth_tracker.core.logging import get_logger
from growth_tracker.db import models, repository

logger = get_logger(__name__)


def reaches(managers_of: Mapping[int, Iterable[int]], start_id: int, target_id: int) -> bool:
    """
    True if ``target_id`` is found among the managers above ``start_id``.

    Iterative depth-first walk; each node is expanded at most once, and
    meeting a node twice only stops that branch.
    """
    stack = [start_id]
    visited = {start_id}
    while stack:
        current = stack.pop()
        for manager_id in managers_of.get(current, ()):
            if manager_id == target_id:
                return True
            if manager_id not in visited:
                visited.add(manager_id)
                stack.append(manager_id)
    return False


def would_create_cycle(db: Session, manager_id: int, employee_id: int) -> bool:
    """Would the edge manager_id -> employee_id close a loop in the membership graph?"""
    return reaches(repository.list_team_edges(db), manager_id, employee_id)


def create_team_membership(db: Session, manager_id: int, employee_id: int) -> models.TeamMembership:
    manager = repository.find_user_by_id(db, manager_id)
    if manager is None:
        raise NotFound(f"Manager with ID {manager_id} does not exist")

    employee = repository.find_user_by_id(db, employee_id)
    if employee is None:
        raise NotFound(f"Employee with ID {employee_id} does not exist")

    if manager_id == employee_id:
        raise InvalidInput("Employee cannot manage themselves")

    if not permissions.can_manage(manager):
        raise Forbidden("User must have Manager, HR_Admin, or System_Admin role to manage team members")

    if repository.find_team_membership(db, manager_id, employee_id) is not None:
        raise Conflict("Team membership already exists")

    if would_create_cycle(db, manager_id, employee_id):
        logger.warning("Rejected membership %s -> %s: circular reporting", manager_id, employee_id)
        raise Conflict("Cannot create circular reporting relationship")

    membership = repository.insert_team_membership(db, manager_id, employee_id)
    logger.info("Team membership %s created: %s manages %s", membership.id, manager_id, employee_id)
    return membership


def get_team_members(db: Session, manager_id: int) -> List[models.User]:
    """Direct reports plus team-membership employees, each user once."""
    direct_reports = db.query(models.User).filter(models.User.manager_id == manager_id).all()
    members = (
        db.query(models.User)
        .join(models.TeamMembership, models.TeamMembership.employee_id == models.User.id)
        .filter(models.TeamMembership.manager_id == manager_id)
        .all()
    )

    unique: Dict[int, models.User] = {}
    for user in direct_reports + members:
        unique.setdefault(user.id, user)
    return [unique[user_id] for user_id in sorted(unique)]


def get_team_managers(db: Session, employee_id: int) -> List[models.TeamMembership]:
    """Membership rows naming who manages ``employee_id``, oldest first."""
    memberships = repository.find_team_memberships_by_employee_id(db, employee_id)
    return sorted(memberships, key=lambda membership: membership.id)
