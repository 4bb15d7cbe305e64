# growth-tracker/growth_tracker/services/users.py
from sqlalchemy.orm import Session

from growth_tracker.core import permissions
from growth_tracker.core.exceptions import Conflict, InvalidInput, NotFound
from growth_tracker.core.logging import get_logger
from growth_tracker.db import models, repository
from growth_tracker.schemas import user as user_schema

logger = get_logger(__name__)


def _check_manager_role(manager: models.User) -> None:
    if not permissions.can_manage(manager):
        raise InvalidInput(f"User with id {manager.id} cannot be a manager (role: {manager.role})")


def _email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
    query = db.query(models.User).filter(models.User.email == email)
    if exclude_id is not None:
        query = query.filter(models.User.id != exclude_id)
    return query.first() is not None


def create_user(db: Session, user_in: user_schema.UserCreate) -> models.User:
    if _email_taken(db, user_in.email):
        raise Conflict(f"User with email {user_in.email} already exists")

    if user_in.manager_id is not None:
        manager = repository.find_user_by_id(db, user_in.manager_id)
        if manager is None:
            raise NotFound(f"Manager with id {user_in.manager_id} does not exist")
        _check_manager_role(manager)

    db_user = models.User(**user_in.model_dump())
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("User %s created with role %s", db_user.id, db_user.role)
    return db_user


def update_user(db: Session, user_id: int, updates: user_schema.UserUpdate) -> models.User:
    """Applies only the fields present in ``updates``."""
    db_user = repository.find_user_by_id(db, user_id)
    if not db_user:
        raise NotFound(f"User with id {user_id} not found")

    update_data = updates.model_dump(exclude_unset=True)

    manager_id = update_data.get("manager_id")
    if manager_id is not None:
        if manager_id == user_id:
            raise InvalidInput("A user cannot be their own manager")
        manager = repository.find_user_by_id(db, manager_id)
        if manager is None:
            raise NotFound(f"Manager with id {manager_id} not found")
        _check_manager_role(manager)

    if "email" in update_data and _email_taken(db, update_data["email"], exclude_id=user_id):
        raise Conflict(f"User with email {update_data['email']} already exists")

    for field, value in update_data.items():
        setattr(db_user, field, value)
    db_user.updated_at = models.utcnow()

    db.commit()
    db.refresh(db_user)
    return db_user
