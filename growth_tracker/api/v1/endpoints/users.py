# growth-tracker/growth_tracker/api/v1/endpoints/users.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from growth_tracker.core.exceptions import NotFound
from growth_tracker.db import models, repository, session
from growth_tracker.schemas import achievement as achievement_schema
from growth_tracker.schemas import chat as chat_schema
from growth_tracker.schemas import goal as goal_schema
from growth_tracker.schemas import team as team_schema
from growth_tracker.schemas import user as user_schema
from growth_tracker.services import hierarchy, users as user_service

router = APIRouter()


@router.post("", response_model=user_schema.User, status_code=status.HTTP_201_CREATED)
def create_user(user_in: user_schema.UserCreate, db: Session = Depends(session.get_db)):
    """ Creates a new user profile. """
    return user_service.create_user(db, user_in)


@router.get("", response_model=List[user_schema.User])
def get_users(db: Session = Depends(session.get_db)):
    """ Retrieves a list of all users. """
    return db.query(models.User).order_by(models.User.id).all()


@router.get("/{user_id}", response_model=user_schema.User)
def get_user_by_id(user_id: int, db: Session = Depends(session.get_db)):
    db_user = repository.find_user_by_id(db, user_id)
    if not db_user:
        raise NotFound(f"User with id {user_id} not found")
    return db_user


@router.put("/{user_id}", response_model=user_schema.User)
def update_user(user_id: int, updates: user_schema.UserUpdate, db: Session = Depends(session.get_db)):
    """ Updates only the fields sent in the request body. """
    return user_service.update_user(db, user_id, updates)


@router.get("/{user_id}/team", response_model=List[user_schema.User])
def get_team_members(user_id: int, db: Session = Depends(session.get_db)):
    """ Direct reports and team-membership employees of a manager. """
    return hierarchy.get_team_members(db, user_id)


@router.get("/{user_id}/managers", response_model=List[team_schema.TeamMembership])
def get_team_managers(user_id: int, db: Session = Depends(session.get_db)):
    """ Team-membership rows in which this user is the employee. """
    return hierarchy.get_team_managers(db, user_id)


@router.get("/{user_id}/goals", response_model=List[goal_schema.Goal])
def get_goals_by_employee(user_id: int, db: Session = Depends(session.get_db)):
    return (
        db.query(models.Goal)
        .filter(models.Goal.employee_id == user_id)
        .order_by(models.Goal.created_at.desc(), models.Goal.id.desc())
        .all()
    )


@router.get("/{user_id}/achievements", response_model=List[achievement_schema.Achievement])
def get_achievements_by_employee(user_id: int, db: Session = Depends(session.get_db)):
    """ Most recent achievements first. """
    return (
        db.query(models.Achievement)
        .filter(models.Achievement.employee_id == user_id)
        .order_by(models.Achievement.achieved_date.desc(), models.Achievement.id.desc())
        .all()
    )


@router.get("/{user_id}/chat-sessions", response_model=List[chat_schema.ChatSession])
def get_chat_sessions_by_user(user_id: int, db: Session = Depends(session.get_db)):
    return (
        db.query(models.ChatSession)
        .filter(models.ChatSession.user_id == user_id)
        .order_by(models.ChatSession.updated_at.desc(), models.ChatSession.id.desc())
        .all()
    )
