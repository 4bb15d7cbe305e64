# growth-tracker/growth_tracker/api/v1/endpoints/achievements.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import InvalidInput, NotFound
from growth_tracker.db import models, repository, session
from growth_tracker.schemas import achievement as achievement_schema

router = APIRouter()


@router.post("", response_model=achievement_schema.Achievement, status_code=status.HTTP_201_CREATED)
def create_achievement(achievement_in: achievement_schema.AchievementCreate, db: Session = Depends(session.get_db)):
    """ Records an achievement, optionally tied to one of the employee's goals. """
    if repository.find_user_by_id(db, achievement_in.employee_id) is None:
        raise NotFound(f"Employee with id {achievement_in.employee_id} not found")

    if achievement_in.goal_id is not None:
        goal = repository.find_goal_by_id(db, achievement_in.goal_id)
        if goal is None:
            raise NotFound(f"Goal with id {achievement_in.goal_id} not found")
        if goal.employee_id != achievement_in.employee_id:
            raise InvalidInput(
                f"Goal with id {achievement_in.goal_id} does not belong to employee {achievement_in.employee_id}"
            )

    db_achievement = models.Achievement(**achievement_in.model_dump())
    db.add(db_achievement)
    db.commit()
    db.refresh(db_achievement)
    return db_achievement
