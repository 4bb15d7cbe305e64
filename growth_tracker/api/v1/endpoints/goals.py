# growth-tracker/growth_tracker/api/v1/endpoints/goals.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from growth_tracker.db import models, session
from growth_tracker.schemas import goal as goal_schema
from growth_tracker.services import approvals, goals as goal_service

router = APIRouter()


@router.post("", response_model=goal_schema.Goal, status_code=status.HTTP_201_CREATED)
def create_goal(goal_in: goal_schema.GoalCreate, db: Session = Depends(session.get_db)):
    """ Creates a goal in Draft status. """
    return goal_service.create_goal(db, goal_in)


@router.get("", response_model=List[goal_schema.Goal])
def get_goals(db: Session = Depends(session.get_db)):
    """ All goals, newest first. """
    return db.query(models.Goal).order_by(models.Goal.created_at.desc(), models.Goal.id.desc()).all()


@router.put("/{goal_id}", response_model=goal_schema.Goal)
def update_goal(goal_id: int, updates: goal_schema.GoalUpdate, db: Session = Depends(session.get_db)):
    return goal_service.update_goal(db, goal_id, updates)


@router.post("/{goal_id}/approve", response_model=goal_schema.Goal)
def approve_goal(goal_id: int, approval: goal_schema.GoalApproval, db: Session = Depends(session.get_db)):
    """
    Approves a pending goal. The acting manager becomes the goal's manager of record.
    """
    return approvals.approve_goal(db, goal_id, approval.manager_id)
