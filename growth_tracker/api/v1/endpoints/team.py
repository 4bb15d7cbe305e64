# growth-tracker/growth_tracker/api/v1/endpoints/team.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from growth_tracker.db import session
from growth_tracker.schemas import team as team_schema
from growth_tracker.services import hierarchy

router = APIRouter()


@router.post("", response_model=team_schema.TeamMembership, status_code=status.HTTP_201_CREATED)
def create_team_membership(membership_in: team_schema.TeamMembershipCreate, db: Session = Depends(session.get_db)):
    """
    Adds a secondary reporting line. Rejected if it duplicates an existing
    one or would make someone their own indirect manager.
    """
    return hierarchy.create_team_membership(db, membership_in.manager_id, membership_in.employee_id)
