# growth-tracker/growth_tracker/schemas/team.py
from pydantic import BaseModel
from datetime import datetime


class TeamMembershipCreate(BaseModel):
    manager_id: int
    employee_id: int


class TeamMembership(TeamMembershipCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
