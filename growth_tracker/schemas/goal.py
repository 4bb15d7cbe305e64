# growth-tracker/growth_tracker/schemas/goal.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from growth_tracker.db.models import GoalPriority, GoalStatus


class GoalCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    priority: GoalPriority
    employee_id: int
    manager_id: Optional[int] = None
    due_date: Optional[datetime] = None

    class Config:
        use_enum_values = True


class GoalUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[GoalStatus] = None
    priority: Optional[GoalPriority] = None
    manager_id: Optional[int] = None
    due_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    approval_date: Optional[datetime] = None

    @field_validator("title", "description", "status", "priority")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value

    class Config:
        use_enum_values = True


class GoalApproval(BaseModel):
    # Acting user; trusted as given
    manager_id: int


class Goal(BaseModel):
    id: int
    title: str
    description: str
    status: GoalStatus
    priority: GoalPriority
    employee_id: int
    manager_id: Optional[int] = None
    due_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    approval_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
