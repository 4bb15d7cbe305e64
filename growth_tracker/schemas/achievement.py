# growth-tracker/growth_tracker/schemas/achievement.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from growth_tracker.db.models import AchievementCategory


class AchievementCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: AchievementCategory
    employee_id: int
    goal_id: Optional[int] = None
    achieved_date: datetime

    class Config:
        use_enum_values = True


class Achievement(BaseModel):
    id: int
    title: str
    description: str
    category: AchievementCategory
    employee_id: int
    goal_id: Optional[int] = None
    achieved_date: datetime
    created_at: datetime

    class Config:
        from_attributes = True
