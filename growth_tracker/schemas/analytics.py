# growth-tracker/growth_tracker/schemas/analytics.py
from pydantic import BaseModel
from typing import Dict, Optional
from datetime import datetime

from growth_tracker.db.models import AchievementCategory, GoalStatus


class AnalyticsQuery(BaseModel):
    user_id: Optional[int] = None
    department: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    goal_status: Optional[GoalStatus] = None
    achievement_category: Optional[AchievementCategory] = None

    class Config:
        use_enum_values = True


class AnalyticsResponse(BaseModel):
    total_goals: int
    completed_goals: int
    pending_goals: int
    total_achievements: int
    achievements_by_category: Dict[str, int]
    goals_by_priority: Dict[str, int]
    # Whole percent, 0 when there are no goals
    completion_rate: int
    # Whole days; None when no goal has been completed
    average_completion_time: Optional[int] = None
