# growth-tracker/growth_tracker/schemas/dashboard.py
from pydantic import BaseModel
from typing import List, Optional

from growth_tracker.schemas.achievement import Achievement
from growth_tracker.schemas.goal import Goal
from growth_tracker.schemas.user import User


class DashboardData(BaseModel):
    user: User
    recent_goals: List[Goal]
    recent_achievements: List[Achievement]
    pending_approvals: List[Goal]
    # Only filled in for Manager, HR_Admin and System_Admin
    team_goals_count: Optional[int] = None
    team_achievements_count: Optional[int] = None
