# growth-tracker/growth_tracker/db/models.py
import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp; every DateTime column stores naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class UserRole(str, enum.Enum):
    EMPLOYEE = "Employee"
    MANAGER = "Manager"
    HR_ADMIN = "HR_Admin"
    SYSTEM_ADMIN = "System_Admin"


class GoalStatus(str, enum.Enum):
    DRAFT = "Draft"
    PENDING_APPROVAL = "Pending_Approval"
    APPROVED = "Approved"
    IN_PROGRESS = "In_Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class GoalPriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class AchievementCategory(str, enum.Enum):
    GOAL_COMPLETION = "Goal_Completion"
    SKILL_DEVELOPMENT = "Skill_Development"
    LEADERSHIP = "Leadership"
    INNOVATION = "Innovation"
    COLLABORATION = "Collaboration"
    PERFORMANCE = "Performance"


class MessageType(str, enum.Enum):
    USER = "User"
    ASSISTANT = "Assistant"


class IntegrationType(str, enum.Enum):
    HRIS = "HRIS"
    LEARNING_MANAGEMENT = "Learning_Management"
    PERFORMANCE_REVIEW = "Performance_Review"
    CALENDAR = "Calendar"
    COMMUNICATION = "Communication"


def _one_of(column: str, choices) -> CheckConstraint:
    values = ", ".join(f"'{choice.value}'" for choice in choices)
    return CheckConstraint(f"{column} IN ({values})", name=f"ck_{column}")


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False)
    department = Column(String(100), nullable=True)
    # Direct-report edge (primary reporting line)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    profile_picture = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    __table_args__ = (
        _one_of("role", UserRole),
        CheckConstraint("manager_id IS NULL OR manager_id <> id", name="ck_user_not_own_manager"),
    )
    manager = relationship("User", remote_side=[id], backref="direct_reports")
    goals = relationship("Goal", back_populates="employee", foreign_keys="Goal.employee_id")
    achievements = relationship("Achievement", back_populates="employee")
    chat_sessions = relationship("ChatSession", back_populates="user")


class Goal(Base):
    __tablename__ = "goals"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=GoalStatus.DRAFT.value)
    priority = Column(String(20), nullable=False)
    employee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    due_date = Column(DateTime, nullable=True)
    completed_date = Column(DateTime, nullable=True)
    approval_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    __table_args__ = (
        _one_of("status", GoalStatus),
        _one_of("priority", GoalPriority),
    )
    employee = relationship("User", back_populates="goals", foreign_keys=[employee_id])
    manager = relationship("User", foreign_keys=[manager_id])
    achievements = relationship("Achievement", back_populates="goal")


class Achievement(Base):
    __tablename__ = "achievements"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(30), nullable=False)
    employee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    goal_id = Column(Integer, ForeignKey("goals.id"), nullable=True)
    achieved_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    __table_args__ = ( _one_of("category", AchievementCategory), )
    employee = relationship("User", back_populates="achievements")
    goal = relationship("Goal", back_populates="achievements")


class ChatSession(Base):
    __tablename__ = "chat_sessions"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    user = relationship("User", back_populates="chat_sessions")
    messages = relationship("ChatMessage", back_populates="session", order_by="ChatMessage.id")


class ChatMessage(Base):
    __tablename__ = "chat_messages"
    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("chat_sessions.id"), nullable=False, index=True)
    message_type = Column(String(20), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    __table_args__ = ( _one_of("message_type", MessageType), )
    session = relationship("ChatSession", back_populates="messages")


class Integration(Base):
    __tablename__ = "integrations"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    type = Column(String(30), nullable=False)
    enabled = Column(Boolean, nullable=False, default=False)
    # JSON document stored as text
    config = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    __table_args__ = ( _one_of("type", IntegrationType), )


class TeamMembership(Base):
    """Secondary ("dotted-line") reporting edge, independent of User.manager_id."""
    __tablename__ = "team_memberships"
    id = Column(Integer, primary_key=True, index=True)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    __table_args__ = (
        UniqueConstraint("manager_id", "employee_id", name="uq_team_membership_pair"),
        CheckConstraint("manager_id <> employee_id", name="ck_team_membership_not_self"),
    )
    manager = relationship("User", foreign_keys=[manager_id])
    employee = relationship("User", foreign_keys=[employee_id])
