# growth-tracker/growth_tracker/schemas/user.py
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from growth_tracker.db.models import UserRole


class UserBase(BaseModel):
    email: EmailStr
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    role: UserRole
    department: Optional[str] = None
    manager_id: Optional[int] = None
    profile_picture: Optional[str] = None


class UserCreate(UserBase):

    class Config:
        use_enum_values = True


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    role: Optional[UserRole] = None
    department: Optional[str] = None
    manager_id: Optional[int] = None
    profile_picture: Optional[str] = None

    @field_validator("email", "first_name", "last_name", "role")
    @classmethod
    def reject_null(cls, value):
        # Only runs for fields present in the payload
        if value is None:
            raise ValueError("field cannot be null")
        return value

    class Config:
        use_enum_values = True


class User(UserBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
