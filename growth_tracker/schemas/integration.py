# growth-tracker/growth_tracker/schemas/integration.py
import json
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from growth_tracker.db.models import IntegrationType


def _ensure_json(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f"config must be a JSON document: {e.msg}")
    return value


class IntegrationCreate(BaseModel):
    name: str = Field(min_length=1)
    type: IntegrationType
    enabled: bool = False
    config: str

    @field_validator("config")
    @classmethod
    def validate_config(cls, value):
        return _ensure_json(value)

    class Config:
        use_enum_values = True


class IntegrationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    enabled: Optional[bool] = None
    config: Optional[str] = None

    @field_validator("name", "enabled", "config")
    @classmethod
    def validate_field(cls, value, info):
        if value is None:
            raise ValueError("field cannot be null")
        if info.field_name == "config":
            return _ensure_json(value)
        return value


class Integration(BaseModel):
    id: int
    name: str
    type: IntegrationType
    enabled: bool
    config: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
