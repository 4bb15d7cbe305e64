# growth-tracker/growth_tracker/api/v1/endpoints/integrations.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from growth_tracker.core.exceptions import NotFound
from growth_tracker.db import models, session
from growth_tracker.schemas import integration as integration_schema

router = APIRouter()


@router.get("", response_model=List[integration_schema.Integration])
def get_integrations(db: Session = Depends(session.get_db)):
    return db.query(models.Integration).order_by(models.Integration.id).all()


@router.post("", response_model=integration_schema.Integration, status_code=status.HTTP_201_CREATED)
def create_integration(integration_in: integration_schema.IntegrationCreate, db: Session = Depends(session.get_db)):
    db_integration = models.Integration(**integration_in.model_dump())
    db.add(db_integration)
    db.commit()
    db.refresh(db_integration)
    return db_integration


@router.put("/{integration_id}", response_model=integration_schema.Integration)
def update_integration(
    integration_id: int,
    updates: integration_schema.IntegrationUpdate,
    db: Session = Depends(session.get_db)
):
    """ Updates name, enabled flag or config. """
    db_integration = db.get(models.Integration, integration_id)
    if not db_integration:
        raise NotFound(f"Integration with id {integration_id} not found")

    for field, value in updates.model_dump(exclude_unset=True).items():
        setattr(db_integration, field, value)
    db_integration.updated_at = models.utcnow()

    db.commit()
    db.refresh(db_integration)
    return db_integration
