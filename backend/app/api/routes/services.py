"""
Services catalog: public listings and expert-owned create / update / soft delete.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.db.session import get_db
from app.services.auth import AuthUser
from app.services.catalog_service import (
    create_service,
    deactivate_service,
    list_active_services,
    list_expert_services,
    update_service,
)

router = APIRouter()


class ServiceBody(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., gt=0)
    duration: int = Field(..., gt=0, description="Minutes")
    description: str | None = None


@router.get("/services")
def list_services(db: Session = Depends(get_db)):
    """All active services, newest first, each with expert_name."""
    return list_active_services(db)


@router.get("/experts/{expert_id}/services")
def list_services_for_expert(expert_id: str, db: Session = Depends(get_db)):
    return list_expert_services(db, expert_id)


@router.post("/services")
def add_service(
    body: ServiceBody,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return create_service(db, user.id, body.model_dump())


@router.put("/services/{service_id}")
def edit_service(
    service_id: int,
    body: ServiceBody,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update one of the caller's services; 404 if it does not exist or belongs to someone else."""
    return update_service(db, user.id, service_id, body.model_dump())


@router.delete("/services/{service_id}")
def remove_service(
    service_id: int,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Soft delete (is_active = false); scoped to the caller's own services."""
    return deactivate_service(db, user.id, service_id)
