"""
Service catalog: experts' bookable services. Deletion is soft (is_active = false).
"""
import logging
from typing import Any

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.models.service import Service

logger = logging.getLogger(__name__)


def service_to_dict(s: Service) -> dict[str, Any]:
    return {
        "id": s.id,
        "expert_id": s.expert_id,
        "name": s.name,
        "price": s.price,
        "duration": s.duration,
        "description": s.description,
        "is_active": bool(s.is_active),
        "created_at": s.created_at.isoformat() if s.created_at else None,
        "updated_at": s.updated_at.isoformat() if s.updated_at else None,
    }


def list_active_services(db: Session) -> list[dict]:
    """All active services, newest first, with the expert's name flattened in."""
    rows = (
        db.query(Service)
        .filter(Service.is_active.is_(True))
        .order_by(Service.created_at.desc(), Service.id.desc())
        .all()
    )
    return [{**service_to_dict(s), "expert_name": s.expert.name if s.expert else None} for s in rows]


def list_expert_services(db: Session, expert_id: str) -> list[dict]:
    rows = (
        db.query(Service)
        .filter(Service.expert_id == expert_id, Service.is_active.is_(True))
        .order_by(Service.created_at.desc(), Service.id.desc())
        .all()
    )
    return [service_to_dict(s) for s in rows]


def create_service(db: Session, expert_id: str, data: dict[str, Any]) -> dict:
    row = Service(expert_id=expert_id, is_active=True, **data)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Created service id=%s expert=%s", row.id, expert_id)
    return service_to_dict(row)


def update_service(db: Session, expert_id: str, service_id: int, data: dict[str, Any]) -> dict:
    """Update a service owned by expert_id. Anyone else's (or a missing) service is a 404."""
    row = db.query(Service).filter(Service.id == service_id, Service.expert_id == expert_id).first()
    if not row:
        raise NotFoundError("Service not found or unauthorized")
    for key, value in data.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return service_to_dict(row)


def deactivate_service(db: Session, expert_id: str, service_id: int) -> dict:
    db.query(Service).filter(Service.id == service_id, Service.expert_id == expert_id).update(
        {Service.is_active: False}, synchronize_session=False
    )
    db.commit()
    return {"success": True}
