"""
User roles: stored in users (upserted from the verified identity); experts also get a profile row.
"""
import logging

from sqlalchemy.orm import Session

from app.core.constants import ROLE_EXPERT
from app.core.errors import NotFoundError
from app.models.expert_profile import ExpertProfile
from app.models.user import User
from app.services.auth import AuthUser

logger = logging.getLogger(__name__)


def get_role(db: Session, user_id: str) -> dict:
    row = db.query(User).filter(User.id == user_id).first()
    if not row:
        raise NotFoundError("User profile not found in database")
    return {"role": row.role}


def set_role(db: Session, identity: AuthUser, role: str) -> dict:
    """Upsert the user with `role`. Becoming an expert creates an expert profile once (never duplicated)."""
    row = db.query(User).filter(User.id == identity.id).first()
    if row:
        row.email = identity.email
        row.name = identity.name or ""
        row.role = role
    else:
        db.add(User(id=identity.id, email=identity.email, name=identity.name or "", role=role))
    db.flush()
    if role == ROLE_EXPERT:
        exists = db.query(ExpertProfile.id).filter(ExpertProfile.user_id == identity.id).first()
        if not exists:
            db.add(ExpertProfile(user_id=identity.id))
    db.commit()
    logger.info("Set role user=%s role=%s", identity.id, role)
    return {"role": role}
