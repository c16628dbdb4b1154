"""
User role: read and set the caller's role (user | expert).
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.constants import ROLE_PATTERN
from app.db.session import get_db
from app.services.auth import AuthUser
from app.services.user_service import get_role, set_role

router = APIRouter()


class UserRoleBody(BaseModel):
    role: str = Field(..., pattern=ROLE_PATTERN, description="user or expert")


@router.get("/users/role")
def read_role(user: AuthUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Return the caller's stored role. 404 until a role has been set."""
    return get_role(db, user.id)


@router.put("/users/role")
def update_role(
    body: UserRoleBody,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Upsert the caller's user row with this role; becoming an expert creates the expert profile."""
    return set_role(db, user, body.role)
