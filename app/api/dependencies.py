"""
Shared API dependencies.

The gateway authenticates callers and forwards their email in
``CALLER_IDENTITY_HEADER``; here we only refuse blocked accounts.
"""

from typing import Annotated, Optional

from fastapi import Depends, Path, Request
from sqlmodel import Session

from app.core import messages
from app.core.config import settings
from app.core.exceptions import Forbidden
from app.db.session import get_db
from app.models.user import User
from app.schemas.base import INT32_MAX, INT32_MIN
from app.services.user_directory import UserDirectory

RowId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX, description="Row id")]


def get_caller(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    """Resolve the caller named by the identity header, if any."""
    email = (request.headers.get(settings.CALLER_IDENTITY_HEADER) or "").strip()
    if not email:
        return None
    return UserDirectory(db).find_by_email(email)


def ensure_caller_not_blocked(caller: Optional[User] = Depends(get_caller)) -> Optional[User]:
    if caller is not None and caller.blocked:
        raise Forbidden(messages.text("user_blocked"))
    return caller
