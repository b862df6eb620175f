"""
User directory.

Existence checks against the ``users`` table shared with the user
service.  A missing row is a :class:`NotFound`; a driver, connection or
timeout failure is a :class:`ServiceUnavailable` and must never be
reported as a missing user.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from sqlalchemy.exc import DataError, DBAPIError
from sqlmodel import Session

from app.core import messages
from app.core.config import settings
from app.core.exceptions import NotFound, ServiceUnavailable
from app.db.repositories.user import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)

K = TypeVar("K")


class UserDirectory:
    """Read-only lookups of platform users."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = UserRepository(session)

    def require(self, user_id: int) -> User:
        """Return the user or raise :class:`NotFound` ("User not found")."""
        user = self._lookup(self.repository.get_by_id, user_id)
        if not user:
            raise NotFound(messages.text("user_not_found"))
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        return self._lookup(self.repository.get_by_email, email)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lookup(self, fetch: Callable[[K], Optional[User]], key: K) -> Optional[User]:
        try:
            with self._bounded_statement_time():
                return fetch(key)
        except DataError:
            self.session.rollback()
            raise
        except DBAPIError as exc:
            logger.exception("user_lookup_failed", extra={"lookup_key": key})
            self.session.rollback()
            raise ServiceUnavailable(messages.text("user_service_unavailable")) from exc

    @contextmanager
    def _bounded_statement_time(self) -> Iterator[None]:
        """Apply USER_LOOKUP_TIMEOUT_MS on PostgreSQL for the lookup only.

        ``SET LOCAL`` lasts until the transaction ends, so the default is
        restored once the lookup returns; a failed lookup is rolled back.
        """
        if self.session.get_bind().dialect.name != "postgresql":
            yield
            return
        connection = self.session.connection()
        connection.exec_driver_sql(f"SET LOCAL statement_timeout = {int(settings.USER_LOOKUP_TIMEOUT_MS)}")
        yield
        connection.exec_driver_sql("SET LOCAL statement_timeout TO DEFAULT")
