"""Sessioning concept: which user, if any, a browser session belongs to."""

import logging
from typing import Any, MutableMapping

from bson import ObjectId

from app.utils.errors import NotAllowedError, UnauthenticatedError

logger = logging.getLogger(__name__)

Session = MutableMapping[str, Any]

SESSION_USER_KEY = "user"


class SessioningService:
    """Reads and writes the user id kept in the signed session cookie."""

    def start(self, session: Session, user: ObjectId) -> None:
        self.is_logged_out(session)
        session[SESSION_USER_KEY] = str(user)
        logger.info(f"Session started for user {user}")

    def end(self, session: Session) -> None:
        self.is_logged_in(session)
        session.pop(SESSION_USER_KEY, None)
        logger.info("Session ended")

    def get_user(self, session: Session) -> ObjectId:
        self.is_logged_in(session)
        return ObjectId(session[SESSION_USER_KEY])

    def is_logged_in(self, session: Session) -> None:
        if not session.get(SESSION_USER_KEY):
            raise UnauthenticatedError("Must be logged in!")

    def is_logged_out(self, session: Session) -> None:
        if session.get(SESSION_USER_KEY):
            raise NotAllowedError("Must be logged out!")
