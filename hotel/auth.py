"""Plaintext credential check against the stored user list (demo only)."""

from __future__ import annotations

from loguru import logger

from .entities import Session
from .errors import AuthError
from .store import PersistentStore


class AuthGate:
    def __init__(self, store: PersistentStore) -> None:
        self.store = store

    def authenticate(self, email: str, password: str) -> Session:
        """
        Log in the first stored user whose email and password both match exactly.

        On success the new session replaces any previous one. On failure the
        stored session is left as it was and ``AuthError`` is raised.
        """
        for user in self.store.users():
            if user.email == email and user.password == password:
                session = Session.for_user(user)
                self.store.set_session(session)
                logger.info("Logged in {} (role={})", user.email, user.role)
                return session

        logger.warning("Rejected login for {}", email)
        raise AuthError()


__all__ = ["AuthGate"]
