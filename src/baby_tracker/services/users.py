"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from baby_tracker.domain.models import User
from baby_tracker.domain.schemas import UserCreate

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for users."""

    def get_user(self, user_id: int) -> User | None:
        """Return a user by id, if present."""

    def get_user_by_username(self, username: str) -> User | None:
        """Return a user by username, if present."""

    def create_user(self, data: UserCreate) -> User:
        """Create and return a new user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def get_user(self, user_id: int) -> User | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def register(self, username: str, password: str) -> User:
        """Create a new user; raises when the username is taken."""
        user = self.repository.create_user(
            UserCreate(username=username, password=password)
        )
        logger.info("Registered user", extra={"user_id": user.id})
        return user

    def ensure_user(self, username: str, password: str) -> User:
        """Return the user with this username, creating it when missing."""
        existing = self.repository.get_user_by_username(username)
        if existing:
            return existing
        return self.register(username, password)
