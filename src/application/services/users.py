"""
application.services.users - User registration and audited deletion.

Deleting a user removes their readings, recommendations and device links
through the schema's ON DELETE CASCADE. delete_user() counts those rows
first so the caller gets a record of what went, then checks that nothing
referencing the user is left behind.
"""

from __future__ import annotations

import logging
from datetime import date

from domain.entities import User
from domain.exceptions import NotFoundError, RepositoryError
from domain.models import DeletionReport
from domain.ports import UserRepository
from application.dto import RegisterUserRequest

logger = logging.getLogger(__name__)


class UserService:
    """Creates, looks up and deletes users."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def register(self, request: RegisterUserRequest) -> User:
        """Insert a new user. A duplicate email raises sqlite3.IntegrityError."""
        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            age=request.age,
            email=request.email,
            gender=request.gender,
            registration_date=request.registration_date or date.today(),
        )
        user.id = await self._user_repo.save(user)
        logger.info("Registered user %d <%s>", user.id, user.email)
        return user

    async def get(self, user_id: int) -> User:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} does not exist.")
        return user

    async def list_users(self) -> list[User]:
        return await self._user_repo.list_all()

    async def delete_user(self, user_id: int) -> DeletionReport:
        """Delete a user and everything that belongs to them.

        Raises:
            NotFoundError: If the user does not exist.
            RepositoryError: If dependent rows survive the delete, which
                means foreign-key enforcement was off for the connection.
        """
        user = await self.get(user_id)
        dependents = await self._user_repo.count_dependents(user_id)
        logger.info(
            "Deleting user %d <%s>: %d readings, %d recommendations, %d device links",
            user_id, user.email, dependents["readings"],
            dependents["recommendations"], dependents["device_links"],
        )

        await self._user_repo.delete(user_id)

        remaining = await self._user_repo.count_dependents(user_id)
        if any(remaining.values()):
            raise RepositoryError(
                f"User {user_id} deleted but dependent rows remain: {remaining}"
            )

        return DeletionReport(
            user_id=user_id,
            email=user.email,
            readings=dependents["readings"],
            recommendations=dependents["recommendations"],
            device_links=dependents["device_links"],
        )
