"""User account service: registration, credential check, account removal."""

from collections.abc import Callable
from uuid import UUID

import structlog
from starlette.concurrency import run_in_threadpool

from core.exceptions import InvalidInputError, UserNotFoundError
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.ports import IAvatarResolver, IPasswordHasher

logger = structlog.get_logger()

INVALID_CREDENTIALS = "Invalid credentials."


class UserService:
    """Service layer for User accounts."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
        avatar_resolver: IAvatarResolver,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = password_hasher
        self._avatars = avatar_resolver

    async def register(self, name: str, email: str, password: str) -> User:
        """Create an account. Emails are unique (case-insensitive)."""
        email = email.strip().lower()
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise InvalidInputError("email", "User already exists")

            # CPU-bound hash runs in a worker thread
            password_hash = await run_in_threadpool(self._hasher.hash, password)
            user = User(
                name=name,
                email=email,
                password_hash=password_hash,
                avatar=self._avatars.resolve(email),
            )
            created = await uow.users.create(user)
            await uow.commit()

        logger.info("user_registered", user_id=str(created.id))
        return created

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials; unknown email and bad password look the same."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email.strip().lower())

        if not user or not await run_in_threadpool(
            self._hasher.verify, password, user.password_hash
        ):
            logger.info("login_rejected")
            raise InvalidInputError("credentials", INVALID_CREDENTIALS)
        return user

    async def get_by_id(self, user_id: UUID) -> User:
        """Get a user by ID."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user

    async def delete_account(self, user_id: UUID) -> None:
        """Remove the user and their profile.

        Posts, likes and comments written by the user are left in place.
        """
        async with self._uow_factory() as uow:
            await uow.profiles.delete_for_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("account_deleted", user_id=str(user_id))
