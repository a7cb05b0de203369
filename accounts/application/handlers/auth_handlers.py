"""
Account handlers: registration, login and logout.
"""

import logging
import uuid
from typing import Optional

from accounts.application.commands.login_user import LoginUserCommand
from accounts.application.commands.register_user import RegisterUserCommand
from accounts.application.dto.user_dto import UserDTO
from accounts.domain.user import User
from accounts.ports.session import SessionPort
from accounts.ports.user_repository import UserRepository
from core.domain.exceptions import (
    InvalidCredentialsError,
    InvalidInputError,
    UserAlreadyExistsError,
)
from core.domain.value_objects import Email
from core.metrics import auth_attempts_total

logger = logging.getLogger(__name__)


def _normalize_email(raw: str) -> str:
    try:
        return str(Email(raw))
    except ValueError as e:
        raise InvalidInputError("Enter a valid email address") from e


class RegisterUserHandler:
    """Handler for RegisterUserCommand."""

    def __init__(self, user_repository: UserRepository, session: SessionPort):
        """Initialize handler with repository and session."""
        self.user_repository = user_repository
        self.session = session

    async def handle(self, command: RegisterUserCommand) -> UserDTO:
        """
        Register a shopper account and sign it in.

        Args:
            command: RegisterUserCommand

        Returns:
            UserDTO of the new account

        Raises:
            UserAlreadyExistsError: If the email is taken
            InvalidPasswordError: If the password fails validation
        """
        email = _normalize_email(command.email)
        name = User.display_name(command.first_name, command.last_name)

        if await self.user_repository.exists_by_email(email):
            auth_attempts_total.labels(action="register", outcome="duplicate").inc()
            raise UserAlreadyExistsError()

        await self.user_repository.validate_password(command.password, email=email, name=name)

        user = await self.user_repository.create(
            email=email,
            password=command.password,
            first_name=command.first_name.strip(),
            last_name=command.last_name.strip(),
            name=name,
        )
        await self.session.start(user.id)

        auth_attempts_total.labels(action="register", outcome="success").inc()
        logger.info("User registered", extra={"user_id": str(user.id)})
        return UserDTO.from_entity(user)


class LoginUserHandler:
    """Handler for LoginUserCommand."""

    def __init__(self, user_repository: UserRepository, session: SessionPort):
        """Initialize handler with repository and session."""
        self.user_repository = user_repository
        self.session = session

    async def handle(self, command: LoginUserCommand) -> UserDTO:
        """
        Sign in with email and password.

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        user = await self.user_repository.authenticate(
            email=command.email.strip().lower(), password=command.password
        )
        if user is None:
            auth_attempts_total.labels(action="login", outcome="rejected").inc()
            logger.warning("Login rejected")
            raise InvalidCredentialsError()

        await self.session.start(user.id)
        auth_attempts_total.labels(action="login", outcome="success").inc()
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return UserDTO.from_entity(user)


class LogoutUserHandler:
    """Ends the current session."""

    def __init__(self, session: SessionPort):
        self.session = session

    async def handle(self) -> None:
        """Sign the current user out."""
        await self.session.end()


class GetSessionUserHandler:
    """Resolves the signed-in user of a request."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def handle(self, user_id: Optional[uuid.UUID]) -> Optional[UserDTO]:
        """
        Args:
            user_id: Id of the session user, None when anonymous

        Returns:
            UserDTO or None
        """
        if user_id is None:
            return None
        user = await self.user_repository.find_by_id(user_id)
        return UserDTO.from_entity(user) if user else None
