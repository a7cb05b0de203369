"""
Unit tests for account handlers.
"""
import uuid
from datetime import datetime, timezone

import pytest

from accounts.application.commands.login_user import LoginUserCommand
from accounts.application.commands.register_user import RegisterUserCommand
from accounts.application.handlers.auth_handlers import (
    GetSessionUserHandler,
    LoginUserHandler,
    LogoutUserHandler,
    RegisterUserHandler,
)
from accounts.domain.user import User
from accounts.ports.session import SessionPort
from accounts.ports.user_repository import UserRepository
from core.domain.exceptions import (
    InvalidCredentialsError,
    InvalidInputError,
    InvalidPasswordError,
    UserAlreadyExistsError,
)
from core.domain.value_objects import Email, UserRole


class InMemoryUserRepository(UserRepository):
    """Users keyed by email, with plain-text passwords."""

    def __init__(self):
        self.users = {}
        self.passwords = {}

    async def find_by_id(self, user_id):
        return next((u for u in self.users.values() if u.id == user_id), None)

    async def exists_by_email(self, email):
        return email in self.users

    async def create(self, email, password, first_name, last_name, name):
        user = User(
            id=uuid.uuid4(),
            email=Email(email),
            first_name=first_name,
            last_name=last_name,
            name=name,
            role=UserRole.USER,
            created_at=datetime.now(timezone.utc),
        )
        self.users[email] = user
        self.passwords[email] = password
        return user

    async def validate_password(self, password, email, name):
        if len(password) < 8:
            raise InvalidPasswordError("This password is too short.")

    async def authenticate(self, email, password):
        if self.passwords.get(email) == password:
            return self.users[email]
        return None


class FakeSession(SessionPort):
    """Records the signed-in user id."""

    def __init__(self):
        self.user_id = None

    async def start(self, user_id):
        self.user_id = user_id

    async def end(self):
        self.user_id = None


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def session():
    return FakeSession()


def _register(first="Jane", last="Doe", email="Jane@Example.com", password="Str0ng-Passw0rd!"):
    return RegisterUserCommand(first_name=first, last_name=last, email=email, password=password)


@pytest.mark.asyncio
class TestRegisterUserHandler:
    """Tests for RegisterUserHandler."""

    async def test_register_signs_in(self, users, session):
        """Test a new shopper account is created and signed in."""
        dto = await RegisterUserHandler(users, session).handle(_register(first=" Jane "))

        assert dto.email == "jane@example.com"
        assert dto.name == "Jane Doe"
        assert dto.first_name == "Jane"
        assert dto.role == "USER"
        assert session.user_id == dto.id

    async def test_register_duplicate_email(self, users, session):
        """Test emails are unique regardless of case."""
        handler = RegisterUserHandler(users, session)
        await handler.handle(_register())
        session.user_id = None

        with pytest.raises(UserAlreadyExistsError, match="User already exists"):
            await handler.handle(_register(email="JANE@example.com"))

        assert session.user_id is None

    async def test_register_weak_password(self, users, session):
        """Test password rules are enforced before creating the account."""
        with pytest.raises(InvalidPasswordError):
            await RegisterUserHandler(users, session).handle(_register(password="short"))

        assert users.users == {}

    async def test_register_invalid_email(self, users, session):
        """Test malformed emails."""
        with pytest.raises(InvalidInputError, match="valid email"):
            await RegisterUserHandler(users, session).handle(_register(email="jane"))


@pytest.mark.asyncio
class TestLoginHandlers:
    """Tests for login, logout and session lookup."""

    async def test_login(self, users, session):
        """Test signing in with a registered account."""
        registered = await RegisterUserHandler(users, FakeSession()).handle(_register())

        dto = await LoginUserHandler(users, session).handle(
            LoginUserCommand(email=" JANE@example.com ", password="Str0ng-Passw0rd!")
        )

        assert dto.id == registered.id
        assert session.user_id == registered.id

    async def test_login_wrong_password(self, users, session):
        """Test mismatched credentials."""
        await RegisterUserHandler(users, FakeSession()).handle(_register())

        with pytest.raises(InvalidCredentialsError, match="Invalid email or password"):
            await LoginUserHandler(users, session).handle(
                LoginUserCommand(email="jane@example.com", password="wrong")
            )

        assert session.user_id is None

    async def test_logout(self, users, session):
        """Test logging out ends the session."""
        session.user_id = uuid.uuid4()

        await LogoutUserHandler(session).handle()

        assert session.user_id is None

    async def test_session_user(self, users, session):
        """Test resolving the signed-in user."""
        registered = await RegisterUserHandler(users, session).handle(_register())
        handler = GetSessionUserHandler(users)

        assert (await handler.handle(registered.id)).email == "jane@example.com"
        assert await handler.handle(None) is None
        assert await handler.handle(uuid.uuid4()) is None
