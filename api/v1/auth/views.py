"""
Authentication API views.

Session-based sign-up and sign-in for the storefront and the dashboard.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.login_user import LoginUserCommand
from accounts.application.commands.register_user import RegisterUserCommand
from accounts.application.handlers.auth_handlers import (
    GetSessionUserHandler,
    LoginUserHandler,
    LogoutUserHandler,
    RegisterUserHandler,
)
from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from accounts.infrastructure.session import DjangoSession
from api.responses import success, validation_error
from api.v1.auth.serializers import (
    LoginRequestSerializer,
    RegisterRequestSerializer,
    UserSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer

_user_repo = DjangoUserRepository()

tracer = get_tracer(__name__)


class RegisterView(APIView):
    """View for registering a shopper account."""

    @extend_schema(
        operation_id="register",
        summary="Register",
        description="Create an account and sign it in.",
        tags=["Auth"],
        request=RegisterRequestSerializer,
        responses={
            201: UserSerializer,
            400: {"description": "Bad Request"},
            422: {"description": "User already exists or password rejected"},
            429: {"description": "Too many attempts"},
        },
    )
    def post(self, request: Request) -> Response:
        """Register and sign in."""
        return async_to_sync(self._handle_register)(request)

    async def _handle_register(self, request: Request) -> Response:
        """Async handler for register."""
        with tracer.start_as_current_span("register_user") as span:
            serializer = RegisterRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = RegisterUserHandler(
                user_repository=_user_repo, session=DjangoSession(request)
            )
            user = await handler.handle(RegisterUserCommand(**serializer.validated_data))

            span.set_attribute("user.id", str(user.id))
            span.set_status(Status(StatusCode.OK))
            return success(
                UserSerializer(user).data,
                message="Registration successful! You are now logged in.",
                status_code=status.HTTP_201_CREATED,
            )


class LoginView(APIView):
    """View for signing in."""

    @extend_schema(
        operation_id="login",
        summary="Login",
        description="Sign in with email and password.",
        tags=["Auth"],
        request=LoginRequestSerializer,
        responses={
            200: UserSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid email or password"},
            429: {"description": "Too many attempts"},
        },
    )
    def post(self, request: Request) -> Response:
        """Sign in."""
        return async_to_sync(self._handle_login)(request)

    async def _handle_login(self, request: Request) -> Response:
        """Async handler for login."""
        with tracer.start_as_current_span("login_user") as span:
            serializer = LoginRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            handler = LoginUserHandler(user_repository=_user_repo, session=DjangoSession(request))
            user = await handler.handle(LoginUserCommand(**serializer.validated_data))

            span.set_attribute("user.id", str(user.id))
            span.set_status(Status(StatusCode.OK))
            return success(UserSerializer(user).data, message="Login successful!")


class LogoutView(APIView):
    """View for signing out."""

    @extend_schema(
        operation_id="logout",
        summary="Logout",
        tags=["Auth"],
        request=None,
        responses={200: {"description": "Signed out"}},
    )
    def post(self, request: Request) -> Response:
        """Sign out."""
        async_to_sync(LogoutUserHandler(session=DjangoSession(request)).handle)()
        return success(message="Logged out")


class SessionView(APIView):
    """View returning the signed-in user."""

    @extend_schema(
        operation_id="session",
        summary="Current Session",
        description="The signed-in user, or null for anonymous requests.",
        tags=["Auth"],
        responses={200: UserSerializer},
    )
    def get(self, request: Request) -> Response:
        """Return the session user."""
        user_id = request.user.pk if request.user.is_authenticated else None
        user = async_to_sync(GetSessionUserHandler(_user_repo).handle)(user_id)
        return success(UserSerializer(user).data if user else None)
