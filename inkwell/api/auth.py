"""Registration, login and profile endpoints."""

from fastapi import APIRouter, status

from inkwell.api.deps import CurrentUserDep, DbDep
from inkwell.core.errors import InvalidCredentialsError
from inkwell.core.security import create_access_token
from inkwell.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserPublic,
)
from inkwell.services import users

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: DbDep) -> AuthResponse:
    """Create an account and return a token so the client is signed in immediately."""
    user = users.create_user(db, body.username, body.email, body.password)
    token = create_access_token(user.id, user.email)
    return AuthResponse(token=token, user=UserPublic.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: DbDep) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    users.validate_login(body.email, body.password)
    user = users.authenticate(db, body.email, body.password)
    if user is None:
        raise InvalidCredentialsError()
    token = create_access_token(user.id, user.email)
    return AuthResponse(token=token, user=UserPublic.model_validate(user))


@router.get("/profile", response_model=ProfileResponse)
def profile(current_user: CurrentUserDep) -> ProfileResponse:
    return ProfileResponse(user=UserPublic.model_validate(current_user))
