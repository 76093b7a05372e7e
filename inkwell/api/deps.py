"""Request dependencies: bearer-token authentication and the resolved CurrentUser."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from inkwell.core.database import get_db
from inkwell.core.errors import InvalidTokenError, NoTokenError
from inkwell.core.security import verify_access_token
from inkwell.schemas.auth import CurrentUser
from inkwell.services.users import get_user

# auto_error=False: a missing or non-Bearer header yields None instead of a stock 403.
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the current user.

    Missing/malformed header -> NoTokenError. Bad or expired token, or a token
    whose user no longer exists -> InvalidTokenError with one shared message.
    """
    if credentials is None or not credentials.credentials:
        raise NoTokenError()
    claims = verify_access_token(credentials.credentials)
    user = get_user(db, claims.user_id)
    if user is None:
        raise InvalidTokenError()
    return CurrentUser.model_validate(user)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
DbDep = Annotated[Session, Depends(get_db)]
