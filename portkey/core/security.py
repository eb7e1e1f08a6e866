# portkey/core/security.py

"""
Security utilities and dependencies.

- Verification of access tokens issued by the identity provider (Supabase Auth).
- Local token minting with the same secret (tests and tooling).
- Resolution of the current user profile from the bearer token.
- Role-based authorization checks.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core.config import settings
from portkey.core.database import get_session
from portkey.domains.usr import models as usr_models

logger = logging.getLogger(__name__)

# auto_error=False so a missing header produces our 401 instead of a generic error
bearer_scheme = HTTPBearer(auto_error=False)


# --- JWT creation and decoding ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Creates an access token shaped like the identity provider's
    (`sub`, `aud`, `exp`).
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.setdefault("aud", settings.JWT_AUDIENCE)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Verifies signature, expiry and audience. Raises JWTError on failure.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
    )


async def get_current_user_from_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    Decodes the bearer token and loads the matching profile.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception
    try:
        payload = decode_access_token(credentials.credentials)
        subject = payload.get("sub")
        if subject is None:
            raise credentials_exception
        user_id = uuid.UUID(str(subject))
    except (JWTError, ValueError) as e:
        logger.warning("Rejected access token: %s", e)
        raise credentials_exception

    user = await db.get(usr_models.User, user_id)
    if user is None:
        logger.warning("Token subject %s has no synced profile", user_id)
        raise credentials_exception
    return user


# --- Role-based authorization ---

def get_current_admin_user(
    current_user: usr_models.User = Depends(get_current_user_from_token),
) -> usr_models.User:
    """
    Returns the current user if they hold the admin role, 403 otherwise.
    """
    if current_user.role != usr_models.UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions. Admin role required."
        )
    return current_user


def ensure_owner_or_admin(current_user: usr_models.User, owner_id: uuid.UUID) -> None:
    """
    Raises 403 unless the current user owns the resource or is an admin.
    """
    if current_user.role == usr_models.UserRole.ADMIN or current_user.id == owner_id:
        return
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Not enough permissions to access this resource."
    )
