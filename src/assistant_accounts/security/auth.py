"""
Authentication

JWT verification and admin-only route guards.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt

from assistant_accounts.config import AppConfig

logger = logging.getLogger("assistant_accounts.auth")


class AuthenticationError(Exception):
    """Missing, malformed, or expired credentials."""


def create_access_token(claims: dict, config: AppConfig, expires_minutes: int = 60) -> str:
    """Sign a JWT carrying the given claims."""
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    return jwt.encode(payload, config.auth.jwt_secret, algorithm=config.auth.jwt_algorithm)


def decode_token(token: str, config: AppConfig) -> dict:
    """
    Verify a JWT and return its claims.

    Raises:
        AuthenticationError: If the token is invalid or carries no role
    """
    try:
        payload = jwt.decode(token, config.auth.jwt_secret, algorithms=[config.auth.jwt_algorithm])
    except JWTError as e:
        raise AuthenticationError(str(e)) from e

    if not isinstance(payload.get("role"), str):
        raise AuthenticationError("Token has no role claim")
    return payload


def extract_token(request: Request) -> Optional[str]:
    """Read a bearer token from the Authorization header or the token cookie."""
    header = request.headers.get("Authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get("token")


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_current_user(request: Request, config: AppConfig = Depends(get_config)) -> dict:
    token = extract_token(request)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    try:
        return decode_token(token, config)
    except AuthenticationError as e:
        logger.warning(f"Rejected token: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def require_admin(
    user: dict = Depends(get_current_user),
    config: AppConfig = Depends(get_config),
) -> dict:
    """Allow only admin and developer roles."""
    if user["role"] not in config.auth.admin_roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Admins or Developers only",
        )
    return user
