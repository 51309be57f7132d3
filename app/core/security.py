from __future__ import annotations

import logging
import uuid
from jose import jwt
from jose.exceptions import JWTError, ExpiredSignatureError
from fastapi import HTTPException, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from typing import Any, Dict, Optional
from app.core.config import settings

logger = logging.getLogger(__name__)
bearer = HTTPBearer(auto_error=False)

DEV_TOKENS = ("dev-bypass", "test", "dev")


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify an app-issued JWT and return the caller identity.
    The user id is read from the `id` claim, falling back to `sub`.
    """
    if not settings.JWT_SECRET:
        logger.error("JWT_SECRET is not configured, rejecting token")
        raise HTTPException(status_code=401, detail="Token verification unavailable")

    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError as exc:
        raise HTTPException(status_code=401, detail="Token has expired") from exc
    except JWTError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}") from e

    user_id = payload.get("id") or payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")

    try:
        uuid.UUID(str(user_id))
    except ValueError as e:
        logger.info("Rejecting non-UUID user id: %s", user_id)
        raise HTTPException(status_code=401, detail="Token user ID is not a valid UUID") from e

    return {
        "user_id": str(user_id),
        "role": payload.get("role", "mother"),
        "email": payload.get("email"),
    }


async def get_current_user(creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer)) -> Dict[str, Any]:
    """
    Resolve the caller from the bearer token, or the dev user in development mode.
    """
    if settings.APP_ENV == "dev":
        if not creds:
            logger.info("No credentials in dev mode, using dev user")
            return {"user_id": settings.DEV_USER_ID}
        if creds.credentials in DEV_TOKENS:
            logger.info("Dev bypass token used")
            return {"user_id": settings.DEV_USER_ID}

    if not creds or creds.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Not authorized to access this route")

    return verify_token(creds.credentials)
