"""Bearer-token verification against Supabase Auth."""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import AuthApiError, Client

from siteimport.services.database import get_supabase_client
from siteimport.services.errors import AuthError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_user_id(client: Client, token: Optional[str]) -> str:
    """Return the id of the Supabase user that owns *token*.

    Raises:
        AuthError: if the token is missing or Supabase does not accept it.
    """
    if not token:
        raise AuthError("Unauthorized: Missing authentication")

    try:
        response = client.auth.get_user(token)
    except AuthApiError as exc:
        logger.warning("Token rejected by Supabase Auth: %s", exc)
        raise AuthError("Unauthorized: Invalid authentication")

    user = response.user if response else None
    if user is None:
        raise AuthError("Unauthorized: Invalid authentication")
    return user.id


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    client: Client = Depends(get_supabase_client),
) -> str:
    """FastAPI dependency: the authenticated caller's user id, or a 401."""
    token = credentials.credentials if credentials else None
    try:
        user_id = resolve_user_id(client, token)
    except AuthError as exc:
        logger.error("Authentication failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))

    logger.info("Authenticated user", extra={"user_id": user_id})
    return user_id
