"""FastAPI authentication dependencies."""

import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...config.settings import get_settings
from ...core.exceptions import AuthenticationError, PermissionDeniedError
from .entities.auth_context import AuthContext
from .services.token_validator import TokenValidator

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme; missing credentials are reported by get_current_user
security = HTTPBearer(auto_error=False)


def get_token_validator() -> TokenValidator:
    """Token validator built from application settings."""
    return TokenValidator.from_settings(get_settings())


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    validator: Annotated[TokenValidator, Depends(get_token_validator)],
) -> AuthContext:
    """Get current authenticated user from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")
    
    try:
        return validator.validate(credentials.credentials)
    except AuthenticationError as e:
        logger.warning(f"Authentication failed: {e.message}")
        raise


def require_permissions(*permissions: str):
    """Require every one of the given permissions.
    
    Returns:
        Dependency yielding the caller's AuthContext
    """
    
    async def dependency(
        current_user: Annotated[AuthContext, Depends(get_current_user)]
    ) -> AuthContext:
        missing = current_user.missing_permissions(permissions)
        if missing:
            logger.warning(f"User {current_user.user_id} lacks permissions: {missing}")
            raise PermissionDeniedError(missing)
        return current_user
    
    return dependency
