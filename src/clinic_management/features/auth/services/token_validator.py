"""JWT token validation service."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ....config.settings import AppSettings
from ....core.exceptions import InvalidTokenError
from ..entities.auth_context import AuthContext

logger = logging.getLogger(__name__)


class TokenValidator:
    """Validates bearer tokens and builds the caller's auth context.
    
    Expected claims: ``sub`` (user id), optional ``tenant_id``, optional
    ``preferred_username`` and either a ``permissions`` list or a
    space separated ``scope`` string.
    """
    
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.audience = audience
        self.issuer = issuer
    
    @classmethod
    def from_settings(cls, settings: AppSettings) -> "TokenValidator":
        return cls(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    
    def decode(self, token: str) -> Dict[str, Any]:
        """Decode and verify a token, returning its claims.
        
        Raises:
            InvalidTokenError: If the signature, expiry, audience or issuer is invalid
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(f"Token validation failed: {e}") from e
    
    def validate(self, token: str) -> AuthContext:
        """Validate a token and return the auth context it carries."""
        claims = self.decode(token)
        
        user_id = self._parse_uuid(claims.get("sub"), "sub")
        if user_id is None:
            raise InvalidTokenError("Token missing 'sub' claim")
        tenant_id = self._parse_uuid(claims.get("tenant_id"), "tenant_id")
        
        context = AuthContext(
            user_id=user_id,
            tenant_id=tenant_id,
            username=claims.get("preferred_username") or claims.get("username"),
            permissions=frozenset(self._extract_permissions(claims)),
        )
        logger.debug(f"Validated token for user {user_id} (tenant {tenant_id})")
        return context
    
    @staticmethod
    def _parse_uuid(value: Any, claim: str) -> Optional[UUID]:
        if value in (None, ""):
            return None
        try:
            return UUID(str(value))
        except ValueError as e:
            raise InvalidTokenError(f"Claim '{claim}' is not a valid UUID") from e
    
    @staticmethod
    def _extract_permissions(claims: Dict[str, Any]) -> List[str]:
        permissions = claims.get("permissions")
        if isinstance(permissions, list):
            return [str(perm) for perm in permissions]
        scope = claims.get("scope")
        if isinstance(scope, str):
            return scope.split()
        return []
