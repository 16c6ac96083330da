"""
JWT Authentication middleware.

Validates Supabase JWT tokens, extracts the caller and gates routes by
dashboard role.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from datetime import datetime, timezone

from shared.config import get_settings
from shared.models import AuthenticatedUser, UserRole
from ..models.user import TokenPayload

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    """Caller is authenticated but lacks the required role."""
    def __init__(self, required: UserRole, actual: UserRole):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Insufficient permissions. Required: {required.value}, has: {actual.value}",
        )


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a Supabase JWT token.

    Args:
        token: The JWT token string

    Returns:
        TokenPayload with decoded claims

    Raises:
        AuthError: If token is invalid or expired
    """
    settings = get_settings()

    if not settings.supabase_jwt_secret:
        raise AuthError("Server authentication not configured")

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            audience="authenticated",
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except JWTError as e:
        raise AuthError(f"Invalid token: {str(e)}")


def get_user_from_payload(payload: TokenPayload) -> AuthenticatedUser:
    """
    Convert JWT payload to AuthenticatedUser model.

    The dashboard role comes from `app_metadata.role`; unknown or missing
    roles fall back to the least privileged role.
    """
    try:
        role = UserRole(payload.app_metadata.get("role", UserRole.USER.value))
    except ValueError:
        role = UserRole.USER

    return AuthenticatedUser(
        id=payload.sub,
        email=payload.email,
        email_verified=payload.email_confirmed_at is not None,
        last_sign_in=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
        role=role,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    payload = decode_token(credentials.credentials)
    return get_user_from_payload(payload)


def require_role(minimum: UserRole):
    """
    Build a dependency that requires at least `minimum` role.

    Usage:
        @router.get("/admin")
        async def admin_route(user: AuthenticatedUser = Depends(require_role(UserRole.MANAGER))):
            ...
    """

    async def dependency(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if not user.role.satisfies(minimum):
            raise ForbiddenError(minimum, user.role)
        return user

    return dependency


def ensure_self_or_role(user: AuthenticatedUser, uid: str, minimum: UserRole) -> None:
    """Allow access to a user's own data, or to staff with `minimum` role."""
    if user.id != uid and not user.role.satisfies(minimum):
        raise ForbiddenError(minimum, user.role)

