"""
Shared infrastructure for Kommyut backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- effects: Primary/auxiliary two-phase operations
- memory: In-memory row store for development and tests

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .effects import EffectOutcome, run_with_auxiliary
from .exceptions import (
    KommyutError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    StorageUnavailableError,
    InternalError,
)
from .memory import MemoryStore
from .models import AuthenticatedUser, UserRole, ROLE_HIERARCHY

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "EffectOutcome",
    "run_with_auxiliary",
    "KommyutError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "StorageUnavailableError",
    "InternalError",
    "MemoryStore",
    "AuthenticatedUser",
    "UserRole",
    "ROLE_HIERARCHY",
]
