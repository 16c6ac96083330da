"""
Feature modules for Kommyut backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API and storage
- models.py: Pydantic models for data transfer
- repository.py: Supabase and in-memory storage implementations
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
