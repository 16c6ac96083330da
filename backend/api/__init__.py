"""
Kommyut API package.

Provides the FastAPI application for the Kommyut admin back-office.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
