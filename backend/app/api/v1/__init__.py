"""
API v1 Module
Contains all version 1 API endpoints.
"""

# Expose routers for easy import
from app.api.v1 import users, subscriptions

__all__ = ["users", "subscriptions"]
