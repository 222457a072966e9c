"""
API package.
"""
from jobly.api.routes import api_router
from jobly.api.deps import (
    CurrentUser,
    get_current_user,
    ensure_logged_in,
    ensure_admin,
    ensure_correct_user_or_admin,
)

__all__ = [
    "api_router",
    "CurrentUser",
    "get_current_user",
    "ensure_logged_in",
    "ensure_admin",
    "ensure_correct_user_or_admin",
]
