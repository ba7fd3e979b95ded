"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from user_store_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the user store attached to the running application."""
    return request.app.state.user_service
