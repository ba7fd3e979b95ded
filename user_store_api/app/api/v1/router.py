"""
Top‑level router for version 1 of the API.

New domains are added by creating an endpoint module and including its
router here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
