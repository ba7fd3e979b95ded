"""
User endpoints for API v1.

List, create, rename and delete users held by the in‑memory store.
Path ids are taken as raw strings and parsed leniently: a value that is
not a number simply matches no user, so ``PUT`` answers 404 and
``DELETE`` still answers 204.  Request bodies are not validated either;
``name`` is read from a JSON object and treated as missing for any other
body (an array, a bare value or nothing at all).  Every collection
route is also served with a trailing slash.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from user_store_api.app.api.deps import get_user_service
from user_store_api.app.schemas.user import Message, UserCreate, UserRead, UserUpdate
from user_store_api.app.services.user_service import UserService, parse_user_id

router = APIRouter()


def _body_name(body: Any) -> Any:
    if isinstance(body, dict):
        return body.get("name")
    return None


@router.get("", response_model=List[UserRead])
@router.get("/", response_model=List[UserRead], include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users in insertion order."""
    return await service.list_users()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_user(
    body: Any = Body(None, example={"name": "Mehmet"}),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user.  A missing ``name`` is stored as ``null``."""
    return await service.create_user(UserCreate(name=_body_name(body)))


@router.put(
    "/{user_id}",
    response_model=UserRead,
    responses={status.HTTP_404_NOT_FOUND: {"model": Message}},
)
async def update_user(
    user_id: str,
    body: Any = Body(None, example={"name": "Veli"}),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the name of an existing user.

    Returns HTTP 404 with ``{"message": "not found"}`` if no user has
    this id; the store is left untouched in that case.
    """
    return await service.update_user(parse_user_id(user_id), UserUpdate(name=_body_name(body)))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user.  Unknown ids are ignored and still answer 204."""
    await service.delete_user(parse_user_id(user_id))
    return None
