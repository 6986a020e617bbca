"""
User endpoints for API v1.

CRUD over the in‑memory user store:

* ``GET /users/`` lists every user.
* ``GET /users/{user_id}`` returns one user, or 404 with an empty body.
* ``PUT /users/{user_id}`` inserts or replaces a user.
* ``POST /users`` creates a user under a generated id.
* ``DELETE /users/{user_id}`` removes a user; unknown ids are ignored.

Write handlers pass the raw request body to the service, which owns
decoding.  A body that cannot be decoded yields 400 with the decoder's
message as plain text.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from users_api.app.schemas.user import UserPayload, UserRead
from users_api.app.services.user_service import (
    UserDecodeError,
    UserNotFoundError,
    UserService,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# The body is read by hand, so its schema has to be published explicitly.
_USER_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserPayload.model_json_schema()}},
    }
}


def get_user_service(request: Request) -> UserService:
    """Return the service owned by the running application."""
    return request.app.state.user_service


def _bad_request(exc: UserDecodeError) -> PlainTextResponse:
    logger.info("Rejected user body: %s", exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/", response_model=List[UserRead])
@router.get("", response_model=List[UserRead], include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users in no particular order."""
    return await service.list_users()


@router.get(
    "/{user_id}",
    response_model=UserRead,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Not Found"}},
)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Retrieve a single user by id."""
    try:
        return await service.get_user(user_id)
    except UserNotFoundError as exc:
        logger.warning("User %s: %s", user_id, exc)
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    openapi_extra=_USER_BODY,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Undecodable body"}},
)
async def upsert_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Insert or replace the user at ``user_id``.

    Any ``ID`` in the body is ignored; the path decides the key.
    """
    body = await request.body()
    try:
        return await service.upsert_user(user_id, body)
    except UserDecodeError as exc:
        return _bad_request(exc)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=_USER_BODY,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Undecodable body"}},
)
@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_user(request: Request, service: UserService = Depends(get_user_service)):
    """Create a user under a generated id and return it."""
    body = await request.body()
    try:
        return await service.create_user(body)
    except UserDecodeError as exc:
        return _bad_request(exc)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    """Delete a user by id.  Always succeeds."""
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
