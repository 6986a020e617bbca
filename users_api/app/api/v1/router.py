"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under their prefixes.  New resources
are added here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

# The users router declares both "/" and "" so that "/users/" and
# "/users" reach the same handlers without a redirect.
router.include_router(users.router, prefix="/users", tags=["users"])
