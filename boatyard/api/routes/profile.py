"""Profile — index of the resources this API exposes.

Clients call it right after login to check their credentials: it is cheap,
always 200 when authenticated, and 401 otherwise (via the auth middleware).
"""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(request: Request):
    """Links to the profile itself and to every exposed collection."""
    return {
        "_links": {
            "self": {"href": str(request.url_for("get_profile"))},
            "boats": {"href": str(request.url_for("list_boats"))},
        },
    }
