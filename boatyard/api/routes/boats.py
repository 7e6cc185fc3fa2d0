"""Boat Routes — CRUD endpoints for the Boat resource.

Invariants:
    - Request bodies validated by Pydantic before reaching the store
    - Store errors (not found, validation, database) propagate to the global handlers
    - POST answers 201 with a Location header; DELETE answers 204 with no body
    - PATCH merges supplied fields into the current record (last write wins)

Design Decisions:
    - Explicit handlers over a BoatRepository dependency: the store is swappable
      (SQL or in-memory) without touching routes
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from boatyard.api.dependencies import get_boat_repository
from boatyard.core.domain_types import BoatId
from boatyard.core.repository_protocols import BoatRepository
from boatyard.schemas.boat import BoatCreate, BoatPatch, BoatReplace, BoatResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/boats", tags=["boats"])


@router.get("", response_model=list[BoatResponse])
async def list_boats(repository: BoatRepository = Depends(get_boat_repository)):
    """List all boats by ascending id."""
    boats = await repository.list()
    return [BoatResponse.model_validate(boat) for boat in boats]


@router.post(
    "", response_model=BoatResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_boat(
    body: BoatCreate,
    request: Request,
    response: Response,
    repository: BoatRepository = Depends(get_boat_repository),
):
    """Create a boat; the store assigns its id."""
    boat = await repository.create(body.name, body.description)
    response.headers["Location"] = str(
        request.url_for("get_boat", boat_id=boat.id),
    )
    return BoatResponse.model_validate(boat)


@router.get("/{boat_id}", response_model=BoatResponse)
async def get_boat(
    boat_id: int, repository: BoatRepository = Depends(get_boat_repository),
):
    """Get a single boat."""
    boat = await repository.get(BoatId(boat_id))
    return BoatResponse.model_validate(boat)


@router.put("/{boat_id}", response_model=BoatResponse)
async def replace_boat(
    boat_id: int,
    body: BoatReplace,
    repository: BoatRepository = Depends(get_boat_repository),
):
    """Replace name and description of an existing boat."""
    boat = await repository.update(BoatId(boat_id), body.name, body.description)
    return BoatResponse.model_validate(boat)


@router.patch("/{boat_id}", response_model=BoatResponse)
async def patch_boat(
    boat_id: int,
    body: BoatPatch,
    repository: BoatRepository = Depends(get_boat_repository),
):
    """Update only the fields present in the body."""
    current = await repository.get(BoatId(boat_id))
    merged = {
        "name": current.name,
        "description": current.description,
        **body.changes(),
    }
    boat = await repository.update(
        BoatId(boat_id), merged["name"], merged["description"],
    )
    return BoatResponse.model_validate(boat)


@router.delete("/{boat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_boat(
    boat_id: int, repository: BoatRepository = Depends(get_boat_repository),
):
    """Delete a boat. Deleting it again answers 404."""
    await repository.delete(BoatId(boat_id))
