"""
Pet endpoints.

These routes expose a CRUD API for pets.  Handlers stay thin: they
read the raw ``pet_id`` segment and body, hand them to ``PetService``
and render whatever it returns.  The id is declared as a plain string
so that malformed ids reach the service and are reported as 400
instead of FastAPI's default 422.  Errors raised by the service are
turned into plain‑text responses by the handler installed in
``main.create_app``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from pet_store_api.app.schemas.pet import Pet
from pet_store_api.app.services.pet_service import PetService

router = APIRouter()


def get_pet_service(request: Request) -> PetService:
    """Return the service bound to the running application."""
    return request.app.state.pet_service


def render(status_code: int, payload: Optional[Pet]) -> Response:
    """Build a response from a service result; ``None`` means no body."""
    if payload is None:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_pet(request: Request, service: PetService = Depends(get_pet_service)) -> Response:
    """Add a new pet.  The body must carry the pet's ``id``."""
    body = await request.body()
    return render(*service.create_pet(body))


@router.get("/{pet_id}", response_model=Pet)
async def get_pet(pet_id: str, service: PetService = Depends(get_pet_service)) -> Response:
    """Retrieve a single pet by ID.

    Returns HTTP 404 if no pet is stored under the ID and 400 if the
    ID is not an unsigned 32‑bit number.
    """
    return render(*service.get_pet(pet_id))


@router.put("/{pet_id}")
async def replace_pet(
    pet_id: str,
    request: Request,
    service: PetService = Depends(get_pet_service),
) -> Response:
    """Create or replace the pet stored under ``pet_id``."""
    body = await request.body()
    return render(*service.replace_pet(pet_id, body))


@router.delete("/{pet_id}", responses={204: {"description": "No pet to delete"}})
async def delete_pet(pet_id: str, service: PetService = Depends(get_pet_service)) -> Response:
    """Delete a pet.

    Responds 200 when a pet was removed and 204 when there was
    nothing stored under the ID.
    """
    return render(*service.delete_pet(pet_id))
