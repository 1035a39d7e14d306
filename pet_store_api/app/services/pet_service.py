"""
Service layer for pets.

``PetService`` turns the raw pieces of an HTTP request (the ``id``
path segment and the request body) into calls on a ``PetStorer`` and
turns the results into a ``(status_code, payload)`` pair.  A payload of
``None`` means the response has no body.  Failures are raised as
``PetServiceError`` subclasses and rendered by the exception handler
registered in ``main.create_app``; this module never swallows an
error coming from the store.
"""

import logging
import re
from typing import Optional, Tuple

from fastapi import status
from pydantic import ValidationError

from pet_store_api.app.core.errors import InvalidInputError, UnknownError
from pet_store_api.app.core.store import PetStorer
from pet_store_api.app.schemas.pet import UINT32_MAX, Pet

logger = logging.getLogger(__name__)

ServiceResult = Tuple[int, Optional[Pet]]

_DIGITS = re.compile(r"[0-9]+")


def parse_pet_id(raw_id: Optional[str]) -> int:
    """Convert the ``id`` path segment into a pet identifier.

    ``None`` means the router did not pass the segment at all, which is
    a bug on our side rather than a bad request.
    """
    if raw_id is None:
        raise UnknownError("An unknown internal error occurred")
    if raw_id == "":
        raise InvalidInputError("Pet ID missing")
    # Length is checked before int() so huge inputs never reach the
    # interpreter's digit limit.
    if (
        not _DIGITS.fullmatch(raw_id)
        or len(raw_id.lstrip("0")) > len(str(UINT32_MAX))
        or int(raw_id) > UINT32_MAX
    ):
        raise InvalidInputError(f"Invalid pet ID {raw_id}. ID should be a number")
    return int(raw_id)


def parse_pet_body(raw_body: Optional[bytes]) -> Pet:
    """Decode a request body into a ``Pet``."""
    if not raw_body:
        raise InvalidInputError("No request body")
    try:
        return Pet.model_validate_json(raw_body)
    except ValidationError as exc:
        raise InvalidInputError("Invalid pet data", cause=exc) from exc


class PetService:
    """Maps pet requests onto a ``PetStorer``."""

    def __init__(self, store: PetStorer) -> None:
        self.store = store

    def get_pet(self, raw_id: Optional[str]) -> ServiceResult:
        pet_id = parse_pet_id(raw_id)
        return status.HTTP_200_OK, self.store.read(pet_id)

    def create_pet(self, raw_body: Optional[bytes]) -> ServiceResult:
        pet = parse_pet_body(raw_body)
        self.store.create(pet)
        logger.info("Created pet %s", pet.id)
        return status.HTTP_201_CREATED, None

    def replace_pet(self, raw_id: Optional[str], raw_body: Optional[bytes]) -> ServiceResult:
        """Store the body under the path id, creating the pet if needed.

        The record is saved as sent, so a body whose ``id`` differs
        from the path keeps its own ``id`` field while being filed
        under the path id.
        """
        pet_id = parse_pet_id(raw_id)
        pet = parse_pet_body(raw_body)
        if pet.id != pet_id:
            logger.warning("Pet body id %s differs from path id %s; storing under path id", pet.id, pet_id)
        self.store.update(pet_id, pet)
        return status.HTTP_200_OK, None

    def delete_pet(self, raw_id: Optional[str]) -> ServiceResult:
        pet_id = parse_pet_id(raw_id)
        if self.store.delete(pet_id):
            logger.info("Deleted pet %s", pet_id)
            return status.HTTP_200_OK, None
        return status.HTTP_204_NO_CONTENT, None
