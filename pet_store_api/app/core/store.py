"""
Storage backends for pet records.

``PetStorer`` defines the four operations the service relies on.
``MemStore`` keeps records in a process‑local dictionary; it is not
persistent and is lost on restart.  The backend is chosen once at
startup with ``create_store``, using the ``datastore`` setting.

All ``MemStore`` methods may be called from several request threads
at once.  Mutations go through a single lock so that the
check‑then‑insert of ``create`` and the check‑then‑remove of
``delete`` are atomic.  Reads do not take the lock: stored records are
never mutated in place, only replaced, so a lookup always sees a
complete record.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict

from .errors import DuplicateKeyError, NotFoundError, StoreConfigError
from ..schemas.pet import Pet

logger = logging.getLogger(__name__)

STORE_BACKENDS = ("mem", "pq")


class PetStorer(ABC):
    """Standard CRUD operations for pets."""

    @abstractmethod
    def create(self, pet: Pet) -> None:
        """Insert ``pet`` under ``pet.id``; raise ``DuplicateKeyError`` if taken."""

    @abstractmethod
    def read(self, pet_id: int) -> Pet:
        """Return a copy of the pet stored under ``pet_id``; raise ``NotFoundError`` if absent."""

    @abstractmethod
    def update(self, pet_id: int, pet: Pet) -> None:
        """Store ``pet`` under ``pet_id``, creating or replacing the entry."""

    @abstractmethod
    def delete(self, pet_id: int) -> bool:
        """Remove the pet under ``pet_id``; return whether one existed."""


class MemStore(PetStorer):
    """In‑memory implementation of ``PetStorer``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pets: Dict[int, Pet] = {}

    def create(self, pet: Pet) -> None:
        stored = pet.model_copy(deep=True)
        with self._lock:
            if stored.id in self._pets:
                raise DuplicateKeyError(f"Pet with id {stored.id} already exists")
            self._pets[stored.id] = stored
        logger.debug("Stored new pet %s", stored.id)

    def read(self, pet_id: int) -> Pet:
        pet = self._pets.get(pet_id)
        if pet is None:
            raise NotFoundError(f"No pet exists with id {pet_id}")
        return pet.model_copy(deep=True)

    def update(self, pet_id: int, pet: Pet) -> None:
        stored = pet.model_copy(deep=True)
        with self._lock:
            self._pets[pet_id] = stored
        logger.debug("Stored pet data under id %s", pet_id)

    def delete(self, pet_id: int) -> bool:
        with self._lock:
            if pet_id not in self._pets:
                return False
            del self._pets[pet_id]
        logger.debug("Removed pet %s", pet_id)
        return True

    def __len__(self) -> int:
        return len(self._pets)


def create_store(kind: str) -> PetStorer:
    """Build the storage backend named by ``kind``.

    Only ``"mem"`` is implemented.  ``"pq"`` is reserved for a
    PostgreSQL backend and is rejected, as is any unknown name; there
    is no fallback to the in‑memory store.

    Raises
    ------
    StoreConfigError
        If ``kind`` does not name a usable backend.
    """
    if kind == "mem":
        return MemStore()
    if kind == "pq":
        raise StoreConfigError("postgres store not yet implemented")
    raise StoreConfigError(
        f"Unknown store implementation {kind!r}, must be one of {', '.join(STORE_BACKENDS)}"
    )
