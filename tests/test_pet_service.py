from __future__ import annotations

import pytest
from pydantic import ValidationError

from pet_store_api.app.core.errors import (
    DuplicateKeyError,
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    PetServiceError,
    UnknownError,
    status_for_error,
)
from pet_store_api.app.core.store import MemStore
from pet_store_api.app.schemas.pet import Pet
from pet_store_api.app.services.pet_service import PetService, parse_pet_body, parse_pet_id

NEMO = b'{"id": 1000, "name": "Nemo", "species": "Goldfish", "owner": "Marlin"}'


@pytest.fixture
def service() -> PetService:
    return PetService(MemStore())


@pytest.mark.parametrize("raw, expected", [("0", 0), ("1000", 1000), ("007", 7), ("4294967295", 4294967295)])
def test_parse_pet_id_accepts_uint32(raw: str, expected: int) -> None:
    assert parse_pet_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "111x", "-1", "+1", " 1", "1_000", "1.5", "4294967296", "١٢", "9" * 5000])
def test_parse_pet_id_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidInputError):
        parse_pet_id(raw)


def test_parse_pet_id_empty_segment_is_bad_input() -> None:
    with pytest.raises(InvalidInputError):
        parse_pet_id("")


def test_parse_pet_id_missing_segment_is_internal() -> None:
    # None only happens when routing failed to pass the segment.
    with pytest.raises(UnknownError):
        parse_pet_id(None)


def test_parse_pet_body_decodes_record() -> None:
    pet = parse_pet_body(NEMO)
    assert pet == Pet(id=1000, name="Nemo", species="Goldfish", owner="Marlin")
    assert pet.extra is None


def test_parse_pet_body_keeps_species_and_owner_apart() -> None:
    pet = parse_pet_body(b'{"id": 1, "species": "Cat", "owner": "Jon"}')
    assert (pet.species, pet.owner) == ("Cat", "Jon")


def test_parse_pet_body_keeps_extra_values() -> None:
    pet = parse_pet_body(b'{"id": 1, "extra": {"food": "meat", "age": 3, "tags": ["a"], "vet": null}}')
    assert pet.extra == {"food": "meat", "age": 3, "tags": ["a"], "vet": None}


def test_parse_pet_body_null_strings_become_empty() -> None:
    pet = parse_pet_body(b'{"id": 3, "name": null, "species": null, "owner": null}')
    assert pet == Pet(id=3, name="", species="", owner="")


def test_parse_pet_body_still_rejects_non_string_names() -> None:
    with pytest.raises(InvalidInputError):
        parse_pet_body(b'{"id": 3, "name": 5}')


@pytest.mark.parametrize("raw", [None, b""])
def test_parse_pet_body_requires_body(raw) -> None:
    with pytest.raises(InvalidInputError):
        parse_pet_body(raw)


@pytest.mark.parametrize(
    "raw",
    [
        b"not json",
        b"[]",
        b'{"name": "no id"}',
        b'{"id": -1}',
        b'{"id": 4294967296}',
        b'{"id": 1, "extra": 5}',
        b'{"id": "1000"}',
        b'{"id": true}',
        b'{"id": 7.0}',
    ],
)
def test_parse_pet_body_rejects_bad_data(raw: bytes) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        parse_pet_body(raw)
    assert isinstance(excinfo.value.cause, ValidationError)
    assert excinfo.value.message == "Invalid pet data"


def test_error_str_includes_cause() -> None:
    err = InvalidInputError("Invalid pet data", cause=ValueError("boom"))
    assert str(err) == "Invalid pet data : boom"
    assert str(NotFoundError("gone")) == "gone"


@pytest.mark.parametrize(
    "error, status_code",
    [
        (InvalidInputError("x"), 400),
        (NotFoundError("x"), 404),
        (DuplicateKeyError("x"), 500),
        (UnknownError("x"), 500),
        (PetServiceError("x"), 500),
        (RuntimeError("x"), 500),
    ],
)
def test_status_for_error(error: Exception, status_code: int) -> None:
    assert status_for_error(error) == status_code


def test_error_kinds() -> None:
    assert InvalidInputError("x").kind is ErrorKind.INVALID_INPUT
    assert DuplicateKeyError("x").kind is ErrorKind.DUPLICATE_KEY


def test_create_then_get(service: PetService) -> None:
    assert service.create_pet(NEMO) == (201, None)
    status_code, pet = service.get_pet("1000")
    assert status_code == 200
    assert pet.name == "Nemo"


def test_create_duplicate_propagates(service: PetService) -> None:
    service.create_pet(NEMO)
    with pytest.raises(DuplicateKeyError):
        service.create_pet(NEMO)


def test_get_missing_propagates_not_found(service: PetService) -> None:
    with pytest.raises(NotFoundError):
        service.get_pet("5")


def test_replace_stores_under_path_id(service: PetService) -> None:
    assert service.replace_pet("7", NEMO) == (200, None)
    _, pet = service.get_pet("7")
    assert pet.id == 1000
    with pytest.raises(NotFoundError):
        service.get_pet("1000")


def test_replace_validates_id_before_body(service: PetService) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        service.replace_pet("abc", b"")
    assert "abc" in excinfo.value.message


def test_delete_status_codes(service: PetService) -> None:
    service.create_pet(NEMO)
    assert service.delete_pet("1000") == (200, None)
    assert service.delete_pet("1000") == (204, None)
