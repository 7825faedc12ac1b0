"""Unit tests for member DTOs."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from domain.schemas.member import MemberIdentifyDTO, MemberJoinDTO


def test_join_dto_optional_fields():
    dto = MemberJoinDTO(email="hello@local.com", password="hello", nickname="1")

    assert dto.thumbnail_image is None
    assert dto.personal_status is None


def test_join_dto_is_identify_dto():
    dto = MemberJoinDTO(email="hello@local.com", password="hello", nickname="1")

    assert isinstance(dto, MemberIdentifyDTO)


@pytest.mark.parametrize("field", ["email", "password", "nickname"])
def test_join_dto_requires_non_empty(field: str):
    data = {"email": "hello@local.com", "password": "hello", "nickname": "1"}
    data[field] = ""

    with pytest.raises(PydanticValidationError):
        MemberJoinDTO(**data)
