"""Profile Schemas — wire aliases and missing-field handling.

Invariants:
    - current and legacy client field names both populate the submission
    - absent or null fields become "" (rejected later as MISSING_FIELD)
    - non-string values are schema errors
"""

import pytest
from pydantic import ValidationError

from profile_service.schemas.profile import ProfileSubmission, ProfileCreated, OccupationList


def _body(**overrides) -> dict:
    body = {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "phone": "0812345678",
        "profileImage": "base64...",
        "birthDate": "01/01/1990",
        "occupation": "Tester",
        "sex": "M",
    }
    body.update(overrides)
    return body


def test_camel_case_body_maps_to_attributes():
    sub = ProfileSubmission.model_validate(_body())
    assert sub.first_name == "A"
    assert sub.last_name == "B"
    assert sub.profile_image == "base64..."
    assert sub.birth_date == "01/01/1990"


def test_legacy_client_names_are_accepted():
    body = _body()
    body["profileBase64"] = body.pop("profileImage")
    body["birthDay"] = body.pop("birthDate")
    sub = ProfileSubmission.model_validate(body)
    assert sub.profile_image == "base64..."
    assert sub.birth_date == "01/01/1990"


def test_absent_field_defaults_to_empty_string():
    body = _body()
    del body["sex"]
    assert ProfileSubmission.model_validate(body).sex == ""


def test_null_field_becomes_empty_string():
    sub = ProfileSubmission.model_validate(_body(email=None))
    assert sub.email == ""


def test_unknown_fields_are_ignored():
    sub = ProfileSubmission.model_validate(_body(nickname="x"))
    assert not hasattr(sub, "nickname")


@pytest.mark.parametrize("value", [812345678, ["0812"], {"n": "0812"}, True])
def test_non_string_value_is_schema_error(value):
    with pytest.raises(ValidationError):
        ProfileSubmission.model_validate(_body(phone=value))


def test_whitespace_is_preserved_for_validator():
    sub = ProfileSubmission.model_validate(_body(firstName="  A "))
    assert sub.first_name == "  A "


def test_response_models_serialize_expected_keys():
    assert ProfileCreated(id="a" * 32, message="save data success").model_dump() == {
        "id": "a" * 32, "message": "save data success",
    }
    assert OccupationList(items=["Developer"]).model_dump() == {"items": ["Developer"]}
