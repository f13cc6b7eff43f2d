import pytest
from pydantic import ValidationError

from schemas.waitlist import WaitlistCreateRequest, WaitlistUpdateRequest


def test_create_defaults_is_joined_to_false():
    payload = WaitlistCreateRequest.model_validate({"name": "Ann", "email": "ann@x.com"})

    assert payload.is_joined is False


def test_create_accepts_camel_and_snake_case():
    camel = WaitlistCreateRequest.model_validate({"name": "Ann", "email": "ann@x.com", "isJoined": True})
    snake = WaitlistCreateRequest.model_validate({"name": "Ann", "email": "ann@x.com", "is_joined": True})

    assert camel.is_joined is snake.is_joined is True


def test_create_trims_surrounding_whitespace_only():
    payload = WaitlistCreateRequest.model_validate({"name": "  Ann   Lee ", "email": "ann@x.com"})

    assert payload.name == "Ann   Lee"


@pytest.mark.parametrize("name", [5, ["Ann"], {"first": "Ann"}])
def test_create_rejects_non_text_name(name):
    with pytest.raises(ValidationError):
        WaitlistCreateRequest.model_validate({"name": name, "email": "ann@x.com"})


def test_update_tracks_only_supplied_fields():
    payload = WaitlistUpdateRequest.model_validate({"isJoined": False})

    assert payload.changes() == {"is_joined": False}


def test_update_with_empty_body_has_no_changes():
    assert WaitlistUpdateRequest.model_validate({}).changes() == {}


@pytest.mark.parametrize("field", ["name", "email", "isJoined"])
def test_update_rejects_explicit_null(field):
    with pytest.raises(ValidationError):
        WaitlistUpdateRequest.model_validate({field: None})


def test_update_rejects_blank_name():
    with pytest.raises(ValidationError):
        WaitlistUpdateRequest.model_validate({"name": "  "})
