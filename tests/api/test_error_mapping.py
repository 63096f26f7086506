"""Error Mapping — domain error kinds translate to the documented status codes."""

import json

from aeroportos.api.error_mapping import error_response, status_for
from aeroportos.config import Settings
from aeroportos.core.errors import (
    Violation, ViolationKind, duplicate_code, not_found, validation_failed,
)


def test_not_found_maps_to_404():
    assert status_for(not_found("XXX")) == 404


def test_validation_failed_maps_to_400():
    error = validation_failed([
        Violation("latitude", ViolationKind.REQUIRED_FIELD, "Latitude é obrigatória"),
    ])
    assert status_for(error) == 400


def test_duplicate_code_maps_to_400_by_default(monkeypatch):
    monkeypatch.setattr(
        "aeroportos.api.error_mapping.get_settings", lambda: Settings(),
    )
    assert status_for(duplicate_code("TST")) == 400


def test_duplicate_code_maps_to_configured_409(monkeypatch):
    monkeypatch.setattr(
        "aeroportos.api.error_mapping.get_settings",
        lambda: Settings(duplicate_code_status=409),
    )
    assert status_for(duplicate_code("TST")) == 409


def test_error_response_body_is_envelope():
    response = error_response(not_found("GRU"), "/api/v1/aeroportos/GRU")
    assert response.status_code == 404
    body = json.loads(response.body)
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["iata_code"] == "GRU"
