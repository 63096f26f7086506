"""Error Handlers — pydantic body errors become wire-named violations."""

from aeroportos.api.error_handlers import violation_from_pydantic
from aeroportos.core.errors import ViolationKind


def test_field_error_uses_json_field_name():
    violation = violation_from_pydantic({
        "type": "finite_number", "loc": ("body", "altitude"),
        "msg": "Input should be a finite number",
    })
    assert violation.field == "altitude"
    assert violation.kind == ViolationKind.INVALID_VALUE
    assert "finite number" in violation.message


def test_unparseable_body_is_reported_on_body():
    violation = violation_from_pydantic({
        "type": "json_invalid", "loc": ("body", 9), "msg": "JSON decode error",
    })
    assert violation.field == "body"
