"""Tests for schema-driven argument validation."""

from __future__ import annotations

import pytest

from shared.errors import ErrorKind, InvalidParamsError
from shared.schemas.tools import ToolDefinition, ToolParameter
from shared.validation import ArgumentValidator


def _validator(*params: ToolParameter) -> ArgumentValidator:
    return ArgumentValidator(ToolDefinition(name="probe", description="probe", parameters=list(params)))


# ===================================================================
# Required and optional arguments
# ===================================================================


class TestRequired:
    def test_missing_required_names_the_argument(self):
        v = _validator(ToolParameter(name="chat_id", type="string", description="Chat"))
        with pytest.raises(InvalidParamsError) as exc:
            v.validate({})
        assert exc.value.message == "Missing required argument: chat_id"
        assert exc.value.kind is ErrorKind.INVALID_PARAMS

    def test_none_arguments_treated_as_empty(self):
        v = _validator(ToolParameter(name="q", type="string", required=False))
        assert v.validate(None) == {"q": None}

    def test_non_object_arguments_rejected(self):
        v = _validator()
        with pytest.raises(InvalidParamsError, match="JSON object"):
            v.validate(["a", "b"])

    def test_optional_default_applied(self):
        v = _validator(ToolParameter(name="limit", type="integer", required=False, default=10))
        assert v.validate({}) == {"limit": 10}

    def test_explicit_value_overrides_default(self):
        v = _validator(ToolParameter(name="limit", type="integer", required=False, default=10))
        assert v.validate({"limit": 3}) == {"limit": 3}

    def test_explicit_null_takes_default(self):
        v = _validator(
            ToolParameter(name="limit", type="integer", required=False, default=10),
            ToolParameter(name="select", type="string", required=False, default="*"),
        )
        assert v.validate({"limit": None, "select": None}) == {"limit": 10, "select": "*"}

    def test_explicit_null_for_optional_without_default(self):
        v = _validator(ToolParameter(name="cursor", type="string", required=False))
        assert v.validate({"cursor": None}) == {"cursor": None}

    def test_explicit_null_for_required_rejected(self):
        v = _validator(ToolParameter(name="chat_id", type="string"))
        with pytest.raises(InvalidParamsError, match="'chat_id'"):
            v.validate({"chat_id": None})

    def test_unknown_arguments_ignored(self):
        v = _validator(ToolParameter(name="text", type="string"))
        assert v.validate({"text": "hi", "extra": 1}) == {"text": "hi"}


# ===================================================================
# Types and constraints
# ===================================================================


class TestTypes:
    @pytest.mark.parametrize(
        "param_type,value",
        [
            ("string", 5),
            ("integer", "5"),
            ("integer", 1.5),
            ("boolean", "true"),
            ("object", "not-an-object"),
            ("array", {"a": 1}),
        ],
    )
    def test_wrong_type_rejected(self, param_type, value):
        v = _validator(ToolParameter(name="x", type=param_type))
        with pytest.raises(InvalidParamsError, match="'x'"):
            v.validate({"x": value})

    def test_number_accepts_float(self):
        v = _validator(ToolParameter(name="ratio", type="number"))
        assert v.validate({"ratio": 0.5}) == {"ratio": 0.5}

    def test_enum_enforced(self):
        v = _validator(
            ToolParameter(name="parse_mode", type="string", required=False, enum=["HTML", "Markdown"])
        )
        assert v.validate({"parse_mode": "HTML"}) == {"parse_mode": "HTML"}
        with pytest.raises(InvalidParamsError, match="parse_mode"):
            v.validate({"parse_mode": "BBCode"})

    def test_bounds_enforced(self):
        v = _validator(ToolParameter(name="limit", type="integer", minimum=1, maximum=100))
        assert v.validate({"limit": 100}) == {"limit": 100}
        with pytest.raises(InvalidParamsError, match="limit"):
            v.validate({"limit": 0})
        with pytest.raises(InvalidParamsError, match="limit"):
            v.validate({"limit": 101})

    def test_typed_array_items(self):
        v = _validator(ToolParameter(name="tags", type="array", items="string"))
        assert v.validate({"tags": ["a", "b"]}) == {"tags": ["a", "b"]}
        with pytest.raises(InvalidParamsError, match="tags"):
            v.validate({"tags": ["a", 1]})


class TestNestedObject:
    @pytest.fixture
    def validator(self):
        return _validator(
            ToolParameter(
                name="filter",
                type="object",
                required=False,
                properties=[
                    ToolParameter(name="after", type="string", required=False),
                    ToolParameter(name="search", type="string", required=False),
                ],
            )
        )

    def test_nested_fields_filled(self, validator):
        result = validator.validate({"filter": {"search": "python"}})
        assert result == {"filter": {"after": None, "search": "python"}}

    def test_nested_type_error_reports_path(self, validator):
        with pytest.raises(InvalidParamsError, match="filter.search"):
            validator.validate({"filter": {"search": 3}})

    def test_absent_object_is_none(self, validator):
        assert validator.validate({}) == {"filter": None}

    def test_null_nested_fields_take_defaults(self, validator):
        result = validator.validate({"filter": {"after": None, "search": "python"}})
        assert result == {"filter": {"after": None, "search": "python"}}
        assert validator.validate({"filter": None}) == {"filter": None}
