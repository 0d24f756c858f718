"""Schema-driven argument validation.

Each tool's parameter list is compiled once into a pydantic model. Arguments
are validated into that model before the handler runs, so handlers receive
typed, defaulted values and never see malformed input.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    create_model,
    model_validator,
)

from shared.errors import InvalidParamsError
from shared.schemas.tools import ToolDefinition, ToolParameter

_PRIMITIVES: dict[str, Any] = {
    "string": StrictStr,
    "integer": StrictInt,
    "number": StrictFloat,
    "boolean": StrictBool,
    "array": list[Any],
    "object": dict[str, Any],
}


def _annotation(param: ToolParameter, owner: str) -> Any:
    if param.enum is not None:
        return Literal[tuple(param.enum)]
    if param.type == "object" and param.properties is not None:
        return build_model(f"{owner}_{param.name}", param.properties)
    if param.type == "array" and param.items is not None:
        return list[_PRIMITIVES[param.items]]

    base = _PRIMITIVES[param.type]
    if param.minimum is not None or param.maximum is not None:
        return Annotated[base, Field(ge=param.minimum, le=param.maximum)]
    return base


class ToolArguments(BaseModel):
    """Base for compiled argument models.

    An explicit ``null`` for an optional argument means "not given", so the
    declared default applies and handlers never receive ``None`` in place of
    a typed value.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = cls.model_fields
        return {
            key: value
            for key, value in data.items()
            if value is not None or key not in fields or fields[key].is_required()
        }


def build_model(name: str, parameters: list[ToolParameter]) -> type[BaseModel]:
    """Compile a parameter list into a pydantic model class."""
    fields: dict[str, Any] = {}
    for param in parameters:
        annotation = _annotation(param, name)
        if param.required:
            fields[param.name] = (annotation, ...)
        else:
            fields[param.name] = (annotation, param.default)
    return create_model(name, __base__=ToolArguments, **fields)


def _describe(error: dict[str, Any]) -> str:
    """Human-readable description of one pydantic error."""
    loc = ".".join(str(part) for part in error.get("loc", ()))
    if error.get("type") == "missing":
        return f"Missing required argument: {loc}"
    if not loc:
        return f"Invalid arguments: {error.get('msg')}"
    return f"Invalid argument '{loc}': {error.get('msg')}"


class ArgumentValidator:
    """Validates raw argument payloads for one tool."""

    def __init__(self, tool: ToolDefinition):
        self.tool = tool
        self.model = build_model(f"{tool.name}_args", tool.parameters)

    def validate(self, arguments: Any) -> dict[str, Any]:
        """Return defaulted arguments, or raise InvalidParamsError on the first violation."""
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidParamsError("Arguments must be a JSON object")
        try:
            record = self.model.model_validate(arguments)
        except ValidationError as e:
            raise InvalidParamsError(_describe(e.errors()[0])) from e
        return record.model_dump()
