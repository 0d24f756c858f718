"""Tool, manifest and result envelope schemas."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from shared.errors import ErrorKind

ParamType = Literal["string", "integer", "number", "boolean", "array", "object"]


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ParamType
    description: str = ""
    required: bool = True
    default: Any = None
    enum: list[str] | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    # Nested fields for ``object`` parameters, element type for ``array``.
    properties: list[ToolParameter] | None = None
    items: ParamType | None = None

    def json_schema(self) -> dict[str, Any]:
        """Render this parameter as a JSON Schema property."""
        prop: dict[str, Any] = {"type": self.type}
        if self.description:
            prop["description"] = self.description
        if self.enum is not None:
            prop["enum"] = list(self.enum)
        if self.default is not None:
            prop["default"] = self.default
        if self.minimum is not None:
            prop["minimum"] = self.minimum
        if self.maximum is not None:
            prop["maximum"] = self.maximum
        if self.properties is not None:
            prop["properties"] = {p.name: p.json_schema() for p in self.properties}
            required = [p.name for p in self.properties if p.required]
            if required:
                prop["required"] = required
        if self.items is not None:
            prop["items"] = {"type": self.items}
        return prop


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a module."""

    model_config = ConfigDict(frozen=True)

    name: str  # e.g. "send_message"
    description: str
    parameters: list[ToolParameter] = Field(default_factory=list)

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object describing the tool's arguments."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
        }
        required = [p.name for p in self.parameters if p.required]
        if required:
            schema["required"] = required
        return schema

    def to_wire(self) -> dict[str, Any]:
        """Catalog entry as returned by ``tools/list``."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class ModuleManifest(BaseModel):
    """Manifest describing a module and its tools."""

    module_name: str
    description: str
    version: str = "0.1.0"
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ContentBlock(BaseModel):
    """One piece of tool output. Only text blocks are produced."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result envelope returned for every invocation."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[ContentBlock]
    is_error: bool = Field(default=False, alias="isError")
    # Internal only; lets callers branch on the failure cause.
    error_kind: ErrorKind | None = Field(default=None, exclude=True)

    @classmethod
    def ok(cls, text: str) -> ToolResult:
        return cls(content=[ContentBlock(text=text)], is_error=False)

    @classmethod
    def failure(cls, text: str, kind: ErrorKind = ErrorKind.CAPABILITY_FAILURE) -> ToolResult:
        return cls(content=[ContentBlock(text=text)], is_error=True, error_kind=kind)

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "\n".join(block.text for block in self.content)


ToolParameter.model_rebuild()
