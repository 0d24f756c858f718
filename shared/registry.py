"""Tool registry - binds tool definitions to handlers and serves the catalog."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import structlog

from shared.errors import FatalStartupError, ToolNotFoundError
from shared.schemas.tools import ModuleManifest, ToolDefinition
from shared.validation import ArgumentValidator

logger = structlog.get_logger()

Handler = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class RegisteredTool:
    """A catalog entry: the advertised definition plus the callable behind it."""

    definition: ToolDefinition
    handler: Handler
    validator: ArgumentValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "validator", ArgumentValidator(self.definition))

    @property
    def name(self) -> str:
        return self.definition.name


def bind_tools(definitions: Iterable[ToolDefinition], target: object) -> list[RegisteredTool]:
    """Bind each definition to the method of the same name on *target*.

    Raises FatalStartupError if a definition has no matching coroutine method,
    so the catalog and the dispatch table cannot drift apart.
    """
    bound = []
    for definition in definitions:
        handler = getattr(target, definition.name, None)
        if handler is None or not callable(handler):
            raise FatalStartupError(
                f"No handler for tool '{definition.name}' on {type(target).__name__}"
            )
        bound.append(RegisteredTool(definition=definition, handler=handler))
    return bound


def _index(entries: Iterable[RegisteredTool]) -> dict[str, RegisteredTool]:
    catalog: dict[str, RegisteredTool] = {}
    for entry in entries:
        if entry.name in catalog:
            raise ValueError(f"Duplicate tool name: {entry.name}")
        catalog[entry.name] = entry
    return catalog


class ToolRegistry:
    """Ordered, name-unique tool catalog.

    Static registries are fixed at construction. A registry built with a
    ``refresher`` re-probes its external source on every listing and swaps
    the whole catalog in one assignment; if the probe fails the catalog
    becomes empty instead of raising.
    """

    def __init__(
        self,
        tools: Iterable[RegisteredTool] = (),
        *,
        refresher: Callable[[], Awaitable[list[RegisteredTool]]] | None = None,
    ):
        self._catalog = _index(tools)
        self._refresher = refresher

    @classmethod
    def from_manifest(cls, manifest: ModuleManifest, target: object) -> ToolRegistry:
        return cls(bind_tools(manifest.tools, target))

    @property
    def dynamic(self) -> bool:
        return self._refresher is not None

    async def refresh(self) -> None:
        """Rebuild the catalog from the external source (dynamic registries only)."""
        if self._refresher is None:
            return
        try:
            entries = await self._refresher()
            catalog = _index(entries)
        except Exception as e:
            logger.warning("catalog_refresh_failed", error=str(e))
            catalog = {}
        self._catalog = catalog
        logger.debug("catalog_refreshed", tools=len(catalog))

    def replace(self, tools: Iterable[RegisteredTool]) -> None:
        """Swap in a new catalog, e.g. when a tool call has just re-read the source."""
        self._catalog = _index(tools)
        logger.debug("catalog_replaced", tools=len(self._catalog))

    async def list_tools(self) -> list[ToolDefinition]:
        """Return the full catalog in registration order."""
        await self.refresh()
        catalog = self._catalog
        return [entry.definition for entry in catalog.values()]

    def get(self, name: str) -> RegisteredTool:
        """Look up a tool in the current catalog."""
        entry = self._catalog.get(name)
        if entry is None:
            raise ToolNotFoundError(name)
        return entry

    def names(self) -> list[str]:
        return list(self._catalog)

    def __len__(self) -> int:
        return len(self._catalog)

    def __contains__(self, name: object) -> bool:
        return name in self._catalog
