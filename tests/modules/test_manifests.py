"""Tests for module manifests — ensure all adapters have valid tool definitions.

These tests import each module's manifest and verify structural correctness:
names are unique, required fields are present, parameter types are valid,
and every advertised tool has a handler.
"""

from __future__ import annotations

import importlib

import pytest

from shared.registry import bind_tools

# All adapters: (manifest module, tools class path).
# Add new modules here when they're created.
MODULES = [
    ("modules.telegram.manifest", "modules.telegram.tools.TelegramTools"),
    ("modules.supabase.manifest", "modules.supabase.tools.SupabaseTools"),
    ("modules.bluesky.manifest", "modules.bluesky.tools.BlueskyTools"),
    ("modules.rss_feed.manifest", "modules.rss_feed.tools.RssFeedTools"),
    ("modules.obsidian.manifest", "modules.obsidian.tools.ObsidianTools"),
    ("modules.ios_simulator.manifest", "modules.ios_simulator.tools.SimulatorTools"),
    ("modules.apple_shortcuts.manifest", "modules.apple_shortcuts.tools.ShortcutsTools"),
]

VALID_PARAM_TYPES = {"string", "integer", "number", "boolean", "array", "object"}


def _load(manifest_path: str, tools_path: str):
    manifest = importlib.import_module(manifest_path).MANIFEST
    module_path, class_name = tools_path.rsplit(".", 1)
    tools_cls = getattr(importlib.import_module(module_path), class_name)
    return manifest, tools_cls


# ===================================================================
# Parametrized tests
# ===================================================================


@pytest.mark.parametrize(
    "manifest_path,tools_path",
    MODULES,
    ids=[m for m, _ in MODULES],
)
class TestManifestStructure:
    """Structural validation for module manifests."""

    def test_module_name_is_set(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        assert manifest.module_name, f"{manifest_path}: module_name is empty"
        assert manifest.description, f"{manifest_path}: description is empty"

    def test_has_tools(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        assert len(manifest.tools) > 0, f"{manifest_path}: no tools defined"

    def test_tool_names_unique(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        names = [tool.name for tool in manifest.tools]
        assert len(names) == len(set(names)), f"{manifest_path}: duplicate tool names"

    def test_tools_have_descriptions(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        for tool in manifest.tools:
            assert tool.description, f"{manifest_path}: tool '{tool.name}' has empty description"

    def test_parameter_types_are_valid(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        for tool in manifest.tools:
            for param in tool.parameters:
                assert param.type in VALID_PARAM_TYPES, (
                    f"{manifest_path}: tool '{tool.name}' param '{param.name}' "
                    f"has invalid type '{param.type}'"
                )

    def test_parameters_have_descriptions(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        for tool in manifest.tools:
            for param in tool.parameters:
                assert param.description, (
                    f"{manifest_path}: tool '{tool.name}' param '{param.name}' has empty description"
                )

    def test_input_schema_is_object(self, manifest_path, tools_path):
        manifest, _ = _load(manifest_path, tools_path)
        for tool in manifest.tools:
            schema = tool.to_wire()["inputSchema"]
            assert schema["type"] == "object"
            for name in schema.get("required", []):
                assert name in schema["properties"]

    def test_every_tool_has_a_handler(self, manifest_path, tools_path):
        manifest, tools_cls = _load(manifest_path, tools_path)
        bound = bind_tools(manifest.tools, tools_cls.__new__(tools_cls))
        assert [entry.name for entry in bound] == [tool.name for tool in manifest.tools]
