"""Apple Shortcuts module manifest — tool definitions.

``run_shortcut`` is advertised as a template; the live catalog narrows its
``name`` parameter to the shortcuts installed at listing time.
"""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

RUN_SHORTCUT = ToolDefinition(
    name="run_shortcut",
    description="Run a Shortcuts automation by name",
    parameters=[
        ToolParameter(name="name", type="string", description="Name of the shortcut to run"),
        ToolParameter(
            name="input",
            type="string",
            description="Optional input to pass to the shortcut",
            required=False,
        ),
    ],
)

LIST_SHORTCUTS = ToolDefinition(
    name="list_shortcuts",
    description="List all available shortcuts",
    parameters=[],
)

MANIFEST = ModuleManifest(
    module_name="apple_shortcuts",
    description="List and run macOS Shortcuts automations.",
    version="1.0.1",
    tools=[RUN_SHORTCUT, LIST_SHORTCUTS],
)


def run_shortcut_for(names: list[str]) -> ToolDefinition:
    """``run_shortcut`` with its ``name`` restricted to *names*."""
    if not names:
        return RUN_SHORTCUT
    name_param, *rest = RUN_SHORTCUT.parameters
    return RUN_SHORTCUT.model_copy(
        update={"parameters": [name_param.model_copy(update={"enum": names}), *rest]}
    )
