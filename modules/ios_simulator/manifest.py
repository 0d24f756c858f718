"""iOS simulator module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter


def _device(action: str) -> ToolParameter:
    return ToolParameter(
        name="device_id",
        type="string",
        description=f"The UDID of the {action}",
    )


MANIFEST = ModuleManifest(
    module_name="ios_simulator",
    description="Manage iOS simulators through xcrun simctl.",
    version="1.0.0",
    tools=[
        ToolDefinition(
            name="list_simulators",
            description="List all available iOS simulators",
            parameters=[],
        ),
        ToolDefinition(
            name="boot_simulator",
            description="Boot an iOS simulator",
            parameters=[_device("simulator to boot")],
        ),
        ToolDefinition(
            name="shutdown_simulator",
            description="Shutdown an iOS simulator",
            parameters=[_device("simulator to shutdown")],
        ),
        ToolDefinition(
            name="install_app",
            description="Install an app on a simulator",
            parameters=[
                _device("target simulator"),
                ToolParameter(
                    name="app_path",
                    type="string",
                    description="Path to the .app bundle to install",
                ),
            ],
        ),
        ToolDefinition(
            name="launch_app",
            description="Launch an installed app on a simulator",
            parameters=[
                _device("target simulator"),
                ToolParameter(
                    name="bundle_id",
                    type="string",
                    description="Bundle identifier of the app to launch",
                ),
            ],
        ),
    ],
)
