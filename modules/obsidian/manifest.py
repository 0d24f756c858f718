"""Obsidian module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

NOTE_PATH = ToolParameter(
    name="path",
    type="string",
    description="Path to the note relative to vault root",
)

MANIFEST = ModuleManifest(
    module_name="obsidian",
    description="Read, write and search Markdown notes in an Obsidian vault.",
    version="0.1.0",
    tools=[
        ToolDefinition(
            name="read_note",
            description="Read a note from the Obsidian vault",
            parameters=[NOTE_PATH],
        ),
        ToolDefinition(
            name="write_note",
            description="Write a note to the Obsidian vault",
            parameters=[
                NOTE_PATH,
                ToolParameter(
                    name="content",
                    type="string",
                    description="Note content in markdown format",
                ),
                ToolParameter(
                    name="frontmatter",
                    type="object",
                    description="Optional YAML frontmatter",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="search_notes",
            description="Search notes in the Obsidian vault",
            parameters=[
                ToolParameter(name="query", type="string", description="Search query"),
            ],
        ),
    ],
)
