"""RSS feed module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

URL = ToolParameter(name="url", type="string", description="URL of the RSS or Atom feed")

LIMIT = ToolParameter(
    name="limit",
    type="integer",
    description="Maximum number of items to return",
    required=False,
    default=10,
    minimum=1,
)

MANIFEST = ModuleManifest(
    module_name="rss_feed",
    description="Fetch RSS/Atom feeds and return their metadata and items, optionally filtered.",
    version="1.0.0",
    tools=[
        ToolDefinition(
            name="fetch_feed",
            description="Fetch and parse an RSS feed, returning metadata and recent items",
            parameters=[URL, LIMIT],
        ),
        ToolDefinition(
            name="get_feed_items",
            description="Get items from an RSS feed with optional filtering",
            parameters=[
                URL,
                LIMIT,
                ToolParameter(
                    name="filter",
                    type="object",
                    description="Optional item filters",
                    required=False,
                    properties=[
                        ToolParameter(
                            name="after",
                            type="string",
                            description="Only return items after this date (ISO 8601)",
                            required=False,
                        ),
                        ToolParameter(
                            name="before",
                            type="string",
                            description="Only return items before this date (ISO 8601)",
                            required=False,
                        ),
                        ToolParameter(
                            name="search",
                            type="string",
                            description="Search term to filter items by title/content",
                            required=False,
                        ),
                    ],
                ),
            ],
        ),
    ],
)
