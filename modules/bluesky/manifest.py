"""Bluesky module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

MAX_LIMIT = 100


def _limit(default: int, noun: str) -> ToolParameter:
    return ToolParameter(
        name="limit",
        type="integer",
        description=f"Maximum number of {noun} to return (max {MAX_LIMIT})",
        required=False,
        default=default,
        minimum=1,
        maximum=MAX_LIMIT,
    )


CURSOR = ToolParameter(
    name="cursor",
    type="string",
    description="Pagination cursor for next page of results",
    required=False,
)


def _query(description: str) -> ToolParameter:
    return ToolParameter(name="query", type="string", description=description)


MANIFEST = ModuleManifest(
    module_name="bluesky",
    description="Read the configured Bluesky account's profile, posts, social graph and feeds, and search Bluesky.",
    version="1.0.0",
    tools=[
        ToolDefinition(
            name="bluesky_get_profile",
            description="Get a user's profile information",
        ),
        ToolDefinition(
            name="bluesky_get_posts",
            description="Get recent posts from a user",
            parameters=[_limit(50, "posts"), CURSOR],
        ),
        ToolDefinition(
            name="bluesky_search_posts",
            description="Search for posts on Bluesky",
            parameters=[_query("The search query"), _limit(25, "posts"), CURSOR],
        ),
        ToolDefinition(
            name="bluesky_get_follows",
            description="Get a list of accounts the user follows",
            parameters=[_limit(50, "follows"), CURSOR],
        ),
        ToolDefinition(
            name="bluesky_get_followers",
            description="Get a list of accounts following the user",
            parameters=[_limit(50, "followers"), CURSOR],
        ),
        ToolDefinition(
            name="bluesky_get_liked_posts",
            description="Get a list of posts liked by the user",
            parameters=[_limit(50, "liked posts"), CURSOR],
        ),
        ToolDefinition(
            name="bluesky_get_personal_feed",
            description="Get your personalized Bluesky feed",
            parameters=[_limit(50, "feed items"), CURSOR],
        ),
        ToolDefinition(
            name="bluesky_search_profiles",
            description="Search for Bluesky profiles",
            parameters=[_query("Search query string"), _limit(25, "results"), CURSOR],
        ),
    ],
)
