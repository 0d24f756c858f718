"""Supabase module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

MANIFEST = ModuleManifest(
    module_name="supabase",
    description="Query and modify Supabase (PostgREST) tables and call Postgres functions.",
    version="0.1.0",
    tools=[
        ToolDefinition(
            name="execute_sql",
            description=(
                "Execute a raw SQL query through the configured Postgres function "
                "(SUPABASE_SQL_FUNCTION, default 'execute_sql')"
            ),
            parameters=[
                ToolParameter(name="query", type="string", description="SQL query to execute"),
            ],
        ),
        ToolDefinition(
            name="query_data",
            description="Query data from a Supabase table with optional filters",
            parameters=[
                ToolParameter(name="table", type="string", description="Name of the table to query"),
                ToolParameter(
                    name="select",
                    type="string",
                    description="Columns to select (comma-separated). Use * for all columns.",
                    required=False,
                    default="*",
                ),
                ToolParameter(
                    name="filters",
                    type="object",
                    description="Optional equality filters as {column: value}",
                    required=False,
                ),
                ToolParameter(
                    name="limit",
                    type="integer",
                    description="Maximum number of rows to return",
                    required=False,
                    minimum=1,
                ),
            ],
        ),
        ToolDefinition(
            name="insert_data",
            description="Insert data into a Supabase table",
            parameters=[
                ToolParameter(name="table", type="string", description="Name of the table to insert into"),
                ToolParameter(name="data", type="object", description="Row to insert as {column: value}"),
            ],
        ),
        ToolDefinition(
            name="update_data",
            description="Update data in a Supabase table",
            parameters=[
                ToolParameter(name="table", type="string", description="Name of the table to update"),
                ToolParameter(name="data", type="object", description="Columns to update as {column: value}"),
                ToolParameter(
                    name="filters",
                    type="object",
                    description="Equality filters identifying the rows to update (must not be empty)",
                ),
            ],
        ),
        ToolDefinition(
            name="delete_data",
            description="Delete data from a Supabase table",
            parameters=[
                ToolParameter(name="table", type="string", description="Name of the table to delete from"),
                ToolParameter(
                    name="filters",
                    type="object",
                    description="Equality filters identifying the rows to delete (must not be empty)",
                ),
            ],
        ),
        ToolDefinition(
            name="rpc",
            description="Call a Postgres function (RPC)",
            parameters=[
                ToolParameter(name="function", type="string", description="Name of the function to call"),
                ToolParameter(
                    name="params",
                    type="object",
                    description="Parameters to pass to the function",
                    required=False,
                ),
            ],
        ),
    ],
)
