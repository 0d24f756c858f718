"""Telegram module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

CHAT_ID = ToolParameter(
    name="chat_id",
    type="string",
    description="Chat ID or @username of the target chat",
)

MANIFEST = ModuleManifest(
    module_name="telegram",
    description="Send messages and photos through a Telegram bot and read its chats and updates.",
    version="0.1.0",
    tools=[
        ToolDefinition(
            name="send_message",
            description="Send a message to a Telegram chat",
            parameters=[
                CHAT_ID,
                ToolParameter(
                    name="text",
                    type="string",
                    description="Text message to send",
                ),
                ToolParameter(
                    name="parse_mode",
                    type="string",
                    description="Parse mode for message formatting",
                    required=False,
                    enum=["Markdown", "MarkdownV2", "HTML"],
                ),
            ],
        ),
        ToolDefinition(
            name="get_chat",
            description="Get information about a chat",
            parameters=[CHAT_ID],
        ),
        ToolDefinition(
            name="send_photo",
            description="Send a photo to a Telegram chat",
            parameters=[
                CHAT_ID,
                ToolParameter(
                    name="photo",
                    type="string",
                    description="URL, Telegram file_id, or local file path of the photo",
                ),
                ToolParameter(
                    name="caption",
                    type="string",
                    description="Optional caption for the photo",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="get_updates",
            description="Get latest updates/messages from the bot",
            parameters=[
                ToolParameter(
                    name="limit",
                    type="integer",
                    description="Limit the number of updates to retrieve",
                    required=False,
                    default=10,
                    minimum=1,
                    maximum=100,
                ),
                ToolParameter(
                    name="timeout",
                    type="integer",
                    description="Timeout in seconds for long polling",
                    required=False,
                    default=0,
                    minimum=0,
                ),
            ],
        ),
    ],
)
