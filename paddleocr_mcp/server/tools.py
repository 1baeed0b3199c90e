"""Registration of the ``paddle-ocr`` tool on a low-level MCP server."""

from collections.abc import Callable
from typing import Any

from mcp.server import Server
from mcp.types import CallToolResult, Tool

from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.ocr.models import ApiCredentials
from paddleocr_mcp.processor.models import ToolResult
from paddleocr_mcp.processor.processor import Processor

SERVER_NAME = "paddle-ocr-mcp"
SERVER_VERSION = "0.1.0"

TOOL_NAME = "paddle-ocr"
TOOL_TITLE = "Paddle OCR Layout Parsing"

SOURCE_URL = "url"
SOURCE_PATH = "path"

TOOLS: dict[str, Tool] = {
    SOURCE_URL: Tool(
        name=TOOL_NAME,
        title=TOOL_TITLE,
        description="Call Paddle OCR layout parsing API. Supports file URL.",
        inputSchema={
            "type": "object",
            "properties": {
                "fileUrl": {
                    "type": "string",
                    "description": "HTTP direct link to PDF or image",
                },
            },
            "required": ["fileUrl"],
        },
    ),
    SOURCE_PATH: Tool(
        name=TOOL_NAME,
        title=TOOL_TITLE,
        description="Call Paddle OCR layout parsing API. Supports local file path.",
        inputSchema={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Local filesystem path to a PDF or image",
                },
            },
            "required": ["path"],
        },
    ),
}

# Receives the transport request object (None outside HTTP) and returns the
# credentials for the current call.
CredentialsProvider = Callable[[Any], ApiCredentials]


async def dispatch_tool_call(
    processor: Processor,
    source: str,
    name: str,
    arguments: dict[str, Any] | None,
    credentials: ApiCredentials,
) -> ToolResult:
    """Route one tool call to the processor and always return a ToolResult."""
    if name != TOOL_NAME:
        Log.warning(f"Unknown tool requested: {name}")
        return ToolResult.error(f"Unknown tool: {name}")
    arguments = arguments or {}

    if source == SOURCE_URL:
        file_url = arguments.get("fileUrl")
        if not isinstance(file_url, str) or not file_url.strip():
            return ToolResult.error("fileUrl must be a non-empty string")
        return await processor.process_url(file_url.strip(), credentials)

    if "path" not in arguments:
        return ToolResult.error("path is required")
    return await processor.process_path(arguments["path"], credentials)


def create_server(
    processor: Processor,
    *,
    source: str,
    credentials: CredentialsProvider,
) -> Server:
    """Build an MCP server exposing the OCR tool for one input source."""
    tool = TOOLS.get(source)
    if tool is None:
        raise ValueError(f"Unknown tool source '{source}'. Choose from: {list(TOOLS)}")

    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [tool]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        Log.info(f"Tool invocation received: {name}")
        result = await dispatch_tool_call(
            processor,
            source,
            name,
            arguments,
            credentials(_current_request(server)),
        )
        return result.to_call_tool_result()

    return server


def _current_request(server: Server) -> Any:
    try:
        return server.request_context.request
    except LookupError:
        return None
