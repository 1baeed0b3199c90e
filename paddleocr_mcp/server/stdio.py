from typing import Any

from mcp.server.stdio import stdio_server

from paddleocr_mcp.config.settings import Settings
from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.ocr.models import ApiCredentials
from paddleocr_mcp.processor.processor import build_http_client, build_processor
from paddleocr_mcp.server.tools import SOURCE_PATH, create_server


async def run_stdio(settings: Settings) -> None:
    """Serve the local-file ``paddle-ocr`` tool over stdin/stdout."""
    defaults = settings.credentials()

    def provide(_request: Any) -> ApiCredentials:
        return defaults

    async with build_http_client(settings) as client:
        processor = build_processor(settings, client)
        server = create_server(processor, source=SOURCE_PATH, credentials=provide)
        Log.info("MCP server running on stdio")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
