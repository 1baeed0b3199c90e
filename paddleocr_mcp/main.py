import asyncio
from collections.abc import Callable, Coroutine
from typing import Any

from paddleocr_mcp.config.settings import Settings
from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.server.http_app import run_http
from paddleocr_mcp.server.stdio import run_stdio

TRANSPORTS: dict[str, Callable[[Settings], Coroutine[Any, Any, None]]] = {
    "stdio": run_stdio,
    "http": run_http,
}


def resolve_transport(settings: Settings) -> Callable[[Settings], Coroutine[Any, Any, None]]:
    transport = settings.mcp_transport.lower()
    runner = TRANSPORTS.get(transport)
    if runner is None:
        raise ValueError(
            f"Unknown MCP transport '{transport}'. Choose from: {list(TRANSPORTS)}"
        )
    return runner


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the chosen transport."""
    settings = Settings()
    Log.configure(settings.log_level)
    runner = resolve_transport(settings)
    try:
        asyncio.run(runner(settings))
    except KeyboardInterrupt:
        Log.info("Server shutting down gracefully")


if __name__ == "__main__":
    main()
