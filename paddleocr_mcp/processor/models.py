from dataclasses import dataclass, field

from mcp.types import CallToolResult, TextContent

from paddleocr_mcp.ocr.models import TextBlock


@dataclass(frozen=True)
class ToolResult:
    """Ordered text blocks plus an error flag, as handed to the MCP layer."""

    blocks: list[TextBlock] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(blocks=[TextBlock(text=message)], is_error=True)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=block.text) for block in self.blocks],
            isError=self.is_error,
        )
