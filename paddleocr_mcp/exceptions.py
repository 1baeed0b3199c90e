class PaddleOcrMcpError(Exception):
    """Base exception for every failure surfaced as an error tool result."""
