from paddleocr_mcp.ocr.base import BaseOcrClient
from paddleocr_mcp.ocr.flattener import flatten
from paddleocr_mcp.ocr.paddle_client_adapter import PaddleOcrClientAdapter

__all__ = ["BaseOcrClient", "PaddleOcrClientAdapter", "flatten"]
