from pydantic_settings import BaseSettings, SettingsConfigDict

from paddleocr_mcp.ocr.models import ApiCredentials


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    paddleocr_mcp_server_url: str = ""
    paddleocr_mcp_aistudio_access_token: str = ""

    mcp_transport: str = "stdio"
    http_host: str = "0.0.0.0"
    http_port: int = 3000

    download_cache_dir: str | None = None
    request_timeout_seconds: int = 120

    def credentials(self) -> ApiCredentials:
        """Default OCR endpoint credentials, used when a session sets none."""
        return ApiCredentials(
            api_url=self.paddleocr_mcp_server_url,
            token=self.paddleocr_mcp_aistudio_access_token,
        )
