# The module is to define the configuration settings for the bridge server.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 0.2.0

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    """
    The Settings class holds the process-wide, read-only configuration.
    Values come from environment variables or a local .env file.
    Attributes:
        SERVER_NAME (str): Name the MCP server advertises to clients.
        SERVER_VERSION (str): Version the MCP server advertises to clients.
        FASTAPI_BASE_URL (str): Fallback base URL of the blog-generation service.
        FASTAPI_API_KEY (str): Fallback bearer key for the blog-generation service.
        HTTP_TIMEOUT (float): Timeout in seconds for outbound requests. None disables it.
        HOST (str): Bind address used by the CLI runner.
        PORT (int): Bind port used by the CLI runner.
        LOG_LEVEL (str): Console log level.
    """
    # MCP server identity
    SERVER_NAME: str = "Authless Calculator"
    SERVER_VERSION: str = "1.0.0"

    # FASTAPI_SERVICE
    FASTAPI_BASE_URL: Optional[str] = None
    FASTAPI_API_KEY: Optional[str] = None

    # Outbound HTTP
    HTTP_TIMEOUT: Optional[float] = None

    # Runner
    HOST: str = "0.0.0.0"
    PORT: int = 8787
    LOG_LEVEL: str = "INFO"


    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"

# lru_cache to cache the settings instance.
@lru_cache
def get_settings():
    return Settings()
