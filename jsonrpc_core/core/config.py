# jsonrpc_core/core/config.py

from pydantic import field_validator
from pydantic_settings import BaseSettings

SUPPORTED_VERSIONS = ("1.0", "2.0")


class Settings(BaseSettings):
    """Library Settings"""

    # Application
    APP_NAME: str = "jsonrpc-core"
    ENVIRONMENT: str = "development"  # development, staging, production
    VERSION: str = "1.0.0"

    # Wire format
    JSONRPC_VERSION: str = "2.0"  # 1.0 or 2.0

    # Error construction
    # Reject application codes that fall inside the reserved -32768..-32000 range
    VALIDATE_ERROR_CODES: bool = True
    INCLUDE_TRACEBACK_IN_DATA: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "allow"
    }

    @field_validator("JSONRPC_VERSION")
    @classmethod
    def check_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"JSONRPC_VERSION must be one of {', '.join(SUPPORTED_VERSIONS)}, got {value!r}"
            )
        return value

settings = Settings()
