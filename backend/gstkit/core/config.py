from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os


class Settings(BaseSettings):
    APP_NAME: str = "EasyBilling GST"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    HOST: str = "127.0.0.1"
    PORT: int = 8765

    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173", "http://127.0.0.1:5173"]

    # Log directory: relative paths resolve against the backend directory
    LOG_DIR: str = os.getenv("GSTKIT_LOG_DIR", "logs")
    LOG_TO_FILE: bool = os.getenv("GSTKIT_LOG_TO_FILE", "true").lower() == "true"

    @property
    def LOG_DIR_ABS(self) -> str:
        """Get absolute path for the log directory."""
        log_dir = self.LOG_DIR
        if os.path.isabs(log_dir):
            return log_dir
        # gstkit/core/config.py -> gstkit/core -> gstkit -> backend
        backend_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        return os.path.join(backend_dir, log_dir)

    # Tax split used when the supplier or customer state is missing.
    # False keeps the CGST+SGST split; set True to charge IGST instead.
    INTERSTATE_WHEN_STATE_UNKNOWN: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # Ignore extra environment variables
    )


settings = Settings()
