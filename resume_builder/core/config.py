# File: resume_builder/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    PROJECT_NAME: str = "Resume Builder API"
    PROJECT_VERSION: str = "0.1.0"

    # "development" exposes exception detail in 500 responses
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")

    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./resume_builder.db")

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))

    # CORS settings
    CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

    # Client settings
    API_BASE_URL: str = os.getenv("API_BASE_URL", f"http://localhost:{PORT}/api")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "10"))

    # Local backup settings
    LOCAL_STORAGE_DIR: str = os.getenv("LOCAL_STORAGE_DIR", os.path.join(os.path.expanduser("~"), ".resume_builder"))
    LOCAL_STORAGE_KEY: str = os.getenv("LOCAL_STORAGE_KEY", "resumeBackup")
    AUTOSAVE_INTERVAL_SECONDS: float = float(os.getenv("AUTOSAVE_INTERVAL_SECONDS", "30"))

    # Display-only limit for the professional summary
    SUMMARY_SOFT_LIMIT: int = int(os.getenv("SUMMARY_SOFT_LIMIT", "500"))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

settings = Settings()
