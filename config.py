"""
Configuration management using environment variables.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Configuration class for application settings."""

    PROJECT_ROOT = Path(__file__).parent  # config.py is at project root

    # ========== SERVER CONFIGURATION ==========
    APP_NAME = os.getenv("APP_NAME", "Complaint Insight API")
    APP_VERSION = "1.0.0"
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    # ========== LOGGING ==========
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # ========== ANALYSIS CONFIGURATION ==========
    # Bundled taxonomy name (campus, civic) or path to a taxonomy YAML file
    TAXONOMY = os.getenv("TAXONOMY", "campus")

    # ========== INPUT / OUTPUT PATHS ==========
    INPUT_COMPLAINT_PATH = PROJECT_ROOT / "input" / "current_complaint.json"
    OUTPUT_DIR = PROJECT_ROOT / "output"

    @classmethod
    def validate(cls):
        """Validate configuration settings."""
        from components.taxonomy import load_taxonomy

        load_taxonomy(cls.TAXONOMY)

        if not 0 < cls.PORT < 65536:
            raise ValueError(f"Invalid PORT: {cls.PORT}")

        return True


# Validate configuration on import
Config.validate()
