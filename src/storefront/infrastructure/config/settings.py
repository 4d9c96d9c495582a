"""Application settings and environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[4]


class Settings:
    DATA_DIR: Path = Path(os.getenv("STOREFRONT_DATA_DIR", str(_PROJECT_ROOT / "data")))

    # Token signing
    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me-in-production-storefront-dev-secret")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_MINUTES: int = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Optimistic concurrency on cart writes
    CART_MAX_RETRIES: int = int(os.getenv("CART_MAX_RETRIES", "3"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
