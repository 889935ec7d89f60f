# petmarket/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # --- API Info ---
    API_TITLE: str = "Pet Market API"
    API_DESCRIPTION: str = "Pet marketplace backend: accounts, pet listings, wishlist, cart, addresses, saved cards and order history."
    API_VERSION: str = "1.0.0"

    # --- Server Configuration ---
    PORT: int = int(os.getenv("PORT", "4000"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # --- Database ---
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./petmarket.db")

    # --- Token signing ---
    # Per-deployment secret. The fallback only exists for local development.
    SECRET_KEY: str = os.getenv("ENCODING_SECRET_KEY") or "dev-secret-change-me"
    SECRET_KEY_IS_DEFAULT: bool = not os.getenv("ENCODING_SECRET_KEY")
    ALGORITHM: str = os.getenv("ENCODING_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_HOURS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "10000"))

    # --- Uploads ---
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "uploads")

    # --- CORS ---
    CORS_ORIGINS: list = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

    # --- Rate limiting ---
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "1") == "1"
    SIGNUP_RATE_LIMIT: str = os.getenv("SIGNUP_RATE_LIMIT", "30/hour")
    LOGIN_RATE_LIMIT: str = os.getenv("LOGIN_RATE_LIMIT", "50/hour")


settings = Settings()
