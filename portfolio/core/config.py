from os import getenv


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./portfolio.db")

    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "1440"))  # 24h

    UPLOAD_DIR = getenv("UPLOAD_DIR", "./uploads")
    UPLOAD_URL_PREFIX = "/uploads"
    UPLOAD_MAX_BYTES = int(getenv("UPLOAD_MAX_BYTES", str(5 * 1024 * 1024)))
    UPLOAD_ALLOWED_EXTENSIONS = _split(
        getenv("UPLOAD_ALLOWED_EXTENSIONS", ".png,.jpg,.jpeg,.gif,.webp,.svg,.pdf").lower()
    )

    # compte admin créé au premier démarrage
    ADMIN_USERNAME = getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = getenv("ADMIN_PASSWORD", "password")
    SEED_SAMPLE_DATA = getenv("SEED_SAMPLE_DATA", "true").lower() in ("1", "true", "yes")

    CORS_ORIGINS = _split(getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
