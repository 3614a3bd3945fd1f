from core.imports import os, load_dotenv, timedelta, logging

load_dotenv()


def resolve_log_level(name, default="INFO"):
    """Return ``name`` as an upper-case logging level name, or ``default`` if unknown."""
    level = (name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///green-grow.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # insecure fallback, set JWT_SECRET_KEY in any real deployment
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY") or os.environ.get("JWT_SECRET") or "devsecret"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    JWT_IDENTITY_CLAIM = "id"

    BCRYPT_LOG_ROUNDS = 10

    SPONSOR_COMMISSION = 1000
    REFERRAL_CODE_PREFIX = "GG"
    REFERRAL_CODE_LENGTH = 6

    PORT = int(os.environ.get("PORT", 4000))
    LOG_LEVEL = resolve_log_level(os.environ.get("LOG_LEVEL"))

    SWAGGER = {
        "title": "Green Grow API",
        "uiversion": 3,
    }
