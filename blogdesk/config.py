# blogdesk/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-me")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_IN = int(os.environ.get("JWT_EXPIRES_IN", 3600))  # segundos

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///blogdesk.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_TABLES = _env_bool("AUTO_CREATE_TABLES", "true")

    PORT = int(os.environ.get("PORT", 5000))
    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 12))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")


class TestConfig(Config):
    TESTING = True
    JWT_SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_TABLES = True
    BCRYPT_ROUNDS = 4
    EXPOSE_ERROR_DETAILS = True
