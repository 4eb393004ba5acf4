import os
from urllib.parse import quote_plus

BASEDIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _env_bool(name, default="False"):
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _database_uri():
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    user = os.getenv("DB_USER")
    password = quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME")
    return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "secret")
    DEBUG = _env_bool("DEBUG")

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Business policy, kept at 20 until the catalog owners confirm otherwise
    CATEGORY_DESCRIPTION_MAX_LENGTH = int(os.getenv("CATEGORY_DESCRIPTION_MAX_LENGTH", 20))

    DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", 10))
    MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", 100))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS", str(DEBUG))


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    EXPOSE_ERROR_DETAILS = False
    LOG_LEVEL = "WARNING"
