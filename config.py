import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./linkboard.db")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    API_PORT = data.get("API_PORT", 4000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    CACHE_BACKEND = data.get("CACHE_BACKEND", "redis")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    GRAPHIQL = bool(data.get("GRAPHIQL", True))

    # Sessions
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "qid")
    SESSION_TTL_SECONDS = data.get("SESSION_TTL_SECONDS", 60 * 60 * 24 * 365 * 10)
    COOKIE_SECURE = ENVIRONMENT == "production"

    # Password reset
    RESET_TOKEN_TTL_SECONDS = data.get("RESET_TOKEN_TTL_SECONDS", 60 * 60 * 24 * 3)
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")

    # Mail
    MAIL_BACKEND = data.get("MAIL_BACKEND", "log")
    MAIL_FROM = data.get("MAIL_FROM", "Link Board <noreply@linkboard.local>")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
