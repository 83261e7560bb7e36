import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./placement.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5050)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get(
        "CORS_ORIGINS",
        [
            "https://internship-allotment.vercel.app",
            "http://localhost:5173",
            "http://localhost:5174",
            "http://localhost:3000",
        ],
    )
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 60))
    BACKEND_URL = data.get("BACKEND_URL", "http://localhost:5050")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_TIMEOUT = int(data.get("SMTP_TIMEOUT", 30))
    MAIL_FROM = data.get("MAIL_FROM", "no-reply@localhost")
    MAIL_FROM_NAME = data.get("MAIL_FROM_NAME", "SIA Support")
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 10))
    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 6))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
