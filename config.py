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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./course.db")
    API_PREFIX = data.get("API_PREFIX", "/api/v1")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(data.get("ACCESS_TOKEN_EXPIRE_MINUTES", 30))
    PAYMENT_GATEWAY_URL = data.get("PAYMENT_GATEWAY_URL", "https://api.iamport.kr")
    PAYMENT_GATEWAY_API_KEY = data.get("PAYMENT_GATEWAY_API_KEY", "")
    PAYMENT_GATEWAY_API_SECRET = data.get("PAYMENT_GATEWAY_API_SECRET", "")
    PAYMENT_GATEWAY_TIMEOUT = float(data.get("PAYMENT_GATEWAY_TIMEOUT", 10))
