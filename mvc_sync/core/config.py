import os
APP_TITLE = os.getenv("APP_TITLE", "MVC Sync Mock Remote")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "5.0"))
REMOTE_BASE_URL = os.getenv("REMOTE_BASE_URL", "http://localhost:8000/api")
REMOTE_RESOURCE = os.getenv("REMOTE_RESOURCE", "users")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
