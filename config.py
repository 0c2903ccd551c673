import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _as_list(value):
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value or [])


def _setting(*names, default=None):
    """Look up a setting, environment variables first, then env.yaml"""
    for name in names:
        if os.environ.get(name):
            raw = os.environ[name]
            try:
                return yaml.safe_load(raw)
            except yaml.YAMLError:
                return raw
    for name in names:
        if name in data:
            return data[name]
    return default


class ApplicationConfig:
    DB_URI = _setting("DB_URI", "DATABASE_URL", default="sqlite+aiosqlite:///./bills.db")
    DB_ECHO = bool(_setting("DB_ECHO", default=False))
    API_PREFIX = _setting("API_PREFIX", default="/api")
    API_PORT = int(_setting("API_PORT", "PORT", default=5000))
    API_HOST = _setting("API_HOST", default="0.0.0.0")
    CORS_ORIGINS = _as_list(_setting("CORS_ORIGINS", default=["*"]))
    CORS_ALLOW_CREDENTIALS = bool(_setting("CORS_ALLOW_CREDENTIALS", default=False))
    LOG_LEVEL = _setting("LOG_LEVEL", default="INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_setting("ENABLE_LOGGING_MIDDLEWARE", default=1))
