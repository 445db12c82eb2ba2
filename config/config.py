import os


def _env_bool(name: str, default: str) -> bool:
    return bool(int(os.environ.get(name, default)))


def _env_weekdays(name: str, default: str) -> tuple[int, ...]:
    raw = os.environ.get(name, default)
    return tuple(int(part) for part in raw.split(",") if part.strip())


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "timekeeping-dev-secret"

    # Database
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "timekeeping")
    # Seconds before a connect attempt fails.
    DB_CONNECT_TIMEOUT = int(os.environ.get("DB_CONNECT_TIMEOUT", "5"))

    # Zeiterfassung
    TIMEZONE = os.environ.get("TIMEZONE", "Europe/Berlin")
    SCHEDULED_BREAK_WEEKDAYS = _env_weekdays("SCHEDULED_BREAK_WEEKDAYS", "1,2,4")
    SCHEDULED_BREAK_MINUTES = int(os.environ.get("SCHEDULED_BREAK_MINUTES", "120"))
    STANDARD_DAY_MINUTES = int(os.environ.get("STANDARD_DAY_MINUTES", "480"))

    PERSISTENCE_ENABLED = _env_bool("PERSISTENCE_ENABLED", "1")
    SYNC_INLINE = _env_bool("SYNC_INLINE", "0")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Dev helpers
    AUTO_INIT_DB = _env_bool("AUTO_INIT_DB", "0")
    AUTO_SEED_DB = _env_bool("AUTO_SEED_DB", "0")


SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
    "connect_timeout": Config.DB_CONNECT_TIMEOUT,
}

DEBUG = _env_bool("DEBUG", "1")

TIMEZONE = Config.TIMEZONE
SCHEDULED_BREAK_WEEKDAYS = Config.SCHEDULED_BREAK_WEEKDAYS
SCHEDULED_BREAK_MINUTES = Config.SCHEDULED_BREAK_MINUTES
STANDARD_DAY_MINUTES = Config.STANDARD_DAY_MINUTES
PERSISTENCE_ENABLED = Config.PERSISTENCE_ENABLED
SYNC_INLINE = Config.SYNC_INLINE
LOG_LEVEL = Config.LOG_LEVEL
AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB
