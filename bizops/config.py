import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev_secret")

    # Storage: DATABASE_URL wins, otherwise a SQLite file at DB_PATH
    DB_PATH = os.getenv("DB_PATH", "./business.db")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_SCHEMA = _flag("AUTO_CREATE_SCHEMA", "true")

    # Backups
    DB_BACKUP_PATH = os.getenv("DB_BACKUP_PATH", "./backups")
    BACKUP_INITIAL_DELAY_SECONDS = int(os.getenv("BACKUP_INITIAL_DELAY_SECONDS", "300"))
    BACKUP_INTERVAL_HOURS = int(os.getenv("BACKUP_INTERVAL_HOURS", "24"))
    SCHEDULER_ENABLED = _flag("SCHEDULER_ENABLED", "true")
    SCHEDULER_TIMEZONE = os.getenv("SCHEDULER_TIMEZONE", "UTC")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class Development(Config):
    DEBUG = True


class Production(Config):
    DEBUG = False


class Testing(Config):
    TESTING = True
    SCHEDULER_ENABLED = False
    DB_PATH = ":memory:"
    SQLALCHEMY_DATABASE_URI = None
