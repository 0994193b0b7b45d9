import os

from config import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timekeeping"),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = env_flag("LOG_JSON", "1")

ABSENCES_ENABLED = env_flag("ABSENCES_ENABLED", "1")
MAX_RECALC_DAYS = int(os.getenv("MAX_RECALC_DAYS", "366"))

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
