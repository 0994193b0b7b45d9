import os

from config import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timekeeping"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = env_flag("LOG_JSON", "0")

# Wires the approved-absence lookup used by the use_absence no-booking policy
ABSENCES_ENABLED = env_flag("ABSENCES_ENABLED", "1")
MAX_RECALC_DAYS = int(os.getenv("MAX_RECALC_DAYS", "366"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
