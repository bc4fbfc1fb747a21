import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# memory | json | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
STATE_FILE = os.getenv("STATE_FILE", "var/bistro_state.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "bistro_staff"),
}

# If enabled with the mysql backend, the app table is created on startup (idempotent).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Load the demo employees/shifts when the store is empty.
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "0"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))
DEDUCTION_RATE = float(os.getenv("DEDUCTION_RATE", "0"))
