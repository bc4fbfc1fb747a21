SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
STATE_FILE = ""

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "bistro_staff_test",
}

AUTO_INIT_DB = False
AUTO_SEED_DB = True

LATE_GRACE_MINUTES = 0
OVERTIME_MULTIPLIER = 1.5
DEDUCTION_RATE = 0.0
