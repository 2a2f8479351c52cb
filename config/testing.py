import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_accrual_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
STRICT_DATE_ORDER = True
LATE_GRACE_MINUTES = 1
REPORT_EXPORT_DIR = os.getenv("REPORT_EXPORT_DIR", "exports")
