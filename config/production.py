import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_accrual"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
STRICT_DATE_ORDER = bool(int(os.getenv("STRICT_DATE_ORDER", "1")))
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "1"))
REPORT_EXPORT_DIR = os.getenv("REPORT_EXPORT_DIR", "/var/lib/hr-accrual/exports")
