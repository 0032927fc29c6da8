import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salary_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Initial "total working days" for the billing period (1-31, anything else -> 30)
TOTAL_WORKING_DAYS = int(os.getenv("TOTAL_WORKING_DAYS", "30"))
# "strict" pays only ids found in the employee directory, "permissive" pays everyone
DIRECTORY_MODE = os.getenv("DIRECTORY_MODE", "strict")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "16"))
