import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salary_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TOTAL_WORKING_DAYS = int(os.getenv("TOTAL_WORKING_DAYS", "30"))
DIRECTORY_MODE = os.getenv("DIRECTORY_MODE", "strict")

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "16"))
