import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salary_db_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

TOTAL_WORKING_DAYS = 30
DIRECTORY_MODE = "strict"

MAX_UPLOAD_MB = 4
