import os
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


def _int_env(name, default):
    value = os.getenv(name)
    return int(value) if value else default


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'default-secret-key-change-me')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    DB_HOST = os.getenv('DB_HOST', 'localhost')
    DB_USER = os.getenv('DB_USER', 'root')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME', 'recruitment')

    # Build MySQL connection string (using PyMySQL driver) unless overridden
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or (
        f"mysql+pymysql://{DB_USER}@{DB_HOST}/{DB_NAME}"
        if not DB_PASSWORD else
        f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}/{DB_NAME}"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Local object store for candidate documents
    STORAGE_ROOT = os.getenv('STORAGE_ROOT', 'candidate_uploads')
    MAX_DOCUMENT_SIZE = 5 * 1024 * 1024  # 5MB
    ACCEPTED_DOCUMENT_TYPES = ("image/jpeg", "image/png", "application/pdf")

    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-3.5-turbo')

    # Pipeline rules
    MIN_STATUS_NOTES_LENGTH = 10
    HISTORY_WRITE_ATTEMPTS = _int_env('HISTORY_WRITE_ATTEMPTS', 3)
    DEFAULT_ACTOR = 'System'
    INTERVIEW_DURATION_MINUTES = 60
    # None = any status may move to any other status.
    # Otherwise {"Screening": ["Interview", "Rejected"], ...}
    STATUS_TRANSITIONS = None


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    OPENAI_API_KEY = None
