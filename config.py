import os
from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    path = os.getenv("DATABASE_PATH")
    if path:
        return f"sqlite:///{os.path.abspath(path)}"
    # relative sqlite paths resolve against the Flask instance folder
    return "sqlite:///budget.db"


class Config:
    # --- Flask Core ---
    SECRET_KEY = os.getenv("SECRET_KEY", "fallback-secret-key")
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- Rooms ---
    # cap on code regeneration when a freshly drawn code is already taken
    ROOM_CODE_MAX_ATTEMPTS = int(os.getenv("ROOM_CODE_MAX_ATTEMPTS", "100"))

    # --- Logging / CORS ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ROOM_CODE_MAX_ATTEMPTS = 100
    LOG_LEVEL = "WARNING"
