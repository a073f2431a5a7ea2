from datetime import datetime, timezone

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./smarthome.db")
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Gateway upstreams
    device_api_url: str = os.getenv("DEVICE_API_URL", "http://localhost:8081")
    telemetry_api_url: str = os.getenv("TELEMETRY_API_URL", "http://localhost:8082")
    upstream_timeout_seconds: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

settings = Settings()

def enable_sqlite_foreign_keys(engine) -> None:
    """SQLite only checks FOREIGN KEY constraints when asked to, per connection"""
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {}
)

if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_utc_datetime() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)
